from abc import ABC, abstractmethod
from typing import List


class IPaymentCommandRepo(ABC):
    @abstractmethod
    async def delete_payments_of_bookings(self, *, booking_ids: List[int]) -> int:
        """Delete every payment referencing one of the given bookings"""
        pass

    @abstractmethod
    async def delete_payment(self, *, payment_id: int) -> int:
        pass
