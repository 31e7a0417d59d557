"""
Booking Command Repository Interface

Status transitions and deletion of Bookings rows. Every method is a single
set-based statement; callers compose them inside one unit of work.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def cancel_all_pending(self) -> List[int]:
        """
        Transition every pending booking to cancelled

        Returns:
            Ids of the bookings that were cancelled
        """
        pass

    @abstractmethod
    async def cancel_booking(self, *, booking_id: int) -> int:
        """
        Transition one booking to cancelled regardless of its current status

        Returns:
            Affected row count (0 when the booking does not exist)
        """
        pass

    @abstractmethod
    async def cancel_bookings_for_closure(
        self, *, show_date: date, cinema_name: str
    ) -> List[int]:
        """
        Cancel every pending/paid booking of a show playing on show_date in
        any theater of the named cinema

        Returns:
            Ids of the bookings that were cancelled
        """
        pass

    @abstractmethod
    async def lock_cancelled_booking_ids(self) -> List[int]:
        """Select and row-lock every cancelled booking until the transaction ends"""
        pass

    @abstractmethod
    async def delete_cancelled_bookings(self, *, booking_ids: List[int]) -> int:
        """Delete the given bookings, restricted to those still cancelled"""
        pass
