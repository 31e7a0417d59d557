"""
Show Seat Command Repository Interface (seat ledger)

ShowSeats.bid is the single source of truth for seat ownership.
Ownership only changes through conditional updates, so the affected row
count tells the caller whether the expected state was still in place.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from src.service.seat_booking.domain.entity.show_seat_entity import ShowSeat


class IShowSeatCommandRepo(ABC):
    @abstractmethod
    async def claim_seat(self, *, seat_id: int, booking_id: int) -> Optional[ShowSeat]:
        """
        Assign an available seat to a booking (compare-and-set on bid IS NULL)

        Returns:
            The claimed seat, or None when the seat is owned or does not exist
        """
        pass

    @abstractmethod
    async def seat_exists(self, *, seat_id: int) -> bool:
        pass

    @abstractmethod
    async def find_owned_seat(self, *, seat_id: int, booking_id: int) -> Optional[ShowSeat]:
        """Get the seat only if it is currently owned by booking_id"""
        pass

    @abstractmethod
    async def release_seat(self, *, seat_id: int, booking_id: int, price: Decimal) -> int:
        """
        Free a seat only if it still belongs to booking_id at the given price

        Returns:
            Affected row count (0 when the seat changed concurrently)
        """
        pass

    @abstractmethod
    async def release_seats_of_bookings(self, *, booking_ids: List[int]) -> int:
        """Free every seat owned by any of the given bookings"""
        pass
