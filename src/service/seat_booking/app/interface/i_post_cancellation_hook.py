"""
Post-Cancellation Hook Interface

Runs inside the cancelling transaction, right after bookings were moved to
cancelled. Decides what happens to the seats those bookings still hold.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List


if TYPE_CHECKING:
    from src.platform.database.unit_of_work import AbstractUnitOfWork


class IPostCancellationHook(ABC):
    @abstractmethod
    async def on_bookings_cancelled(
        self, *, uow: AbstractUnitOfWork, booking_ids: List[int]
    ) -> int:
        """
        Args:
            uow: Active unit of work of the cancellation
            booking_ids: Bookings that were just cancelled

        Returns:
            Number of ShowSeats released
        """
        pass
