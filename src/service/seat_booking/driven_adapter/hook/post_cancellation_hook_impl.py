"""
Post-Cancellation Hook Implementations

Selected by settings.POST_CANCELLATION_POLICY:
- keep_seats: cancelled bookings keep their seats until they are purged
- release_seats: seats go back to the pool in the cancelling transaction
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.interface.i_post_cancellation_hook import (
    IPostCancellationHook,
)


if TYPE_CHECKING:
    from src.platform.database.unit_of_work import AbstractUnitOfWork


class KeepSeatsPostCancellationHook(IPostCancellationHook):
    async def on_bookings_cancelled(
        self, *, uow: AbstractUnitOfWork, booking_ids: List[int]
    ) -> int:
        return 0


class ReleaseSeatsPostCancellationHook(IPostCancellationHook):
    @Logger.io
    async def on_bookings_cancelled(
        self, *, uow: AbstractUnitOfWork, booking_ids: List[int]
    ) -> int:
        if not booking_ids:
            return 0
        released = await uow.show_seat_command_repo.release_seats_of_bookings(
            booking_ids=booking_ids
        )
        Logger.base.info(
            f'💺 [CANCEL] Released {released} seats of {len(booking_ids)} cancelled bookings'
        )
        return released
