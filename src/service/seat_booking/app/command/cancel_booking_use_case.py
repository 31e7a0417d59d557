from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.seat_booking.app.dto import CancellationResult
from src.service.seat_booking.app.interface.i_post_cancellation_hook import (
    IPostCancellationHook,
)


class CancelBookingUseCase:
    """
    Cancel one booking, whatever its current status.

    Cancelling an already cancelled booking matches the row again and
    succeeds unchanged, so callers may retry freely.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        post_cancellation_hook: IPostCancellationHook,
    ) -> None:
        self.uow = uow
        self.post_cancellation_hook = post_cancellation_hook

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        post_cancellation_hook: IPostCancellationHook = Depends(
            Provide[Container.post_cancellation_hook]
        ),
    ) -> Self:
        return cls(uow=uow, post_cancellation_hook=post_cancellation_hook)

    @Logger.io
    async def execute(self, *, booking_id: int) -> CancellationResult:
        async with self.uow:
            affected = await self.uow.booking_command_repo.cancel_booking(booking_id=booking_id)
            if affected == 0:
                raise NotFoundError(f'Booking {booking_id} not found')

            released = await self.post_cancellation_hook.on_bookings_cancelled(
                uow=self.uow, booking_ids=[booking_id]
            )
            await self.uow.commit()

        metrics.record_cancellation(operation='single', cancelled=affected, released_seats=released)
        Logger.base.info(f'🚫 [CANCEL] Booking {booking_id} cancelled')
        return CancellationResult(cancelled_count=affected, released_seats=released)
