from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.seat_booking.app.dto import CancellationResult
from src.service.seat_booking.app.interface.i_post_cancellation_hook import (
    IPostCancellationHook,
)


class CancelAllPendingBookingsUseCase:
    """
    Cancel every pending booking in one set-based statement.

    Paid bookings are untouched. Seats follow the post-cancellation hook.
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
    async def execute(self) -> CancellationResult:
        async with self.uow:
            booking_ids = await self.uow.booking_command_repo.cancel_all_pending()
            released = await self.post_cancellation_hook.on_bookings_cancelled(
                uow=self.uow, booking_ids=booking_ids
            )
            await self.uow.commit()

        metrics.record_cancellation(
            operation='all_pending', cancelled=len(booking_ids), released_seats=released
        )
        Logger.base.info(f'🚫 [CANCEL] Cancelled {len(booking_ids)} pending bookings')
        return CancellationResult(cancelled_count=len(booking_ids), released_seats=released)
