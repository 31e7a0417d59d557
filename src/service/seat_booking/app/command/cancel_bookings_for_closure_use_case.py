from datetime import date
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.seat_booking.app.dto import CancellationResult
from src.service.seat_booking.app.interface.i_post_cancellation_hook import (
    IPostCancellationHook,
)


class CancelBookingsForClosureUseCase:
    """
    Cascade a cinema closure on one date to its bookings.

    Cancels every pending/paid booking of every show playing that day in any
    theater of the cinema, as a single UPDATE: all of them or none.
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
    async def execute(self, *, show_date: date, cinema_name: str) -> CancellationResult:
        cinema_name = cinema_name.strip()
        if not cinema_name:
            raise DomainError('cinema_name must not be empty')

        async with self.uow:
            booking_ids = await self.uow.booking_command_repo.cancel_bookings_for_closure(
                show_date=show_date, cinema_name=cinema_name
            )
            released = await self.post_cancellation_hook.on_bookings_cancelled(
                uow=self.uow, booking_ids=booking_ids
            )
            await self.uow.commit()

        metrics.record_cancellation(
            operation='closure', cancelled=len(booking_ids), released_seats=released
        )
        Logger.base.info(
            f'🏚️ [CLOSURE] {cinema_name} on {show_date.isoformat()}: '
            f'cancelled {len(booking_ids)} bookings'
        )
        return CancellationResult(cancelled_count=len(booking_ids), released_seats=released)
