from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.seat_booking.app.dto import PurgeResult


class PurgeCancelledBookingsUseCase:
    """
    Delete every cancelled booking together with its payments.

    Seats still pointing at those bookings are released first, then payments
    and finally the bookings themselves. The cancelled rows are locked up
    front, so a partial failure leaves nothing deleted.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self) -> PurgeResult:
        async with self.uow:
            booking_ids = await self.uow.booking_command_repo.lock_cancelled_booking_ids()
            if not booking_ids:
                return PurgeResult.empty()

            released_seats = await self.uow.show_seat_command_repo.release_seats_of_bookings(
                booking_ids=booking_ids
            )
            deleted_payments = await self.uow.payment_command_repo.delete_payments_of_bookings(
                booking_ids=booking_ids
            )
            deleted_bookings = await self.uow.booking_command_repo.delete_cancelled_bookings(
                booking_ids=booking_ids
            )
            await self.uow.commit()

        metrics.record_purge(
            bookings=deleted_bookings, payments=deleted_payments, released_seats=released_seats
        )
        Logger.base.info(
            f'🧹 [PURGE] Deleted {deleted_bookings} bookings, {deleted_payments} payments, '
            f'released {released_seats} seats'
        )
        return PurgeResult(
            deleted_bookings=deleted_bookings,
            deleted_payments=deleted_payments,
            released_seats=released_seats,
        )
