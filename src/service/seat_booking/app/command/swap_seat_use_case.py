import time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import (
    ConflictError,
    CustomBaseError,
    DomainError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.seat_booking.app.dto import SeatSwapResult


_SWAP_OUTCOMES: dict[type[CustomBaseError], str] = {
    ConflictError: 'conflict',
    NotFoundError: 'not_found',
    DomainError: 'rejected',
}


class SwapSeatUseCase:
    """
    Move a booking from one seat to another of the same show.

    Steps, all in one transaction:
    1. Claim the target seat only if it is still available (conditional UPDATE)
    2. Look up the source seat held by the booking
    3. Check both seats belong to the same show and their prices match
       (a price difference only warns when not strict)
    4. Release the source seat, guarded by seat id, booking id and price

    Any failure rolls the whole transaction back, so the booking never ends
    up holding both seats or neither.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, require_equal_price: bool = True) -> None:
        self.uow = uow
        self.require_equal_price = require_equal_price

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(uow=uow, require_equal_price=settings.SEAT_SWAP_REQUIRE_EQUAL_PRICE)

    @Logger.io
    async def execute(
        self, *, booking_id: int, from_seat_id: int, to_seat_id: int
    ) -> SeatSwapResult:
        if from_seat_id == to_seat_id:
            raise DomainError('Source and target seat must be different')

        started = time.perf_counter()
        try:
            result = await self._swap(
                booking_id=booking_id, from_seat_id=from_seat_id, to_seat_id=to_seat_id
            )
        except CustomBaseError as e:
            outcome = _SWAP_OUTCOMES.get(type(e), 'error')
            metrics.record_seat_swap(result=outcome, duration=time.perf_counter() - started)
            raise

        metrics.record_seat_swap(result='success', duration=time.perf_counter() - started)
        Logger.base.info(
            f'🔄 [SWAP] Booking {booking_id} moved from seat {from_seat_id} to {to_seat_id}'
        )
        return result

    async def _swap(self, *, booking_id: int, from_seat_id: int, to_seat_id: int) -> SeatSwapResult:
        async with self.uow:
            seat_repo = self.uow.show_seat_command_repo

            target = await seat_repo.claim_seat(seat_id=to_seat_id, booking_id=booking_id)
            if target is None:
                if await seat_repo.seat_exists(seat_id=to_seat_id):
                    raise ConflictError(f'Seat {to_seat_id} is not available')
                raise NotFoundError(f'Seat {to_seat_id} not found')

            source = await seat_repo.find_owned_seat(seat_id=from_seat_id, booking_id=booking_id)
            if source is None:
                raise NotFoundError(
                    f'Seat {from_seat_id} is not held by active booking {booking_id}'
                )

            if not target.is_same_show_as(source):
                raise DomainError(
                    f'Seat {to_seat_id} belongs to show {target.show_id}, '
                    f'not show {source.show_id} of seat {from_seat_id}'
                )

            if source.price != target.price:
                if self.require_equal_price:
                    raise DomainError(
                        f'Seat prices differ: {from_seat_id}={source.price}, '
                        f'{to_seat_id}={target.price}'
                    )
                Logger.base.warning(
                    f'⚠️ [SWAP] Price mismatch accepted for booking {booking_id}: '
                    f'{source.price} → {target.price}'
                )

            released = await seat_repo.release_seat(
                seat_id=from_seat_id, booking_id=booking_id, price=source.price
            )
            if released == 0:
                # Source changed between lookup and release
                raise NotFoundError(
                    f'Seat {from_seat_id} is no longer held by booking {booking_id}'
                )

            await self.uow.commit()

        return SeatSwapResult(
            booking_id=booking_id,
            from_seat_id=from_seat_id,
            to_seat_id=to_seat_id,
            price=source.price,
        )
