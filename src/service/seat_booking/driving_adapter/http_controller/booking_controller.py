from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.command.cancel_all_pending_bookings_use_case import (
    CancelAllPendingBookingsUseCase,
)
from src.service.seat_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.seat_booking.app.command.cancel_bookings_for_closure_use_case import (
    CancelBookingsForClosureUseCase,
)
from src.service.seat_booking.app.command.purge_cancelled_bookings_use_case import (
    PurgeCancelledBookingsUseCase,
)
from src.service.seat_booking.app.command.swap_seat_use_case import SwapSeatUseCase
from src.service.seat_booking.driving_adapter.http_controller.schema.booking_schema import (
    CancellationResponse,
    ClosureRequest,
    PurgeResponse,
    SeatSwapRequest,
    SeatSwapResponse,
)


router = APIRouter()


@router.post('/cancel-pending', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_all_pending_bookings(
    use_case: CancelAllPendingBookingsUseCase = Depends(CancelAllPendingBookingsUseCase.depends),
) -> CancellationResponse:
    result = await use_case.execute()
    return CancellationResponse(
        cancelled_count=result.cancelled_count, released_seats=result.released_seats
    )


@router.post('/closure', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_bookings_for_closure(
    request: ClosureRequest,
    use_case: CancelBookingsForClosureUseCase = Depends(CancelBookingsForClosureUseCase.depends),
) -> CancellationResponse:
    result = await use_case.execute(show_date=request.date, cinema_name=request.cinema_name)
    return CancellationResponse(
        cancelled_count=result.cancelled_count, released_seats=result.released_seats
    )


@router.delete('/cancelled', status_code=status.HTTP_200_OK)
@Logger.io
async def purge_cancelled_bookings(
    use_case: PurgeCancelledBookingsUseCase = Depends(PurgeCancelledBookingsUseCase.depends),
) -> PurgeResponse:
    result = await use_case.execute()
    return PurgeResponse(
        deleted_bookings=result.deleted_bookings,
        deleted_payments=result.deleted_payments,
        released_seats=result.released_seats,
    )


@router.patch('/{booking_id}/cancel', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_booking(
    booking_id: int,
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> CancellationResponse:
    # NotFoundError propagates to the exception handlers (404)
    result = await use_case.execute(booking_id=booking_id)
    return CancellationResponse(
        cancelled_count=result.cancelled_count, released_seats=result.released_seats
    )


@router.patch('/{booking_id}/seat', status_code=status.HTTP_200_OK)
@Logger.io
async def swap_seat(
    booking_id: int,
    request: SeatSwapRequest,
    use_case: SwapSeatUseCase = Depends(SwapSeatUseCase.depends),
) -> SeatSwapResponse:
    result = await use_case.execute(
        booking_id=booking_id,
        from_seat_id=request.from_seat_id,
        to_seat_id=request.to_seat_id,
    )
    return SeatSwapResponse(
        booking_id=result.booking_id,
        from_seat_id=result.from_seat_id,
        to_seat_id=result.to_seat_id,
        price=result.price,
    )
