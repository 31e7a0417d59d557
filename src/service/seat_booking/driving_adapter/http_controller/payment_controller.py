from fastapi import APIRouter, Depends, Response, status

from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.command.remove_payment_use_case import RemovePaymentUseCase


router = APIRouter()


@router.delete('/{payment_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def remove_payment(
    payment_id: int,
    use_case: RemovePaymentUseCase = Depends(RemovePaymentUseCase.depends),
) -> Response:
    await use_case.execute(payment_id=payment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
