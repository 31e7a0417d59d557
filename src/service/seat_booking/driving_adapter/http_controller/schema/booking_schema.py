from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


class ClosureRequest(BaseModel):
    date: date
    cinema_name: str = Field(min_length=1)

    class Config:
        json_schema_extra = {'example': {'date': '2019-02-02', 'cinema_name': 'AMC'}}


class SeatSwapRequest(BaseModel):
    from_seat_id: int
    to_seat_id: int

    class Config:
        json_schema_extra = {'example': {'from_seat_id': 10, 'to_seat_id': 11}}


class CancellationResponse(BaseModel):
    cancelled_count: int
    released_seats: int = 0


class SeatSwapResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'booking_id': 1,
                'from_seat_id': 10,
                'to_seat_id': 11,
                'price': '12.50',
            }
        },
    }

    booking_id: int
    from_seat_id: int
    to_seat_id: int
    price: Decimal


class PurgeResponse(BaseModel):
    deleted_bookings: int
    deleted_payments: int
    released_seats: int
