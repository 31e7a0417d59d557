"""Seat Booking Application DTOs"""

from src.service.seat_booking.app.dto.booking_lifecycle_dto import (
    CancellationResult,
    PurgeResult,
    SeatSwapResult,
)


__all__ = [
    'CancellationResult',
    'PurgeResult',
    'SeatSwapResult',
]
