"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.seat_booking.app.command import (
    cancel_all_pending_bookings_use_case,
    cancel_booking_use_case,
    cancel_bookings_for_closure_use_case,
    purge_cancelled_bookings_use_case,
    remove_payment_use_case,
    swap_seat_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    cancel_all_pending_bookings_use_case,
    cancel_booking_use_case,
    cancel_bookings_for_closure_use_case,
    swap_seat_use_case,
    purge_cancelled_bookings_use_case,
    remove_payment_use_case,
]
