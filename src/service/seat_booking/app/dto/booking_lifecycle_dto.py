"""
Booking Lifecycle DTOs

Results of cancellation, seat swap and purge operations.
"""

from decimal import Decimal

import attrs


@attrs.define
class CancellationResult:
    """Outcome of a cancellation operation"""

    cancelled_count: int  # Booking rows whose status was set to cancelled
    released_seats: int = 0  # ShowSeats freed by the post-cancellation hook

    @property
    def applied(self) -> bool:
        return self.cancelled_count > 0


@attrs.define
class SeatSwapResult:
    booking_id: int
    from_seat_id: int
    to_seat_id: int
    price: Decimal  # Price of the released seat, the basis of the swap


@attrs.define
class PurgeResult:
    """Rows removed (or released) by one purge, all in the same transaction"""

    deleted_bookings: int
    deleted_payments: int
    released_seats: int

    @classmethod
    def empty(cls) -> 'PurgeResult':
        return cls(deleted_bookings=0, deleted_payments=0, released_seats=0)
