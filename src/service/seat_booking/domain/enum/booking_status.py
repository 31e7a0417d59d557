"""Booking Status Enum"""

from enum import StrEnum


class BookingStatus(StrEnum):
    PENDING = 'pending'
    PAID = 'paid'
    CANCELLED = 'cancelled'

    def can_transition_to(self, target: 'BookingStatus') -> bool:
        return target in _ALLOWED_TRANSITIONS[self]

    @classmethod
    def cancellable(cls) -> list['BookingStatus']:
        """Statuses a booking may be cancelled from (cancelled itself is terminal)."""
        return [status for status in cls if status.can_transition_to(cls.CANCELLED)]


# pending → paid happens outside this service; cancelled accepts nothing
_ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.PAID, BookingStatus.CANCELLED}),
    BookingStatus.PAID: frozenset({BookingStatus.CANCELLED}),
    BookingStatus.CANCELLED: frozenset(),
}
