from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Booking lifecycle metrics

    Tracks cancellations, seat swaps and purges of the seat-booking service
    """

    def __init__(self) -> None:
        # ========== Booking Lifecycle ==========
        self.bookings_cancelled = Counter(
            'bookings_cancelled_total',
            'Bookings transitioned to cancelled',
            ['operation'],  # operation: single/all_pending/closure
        )

        self.seats_released = Counter(
            'show_seats_released_total',
            'ShowSeats whose booking reference was cleared',
            ['reason'],  # reason: cancellation/swap/purge
        )

        # ========== Reservation Exchange ==========
        self.seat_swaps = Counter(
            'seat_swaps_total',
            'Seat swap attempts by outcome',
            ['result'],  # result: success/conflict/not_found/rejected/error
        )

        self.seat_swap_duration = Histogram(
            'seat_swap_duration_seconds',
            'Seat swap transaction duration',
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
        )

        # ========== Cleanup ==========
        self.rows_purged = Counter(
            'cancelled_rows_purged_total',
            'Rows deleted by cancelled-booking purges',
            ['table'],  # table: bookings/payments
        )

    # ========== Helper Methods ==========

    def record_cancellation(self, *, operation: str, cancelled: int, released_seats: int) -> None:
        self.bookings_cancelled.labels(operation=operation).inc(cancelled)
        if released_seats:
            self.seats_released.labels(reason='cancellation').inc(released_seats)

    def record_seat_swap(self, *, result: str, duration: float) -> None:
        self.seat_swaps.labels(result=result).inc()
        self.seat_swap_duration.observe(duration)

    def record_purge(self, *, bookings: int, payments: int, released_seats: int) -> None:
        self.rows_purged.labels(table='bookings').inc(bookings)
        self.rows_purged.labels(table='payments').inc(payments)
        if released_seats:
            self.seats_released.labels(reason='purge').inc(released_seats)


# Global metrics instance
metrics = BookingMetrics()
