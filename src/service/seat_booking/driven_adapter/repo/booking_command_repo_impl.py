"""
Booking Command Repository Implementation

Set-based status updates and deletes on the bookings table.
"""

from datetime import date
from typing import List

from opentelemetry import trace

from src.platform.database.query_executor import QueryExecutor
from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.seat_booking.domain.enum.booking_status import BookingStatus


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, executor: QueryExecutor) -> None:
        self.executor = executor
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def cancel_all_pending(self) -> List[int]:
        with self.tracer.start_as_current_span(
            'repo.cancel_all_pending',
            attributes={'db.system': 'postgresql', 'db.operation': 'update'},
        ):
            rows = await self.executor.fetch(
                """
                UPDATE bookings
                SET status = $1
                WHERE status = $2
                RETURNING bid
                """,
                BookingStatus.CANCELLED.value,
                BookingStatus.PENDING.value,
            )
            return [row['bid'] for row in rows]

    @Logger.io
    async def cancel_booking(self, *, booking_id: int) -> int:
        with self.tracer.start_as_current_span(
            'repo.cancel_booking',
            attributes={
                'booking.id': booking_id,
                'db.system': 'postgresql',
                'db.operation': 'update',
            },
        ):
            # No status predicate: re-cancelling matches the row again (idempotent)
            return await self.executor.execute_update(
                'UPDATE bookings SET status = $1 WHERE bid = $2',
                BookingStatus.CANCELLED.value,
                booking_id,
            )

    @Logger.io
    async def cancel_bookings_for_closure(
        self, *, show_date: date, cinema_name: str
    ) -> List[int]:
        with self.tracer.start_as_current_span(
            'repo.cancel_bookings_for_closure',
            attributes={
                'show.date': show_date.isoformat(),
                'cinema.name': cinema_name,
                'db.system': 'postgresql',
                'db.operation': 'update',
            },
        ):
            # cinema → theaters → plays → shows(date) → bookings, as one statement
            rows = await self.executor.fetch(
                """
                UPDATE bookings
                SET status = $1
                WHERE status = ANY($2::text[])
                  AND sid IN (
                      SELECT s.sid
                      FROM shows s
                      JOIN plays p ON p.sid = s.sid
                      JOIN theaters t ON t.tid = p.tid
                      JOIN cinemas c ON c.cid = t.cid
                      WHERE s.sdate = $3
                        AND c.cname = $4
                  )
                RETURNING bid
                """,
                BookingStatus.CANCELLED.value,
                [status.value for status in BookingStatus.cancellable()],
                show_date,
                cinema_name,
            )
            return [row['bid'] for row in rows]

    @Logger.io
    async def lock_cancelled_booking_ids(self) -> List[int]:
        records = await self.executor.execute_query_and_return_result(
            """
            SELECT bid
            FROM bookings
            WHERE status = $1
            ORDER BY bid
            FOR UPDATE
            """,
            BookingStatus.CANCELLED.value,
        )
        return [int(record[0]) for record in records if record[0] is not None]

    @Logger.io
    async def delete_cancelled_bookings(self, *, booking_ids: List[int]) -> int:
        with self.tracer.start_as_current_span(
            'repo.delete_cancelled_bookings',
            attributes={
                'booking.count': len(booking_ids),
                'db.system': 'postgresql',
                'db.operation': 'delete',
            },
        ):
            return await self.executor.execute_update(
                """
                DELETE FROM bookings
                WHERE bid = ANY($1::int[])
                  AND status = $2
                """,
                booking_ids,
                BookingStatus.CANCELLED.value,
            )
