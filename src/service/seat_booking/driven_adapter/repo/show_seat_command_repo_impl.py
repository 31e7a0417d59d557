"""
Show Seat Command Repository Implementation (seat ledger)

Every ownership change is a conditional UPDATE; the WHERE clause carries
the expected current state and the row count reports whether it held.
"""

from decimal import Decimal
from typing import List, Optional

import asyncpg
from opentelemetry import trace

from src.platform.database.query_executor import QueryExecutor
from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.interface.i_show_seat_command_repo import (
    IShowSeatCommandRepo,
)
from src.service.seat_booking.domain.entity.show_seat_entity import ShowSeat
from src.service.seat_booking.domain.enum.booking_status import BookingStatus


class ShowSeatCommandRepoImpl(IShowSeatCommandRepo):
    def __init__(self, *, executor: QueryExecutor) -> None:
        self.executor = executor
        self.tracer = trace.get_tracer(__name__)

    @staticmethod
    def _row_to_entity(row: asyncpg.Record) -> ShowSeat:
        return ShowSeat(
            id=row['ssid'],
            show_id=row['sid'],
            price=row['price'],
            booking_id=row['bid'],
        )

    @Logger.io
    async def claim_seat(self, *, seat_id: int, booking_id: int) -> Optional[ShowSeat]:
        with self.tracer.start_as_current_span(
            'repo.claim_seat',
            attributes={
                'seat.id': seat_id,
                'booking.id': booking_id,
                'db.system': 'postgresql',
                'db.operation': 'update',
            },
        ):
            # bid IS NULL is the compare-and-set guard; a concurrent claimer
            # blocks on the row lock, then re-checks it and matches nothing
            row = await self.executor.fetchrow(
                """
                UPDATE show_seats
                SET bid = $1
                WHERE ssid = $2
                  AND bid IS NULL
                RETURNING ssid, sid, bid, price
                """,
                booking_id,
                seat_id,
            )
            return self._row_to_entity(row) if row else None

    @Logger.io
    async def seat_exists(self, *, seat_id: int) -> bool:
        return (
            await self.executor.execute_query_rows(
                'SELECT 1 FROM show_seats WHERE ssid = $1', seat_id
            )
            > 0
        )

    @Logger.io
    async def find_owned_seat(self, *, seat_id: int, booking_id: int) -> Optional[ShowSeat]:
        row = await self.executor.fetchrow(
            """
            SELECT ss.ssid, ss.sid, ss.bid, ss.price
            FROM show_seats ss
            JOIN bookings b ON b.bid = ss.bid
            WHERE ss.ssid = $1
              AND b.bid = $2
              AND b.status = ANY($3::text[])
            """,
            seat_id,
            booking_id,
            [status.value for status in BookingStatus.cancellable()],
        )
        return self._row_to_entity(row) if row else None

    @Logger.io
    async def release_seat(self, *, seat_id: int, booking_id: int, price: Decimal) -> int:
        with self.tracer.start_as_current_span(
            'repo.release_seat',
            attributes={
                'seat.id': seat_id,
                'booking.id': booking_id,
                'db.system': 'postgresql',
                'db.operation': 'update',
            },
        ):
            return await self.executor.execute_update(
                """
                UPDATE show_seats
                SET bid = NULL
                WHERE ssid = $1
                  AND bid = $2
                  AND price = $3
                """,
                seat_id,
                booking_id,
                price,
            )

    @Logger.io
    async def release_seats_of_bookings(self, *, booking_ids: List[int]) -> int:
        if not booking_ids:
            return 0
        with self.tracer.start_as_current_span(
            'repo.release_seats_of_bookings',
            attributes={
                'booking.count': len(booking_ids),
                'db.system': 'postgresql',
                'db.operation': 'update',
            },
        ):
            return await self.executor.execute_update(
                'UPDATE show_seats SET bid = NULL WHERE bid = ANY($1::int[])',
                booking_ids,
            )
