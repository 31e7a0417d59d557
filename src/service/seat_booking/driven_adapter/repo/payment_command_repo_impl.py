from typing import List

from opentelemetry import trace

from src.platform.database.query_executor import QueryExecutor
from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.interface.i_payment_command_repo import IPaymentCommandRepo


class PaymentCommandRepoImpl(IPaymentCommandRepo):
    def __init__(self, *, executor: QueryExecutor) -> None:
        self.executor = executor
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def delete_payments_of_bookings(self, *, booking_ids: List[int]) -> int:
        if not booking_ids:
            return 0
        with self.tracer.start_as_current_span(
            'repo.delete_payments_of_bookings',
            attributes={
                'booking.count': len(booking_ids),
                'db.system': 'postgresql',
                'db.operation': 'delete',
            },
        ):
            return await self.executor.execute_update(
                'DELETE FROM payments WHERE bid = ANY($1::int[])',
                booking_ids,
            )

    @Logger.io
    async def delete_payment(self, *, payment_id: int) -> int:
        return await self.executor.execute_update(
            'DELETE FROM payments WHERE pid = $1',
            payment_id,
        )
