import asyncpg
import pytest

from src.platform.database.unit_of_work import AsyncpgUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.service.seat_booking.app.command.cancel_all_pending_bookings_use_case import (
    CancelAllPendingBookingsUseCase,
)
from src.service.seat_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.seat_booking.app.command.cancel_bookings_for_closure_use_case import (
    CancelBookingsForClosureUseCase,
)
from src.service.seat_booking.domain.enum.booking_status import BookingStatus
from src.service.seat_booking.driven_adapter.hook.post_cancellation_hook_impl import (
    KeepSeatsPostCancellationHook,
    ReleaseSeatsPostCancellationHook,
)
from test.constants import (
    AMC,
    AMC_EVENING_SHOW,
    AMC_LATE_SHOW,
    AMC_NEXT_DAY_SHOW,
    BOB_EMAIL,
    CLOSURE_DATE,
    MISSING_BOOKING_ID,
    REGAL_EVENING_SHOW,
)
from test.service.seat_booking.seed import booking_status, insert_booking, seat_owner


@pytest.mark.integration
class TestCancelAllPending:
    @pytest.mark.asyncio
    async def test_only_pending_bookings_are_cancelled(self, db_conn: asyncpg.Connection) -> None:
        """
        Given: two pending bookings and one paid booking
        When: all pending bookings are cancelled
        Then: the two pending ones are cancelled, the paid one is untouched
        """
        # Arrange
        await insert_booking(db_conn, bid=1, status=BookingStatus.PENDING, seat_ids=(10,))
        await insert_booking(db_conn, bid=2, status=BookingStatus.PENDING, email=BOB_EMAIL)
        await insert_booking(db_conn, bid=3, status=BookingStatus.PAID, seat_ids=(11,))

        # Act
        result = await CancelAllPendingBookingsUseCase(
            uow=AsyncpgUnitOfWork(), post_cancellation_hook=KeepSeatsPostCancellationHook()
        ).execute()

        # Assert
        assert result.cancelled_count == 2
        assert await booking_status(db_conn, 1) == BookingStatus.CANCELLED
        assert await booking_status(db_conn, 2) == BookingStatus.CANCELLED
        assert await booking_status(db_conn, 3) == BookingStatus.PAID
        # keep_seats: cancelled booking still owns its seat
        assert await seat_owner(db_conn, 10) == 1

    @pytest.mark.asyncio
    async def test_release_policy_frees_seats_in_same_transaction(
        self, db_conn: asyncpg.Connection
    ) -> None:
        await insert_booking(db_conn, bid=1, status=BookingStatus.PENDING, seat_ids=(10, 11))

        result = await CancelAllPendingBookingsUseCase(
            uow=AsyncpgUnitOfWork(), post_cancellation_hook=ReleaseSeatsPostCancellationHook()
        ).execute()

        assert result.cancelled_count == 1
        assert result.released_seats == 2
        assert await seat_owner(db_conn, 10) is None
        assert await seat_owner(db_conn, 11) is None

    @pytest.mark.asyncio
    async def test_nothing_pending_returns_zero(self, db_conn: asyncpg.Connection) -> None:
        result = await CancelAllPendingBookingsUseCase(
            uow=AsyncpgUnitOfWork(), post_cancellation_hook=KeepSeatsPostCancellationHook()
        ).execute()

        assert result.cancelled_count == 0


@pytest.mark.integration
class TestCancelBooking:
    @pytest.fixture
    def use_case(self) -> CancelBookingUseCase:
        return CancelBookingUseCase(
            uow=AsyncpgUnitOfWork(), post_cancellation_hook=KeepSeatsPostCancellationHook()
        )

    @pytest.mark.asyncio
    async def test_paid_booking_is_cancelled(
        self, db_conn: asyncpg.Connection, use_case: CancelBookingUseCase
    ) -> None:
        await insert_booking(db_conn, bid=1, status=BookingStatus.PAID)

        result = await use_case.execute(booking_id=1)

        assert result.cancelled_count == 1
        assert await booking_status(db_conn, 1) == BookingStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_cancelling_twice_succeeds_both_times(self, db_conn: asyncpg.Connection) -> None:
        await insert_booking(db_conn, bid=1, status=BookingStatus.PENDING)

        first = await CancelBookingUseCase(
            uow=AsyncpgUnitOfWork(), post_cancellation_hook=KeepSeatsPostCancellationHook()
        ).execute(booking_id=1)
        second = await CancelBookingUseCase(
            uow=AsyncpgUnitOfWork(), post_cancellation_hook=KeepSeatsPostCancellationHook()
        ).execute(booking_id=1)

        assert first.cancelled_count == 1
        assert second.cancelled_count == 1
        assert await booking_status(db_conn, 1) == BookingStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_missing_booking_is_not_found(
        self, db_conn: asyncpg.Connection, use_case: CancelBookingUseCase
    ) -> None:
        with pytest.raises(NotFoundError):
            await use_case.execute(booking_id=MISSING_BOOKING_ID)


@pytest.mark.integration
class TestCancelBookingsForClosure:
    @pytest.mark.asyncio
    async def test_cascades_to_every_theater_of_the_cinema_on_that_date(
        self, db_conn: asyncpg.Connection
    ) -> None:
        """
        Given: bookings on both AMC screens on 2019-02-02, one AMC booking the
               next day, and one Regal booking on 2019-02-02
        When: AMC closes on 2019-02-02
        Then: only the two AMC bookings of that date are cancelled
        """
        # Arrange
        await insert_booking(db_conn, bid=1, status=BookingStatus.PENDING, sid=AMC_EVENING_SHOW)
        await insert_booking(db_conn, bid=2, status=BookingStatus.PAID, sid=AMC_LATE_SHOW)
        await insert_booking(db_conn, bid=3, status=BookingStatus.PENDING, sid=AMC_NEXT_DAY_SHOW)
        await insert_booking(db_conn, bid=4, status=BookingStatus.PAID, sid=REGAL_EVENING_SHOW)

        # Act
        result = await CancelBookingsForClosureUseCase(
            uow=AsyncpgUnitOfWork(), post_cancellation_hook=KeepSeatsPostCancellationHook()
        ).execute(show_date=CLOSURE_DATE, cinema_name=AMC)

        # Assert
        assert result.cancelled_count == 2
        assert await booking_status(db_conn, 1) == BookingStatus.CANCELLED
        assert await booking_status(db_conn, 2) == BookingStatus.CANCELLED
        assert await booking_status(db_conn, 3) == BookingStatus.PENDING
        assert await booking_status(db_conn, 4) == BookingStatus.PAID

    @pytest.mark.asyncio
    async def test_already_cancelled_bookings_are_not_counted(
        self, db_conn: asyncpg.Connection
    ) -> None:
        await insert_booking(db_conn, bid=1, status=BookingStatus.CANCELLED, sid=AMC_EVENING_SHOW)
        await insert_booking(db_conn, bid=2, status=BookingStatus.PAID, sid=AMC_EVENING_SHOW)

        result = await CancelBookingsForClosureUseCase(
            uow=AsyncpgUnitOfWork(), post_cancellation_hook=KeepSeatsPostCancellationHook()
        ).execute(show_date=CLOSURE_DATE, cinema_name=AMC)

        assert result.cancelled_count == 1

    @pytest.mark.asyncio
    async def test_unknown_cinema_cancels_nothing(self, db_conn: asyncpg.Connection) -> None:
        await insert_booking(db_conn, bid=1, status=BookingStatus.PAID, sid=AMC_EVENING_SHOW)

        result = await CancelBookingsForClosureUseCase(
            uow=AsyncpgUnitOfWork(), post_cancellation_hook=KeepSeatsPostCancellationHook()
        ).execute(show_date=CLOSURE_DATE, cinema_name='Nowhere Cinema')

        assert result.cancelled_count == 0
        assert await booking_status(db_conn, 1) == BookingStatus.PAID
