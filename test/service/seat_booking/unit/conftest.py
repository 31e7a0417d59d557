from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_uow() -> MagicMock:
    """Unit of work whose repositories are AsyncMocks; entering returns itself"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.booking_command_repo = AsyncMock()
    uow.show_seat_command_repo = AsyncMock()
    uow.payment_command_repo = AsyncMock()
    return uow


@pytest.fixture
def mock_post_cancellation_hook() -> AsyncMock:
    hook = AsyncMock()
    hook.on_bookings_cancelled.return_value = 0
    return hook
