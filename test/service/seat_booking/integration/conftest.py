from collections.abc import AsyncGenerator

import asyncpg
import pytest

from src.platform.database.asyncpg_setting import get_asyncpg_pool
from src.platform.database.unit_of_work import AsyncpgUnitOfWork
from test.service.seat_booking.seed import seed_catalog


@pytest.fixture
async def db_conn() -> AsyncGenerator[asyncpg.Connection, None]:
    """Autocommit connection for seeding and asserting outside the code under test"""
    pool = await get_asyncpg_pool()
    async with pool.acquire() as conn:
        await seed_catalog(conn)
        yield conn


@pytest.fixture
def uow() -> AsyncpgUnitOfWork:
    return AsyncpgUnitOfWork()
