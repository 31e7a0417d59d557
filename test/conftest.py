"""
Test Configuration and Fixtures

This module provides:
- Test environment variables (set before any application import)
- Test database creation and schema reset once per session
- Per-test table cleanup and asyncpg pool teardown for integration tests

Architecture:
- Unit tests (@pytest.mark.unit): mocked collaborators, no database
- Integration tests: real PostgreSQL, skipped when it cannot be reached
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time, so POSTGRES_DB must already point at the
# test database when src.platform.config.core_setting is first imported
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    if worker_id == 'master':
        os.environ['POSTGRES_DB'] = 'ticketmaster_test_db'
    else:
        os.environ['POSTGRES_DB'] = f'ticketmaster_test_db_{worker_id}'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('ASYNCPG_POOL_MIN_SIZE', '1')
    os.environ.setdefault('ASYNCPG_POOL_MAX_SIZE', '5')
    os.environ.setdefault('POST_CANCELLATION_POLICY', 'keep_seats')
    os.environ.setdefault('SEAT_SWAP_REQUIRE_EQUAL_PRICE', 'true')


_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

from dotenv import load_dotenv  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import text  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402


# =============================================================================
# Database Configuration
# =============================================================================
def _get_db_config() -> dict[str, str]:
    env_file = '.env' if Path('.env').exists() else '.env.example'
    # override=False keeps POSTGRES_DB pointed at the test database
    load_dotenv(env_file, override=False)

    return {
        'user': os.getenv('POSTGRES_USER', 'postgres'),
        'password': os.getenv('POSTGRES_PASSWORD', 'postgres'),
        'host': os.getenv('POSTGRES_SERVER', 'localhost'),
        'port': os.getenv('POSTGRES_PORT', '5432'),
        'test_db': os.getenv('POSTGRES_DB', 'ticketmaster_test_db'),
    }


def _get_test_database_url() -> str:
    cfg = _get_db_config()
    return (
        f'postgresql+asyncpg://{cfg["user"]}:{cfg["password"]}'
        f'@{cfg["host"]}:{cfg["port"]}/{cfg["test_db"]}'
    )


TABLES = [
    'payments',
    'show_seats',
    'bookings',
    'plays',
    'shows',
    'movies',
    'theaters',
    'cinemas',
    'users',
]

_database_error: str | None = None


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
async def _setup_test_database() -> None:
    from src.platform.database.orm_db_setting import create_db_and_tables, drop_db_tables

    db_url = _get_test_database_url()
    cfg = _get_db_config()

    postgres_url = db_url.replace(f'/{cfg["test_db"]}', '/postgres')
    engine = create_async_engine(postgres_url, isolation_level='AUTOCOMMIT')
    try:
        async with engine.begin() as conn:
            result = await conn.execute(
                text('SELECT 1 FROM pg_database WHERE datname = :name'),
                {'name': cfg['test_db']},
            )
            if not result.fetchone():
                await conn.execute(text(f'CREATE DATABASE "{cfg["test_db"]}"'))
    finally:
        await engine.dispose()

    await drop_db_tables(db_url)
    await create_db_and_tables(db_url)


async def _clean_all_tables() -> None:
    engine = create_async_engine(_get_test_database_url())
    try:
        async with engine.begin() as conn:
            await conn.execute(text(f'TRUNCATE {", ".join(TABLES)} RESTART IDENTITY CASCADE'))
    finally:
        await engine.dispose()


# =============================================================================
# Pytest Hooks
# =============================================================================
def _is_unit_test_only_run(config: pytest.Config) -> bool:
    markexpr = config.getoption('markexpr', default='')
    return bool(markexpr) and 'unit' in str(markexpr) and 'not unit' not in str(markexpr)


def pytest_sessionstart(session: pytest.Session) -> None:
    global _database_error
    if _is_unit_test_only_run(session.config):
        return

    try:
        asyncio.run(_setup_test_database())
    except Exception as e:  # any connection / auth / catalog failure
        _database_error = f'PostgreSQL unavailable for integration tests: {e}'


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' in markers:
            continue
        if _database_error is not None:
            item.add_marker(pytest.mark.skip(reason=_database_error))
        else:
            # Truncate before any test fixture seeds data
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    yield

    from src.platform.database.asyncpg_setting import close_asyncpg_pool

    await close_asyncpg_pool()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def execute_sql_statement() -> Any:
    """Run raw SQL against the test database from synchronous (TestClient) tests."""

    def _execute(
        statement: str, params: dict[str, Any] | None = None, fetch: bool = False
    ) -> list[dict[str, Any]] | None:
        async def _run() -> list[dict[str, Any]] | None:
            engine = create_async_engine(_get_test_database_url())
            try:
                async with engine.begin() as conn:
                    result = await conn.execute(text(statement), params or {})
                    if fetch:
                        return [dict(row._mapping) for row in result]
                    return None
            finally:
                await engine.dispose()

        return asyncio.run(_run())

    return _execute
