"""
Query Executor

Thin wrapper around one asyncpg connection. Every statement is parameterized
($1..$n placeholders); callers never interpolate values into SQL text.

asyncpg failures are translated into the platform error taxonomy:
- IntegrityConstraintViolationError → IntegrityViolationError
- connection / pool failures → UnavailableError
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import asyncpg

from src.platform.exception.exceptions import IntegrityViolationError, UnavailableError
from src.platform.logging.loguru_io import Logger


UNAVAILABLE_ERRORS: tuple[type[BaseException], ...] = (
    OSError,
    asyncio.TimeoutError,
    asyncpg.exceptions.PostgresConnectionError,
    asyncpg.exceptions.CannotConnectNowError,
    asyncpg.exceptions.TooManyConnectionsError,
)


@asynccontextmanager
async def translate_db_errors(operation: str) -> AsyncIterator[None]:
    try:
        yield
    except asyncpg.exceptions.IntegrityConstraintViolationError as e:
        constraint = getattr(e, 'constraint_name', None) or 'unknown'
        raise IntegrityViolationError(
            f'{operation} violated constraint {constraint}: {e}'
        ) from e
    except UNAVAILABLE_ERRORS as e:
        raise UnavailableError(f'{operation} failed, database unavailable: {e}') from e


def parse_affected_rows(status: str) -> int:
    """
    asyncpg returns the command tag, e.g. 'UPDATE 3', 'DELETE 0', 'INSERT 0 1'.
    The affected row count is always the last token.
    """
    try:
        return int(status.rsplit(' ', 1)[-1])
    except (ValueError, AttributeError):
        return 0


class QueryExecutor:
    def __init__(self, conn: asyncpg.Connection) -> None:
        self.conn = conn

    async def execute_update(self, statement: str, *params: Any) -> int:
        async with translate_db_errors('execute_update'):
            status = await self.conn.execute(statement, *params)
        affected = parse_affected_rows(status)
        Logger.base.debug(f'🗄️ [SQL] {status} ({affected} rows)')
        return affected

    async def execute_query_rows(self, statement: str, *params: Any) -> int:
        async with translate_db_errors('execute_query_rows'):
            rows = await self.conn.fetch(statement, *params)
        return len(rows)

    async def execute_query_and_return_result(
        self, statement: str, *params: Any
    ) -> list[list[str | None]]:
        async with translate_db_errors('execute_query_and_return_result'):
            rows = await self.conn.fetch(statement, *params)
        return [[None if value is None else str(value) for value in row.values()] for row in rows]

    async def fetch(self, statement: str, *params: Any) -> list[asyncpg.Record]:
        async with translate_db_errors('fetch'):
            return await self.conn.fetch(statement, *params)

    async def fetchrow(self, statement: str, *params: Any) -> asyncpg.Record | None:
        async with translate_db_errors('fetchrow'):
            return await self.conn.fetchrow(statement, *params)
