"""
SQLAlchemy schema management

The service issues its statements through asyncpg (see query_executor.py);
SQLAlchemy only declares the relational schema and creates / drops it for
tests and the reset script.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


def create_schema_engine(database_url: str | None = None) -> AsyncEngine:
    return create_async_engine(database_url or settings.DATABASE_URL_ASYNC, future=True)


def _register_models() -> None:
    # Importing the package registers every table on Base.metadata
    import src.service.seat_booking.driven_adapter.model  # noqa: F401


async def create_db_and_tables(database_url: str | None = None) -> None:
    """Create database tables if they don't exist"""
    _register_models()
    engine = create_schema_engine(database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        Logger.base.info(f'🗄️ [DB] Ensured {len(Base.metadata.tables)} tables')
    finally:
        await engine.dispose()


async def drop_db_tables(database_url: str | None = None) -> None:
    _register_models()
    engine = create_schema_engine(database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all, checkfirst=True)
        Logger.base.info('🗑️ [DB] Dropped all tables')
    finally:
        await engine.dispose()
