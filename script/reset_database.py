#!/usr/bin/env python3
"""
Database Reset Script
Reset PostgreSQL database structure

Features:
1. Drop & Recreate Database - completely wipe the database
2. Create Tables - build the schema from the SQLAlchemy models

Notes:
- This script only resets database structure, does not seed data
"""

import asyncio

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, create_async_engine

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import create_db_and_tables


DB_WAIT_SECONDS = 1


def _parse_db_connection(database_url: str) -> tuple[str, str]:
    """Parse database URL and return (server_url, db_name)"""
    server_url, db_name = database_url.rsplit('/', 1)
    return server_url, db_name


async def _terminate_connections(conn: AsyncConnection, db_name: str) -> None:
    await conn.execute(
        text(
            'SELECT pg_terminate_backend(pid) FROM pg_stat_activity '
            'WHERE datname = :db_name AND pid <> pg_backend_pid()'
        ),
        {'db_name': db_name},
    )


async def _drop_and_create_db(server_url: str, db_name: str) -> None:
    admin_engine = create_async_engine(f'{server_url}/postgres', isolation_level='AUTOCOMMIT')

    try:
        async with admin_engine.connect() as conn:
            await _terminate_connections(conn, db_name)

            await conn.execute(text(f'DROP DATABASE IF EXISTS "{db_name}"'))
            print(f"   ✅ Database '{db_name}' dropped")

            await asyncio.sleep(DB_WAIT_SECONDS)

            await conn.execute(text(f'CREATE DATABASE "{db_name}"'))
            print(f"   ✅ Database '{db_name}' created")
    finally:
        await admin_engine.dispose()


async def main() -> None:
    print('🔄 Starting database reset...')
    print('=' * 50)

    database_url = settings.DATABASE_URL_ASYNC
    server_url, db_name = _parse_db_connection(database_url)
    print(f'Database name: {db_name}')

    print('🗑️ Dropping database...')
    await _drop_and_create_db(server_url, db_name)

    print('🏗️ Creating tables...')
    await create_db_and_tables(database_url)

    print('=' * 50)
    print('✅ Database reset completed!')


if __name__ == '__main__':
    asyncio.run(main())
