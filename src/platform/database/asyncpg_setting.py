import asyncio

import asyncpg

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


# Global connection pools per event loop
asyncpg_pools: dict[int, asyncpg.Pool] = {}


def _asyncpg_dsn() -> str:
    return settings.DATABASE_URL_ASYNC.replace('postgresql+asyncpg://', 'postgresql://')


async def get_asyncpg_pool() -> asyncpg.Pool:
    current_loop = asyncio.get_running_loop()
    loop_id = id(current_loop)

    # Fast path: pool already exists for this loop
    if loop_id in asyncpg_pools:
        pool = asyncpg_pools[loop_id]
        Logger.base.debug(
            f'📊 [Pool Stats] size={pool.get_size()}, free={pool.get_idle_size()}, '
            f'max={pool.get_max_size()}, min={pool.get_min_size()}'
        )
        return pool

    # Slow path: create new pool (startup, or a fresh loop in tests)
    pool = await asyncpg.create_pool(
        _asyncpg_dsn(),
        min_size=settings.ASYNCPG_POOL_MIN_SIZE,
        max_size=settings.ASYNCPG_POOL_MAX_SIZE,
        command_timeout=settings.ASYNCPG_POOL_COMMAND_TIMEOUT,
        max_inactive_connection_lifetime=settings.ASYNCPG_POOL_MAX_INACTIVE_LIFETIME,
        timeout=settings.ASYNCPG_POOL_TIMEOUT,
        max_queries=settings.ASYNCPG_POOL_MAX_QUERIES,
    )
    Logger.base.info(
        f'🏊 [Pool] Created asyncpg pool for loop {loop_id} '
        f'(min={settings.ASYNCPG_POOL_MIN_SIZE}, max={settings.ASYNCPG_POOL_MAX_SIZE})'
    )

    asyncpg_pools[loop_id] = pool
    return pool


async def close_asyncpg_pool() -> None:
    """
    Close the asyncpg connection pool for the current event loop

    Note: Only closes the pool for the current event loop.
    Other event loops' pools remain active.
    """
    loop_id = id(asyncio.get_running_loop())
    pool = asyncpg_pools.pop(loop_id, None)
    if pool is not None:
        await pool.close()


async def close_all_asyncpg_pools() -> None:
    """Close every pool; only call during application shutdown."""
    for loop_id, pool in list(asyncpg_pools.items()):
        try:
            await pool.close()
        except Exception as e:
            Logger.base.warning(f'⚠️ [Pool] Failed to close pool for loop {loop_id}: {e}')
    asyncpg_pools.clear()
