"""
Production FastAPI Application

Booking lifecycle service: cancellations, seat swaps, purges and payment removal.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.asyncpg_setting import close_all_asyncpg_pools, get_asyncpg_pool
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Booking Service] Starting up...')

    tracing = TracingConfig(service_name='booking-service')
    tracing.setup()
    tracing.instrument_asyncpg()
    Logger.base.info('📊 [Booking Service] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Booking Service] Dependency injection wired')

    # Fail fast when the database is unreachable
    await get_asyncpg_pool()
    Logger.base.info('🏊 [Booking Service] Asyncpg pool initialized')

    Logger.base.info(
        f'✅ [Booking Service] Ready (post-cancellation policy: '
        f'{container.config_service().POST_CANCELLATION_POLICY})'
    )

    yield

    Logger.base.info('🛑 [Booking Service] Shutting down...')

    await close_all_asyncpg_pools()
    Logger.base.info('🏊 [Booking Service] Asyncpg pools closed')

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Booking Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')
