"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.asyncpg_setting import get_asyncpg_pool
from src.platform.database.unit_of_work import AsyncpgUnitOfWork
from src.service.seat_booking.driven_adapter.hook.post_cancellation_hook_impl import (
    KeepSeatsPostCancellationHook,
    ReleaseSeatsPostCancellationHook,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # One unit of work (pooled connection + transaction) per operation
    unit_of_work = providers.Factory(AsyncpgUnitOfWork, pool_provider=get_asyncpg_pool)

    # What happens to the seats of cancelled bookings
    post_cancellation_hook = providers.Selector(
        config_service.provided.POST_CANCELLATION_POLICY,
        keep_seats=providers.Singleton(KeepSeatsPostCancellationHook),
        release_seats=providers.Singleton(ReleaseSeatsPostCancellationHook),
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
