"""
Unit of Work Pattern - one pooled connection and one transaction per operation

Architecture:
- UoW acquires a connection from the asyncpg pool on enter and releases it on exit
- UoW owns the transaction: commit() makes changes durable, anything else rolls back
- Repositories share the UoW's QueryExecutor, so every statement of an
  operation runs inside the same transaction
"""

from __future__ import annotations

import abc
from collections.abc import Awaitable, Callable
from types import TracebackType
from typing import TYPE_CHECKING, Optional

import asyncpg

from src.platform.database.asyncpg_setting import get_asyncpg_pool
from src.platform.database.query_executor import QueryExecutor, translate_db_errors
from src.platform.exception.exceptions import UnavailableError
from src.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from asyncpg.transaction import Transaction

    from src.service.seat_booking.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from src.service.seat_booking.app.interface.i_payment_command_repo import (
        IPaymentCommandRepo,
    )
    from src.service.seat_booking.app.interface.i_show_seat_command_repo import (
        IShowSeatCommandRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Usage:
        async with uow:
            await uow.show_seat_command_repo.claim_seat(...)
            await uow.commit()

    Leaving the block without commit() rolls back.
    """

    booking_command_repo: IBookingCommandRepo
    show_seat_command_repo: IShowSeatCommandRepo
    payment_command_repo: IPaymentCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class AsyncpgUnitOfWork(AbstractUnitOfWork):
    def __init__(
        self, *, pool_provider: Callable[[], Awaitable[asyncpg.Pool]] = get_asyncpg_pool
    ) -> None:
        self._pool_provider = pool_provider
        self._pool: Optional[asyncpg.Pool] = None
        self._conn: Optional[asyncpg.Connection] = None
        self._transaction: Optional[Transaction] = None
        self._finished = False

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.seat_booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.seat_booking.driven_adapter.repo.payment_command_repo_impl import (
            PaymentCommandRepoImpl,
        )
        from src.service.seat_booking.driven_adapter.repo.show_seat_command_repo_impl import (
            ShowSeatCommandRepoImpl,
        )

        async with translate_db_errors('begin unit of work'):
            self._pool = await self._pool_provider()
            self._conn = await self._pool.acquire()
            try:
                self._transaction = self._conn.transaction()
                await self._transaction.start()
            except BaseException:
                await self._release()
                raise
        self._finished = False

        executor = QueryExecutor(self._conn)
        self.booking_command_repo = BookingCommandRepoImpl(executor=executor)
        self.show_seat_command_repo = ShowSeatCommandRepoImpl(executor=executor)
        self.payment_command_repo = PaymentCommandRepoImpl(executor=executor)

        return await super().__aenter__()

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        except UnavailableError as e:
            # Broken connection: the server already discarded the transaction
            Logger.base.warning(f'⚠️ [UoW] Rollback failed, discarding connection: {e}')
        finally:
            await self._release()

    async def _commit(self) -> None:
        if self._transaction is None or self._finished:
            raise RuntimeError('Unit of work is not active')
        self._finished = True
        async with translate_db_errors('commit'):
            await self._transaction.commit()

    async def rollback(self) -> None:
        if self._transaction is None or self._finished:
            return
        self._finished = True
        async with translate_db_errors('rollback'):
            await self._transaction.rollback()

    async def _release(self) -> None:
        if self._pool is not None and self._conn is not None:
            await self._pool.release(self._conn)
        self._conn = None
        self._transaction = None
