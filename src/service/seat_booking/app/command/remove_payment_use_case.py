from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger


class RemovePaymentUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, payment_id: int) -> None:
        async with self.uow:
            deleted = await self.uow.payment_command_repo.delete_payment(payment_id=payment_id)
            if deleted == 0:
                raise NotFoundError(f'Payment {payment_id} not found')
            await self.uow.commit()

        Logger.base.info(f'💳 [PAYMENT] Payment {payment_id} removed')
