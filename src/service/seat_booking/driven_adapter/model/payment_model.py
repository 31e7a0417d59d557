from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class PaymentModel(Base):
    __tablename__ = 'payments'

    pid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    bid: Mapped[int] = mapped_column(ForeignKey('bookings.bid'), nullable=False, index=True)
    pmethod: Mapped[str] = mapped_column(String(32), nullable=False)
    pdatetime: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(8, 2), nullable=False)
