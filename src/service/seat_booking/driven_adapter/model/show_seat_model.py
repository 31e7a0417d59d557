from decimal import Decimal
from typing import Optional

from sqlalchemy import ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class ShowSeatModel(Base):
    __tablename__ = 'show_seats'

    ssid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    sid: Mapped[int] = mapped_column(ForeignKey('shows.sid'), nullable=False, index=True)
    # NULL means the seat is available
    bid: Mapped[Optional[int]] = mapped_column(
        ForeignKey('bookings.bid'), nullable=True, index=True
    )
    price: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False)
