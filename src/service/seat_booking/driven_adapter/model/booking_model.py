from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class BookingModel(Base):
    __tablename__ = 'bookings'

    # Externally supplied id, not sequence generated
    bid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    bdatetime: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    seats: Mapped[int] = mapped_column(Integer, nullable=False)
    sid: Mapped[int] = mapped_column(ForeignKey('shows.sid'), nullable=False, index=True)
    email: Mapped[str] = mapped_column(ForeignKey('users.email'), nullable=False)

    __table_args__ = (
        CheckConstraint("status IN ('pending', 'paid', 'cancelled')", name='ck_booking_status'),
        CheckConstraint('seats > 0', name='ck_booking_seats_positive'),
    )
