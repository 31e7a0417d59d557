from datetime import date, time

from sqlalchemy import Date, ForeignKey, Integer, String, Time
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class MovieModel(Base):
    __tablename__ = 'movies'

    mvid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    title: Mapped[str] = mapped_column(String(128), nullable=False)


class ShowModel(Base):
    __tablename__ = 'shows'

    sid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    mvid: Mapped[int] = mapped_column(ForeignKey('movies.mvid'), nullable=False)
    sdate: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    sttime: Mapped[time] = mapped_column(Time, nullable=False)
    edtime: Mapped[time] = mapped_column(Time, nullable=False)


class PlaysModel(Base):
    """Which theater a show plays in"""

    __tablename__ = 'plays'

    sid: Mapped[int] = mapped_column(ForeignKey('shows.sid'), primary_key=True)
    tid: Mapped[int] = mapped_column(ForeignKey('theaters.tid'), primary_key=True)
