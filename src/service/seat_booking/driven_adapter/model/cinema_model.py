from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class CinemaModel(Base):
    __tablename__ = 'cinemas'

    cid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    cname: Mapped[str] = mapped_column(String(64), nullable=False, index=True)


class TheaterModel(Base):
    __tablename__ = 'theaters'

    tid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    cid: Mapped[int] = mapped_column(ForeignKey('cinemas.cid'), nullable=False, index=True)
    tname: Mapped[str] = mapped_column(String(64), nullable=False)
