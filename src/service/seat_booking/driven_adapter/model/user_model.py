from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class UserModel(Base):
    __tablename__ = 'users'

    email: Mapped[str] = mapped_column(String(64), primary_key=True)
    fname: Mapped[str] = mapped_column(String(32), nullable=False)
    lname: Mapped[str] = mapped_column(String(32), nullable=False)
