from datetime import datetime

from sqlalchemy import DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from flashcards.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    # column keeps its historical name, the value is a passlib hash
    password_hash: Mapped[str] = mapped_column("password", Text, nullable=False)
    created_at: Mapped[datetime | None] = mapped_column(DateTime, server_default=func.current_timestamp())
