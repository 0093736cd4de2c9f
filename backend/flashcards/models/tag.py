from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from flashcards.db.base import Base

DEFAULT_TAG_NAMES = ("general", "code", "bookmark")


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("tagName", Text, nullable=False)
