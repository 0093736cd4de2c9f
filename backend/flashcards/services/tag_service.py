from sqlalchemy import select, update
from sqlalchemy.orm import Session

from flashcards.models.tag import Tag


class TagService:
    @staticmethod
    def list_all(db: Session) -> list[Tag]:
        return list(db.scalars(select(Tag).order_by(Tag.id.asc())))

    @staticmethod
    def fetch_by_id(db: Session, tag_id: int) -> Tag | None:
        return db.get(Tag, tag_id)

    @staticmethod
    def insert(db: Session, name: str) -> Tag:
        tag = Tag(name=name)
        db.add(tag)
        db.commit()
        db.refresh(tag)
        return tag

    @staticmethod
    def update_name(db: Session, tag_id: int, name: str) -> bool:
        result = db.execute(update(Tag).where(Tag.id == tag_id).values(name=name))
        db.commit()
        return result.rowcount > 0
