from sqlalchemy import ColumnElement, delete, func, select, true, update
from sqlalchemy.orm import Session

from flashcards.core.exceptions import ValidationError
from flashcards.models.card import Card
from flashcards.schemas.common import check_sqlite_int

NAMED_FILTERS: dict[str, ColumnElement[bool]] = {
    "all": true(),
    "general": Card.type == 1,
    "code": Card.type == 2,
    "known": Card.known.is_(True),
    "unknown": Card.known.is_(False),
}


def parse_filter(filter_name: str) -> tuple[ColumnElement[bool], str | int]:
    """
    Resolve a filter name to a WHERE clause and its display value.

    Named filters map to fixed clauses; anything else must be an integer tag
    id, compared as a bound parameter.
    """
    if filter_name in NAMED_FILTERS:
        return NAMED_FILTERS[filter_name], filter_name
    try:
        card_type = int(filter_name)
    except (TypeError, ValueError):
        raise ValidationError(f"Unknown card filter: {filter_name!r}")
    check_sqlite_int(card_type)
    return Card.type == card_type, card_type


class CardService:
    @staticmethod
    def fetch_all(db: Session) -> list[Card]:
        return list(db.scalars(select(Card).order_by(Card.id.desc())))

    @staticmethod
    def fetch_by_predicate(db: Session, filter_name: str) -> list[Card]:
        clause, _ = parse_filter(filter_name)
        return list(db.scalars(select(Card).where(clause).order_by(Card.id.desc())))

    @staticmethod
    def _fetch_random(db: Session, *clauses) -> Card | None:
        stmt = select(Card).where(*clauses).order_by(func.random()).limit(1)
        return db.scalars(stmt).first()

    @staticmethod
    def fetch_random_unknown_by_type(db: Session, card_type: int) -> Card | None:
        return CardService._fetch_random(db, Card.type == card_type, Card.known.is_(False))

    @staticmethod
    def fetch_random_any_unknown(db: Session) -> Card | None:
        return CardService._fetch_random(db, Card.known.is_(False))

    @staticmethod
    def fetch_random_known_by_type(db: Session, card_type: int) -> Card | None:
        return CardService._fetch_random(db, Card.type == card_type, Card.known.is_(True))

    @staticmethod
    def fetch_by_id(db: Session, card_id: int) -> Card | None:
        return db.get(Card, card_id)

    @staticmethod
    def insert_card(db: Session, *, card_type: int, front: str, back: str) -> Card:
        card = Card(type=card_type, front=front, back=back, known=False)
        db.add(card)
        db.commit()
        db.refresh(card)
        return card

    @staticmethod
    def update_card(
        db: Session,
        card_id: int,
        *,
        card_type: int,
        front: str,
        back: str,
        known: bool = False,
    ) -> bool:
        result = db.execute(
            update(Card)
            .where(Card.id == card_id)
            .values(type=card_type, front=front, back=back, known=known)
        )
        db.commit()
        return result.rowcount > 0

    @staticmethod
    def delete_card(db: Session, card_id: int) -> bool:
        result = db.execute(delete(Card).where(Card.id == card_id))
        db.commit()
        return result.rowcount > 0

    @staticmethod
    def set_known(db: Session, card_id: int, known: bool) -> bool:
        result = db.execute(update(Card).where(Card.id == card_id).values(known=known))
        db.commit()
        return result.rowcount > 0

    @staticmethod
    def update_card_type(db: Session, card_id: int, card_type: int) -> bool:
        result = db.execute(update(Card).where(Card.id == card_id).values(type=card_type))
        db.commit()
        return result.rowcount > 0
