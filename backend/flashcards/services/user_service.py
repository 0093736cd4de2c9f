import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from flashcards.core.security import hash_password, verify_password
from flashcards.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    @staticmethod
    def fetch_by_username(db: Session, username: str) -> User | None:
        return db.scalars(select(User).where(User.username == username)).first()

    @staticmethod
    def authenticate(db: Session, username: str, password: str) -> User | None:
        """Return the user when the password matches the stored hash."""
        user = UserService.fetch_by_username(db, username)
        if not user or not verify_password(password, user.password_hash):
            return None
        return user

    @staticmethod
    def insert(db: Session, username: str, password: str) -> User:
        user = User(username=username, password_hash=hash_password(password))
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("User created: %s", username)
        return user
