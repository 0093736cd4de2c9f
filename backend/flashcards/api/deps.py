from typing import Annotated, Iterator

from fastapi import Depends, Path, Query, Request
from sqlalchemy.orm import Session

from flashcards.core.config import settings
from flashcards.core.exceptions import AuthenticationError
from flashcards.db.store import StoreManager
from flashcards.schemas.common import SQLITE_INT_MAX, SQLITE_INT_MIN
from flashcards.services.hint_service import HintGenerator

SESSION_USER_KEY = "user"

PathId = Annotated[int, Path(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)]
QueryId = Annotated[int, Query(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)]


def get_store(request: Request) -> StoreManager:
    return request.app.state.store


def get_db(store: StoreManager = Depends(get_store)) -> Iterator[Session]:
    db = store.current.session()
    try:
        yield db
    finally:
        db.close()


def current_user(request: Request) -> str | None:
    return request.session.get(SESSION_USER_KEY)


def require_login(request: Request) -> str:
    username = current_user(request)
    if not username:
        raise AuthenticationError("Login required")
    return username


def get_hint_generator() -> HintGenerator:
    return HintGenerator.from_settings(settings)
