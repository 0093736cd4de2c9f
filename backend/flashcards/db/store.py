"""
Deck files and the active store.

A deck is one SQLite file in the store directory. ``StoreManager`` owns the
single active ``StoreHandle``; switching decks builds and initialises a new
handle first, then swaps it in and closes the old one, all under one lock.
Requests that still hold a session from the old handle finish on their
checked-out connection; new sessions on a closed handle are refused.
"""
import logging
import re
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from sqlalchemy import create_engine, func, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

import flashcards.models  # noqa: F401  registers the tables on Base.metadata
from flashcards.core.exceptions import (
    ConflictError,
    StoreError,
    StoreNotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from flashcards.db.base import Base
from flashcards.models.tag import DEFAULT_TAG_NAMES, Tag

logger = logging.getLogger(__name__)

DB_EXTENSION = ".db"

_NEW_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")
_FILE_NAME_RE = re.compile(r"^[A-Za-z0-9_.-]+\.db$")


class StoreHandle:
    """One open deck file: an engine with a fixed-size pool and its session factory."""

    def __init__(self, path: Path, pool_size: int = 5):
        self.path = path
        self.engine = create_engine(
            f"sqlite:///{path}",
            connect_args={"check_same_thread": False},
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=10,
        )
        self._session_factory = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
        self.closed = False

    @property
    def name(self) -> str:
        return self.path.name

    def session(self) -> Session:
        if self.closed:
            raise StoreUnavailableError(f"Store '{self.name}' was closed")
        return self._session_factory()

    def has_table(self, table_name: str) -> bool:
        return inspect(self.engine).has_table(table_name)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.engine.dispose()
        logger.info("Closed store %s", self.path)


def ensure_initialized(handle: StoreHandle) -> bool:
    """
    Create missing tables and seed the default tags into an empty tag table.

    Idempotent. Returns True when the default tags were seeded.
    """
    Base.metadata.create_all(handle.engine)

    with handle.session() as db:
        tag_count = db.scalar(select(func.count()).select_from(Tag))
        if tag_count:
            return False

        # one insert per tag keeps ids 1, 2, 3 in seed order
        for tag_name in DEFAULT_TAG_NAMES:
            db.add(Tag(name=tag_name))
            db.flush()
        db.commit()

    logger.info("Seeded default tags into %s", handle.path)
    return True


class StoreManager:
    def __init__(self, directory: str | Path, pool_size: int = 5):
        self.directory = Path(directory)
        self.pool_size = pool_size
        self._handle: StoreHandle | None = None
        self._lock = threading.Lock()

    @property
    def current(self) -> StoreHandle:
        handle = self._handle
        if handle is None or handle.closed:
            raise StoreUnavailableError("No active store")
        return handle

    @property
    def active_name(self) -> str | None:
        handle = self._handle
        return handle.name if handle is not None else None

    def list_stores(self) -> list[str]:
        if not self.directory.is_dir():
            return []
        return sorted(
            p.name for p in self.directory.iterdir()
            if p.is_file() and p.suffix == DB_EXTENSION
        )

    def resolve(self, name: str) -> Path:
        """Map a deck file name to a path inside the store directory."""
        if not name or not _FILE_NAME_RE.match(name) or name.startswith("."):
            raise ValidationError(f"Invalid store name: {name!r}")
        return self.directory / name

    def connect(self, name: str) -> StoreHandle:
        """Open ``name`` as the active store, creating the file on first boot."""
        with self._lock:
            self.directory.mkdir(parents=True, exist_ok=True)
            path = self.resolve(name)
            return self._activate(path)

    def switch_to(self, name: str) -> StoreHandle:
        with self._lock:
            path = self.resolve(name)
            if not path.is_file():
                raise StoreNotFoundError(f"Store '{name}' does not exist")
            return self._activate(path)

    def create(self, name: str) -> StoreHandle:
        """Create ``<name>.db``, initialise it and make it the active store."""
        if not name or not _NEW_NAME_RE.match(name):
            raise ValidationError(f"Invalid store name: {name!r}")
        with self._lock:
            self.directory.mkdir(parents=True, exist_ok=True)
            path = self.resolve(name + DB_EXTENSION)
            if path.exists():
                raise ConflictError(f"Store '{path.name}' already exists")
            try:
                return self._activate(path)
            except StoreError:
                path.unlink(missing_ok=True)
                raise

    def close(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.close()
                self._handle = None

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.current.session()
        try:
            yield db
        finally:
            db.close()

    def _activate(self, path: Path) -> StoreHandle:
        handle = StoreHandle(path, pool_size=self.pool_size)
        try:
            ensure_initialized(handle)
        except SQLAlchemyError as exc:
            handle.close()
            logger.error("Failed to initialise store %s: %s", path, exc)
            raise StoreError(f"Could not open store '{path.name}'") from exc

        previous, self._handle = self._handle, handle
        if previous is not None:
            previous.close()
        logger.info("Connected to SQLite database: %s", path)
        return handle
