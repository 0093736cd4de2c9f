from typing import Annotated

from pydantic import Field

from flashcards.core.exceptions import ValidationError

# SQLite INTEGER is a signed 64-bit value; anything wider cannot be bound.
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1

SqliteInt = Annotated[int, Field(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)]


def check_sqlite_int(*values: int | None) -> None:
    for value in values:
        if value is not None and not SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
            raise ValidationError(f"Integer out of range: {value}")
