"""One-shot notifications kept in the session and drained on the next render."""
from fastapi import Request

FLASH_KEY = "_flashes"


def flash(request: Request, category: str, message: str) -> None:
    queue = list(request.session.get(FLASH_KEY, []))
    queue.append([category, message])
    request.session[FLASH_KEY] = queue


def pop_flashed_messages(request: Request) -> list[tuple[str, str]]:
    queue = request.session.pop(FLASH_KEY, [])
    return [(category, message) for category, message in queue]
