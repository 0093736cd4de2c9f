import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette import status
from starlette.middleware.sessions import SessionMiddleware

from flashcards.api.rendering import redirect
from flashcards.api.routes import auth, cards, memorize, stores, tags
from flashcards.core.config import settings
from flashcards.core.exceptions import (
    AuthenticationError,
    ConflictError,
    FlashcardsError,
    HintServiceError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from flashcards.db.store import StoreManager

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = StoreManager(settings.DB_DIR, pool_size=settings.DB_POOL_SIZE)
    # a deck that cannot be opened at start-up is fatal
    store.connect(settings.DEFAULT_DB_NAME)
    app.state.store = store
    yield
    store.close()


app = FastAPI(title="Flashcards", lifespan=lifespan)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET,
    max_age=settings.SESSION_MAX_AGE,
    same_site="lax",
    https_only=False,
)


def _wants_json(request: Request) -> bool:
    return "application/json" in request.headers.get("accept", "")


@app.exception_handler(FlashcardsError)
async def flashcards_exception_handler(request: Request, exc: FlashcardsError):
    if isinstance(exc, AuthenticationError):
        if _wants_json(request):
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": str(exc), "type": type(exc).__name__},
            )
        return redirect("/login")

    if isinstance(exc, HintServiceError):
        logger.error("Hint failed on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )

    if isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ConflictError):
        status_code = status.HTTP_409_CONFLICT
    elif isinstance(exc, StoreUnavailableError):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logger.warning(f"Application exception on {request.method} {request.url.path}: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "type": type(exc).__name__},
    )


@app.exception_handler(PydanticValidationError)
async def form_validation_exception_handler(request: Request, exc: PydanticValidationError):
    errors = exc.errors(include_url=False)
    logger.warning(f"Invalid form on {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(errors), "type": "ValidationError"},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors()), "type": "ValidationError"},
    )


@app.exception_handler(SQLAlchemyError)
async def store_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Store failure on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


app.include_router(auth.router)
app.include_router(cards.router, tags=["cards"])
app.include_router(memorize.router, tags=["memorize"])
app.include_router(tags.router)
app.include_router(stores.router)


@app.get("/health")
def health_check(request: Request):
    store = getattr(request.app.state, "store", None)
    return {"status": "ok", "store": store.active_name if store else None}


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
