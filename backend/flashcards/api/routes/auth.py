import logging

from fastapi import APIRouter, Depends, Form, Request
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session
from starlette import status

from flashcards.api.deps import SESSION_USER_KEY, get_db, require_login
from flashcards.api.rendering import redirect, render
from flashcards.schemas.auth import CredentialsForm
from flashcards.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _login_form(request: Request, *, signup: bool, error: str | None = None, status_code: int = 200):
    return render(request, "login.html", {"error": error, "signup": signup}, status_code=status_code)


def _parse_credentials(username: str, password: str) -> CredentialsForm | None:
    try:
        return CredentialsForm(username=username, password=password)
    except PydanticValidationError:
        return None


@router.get("/login")
def login_form(request: Request):
    return _login_form(request, signup=False)


@router.get("/signup")
def signup_form(request: Request):
    return _login_form(request, signup=True)


@router.post("/login")
def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    credentials = _parse_credentials(username, password)
    if credentials is None:
        return _login_form(
            request,
            signup=False,
            error="Username and password are required!",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    user = UserService.authenticate(db, credentials.username, credentials.password)
    if not user:
        return _login_form(request, signup=False, error="Invalid username or password!")

    request.session[SESSION_USER_KEY] = user.username
    logger.info("User logged in: %s", user.username)
    return redirect("/list_db")


@router.post("/signup")
def signup(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    credentials = _parse_credentials(username, password)
    if credentials is None:
        return _login_form(
            request,
            signup=True,
            error="Username and password are required!",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    if UserService.fetch_by_username(db, credentials.username):
        return _login_form(request, signup=True, error="Username already exists!")

    user = UserService.insert(db, credentials.username, credentials.password)
    request.session[SESSION_USER_KEY] = user.username
    return redirect("/list_db")


@router.get("/logout")
def logout(request: Request, username: str = Depends(require_login)):
    request.session.clear()
    logger.info("User logged out: %s", username)
    return redirect("/login")
