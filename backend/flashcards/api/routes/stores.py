import logging

from fastapi import APIRouter, Depends, Form, Request

from flashcards.api.deps import get_store, require_login
from flashcards.api.flash import flash
from flashcards.api.rendering import redirect, render
from flashcards.core.exceptions import ConflictError, StoreError, StoreNotFoundError, ValidationError
from flashcards.db.store import StoreManager
from flashcards.schemas.stores import StoreCreateForm

logger = logging.getLogger(__name__)

router = APIRouter(tags=["stores"], dependencies=[Depends(require_login)])


@router.get("/list_db")
def list_stores(request: Request, store: StoreManager = Depends(get_store)):
    return render(request, "list_db.html", {
        "dbs": store.list_stores(),
        "active_db": store.active_name,
    })


@router.get("/load_db/{name}")
def load_store(name: str, request: Request, store: StoreManager = Depends(get_store)):
    try:
        store.switch_to(name)
    except (StoreNotFoundError, ValidationError) as e:
        flash(request, "info", str(e))
        return redirect("/list_db")
    except StoreError as e:
        logger.error("Failed to load store %s: %s", name, e)
        flash(request, "danger", str(e))
        return redirect("/list_db")
    return redirect("/memorize/1")


@router.get("/create_db")
def create_store_form(request: Request):
    return render(request, "create_db.html")


@router.post("/init")
def create_store(
    request: Request,
    db_name: str = Form("", alias="dbName"),
    store: StoreManager = Depends(get_store),
):
    form = StoreCreateForm(db_name=db_name)
    try:
        store.create(form.db_name)
    except ConflictError as e:
        flash(request, "info", str(e))
        return redirect("/create_db")
    return redirect("/")
