from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from flashcards.api.deps import PathId, get_db, require_login
from flashcards.api.flash import flash
from flashcards.api.rendering import redirect, render
from flashcards.schemas.cards import CardEditForm, CardForm
from flashcards.services.card_service import CardService, parse_filter
from flashcards.services.tag_service import TagService

router = APIRouter(dependencies=[Depends(require_login)])


def parse_known(raw: str | None) -> bool:
    """Checkbox / select value to bool; anything that is not an integer means unknown."""
    try:
        return bool(int(raw))
    except (TypeError, ValueError):
        return False


@router.get("/")
@router.get("/cards")
def list_cards(request: Request, db: Session = Depends(get_db)):
    cards = CardService.fetch_all(db)
    tags = TagService.list_all(db)
    return render(request, "cards.html", {"cards": cards, "tags": tags, "filter_name": "all"})


@router.get("/filter_cards/{filter_name}")
def filter_cards(filter_name: str, request: Request, db: Session = Depends(get_db)):
    _, display_filter = parse_filter(filter_name)
    cards = CardService.fetch_by_predicate(db, filter_name)
    tags = TagService.list_all(db)
    return render(request, "show.html", {"cards": cards, "tags": tags, "filter_name": display_filter})


@router.get("/show")
def show(request: Request, db: Session = Depends(get_db)):
    cards = CardService.fetch_all(db)
    tags = TagService.list_all(db)
    return render(request, "show.html", {"cards": cards, "tags": tags, "filter_name": ""})


@router.post("/add")
def add_card(
    request: Request,
    card_type: str = Form("", alias="type"),
    front: str = Form(""),
    back: str = Form(""),
    db: Session = Depends(get_db),
):
    form = CardForm(type=card_type, front=front, back=back)
    CardService.insert_card(db, card_type=form.type, front=form.front, back=form.back)
    flash(request, "success", "New card was successfully added.")
    return redirect("/cards")


@router.get("/edit/{card_id}")
def edit_card_form(card_id: PathId, request: Request, db: Session = Depends(get_db)):
    card = CardService.fetch_by_id(db, card_id)
    if not card:
        flash(request, "info", "Card not found.")
        return redirect("/show")
    tags = TagService.list_all(db)
    return render(request, "edit.html", {"card": card, "tags": tags})


@router.post("/edit-card")
def edit_card(
    request: Request,
    card_id: str = Form(""),
    card_type: str = Form("", alias="type"),
    front: str = Form(""),
    back: str = Form(""),
    known: str | None = Form(None),
    db: Session = Depends(get_db),
):
    form = CardEditForm(
        card_id=card_id,
        type=card_type,
        front=front,
        back=back,
        known=parse_known(known),
    )
    updated = CardService.update_card(
        db,
        form.card_id,
        card_type=form.type,
        front=form.front,
        back=form.back,
        known=form.known,
    )
    if not updated:
        flash(request, "info", "Card not found.")
    else:
        flash(request, "success", "Card saved.")
    return redirect("/show")


@router.get("/delete/{card_id}")
def delete_card(card_id: PathId, request: Request, db: Session = Depends(get_db)):
    CardService.delete_card(db, card_id)
    flash(request, "success", "Card deleted.")
    return redirect("/cards")


@router.get("/bookmark/{card_type}/{card_id}")
def bookmark_card(card_type: PathId, card_id: PathId, request: Request, db: Session = Depends(get_db)):
    CardService.update_card_type(db, card_id, card_type)
    flash(request, "success", "Card saved.")
    return redirect(f"/memorize/{card_type}")
