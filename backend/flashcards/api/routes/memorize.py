import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette import status

from flashcards.api.deps import PathId, get_db, get_hint_generator, require_login
from flashcards.api.flash import flash
from flashcards.api.rendering import redirect, render
from flashcards.schemas.cards import HintResponse
from flashcards.schemas.common import check_sqlite_int
from flashcards.services.card_service import CardService
from flashcards.services.hint_service import HintGenerator
from flashcards.services.tag_service import TagService

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_login)])

SHORT_ANSWER_LENGTH = 75


@router.get("/memorize")
@router.get("/memorize/{card_type}")
@router.get("/memorize/{card_type}/{card_id}")
def memorize(
    request: Request,
    card_type: int | None = None,
    card_id: int | None = None,
    db: Session = Depends(get_db),
):
    """
    Drill unknown cards.

    With a card id that exact card is shown; with only a type a random
    unknown card of that type; with neither a random unknown card of any type.
    """
    check_sqlite_int(card_type, card_id)
    if card_id is not None:
        card = CardService.fetch_by_id(db, card_id)
    elif card_type is not None:
        card = CardService.fetch_random_unknown_by_type(db, card_type)
    else:
        card = CardService.fetch_random_any_unknown(db)

    if not card:
        if card_type is not None:
            flash(request, "info", "You've learned all the cards of this type.")
        else:
            flash(request, "info", "You've learned all unknown cards.")
        return redirect("/show")

    logger.debug("Memorizing card: %s, type: %s", card.id, card.type)
    tags = TagService.list_all(db)
    return render(request, "memorize.html", {
        "card": card,
        "card_type": card.type,
        "short_answer": len(card.back) < SHORT_ANSWER_LENGTH,
        "tags": tags,
    })


@router.get("/memorize_known")
@router.get("/memorize_known/{card_type}")
@router.get("/memorize_known/{card_type}/{card_id}")
def memorize_known(
    request: Request,
    card_type: int = 1,
    card_id: int | None = None,
    db: Session = Depends(get_db),
):
    check_sqlite_int(card_type, card_id)
    if card_id is not None:
        card = CardService.fetch_by_id(db, card_id)
    else:
        card = CardService.fetch_random_known_by_type(db, card_type)

    if not card:
        tag = TagService.fetch_by_id(db, card_type)
        tag_name = tag.name if tag else str(card_type)
        flash(request, "info", f"You've no more known '{tag_name}' cards to review.")
        return redirect("/show")

    tags = TagService.list_all(db)
    return render(request, "memorize_known.html", {
        "card": card,
        "card_type": card_type,
        "short_answer": len(card.back) < SHORT_ANSWER_LENGTH,
        "tags": tags,
    })


@router.get("/mark-known/{card_id}/{card_type}")
def mark_known(card_id: PathId, card_type: PathId, request: Request, db: Session = Depends(get_db)):
    CardService.set_known(db, card_id, True)
    flash(request, "success", "Card marked as known.")
    return redirect(f"/memorize/{card_type}")


@router.get("/mark_unknown/{card_id}/{card_type}")
def mark_unknown(card_id: PathId, card_type: PathId, request: Request, db: Session = Depends(get_db)):
    CardService.set_known(db, card_id, False)
    flash(request, "success", "Card marked as unknown.")
    return redirect(f"/memorize_known/{card_type}")


@router.get("/hint/{card_id}", response_model=HintResponse)
def hint(
    card_id: PathId,
    db: Session = Depends(get_db),
    generator: HintGenerator = Depends(get_hint_generator),
):
    card = CardService.fetch_by_id(db, card_id)
    if not card:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Card not found"})

    # release the pooled connection before the outbound call
    db.close()
    logger.info("Requesting hint for card %s", card_id)
    return HintResponse(hint=generator.generate(card.front, card.back))
