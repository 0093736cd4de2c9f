from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from flashcards.api.deps import QueryId, get_db, require_login
from flashcards.api.flash import flash
from flashcards.api.rendering import redirect, render
from flashcards.schemas.tags import TagForm, TagUpdateForm
from flashcards.services.tag_service import TagService

router = APIRouter(tags=["tags"], dependencies=[Depends(require_login)])


@router.get("/tags")
def list_tags(request: Request, db: Session = Depends(get_db)):
    tags = TagService.list_all(db)
    return render(request, "tags.html", {"tags": tags, "filter_name": "all"})


@router.post("/add-tag")
def add_tag(request: Request, tag_name: str = Form("", alias="tagName"), db: Session = Depends(get_db)):
    form = TagForm(name=tag_name)
    TagService.insert(db, form.name)
    flash(request, "success", "New tag was successfully added.")
    return redirect("/tags")


@router.get("/edit-tag")
def edit_tag_form(request: Request, tag_id: QueryId, db: Session = Depends(get_db)):
    tag = TagService.fetch_by_id(db, tag_id)
    if not tag:
        flash(request, "info", "Tag not found.")
        return redirect("/tags")
    return render(request, "edit_tag.html", {"tag": tag})


@router.post("/update-tag")
def update_tag(
    request: Request,
    tag_id: str = Form(""),
    tag_name: str = Form("", alias="tagName"),
    db: Session = Depends(get_db),
):
    form = TagUpdateForm(tag_id=tag_id, name=tag_name)
    if TagService.update_name(db, form.tag_id, form.name):
        flash(request, "success", "Tag saved.")
    else:
        flash(request, "info", "Tag not found.")
    return redirect("/tags")
