from pydantic import BaseModel, ConfigDict, Field

from flashcards.schemas.common import SqliteInt


class TagForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)


class TagUpdateForm(TagForm):
    tag_id: SqliteInt
