from pydantic import BaseModel, ConfigDict, Field

from flashcards.schemas.common import SqliteInt


class CardForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    type: SqliteInt
    front: str = Field(min_length=1)
    back: str = Field(min_length=1)


class CardEditForm(CardForm):
    card_id: SqliteInt
    known: bool = False


class HintResponse(BaseModel):
    hint: str
