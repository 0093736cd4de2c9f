from pydantic import BaseModel, ConfigDict, Field


class StoreCreateForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    db_name: str = Field(min_length=1, pattern=r"^[A-Za-z0-9_-]+$")
