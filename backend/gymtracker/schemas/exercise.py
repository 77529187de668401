from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

# Keep max length via Field
NameStr = Annotated[str, Field(max_length=120)]

def _non_blank(v: str) -> str:
    v2 = v.strip()
    if not v2:
        raise ValueError("name cannot be empty")
    return v2  # return the trimmed value so the DB gets clean text

class ExerciseCreate(BaseModel):
    name: NameStr
    is_favorite: bool = False

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        return _non_blank(v)

class ExerciseUpdate(BaseModel):
    name: NameStr | None = None
    is_favorite: bool | None = None

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str | None) -> str | None:
        return None if v is None else _non_blank(v)

class ExerciseRead(BaseModel):
    id: int
    name: str
    is_favorite: bool
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
