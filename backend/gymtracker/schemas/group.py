from datetime import datetime
from pydantic import BaseModel, field_validator

from gymtracker.schemas.exercise import NameStr, ExerciseRead, _non_blank

class GroupCreate(BaseModel):
    name: NameStr
    is_favorite: bool = False
    exercise_ids: list[int] = []

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        return _non_blank(v)

class GroupUpdate(BaseModel):
    name: NameStr | None = None
    is_favorite: bool | None = None
    # None leaves membership alone; a list replaces it
    exercise_ids: list[int] | None = None

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str | None) -> str | None:
        return None if v is None else _non_blank(v)

class GroupRead(BaseModel):
    id: int
    name: str
    is_favorite: bool
    created_at: datetime | None = None

    model_config = {"from_attributes": True}

class GroupWithExercisesRead(GroupRead):
    exercises: list[ExerciseRead] = []
