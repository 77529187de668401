from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field

from gymtracker.schemas.performance import Weight, Reps, SetRead, WeightRowRead

NotesStr = Annotated[str, Field(max_length=2000)]

class EditorOpen(BaseModel):
    exercise_id: int
    performance_id: int | None = None

class WeightUpdate(BaseModel):
    weight: Weight

class RepUpdate(BaseModel):
    reps: Reps

class NotesUpdate(BaseModel):
    notes: NotesStr = ""

class EditorRead(BaseModel):
    editor_id: str
    exercise_id: int
    exercise_name: str
    performance_id: int | None = None
    date: datetime | None = None
    notes: str = ""
    status: str
    error: str | None = None
    rows: list[WeightRowRead] = []
    sets: list[SetRead] = []

    model_config = {"from_attributes": True}
