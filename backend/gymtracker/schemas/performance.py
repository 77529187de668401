from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field

Weight = Annotated[float, Field(ge=0)]
Reps = Annotated[int, Field(ge=0)]

class SetRead(BaseModel):
    weight: float
    reps: int
    order: int

    model_config = {"from_attributes": True}

class WeightRowRead(BaseModel):
    weight: float
    reps: list[int]
    start_order: int

    model_config = {"from_attributes": True}

class PerformanceRead(BaseModel):
    id: int
    exercise_id: int
    date: datetime | None = None
    notes: str = ""
    sets: list[SetRead] = []

    model_config = {"from_attributes": True}

class PerformanceDetail(PerformanceRead):
    # derived for display, never stored
    rows: list[WeightRowRead] = []
