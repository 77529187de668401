"""Plain value types shared by the editing core and the storage layer.

ORM rows never leave the repositories; they are mapped onto these first.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class SetEntry:
    """One logged set. ``order`` is its chronological position in the performance."""
    weight: float
    reps: int
    order: int = 0


@dataclass(frozen=True, slots=True)
class WeightRow:
    """A run of chronologically adjacent sets sharing one weight.

    Only exists while a performance is being edited; it is never stored.
    ``start_order`` is the order of the run's first set.
    """
    weight: float
    reps: tuple[int, ...] = ()
    start_order: int = 0


@dataclass(frozen=True, slots=True)
class ExerciseRef:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class PerformanceRecord:
    id: int
    exercise_id: int
    date: datetime
    sets: tuple[SetEntry, ...] = ()
    notes: str = ""
