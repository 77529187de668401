"""Storage interface consumed by the performance editor, and its SQL implementation."""
from __future__ import annotations
from contextlib import contextmanager
from datetime import datetime
from typing import Iterable, Iterator, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gymtracker.domain import ExerciseRef, PerformanceRecord, SetEntry
from gymtracker.errors import StorageFailureError
from gymtracker.models import Performance
from gymtracker.repositories.exercise_repo import ExerciseRepository
from gymtracker.repositories.performance_repo import PerformanceRepository


class PerformanceStore(Protocol):
    def get_exercise(self, exercise_id: int) -> Optional[ExerciseRef]: ...

    def get_performance(self, performance_id: int) -> Optional[PerformanceRecord]: ...

    def insert_performance(self, exercise_id: int, *, date: Optional[datetime],
                           sets: Iterable[SetEntry], notes: str) -> PerformanceRecord: ...

    def update_performance(self, performance_id: int, *, exercise_id: int, date: Optional[datetime],
                           sets: Iterable[SetEntry], notes: str) -> PerformanceRecord: ...

    def delete_performance(self, performance_id: int) -> None: ...

    def list_performances(self, exercise_id: int) -> list[PerformanceRecord]: ...


def to_record(perf: Performance) -> PerformanceRecord:
    sets = tuple(SetEntry(weight=s.weight, reps=s.reps, order=s.order) for s in perf.sets)
    return PerformanceRecord(id=perf.id, exercise_id=perf.exercise_id, date=perf.date,
                             sets=sets, notes=perf.notes or "")


class SqlPerformanceStore:
    """PerformanceStore over one SQLAlchemy session (one request)."""

    def __init__(self, db: Session):
        self.db = db
        self.exercises = ExerciseRepository(db)
        self.performances = PerformanceRepository(db)

    @contextmanager
    def _guarded(self) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageFailureError(str(e)) from e

    def get_exercise(self, exercise_id: int) -> Optional[ExerciseRef]:
        with self._guarded():
            ex = self.exercises.get(exercise_id)
            return ExerciseRef(id=ex.id, name=ex.name) if ex else None

    def get_performance(self, performance_id: int) -> Optional[PerformanceRecord]:
        with self._guarded():
            perf = self.performances.get(performance_id)
            return to_record(perf) if perf else None

    def insert_performance(self, exercise_id, *, date, sets, notes) -> PerformanceRecord:
        with self._guarded():
            perf = self.performances.create(exercise_id, sets=sets, notes=notes, date=date)
            return to_record(perf)

    def update_performance(self, performance_id, *, exercise_id, date, sets, notes) -> PerformanceRecord:
        with self._guarded():
            perf = self.performances.update(performance_id, exercise_id=exercise_id, sets=sets,
                                            notes=notes, date=date)
            return to_record(perf)

    def delete_performance(self, performance_id: int) -> None:
        with self._guarded():
            self.performances.delete(performance_id)

    def list_performances(self, exercise_id: int) -> list[PerformanceRecord]:
        with self._guarded():
            return [to_record(p) for p in self.performances.list_for_exercise(exercise_id)]
