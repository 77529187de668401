# gymtracker/repositories/performance_repo.py
from __future__ import annotations
from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import select, delete

from gymtracker.domain import SetEntry
from gymtracker.models import Performance, PerformanceSet
from gymtracker.repositories.base import BaseRepository

class PerformanceRepository(BaseRepository[Performance]):
    model = Performance

    # READS
    def list_for_exercise(self, exercise_id: int) -> list[Performance]:
        stmt = select(Performance).where(Performance.exercise_id == exercise_id)\
                                  .order_by(Performance.date.desc(), Performance.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def latest_for_exercise(self, exercise_id: int) -> Optional[Performance]:
        stmt = select(Performance).where(Performance.exercise_id == exercise_id)\
                                  .order_by(Performance.date.desc(), Performance.id.desc())\
                                  .limit(1)
        return self.db.execute(stmt).scalars().first()

    def list_in_range(self, exercise_id: int, start: datetime, end: datetime) -> list[Performance]:
        stmt = select(Performance).where(
            Performance.exercise_id == exercise_id,
            Performance.date >= start,
            Performance.date <= end,
        ).order_by(Performance.date.asc(), Performance.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    # WRITES
    def create(self, exercise_id: int, *, sets: Iterable[SetEntry], notes: str = "",
               date: Optional[datetime] = None) -> Performance:
        perf = Performance(exercise_id=exercise_id, notes=notes)
        if date is not None:
            perf.date = date
        perf.sets = [_to_row(s) for s in sets]
        return self.add_and_refresh(perf)

    def update(self, performance_id: int, *, exercise_id: int, sets: Iterable[SetEntry], notes: str,
               date: Optional[datetime] = None) -> Performance:
        """Overwrite a performance; its set rows are replaced wholesale."""
        perf = self.get_or_raise(performance_id)
        with self.writing():
            perf.exercise_id = exercise_id
            perf.notes = notes
            if date is not None:
                perf.date = date
            perf.sets = [_to_row(s) for s in sets]
        self.db.refresh(perf)
        return perf

    def delete_all_for_exercise(self, exercise_id: int) -> None:
        with self.writing():
            self.db.execute(delete(Performance).where(Performance.exercise_id == exercise_id))


def _to_row(s: SetEntry) -> PerformanceSet:
    return PerformanceSet(weight=float(s.weight), reps=int(s.reps), order=int(s.order))
