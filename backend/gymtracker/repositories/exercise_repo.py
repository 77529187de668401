# gymtracker/repositories/exercise_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import String, select, func

from gymtracker.models import Exercise, exercise_group_links
from gymtracker.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    # READS
    def list(self, *, favorites_only: bool = False) -> list[Exercise]:
        stmt = select(Exercise).order_by(Exercise.name.asc(), Exercise.id.asc())
        if favorites_only:
            stmt = stmt.where(Exercise.is_favorite.is_(True))
        return list(self.db.execute(stmt).scalars().all())

    def search(self, query: str) -> list[Exercise]:
        # % and _ in the query match literally
        name = func.lower(Exercise.name, type_=String)
        stmt = (
            select(Exercise)
            .where(name.contains(query.strip().lower(), autoescape=True))
            .order_by(Exercise.name.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def list_ungrouped(self) -> list[Exercise]:
        grouped = select(exercise_group_links.c.exercise_id)
        stmt = select(Exercise).where(Exercise.id.not_in(grouped)).order_by(Exercise.name.asc())
        return list(self.db.execute(stmt).scalars().all())

    # WRITES
    def create(self, *, name: str, is_favorite: bool = False) -> Exercise:
        return self.add_and_refresh(Exercise(name=name, is_favorite=is_favorite))

    def update(self, exercise_id: int, *, name: Optional[str] = None, is_favorite: Optional[bool] = None) -> Exercise:
        exercise = self.get_or_raise(exercise_id)
        with self.writing():
            if name is not None:
                exercise.name = name
            if is_favorite is not None:
                exercise.is_favorite = is_favorite
        self.db.refresh(exercise)
        return exercise
