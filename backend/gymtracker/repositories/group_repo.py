# gymtracker/repositories/group_repo.py
from __future__ import annotations
from typing import Iterable, Optional

from sqlalchemy import select

from gymtracker.errors import NotFoundError
from gymtracker.models import Exercise, ExerciseGroup
from gymtracker.repositories.base import BaseRepository

class GroupRepository(BaseRepository[ExerciseGroup]):
    model = ExerciseGroup

    # READS
    def list(self, *, favorites_only: bool = False) -> list[ExerciseGroup]:
        stmt = select(ExerciseGroup).order_by(ExerciseGroup.name.asc(), ExerciseGroup.id.asc())
        if favorites_only:
            stmt = stmt.where(ExerciseGroup.is_favorite.is_(True))
        return list(self.db.execute(stmt).scalars().all())

    # WRITES
    def create(self, *, name: str, is_favorite: bool = False, exercise_ids: Iterable[int] = ()) -> ExerciseGroup:
        exercises = self._load_exercises(exercise_ids)
        group = ExerciseGroup(name=name, is_favorite=is_favorite)
        group.exercises = exercises
        return self.add_and_refresh(group)

    def update(self, group_id: int, *, name: Optional[str] = None, is_favorite: Optional[bool] = None,
               exercise_ids: Optional[Iterable[int]] = None) -> ExerciseGroup:
        """Apply the given changes in one commit. ``exercise_ids`` replaces the membership;
        links not mentioned are removed. Nothing is written if an exercise is missing."""
        group = self.get_or_raise(group_id)
        wanted = None
        if exercise_ids is not None:
            wanted = {e.id: e for e in self._load_exercises(exercise_ids)}

        with self.writing():
            if name is not None:
                group.name = name
            if is_favorite is not None:
                group.is_favorite = is_favorite
            if wanted is not None:
                current = {e.id for e in group.exercises}
                for ex in [e for e in group.exercises if e.id not in wanted]:
                    group.exercises.remove(ex)
                for ex_id, ex in wanted.items():
                    if ex_id not in current:
                        group.exercises.append(ex)
        self.db.refresh(group)
        return group

    def set_exercises(self, group_id: int, exercise_ids: Iterable[int]) -> ExerciseGroup:
        return self.update(group_id, exercise_ids=exercise_ids)

    def _load_exercises(self, exercise_ids: Iterable[int]) -> list[Exercise]:
        ids = list(dict.fromkeys(exercise_ids))
        if not ids:
            return []
        found = self.db.execute(select(Exercise).where(Exercise.id.in_(ids))).scalars().all()
        missing = set(ids) - {e.id for e in found}
        if missing:
            raise NotFoundError(f"Exercise {min(missing)} not found")
        return list(found)
