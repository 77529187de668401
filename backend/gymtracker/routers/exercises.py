from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from gymtracker.db import get_db
from gymtracker.repositories.exercise_repo import ExerciseRepository
from gymtracker.repositories.performance_repo import PerformanceRepository
from gymtracker.schemas.exercise import ExerciseCreate, ExerciseUpdate, ExerciseRead
from gymtracker.schemas.group import GroupRead
from gymtracker.schemas.performance import PerformanceRead

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=list[ExerciseRead])
def list_exercises(
    db: Session = Depends(get_db),
    favorites: bool = Query(False),
    ungrouped: bool = Query(False),
    q: str | None = Query(None, max_length=120),
):
    repo = ExerciseRepository(db)
    if q:
        return repo.search(q)
    if ungrouped:
        return repo.list_ungrouped()
    return repo.list(favorites_only=favorites)

@router.post("", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
def create_exercise(payload: ExerciseCreate, db: Session = Depends(get_db)):
    return ExerciseRepository(db).create(name=payload.name, is_favorite=payload.is_favorite)

@router.get("/{exercise_id}", response_model=ExerciseRead)
def get_exercise(exercise_id: int, db: Session = Depends(get_db)):
    return ExerciseRepository(db).get_or_raise(exercise_id)

@router.get("/{exercise_id}/groups", response_model=list[GroupRead])
def get_exercise_groups(exercise_id: int, db: Session = Depends(get_db)):
    return sorted(ExerciseRepository(db).get_or_raise(exercise_id).groups, key=lambda g: g.name)

@router.patch("/{exercise_id}", response_model=ExerciseRead)
def update_exercise(exercise_id: int, payload: ExerciseUpdate, db: Session = Depends(get_db)):
    return ExerciseRepository(db).update(exercise_id, name=payload.name, is_favorite=payload.is_favorite)

@router.delete("/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_exercise(exercise_id: int, db: Session = Depends(get_db)):
    ExerciseRepository(db).delete(exercise_id)

@router.get("/{exercise_id}/performances", response_model=list[PerformanceRead])
def list_performances(
    exercise_id: int,
    db: Session = Depends(get_db),
    start: datetime | None = Query(None),
    end: datetime | None = Query(None),
):
    """Newest first; with both ``start`` and ``end`` only that window, oldest first."""
    ExerciseRepository(db).get_or_raise(exercise_id)
    repo = PerformanceRepository(db)
    if start is None and end is None:
        return repo.list_for_exercise(exercise_id)
    if start is None or end is None:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="start and end go together")
    return repo.list_in_range(exercise_id, start, end)

@router.delete("/{exercise_id}/performances", status_code=status.HTTP_204_NO_CONTENT)
def delete_performances(exercise_id: int, db: Session = Depends(get_db)):
    ExerciseRepository(db).get_or_raise(exercise_id)
    PerformanceRepository(db).delete_all_for_exercise(exercise_id)

@router.get("/{exercise_id}/performances/latest", response_model=PerformanceRead)
def latest_performance(exercise_id: int, db: Session = Depends(get_db)):
    ExerciseRepository(db).get_or_raise(exercise_id)
    perf = PerformanceRepository(db).latest_for_exercise(exercise_id)
    if not perf:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No performances yet")
    return perf
