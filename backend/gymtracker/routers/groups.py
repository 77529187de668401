from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from gymtracker.db import get_db
from gymtracker.repositories.group_repo import GroupRepository
from gymtracker.schemas.group import GroupCreate, GroupUpdate, GroupRead, GroupWithExercisesRead

router = APIRouter(prefix="/groups", tags=["groups"])

@router.get("", response_model=list[GroupRead])
def list_groups(db: Session = Depends(get_db), favorites: bool = Query(False)):
    return GroupRepository(db).list(favorites_only=favorites)

@router.post("", response_model=GroupWithExercisesRead, status_code=status.HTTP_201_CREATED)
def create_group(payload: GroupCreate, db: Session = Depends(get_db)):
    return GroupRepository(db).create(
        name=payload.name,
        is_favorite=payload.is_favorite,
        exercise_ids=payload.exercise_ids,
    )

@router.get("/{group_id}", response_model=GroupWithExercisesRead)
def get_group(group_id: int, db: Session = Depends(get_db)):
    return GroupRepository(db).get_or_raise(group_id)

@router.patch("/{group_id}", response_model=GroupWithExercisesRead)
def update_group(group_id: int, payload: GroupUpdate, db: Session = Depends(get_db)):
    return GroupRepository(db).update(
        group_id,
        name=payload.name,
        is_favorite=payload.is_favorite,
        exercise_ids=payload.exercise_ids,
    )

@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_group(group_id: int, db: Session = Depends(get_db)):
    GroupRepository(db).delete(group_id)
