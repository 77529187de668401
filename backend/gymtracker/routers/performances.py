from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from gymtracker.db import get_db
from gymtracker.repositories.performance_repo import PerformanceRepository
from gymtracker.repositories.store import to_record
from gymtracker.schemas.performance import PerformanceDetail, SetRead, WeightRowRead
from gymtracker.services.weight_rows import sets_to_rows

router = APIRouter(prefix="/performances", tags=["performances"])

@router.get("/{performance_id}", response_model=PerformanceDetail)
def get_performance(performance_id: int, db: Session = Depends(get_db)):
    record = to_record(PerformanceRepository(db).get_or_raise(performance_id))
    return PerformanceDetail(
        id=record.id,
        exercise_id=record.exercise_id,
        date=record.date,
        notes=record.notes,
        sets=[SetRead.model_validate(s) for s in record.sets],
        rows=[WeightRowRead.model_validate(r) for r in sets_to_rows(record.sets)],
    )

@router.delete("/{performance_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_performance(performance_id: int, db: Session = Depends(get_db)):
    PerformanceRepository(db).delete(performance_id)
