# gymtracker/repositories/base.py
from __future__ import annotations
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gymtracker.errors import NotFoundError, StorageFailureError

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id: int) -> T | None:
        return self.db.get(self.model, entity_id)

    def get_or_raise(self, entity_id: int) -> T:
        entity = self.get(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.model.__name__} {entity_id} not found")
        return entity

    @contextmanager
    def writing(self) -> Iterator[None]:
        """Commit on success; roll back and raise StorageFailureError on DB errors."""
        try:
            yield
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageFailureError(str(e)) from e

    def add_and_refresh(self, entity: T) -> T:
        with self.writing():
            self.db.add(entity)
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: int) -> None:
        entity = self.get_or_raise(entity_id)
        with self.writing():
            self.db.delete(entity)
