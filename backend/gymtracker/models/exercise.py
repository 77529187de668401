from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, Boolean, DateTime, func
from gymtracker.db import Base

class Exercise(Base):
    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="0")
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    groups = relationship("ExerciseGroup", secondary="exercise_group_links", back_populates="exercises")
    performances = relationship(
        "Performance",
        back_populates="exercise",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
