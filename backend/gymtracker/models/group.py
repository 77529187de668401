from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Table, func
from gymtracker.db import Base

# many-to-many: an exercise can sit in any number of groups
exercise_group_links = Table(
    "exercise_group_links",
    Base.metadata,
    Column("exercise_id", ForeignKey("exercises.id", ondelete="CASCADE"), primary_key=True, index=True),
    Column("group_id", ForeignKey("exercise_groups.id", ondelete="CASCADE"), primary_key=True, index=True),
)

class ExerciseGroup(Base):
    __tablename__ = "exercise_groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="0")
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    exercises = relationship(
        "Exercise",
        secondary=exercise_group_links,
        back_populates="groups",
        order_by="Exercise.name",
    )
