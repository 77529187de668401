from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Float, ForeignKey, DateTime, Text, func
from gymtracker.db import Base

class Performance(Base):
    __tablename__ = "performances"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    exercise_id: Mapped[int] = mapped_column(ForeignKey("exercises.id", ondelete="CASCADE"), index=True)
    date: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now(), index=True)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")

    exercise = relationship("Exercise", back_populates="performances")
    sets = relationship(
        "PerformanceSet",
        back_populates="performance",
        cascade="all, delete-orphan",
        order_by="PerformanceSet.order",
    )

class PerformanceSet(Base):
    __tablename__ = "performance_sets"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    performance_id: Mapped[int] = mapped_column(ForeignKey("performances.id", ondelete="CASCADE"), index=True)
    weight: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    reps: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # "order" is reserved in SQL
    order: Mapped[int] = mapped_column("set_order", Integer, nullable=False)

    performance = relationship("Performance", back_populates="sets")
