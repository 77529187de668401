from gymtracker.models.exercise import Exercise
from gymtracker.models.group import ExerciseGroup, exercise_group_links
from gymtracker.models.performance import Performance, PerformanceSet

__all__ = ["Exercise", "ExerciseGroup", "exercise_group_links", "Performance", "PerformanceSet"]
