"""Domain models for logged meals and workouts."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class MealType(StrEnum):
    """Meal categories used to group entries for display."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class MealEntry:
    """A committed meal."""

    id: UUID
    description: str
    calories: int
    meal_type: MealType
    logged_at: datetime


@dataclass(frozen=True)
class WorkoutEntry:
    """A committed workout."""

    id: UUID
    description: str
    calories_burned: int
    logged_at: datetime
