"""Pydantic models for the tracker HTTP API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from calorie_tracker.domain.entries import MealEntry, MealType, WorkoutEntry
from calorie_tracker.services.dashboard import DashboardSummary


class MealDraft(BaseModel):
    """Meal form submission.

    Missing or non-positive calories pass the schema so the form validator
    reports them. Non-integer values fail the schema and are reported with
    the same inline message.
    """

    description: str = ""
    calories: int | None = None
    meal_type: MealType = MealType.BREAKFAST


class WorkoutDraft(BaseModel):
    """Workout form submission."""

    description: str = ""
    calories_burned: int | None = None


class EstimateRequest(BaseModel):
    """Free-text description to estimate."""

    description: str = ""


class EstimateResponse(BaseModel):
    """Estimate result or inline error."""

    calories: int | None = None
    error: str | None = None


class FormError(BaseModel):
    """Inline form error."""

    error: str


class MealOut(BaseModel):
    """Committed meal."""

    id: UUID
    description: str
    calories: int
    meal_type: MealType
    logged_at: datetime

    @classmethod
    def from_entry(cls, entry: MealEntry) -> "MealOut":
        return cls(
            id=entry.id,
            description=entry.description,
            calories=entry.calories,
            meal_type=entry.meal_type,
            logged_at=entry.logged_at,
        )


class WorkoutOut(BaseModel):
    """Committed workout."""

    id: UUID
    description: str
    calories_burned: int
    logged_at: datetime

    @classmethod
    def from_entry(cls, entry: WorkoutEntry) -> "WorkoutOut":
        return cls(
            id=entry.id,
            description=entry.description,
            calories_burned=entry.calories_burned,
            logged_at=entry.logged_at,
        )


class ProgressOut(BaseModel):
    """Goal progress."""

    goal: int
    percentage: float
    remaining: int


class MealGroupOut(BaseModel):
    """Meals of one type."""

    meal_type: MealType
    meals: list[MealOut]


class DashboardOut(BaseModel):
    """Dashboard payload."""

    consumed: int
    burned: int
    net: int
    progress: ProgressOut
    meal_groups: list[MealGroupOut]
    workouts: list[WorkoutOut]

    @classmethod
    def from_summary(cls, summary: DashboardSummary) -> "DashboardOut":
        return cls(
            consumed=summary.consumed,
            burned=summary.burned,
            net=summary.net,
            progress=ProgressOut(
                goal=summary.progress.goal,
                percentage=summary.progress.percentage,
                remaining=summary.progress.remaining,
            ),
            meal_groups=[
                MealGroupOut(
                    meal_type=group.meal_type,
                    meals=[MealOut.from_entry(meal) for meal in group.meals],
                )
                for group in summary.meal_groups
            ],
            workouts=[WorkoutOut.from_entry(entry) for entry in summary.workouts],
        )
