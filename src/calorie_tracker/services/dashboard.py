"""Dashboard view model."""

from dataclasses import dataclass

from calorie_tracker.domain.entries import MealEntry, MealType, WorkoutEntry
from calorie_tracker.domain.progress import GoalProgress, compute_progress
from calorie_tracker.services.tracker import EntryAggregator


@dataclass(frozen=True)
class MealGroup:
    """Meals sharing a meal type."""

    meal_type: MealType
    meals: list[MealEntry]


@dataclass(frozen=True)
class DashboardSummary:
    """Everything the dashboard page renders."""

    consumed: int
    burned: int
    net: int
    progress: GoalProgress
    meal_groups: list[MealGroup]
    workouts: list[WorkoutEntry]


def build_dashboard(aggregator: EntryAggregator, goal: int) -> DashboardSummary:
    """Derive the dashboard from the aggregator's current state."""
    consumed = aggregator.total_consumed()
    groups = []
    for meal_type in MealType:
        meals = aggregator.meals_by_type(meal_type)
        if meals:
            groups.append(MealGroup(meal_type=meal_type, meals=meals))
    return DashboardSummary(
        consumed=consumed,
        burned=aggregator.total_burned(),
        net=aggregator.net_calories(),
        progress=compute_progress(consumed, goal),
        meal_groups=groups,
        workouts=aggregator.workouts,
    )
