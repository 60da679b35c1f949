"""In-memory store of the session's meals and workouts."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

from calorie_tracker.domain.entries import MealEntry, MealType, WorkoutEntry


@dataclass
class EntryAggregator:
    """Append-only collections of committed entries with derived totals.

    Inputs are trusted: the entry forms validate drafts before they get here.
    Totals are recomputed from the collections on every call.
    """

    _meals: list[MealEntry] = field(default_factory=list)
    _workouts: list[WorkoutEntry] = field(default_factory=list)

    @property
    def meals(self) -> list[MealEntry]:
        """Return all meals in insertion order."""
        return list(self._meals)

    @property
    def workouts(self) -> list[WorkoutEntry]:
        """Return all workouts in insertion order."""
        return list(self._workouts)

    def add_meal(
        self, description: str, calories: int, meal_type: MealType
    ) -> MealEntry:
        """Append a meal and return it."""
        entry = MealEntry(
            id=uuid4(),
            description=description,
            calories=calories,
            meal_type=meal_type,
            logged_at=datetime.now(tz=UTC),
        )
        self._meals.append(entry)
        return entry

    def add_workout(self, description: str, calories_burned: int) -> WorkoutEntry:
        """Append a workout and return it."""
        entry = WorkoutEntry(
            id=uuid4(),
            description=description,
            calories_burned=calories_burned,
            logged_at=datetime.now(tz=UTC),
        )
        self._workouts.append(entry)
        return entry

    def total_consumed(self) -> int:
        """Return calories across all meals."""
        return sum(meal.calories for meal in self._meals)

    def total_burned(self) -> int:
        """Return calories burned across all workouts."""
        return sum(workout.calories_burned for workout in self._workouts)

    def net_calories(self) -> int:
        """Return consumed minus burned; may be negative."""
        return self.total_consumed() - self.total_burned()

    def meals_by_type(self, meal_type: MealType) -> list[MealEntry]:
        """Return meals of one type in insertion order."""
        return [meal for meal in self._meals if meal.meal_type == meal_type]
