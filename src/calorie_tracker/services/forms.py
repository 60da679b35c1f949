"""Entry forms: draft state, estimation and validated submission."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from calorie_tracker.domain.entries import MealEntry, MealType, WorkoutEntry
from calorie_tracker.domain.errors import EstimationError, ValidationError
from calorie_tracker.services.estimation import EstimationService
from calorie_tracker.services.tracker import EntryAggregator

INVALID_FIELDS_MESSAGE = "Please fill out all fields with valid values."
ESTIMATE_FAILED_MESSAGE = "Could not estimate calories. Please enter manually."

_logger = logging.getLogger(__name__)


def require_description(description: str, message: str) -> str:
    """Return the trimmed description or raise when it is blank."""
    cleaned = description.strip()
    if not cleaned:
        raise ValidationError(message)
    return cleaned


def validate_meal_draft(description: str, calories: int | None) -> tuple[str, int]:
    """Validate a meal draft and return its committed values."""
    return _validate_draft(description, calories)


def validate_workout_draft(
    description: str, calories_burned: int | None
) -> tuple[str, int]:
    """Validate a workout draft and return its committed values."""
    return _validate_draft(description, calories_burned)


def _validate_draft(description: str, calories: int | None) -> tuple[str, int]:
    cleaned = require_description(description, INVALID_FIELDS_MESSAGE)
    if calories is None or calories <= 0:
        raise ValidationError(INVALID_FIELDS_MESSAGE)
    return cleaned, calories


@dataclass
class EstimateGate:
    """In-flight marker shared by every draft of one form kind."""

    busy: bool = False


@dataclass
class EntryForm(ABC):
    """Shared draft handling for meal and workout forms.

    A draft lives for one request. Drafts of the same kind share an
    `EstimateGate` so only one estimate runs at a time.
    """

    aggregator: EntryAggregator
    estimation_service: EstimationService
    debug: bool = False
    description: str = ""
    calories: int | None = None
    error: str | None = None
    gate: EstimateGate = field(default_factory=EstimateGate)

    missing_description_message = "Please enter a description."

    @property
    def is_estimating(self) -> bool:
        """Return True while an estimate for this form kind is in flight."""
        return self.gate.busy

    async def request_estimate(self) -> int | None:
        """Pre-fill calories from an estimate; return None when unavailable.

        A second request while one is in flight is ignored.
        """
        if self.is_estimating:
            return None
        try:
            description = require_description(
                self.description, self.missing_description_message
            )
        except ValidationError as exc:
            self.error = str(exc)
            return None

        self.gate.busy = True
        try:
            calories = await self._estimate(description)
        except EstimationError as exc:
            _logger.warning("Calorie estimate unavailable: %s", exc)
            self.error = self._format_error(exc, ESTIMATE_FAILED_MESSAGE)
            return None
        finally:
            self.gate.busy = False

        self.calories = calories
        self.error = None
        return calories

    def cancel(self) -> None:
        """Discard the draft."""
        self.reset()

    def reset(self) -> None:
        """Clear draft fields and any inline error."""
        self.description = ""
        self.calories = None
        self.error = None

    @abstractmethod
    def submit(self) -> MealEntry | WorkoutEntry | None:
        """Commit the draft to the aggregator, or set an inline error."""

    @abstractmethod
    async def _estimate(self, description: str) -> int:
        """Return the calorie estimate for a description."""

    def _format_error(self, exc: Exception, fallback: str) -> str:
        """Return a user-facing error message with local debug info."""
        if self.debug:
            detail = f"{type(exc).__name__}: {exc}".strip()
            if detail:
                return f"{fallback} (debug: {detail})"
        return fallback


@dataclass
class MealForm(EntryForm):
    """Form that captures a meal."""

    meal_type: MealType = MealType.BREAKFAST

    missing_description_message = "Please enter a food description."

    def submit(self) -> MealEntry | None:
        """Commit the draft to the aggregator, or set an inline error."""
        try:
            description, calories = validate_meal_draft(
                self.description, self.calories
            )
        except ValidationError as exc:
            self.error = str(exc)
            return None
        entry = self.aggregator.add_meal(description, calories, self.meal_type)
        _logger.info("Meal logged: %s kcal (%s)", entry.calories, entry.meal_type)
        self.reset()
        return entry

    def reset(self) -> None:
        """Clear draft fields, restoring the default meal type."""
        super().reset()
        self.meal_type = MealType.BREAKFAST

    async def _estimate(self, description: str) -> int:
        return await self.estimation_service.estimate_food_calories(description)


@dataclass
class WorkoutForm(EntryForm):
    """Form that captures a workout."""

    missing_description_message = "Please enter a workout description."

    def submit(self) -> WorkoutEntry | None:
        """Commit the draft to the aggregator, or set an inline error."""
        try:
            description, calories_burned = validate_workout_draft(
                self.description, self.calories
            )
        except ValidationError as exc:
            self.error = str(exc)
            return None
        entry = self.aggregator.add_workout(description, calories_burned)
        _logger.info("Workout logged: %s kcal", entry.calories_burned)
        self.reset()
        return entry

    async def _estimate(self, description: str) -> int:
        return await self.estimation_service.estimate_workout_calories(description)
