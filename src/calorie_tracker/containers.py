"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from calorie_tracker.adapters.openai_text_client import OpenAITextClient
from calorie_tracker.config import Settings, load_settings
from calorie_tracker.services.estimation import (
    EstimationService,
    TextGenerationClient,
)
from calorie_tracker.services.forms import EstimateGate, MealForm, WorkoutForm
from calorie_tracker.services.tracker import EntryAggregator


@dataclass
class AppContainer:
    """Holds session-wide dependencies.

    Form drafts are per request; only the estimate gates are shared.
    """

    settings: Settings
    aggregator: EntryAggregator
    estimation_service: EstimationService
    close_resources: Callable[[], Awaitable[None]]
    meal_estimates: EstimateGate = field(default_factory=EstimateGate)
    workout_estimates: EstimateGate = field(default_factory=EstimateGate)

    @property
    def debug(self) -> bool:
        """Return True when user-facing errors should carry debug detail."""
        return self.settings.environment == "local"

    def new_meal_form(self) -> MealForm:
        """Create an empty meal draft bound to the session's state."""
        return MealForm(
            aggregator=self.aggregator,
            estimation_service=self.estimation_service,
            debug=self.debug,
            gate=self.meal_estimates,
        )

    def new_workout_form(self) -> WorkoutForm:
        """Create an empty workout draft bound to the session's state."""
        return WorkoutForm(
            aggregator=self.aggregator,
            estimation_service=self.estimation_service,
            debug=self.debug,
            gate=self.workout_estimates,
        )


def build_estimation_service(
    settings: Settings, client: TextGenerationClient
) -> EstimationService:
    """Create the estimation service from settings."""
    return EstimationService(
        client=client,
        model=settings.openai_model,
        reasoning_effort=settings.openai_reasoning_effort,
        store=settings.openai_store,
        timeout_seconds=settings.estimation_timeout_seconds,
        retry_attempts=settings.estimation_retry_attempts,
        retry_delay_seconds=settings.estimation_retry_delay_seconds,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or load_settings()
    openai_client = OpenAITextClient.create(resolved_settings.openai_api_key)

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        aggregator=EntryAggregator(),
        estimation_service=build_estimation_service(resolved_settings, openai_client),
        close_resources=close_resources,
    )
