"""Tests for container wiring."""

import asyncio

from calorie_tracker.adapters.openai_text_client import OpenAITextClient
from calorie_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.estimation_service.client, OpenAITextClient)
    assert container.estimation_service.timeout_seconds == 15.0
    assert container.debug is False
    asyncio.run(container.close_resources())


def test_new_forms_are_fresh_drafts_sharing_state(container) -> None:
    first = container.new_meal_form()
    second = container.new_meal_form()
    workout = container.new_workout_form()

    first.description = "Soup"
    first.error = "stale"

    assert first is not second
    assert second.description == ""
    assert second.error is None
    assert first.aggregator is second.aggregator is container.aggregator
    assert first.gate is second.gate is container.meal_estimates
    assert workout.gate is container.workout_estimates
    assert workout.gate is not first.gate
