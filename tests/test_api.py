"""Tests for the tracker HTTP API."""

import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from calorie_tracker.api.app import create_app
from calorie_tracker.domain.errors import EstimationError
from tests.conftest import FakeTextClient


def test_health_and_index(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/health").json() == {"status": "ok"}
    page = client.get("/")
    assert page.status_code == 200
    assert "Calorie Tracker" in page.text


def test_add_meal_updates_dashboard(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/meals",
        json={"description": "Oatmeal", "calories": 500, "meal_type": "breakfast"},
    )
    client.post("/api/workouts", json={"description": "Run", "calories_burned": 200})

    assert response.status_code == 201
    assert response.json()["meal_type"] == "breakfast"
    dashboard = client.get("/api/dashboard").json()
    assert dashboard["consumed"] == 500
    assert dashboard["burned"] == 200
    assert dashboard["net"] == 300
    assert dashboard["progress"] == {
        "goal": 2000,
        "percentage": 25.0,
        "remaining": 1500,
    }
    assert dashboard["meal_groups"][0]["meals"][0]["description"] == "Oatmeal"
    assert dashboard["workouts"][0]["calories_burned"] == 200


def test_add_meal_with_invalid_calories_returns_inline_error(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/meals", json={"description": "Soup", "calories": 0, "meal_type": "lunch"}
    )

    assert response.status_code == 422
    assert response.json() == {"error": "Please fill out all fields with valid values."}
    assert container.aggregator.meals == []


def test_add_workout_without_description_is_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/workouts", json={"calories_burned": 300})

    assert response.status_code == 422
    assert "error" in response.json()
    assert container.aggregator.workouts == []


def test_list_meals_filters_by_type(container) -> None:
    client = TestClient(create_app(container))
    client.post(
        "/api/meals", json={"description": "Eggs", "calories": 150, "meal_type": "breakfast"}
    )
    client.post(
        "/api/meals", json={"description": "Nuts", "calories": 200, "meal_type": "snack"}
    )

    snacks = client.get("/api/meals", params={"meal_type": "snack"}).json()
    everything = client.get("/api/meals").json()
    dinners = client.get("/api/meals", params={"meal_type": "dinner"}).json()

    assert [meal["description"] for meal in snacks] == ["Nuts"]
    assert len(everything) == 2
    assert dinners == []


def test_estimate_meal_returns_calories(
    container, text_client: FakeTextClient
) -> None:
    text_client.replies = ["Approximately 350 calories"]
    client = TestClient(create_app(container))

    response = client.post("/api/estimates/meal", json={"description": "Sandwich"})

    assert response.status_code == 200
    assert response.json() == {"calories": 350, "error": None}
    assert container.aggregator.meals == []


def test_estimate_workout_failure_returns_inline_error(
    container, text_client: FakeTextClient
) -> None:
    text_client.replies = [EstimationError("service down")]
    client = TestClient(create_app(container))

    response = client.post("/api/estimates/workout", json={"description": "Yoga"})

    assert response.status_code == 200
    assert response.json() == {
        "calories": None,
        "error": "Could not estimate calories. Please enter manually.",
    }


def test_estimate_with_empty_description_makes_no_call(
    container, text_client: FakeTextClient
) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/estimates/meal", json={"description": ""})

    assert response.json()["error"] == "Please enter a food description."
    assert text_client.prompts == []


def test_estimate_rejected_while_in_flight(container) -> None:
    container.meal_estimates.busy = True
    client = TestClient(create_app(container))

    response = client.post("/api/estimates/meal", json={"description": "Pizza"})

    assert response.status_code == 409


def test_lifespan_closes_resources(container) -> None:
    closed: list[bool] = []

    async def close_resources() -> None:
        closed.append(True)

    container.close_resources = close_resources
    with TestClient(create_app(container)) as client:
        client.get("/health")

    assert closed == [True]


def test_estimate_unaffected_by_concurrent_failed_submit(
    container, text_client: FakeTextClient
) -> None:
    async def run() -> tuple[httpx.Response, httpx.Response, httpx.Response]:
        release = asyncio.Event()

        async def gated_generate(**kwargs) -> str:
            text_client.prompts.append(kwargs["prompt"])
            await release.wait()
            return "350"

        text_client.generate = gated_generate  # type: ignore[method-assign]
        transport = httpx.ASGITransport(app=create_app(container))
        async with httpx.AsyncClient(
            transport=transport, base_url="http://tracker.test"
        ) as client:
            estimate = asyncio.create_task(
                client.post("/api/estimates/meal", json={"description": "Sandwich"})
            )
            while not text_client.prompts:
                await asyncio.sleep(0)
            rejected = await client.post(
                "/api/meals", json={"description": "Soup", "meal_type": "lunch"}
            )
            overlapping = await client.post(
                "/api/estimates/meal", json={"description": "Salad"}
            )
            release.set()
            return await estimate, rejected, overlapping

    estimate, rejected, overlapping = asyncio.run(run())

    assert rejected.status_code == 422
    assert overlapping.status_code == 409
    assert estimate.status_code == 200
    assert estimate.json() == {"calories": 350, "error": None}
    assert container.meal_estimates.busy is False


@pytest.mark.parametrize("calories", ["abc", 350.5, [100]])
def test_add_meal_with_non_integer_calories_returns_inline_error(
    container, calories: object
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/meals",
        json={"description": "Soup", "calories": calories, "meal_type": "lunch"},
    )

    assert response.status_code == 422
    assert response.json() == {"error": "Please fill out all fields with valid values."}
    assert container.aggregator.meals == []


def test_add_workout_with_non_integer_calories_returns_inline_error(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/workouts", json={"description": "Run", "calories_burned": "lots"}
    )

    assert response.status_code == 422
    assert response.json() == {"error": "Please fill out all fields with valid values."}


def test_other_routes_keep_default_validation_errors(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/meals", params={"meal_type": "brunch"})

    assert response.status_code == 422
    assert "detail" in response.json()
