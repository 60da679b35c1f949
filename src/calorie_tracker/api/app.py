"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from calorie_tracker.api.models import (
    DashboardOut,
    EstimateRequest,
    EstimateResponse,
    FormError,
    MealDraft,
    MealOut,
    WorkoutDraft,
    WorkoutOut,
)
from calorie_tracker.api.page import DASHBOARD_HTML
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.entries import MealType
from calorie_tracker.services.dashboard import build_dashboard
from calorie_tracker.services.forms import INVALID_FIELDS_MESSAGE, EntryForm

ESTIMATE_IN_PROGRESS_MESSAGE = "An estimate is already in progress."
FORM_PATHS = frozenset({"/api/meals", "/api/workouts"})


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Calorie tracker started (model=%s, goal=%s kcal)",
            container.settings.openai_model,
            container.settings.daily_calorie_goal,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(RequestValidationError)
    async def form_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed form submissions as inline errors."""
        if request.method == "POST" and request.url.path in FORM_PATHS:
            return JSONResponse(
                status_code=422, content={"error": INVALID_FIELDS_MESSAGE}
            )
        return await request_validation_exception_handler(request, exc)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        """Single-page tracker UI that consumes the API."""
        return HTMLResponse(DASHBOARD_HTML)

    @app.get("/api/dashboard")
    async def dashboard(request: Request) -> DashboardOut:
        """Return totals, goal progress and logged entries."""
        state_container: AppContainer = request.app.state.container
        summary = build_dashboard(
            state_container.aggregator, state_container.settings.daily_calorie_goal
        )
        return DashboardOut.from_summary(summary)

    @app.get("/api/meals")
    async def list_meals(
        request: Request, meal_type: MealType | None = None
    ) -> list[MealOut]:
        """Return logged meals, optionally filtered by meal type."""
        aggregator = request.app.state.container.aggregator
        meals = (
            aggregator.meals
            if meal_type is None
            else aggregator.meals_by_type(meal_type)
        )
        return [MealOut.from_entry(meal) for meal in meals]

    @app.post(
        "/api/meals",
        status_code=status.HTTP_201_CREATED,
        response_model=MealOut,
        responses={422: {"model": FormError}},
    )
    async def add_meal(draft: MealDraft, request: Request) -> MealOut | JSONResponse:
        """Validate a meal draft and log it."""
        form = request.app.state.container.new_meal_form()
        form.description = draft.description
        form.calories = draft.calories
        form.meal_type = draft.meal_type
        entry = form.submit()
        if entry is None:
            return _form_error(form)
        return MealOut.from_entry(entry)

    @app.get("/api/workouts")
    async def list_workouts(request: Request) -> list[WorkoutOut]:
        """Return logged workouts."""
        aggregator = request.app.state.container.aggregator
        return [WorkoutOut.from_entry(entry) for entry in aggregator.workouts]

    @app.post(
        "/api/workouts",
        status_code=status.HTTP_201_CREATED,
        response_model=WorkoutOut,
        responses={422: {"model": FormError}},
    )
    async def add_workout(
        draft: WorkoutDraft, request: Request
    ) -> WorkoutOut | JSONResponse:
        """Validate a workout draft and log it."""
        form = request.app.state.container.new_workout_form()
        form.description = draft.description
        form.calories = draft.calories_burned
        entry = form.submit()
        if entry is None:
            return _form_error(form)
        return WorkoutOut.from_entry(entry)

    @app.post(
        "/api/estimates/meal",
        response_model=EstimateResponse,
        responses={409: {"model": FormError}},
    )
    async def estimate_meal(
        payload: EstimateRequest, request: Request
    ) -> EstimateResponse | JSONResponse:
        """Estimate calories for a food description."""
        return await _estimate(
            request.app.state.container.new_meal_form(), payload
        )

    @app.post(
        "/api/estimates/workout",
        response_model=EstimateResponse,
        responses={409: {"model": FormError}},
    )
    async def estimate_workout(
        payload: EstimateRequest, request: Request
    ) -> EstimateResponse | JSONResponse:
        """Estimate calories burned for a workout description."""
        return await _estimate(
            request.app.state.container.new_workout_form(), payload
        )

    return app


async def _estimate(
    form: EntryForm, payload: EstimateRequest
) -> EstimateResponse | JSONResponse:
    """Run a form estimate, rejecting overlapping requests."""
    if form.is_estimating:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"error": ESTIMATE_IN_PROGRESS_MESSAGE},
        )
    form.description = payload.description
    calories = await form.request_estimate()
    return EstimateResponse(calories=calories, error=form.error)


def _form_error(form: EntryForm) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": form.error or "Invalid entry."},
    )
