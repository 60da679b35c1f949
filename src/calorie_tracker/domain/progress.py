"""Daily goal progress."""

from dataclasses import dataclass

MAX_PERCENTAGE = 100.0


@dataclass(frozen=True)
class GoalProgress:
    """Consumption measured against the daily goal."""

    consumed: int
    goal: int
    percentage: float
    remaining: int


def compute_progress(consumed: int, goal: int) -> GoalProgress:
    """Return progress toward the goal, clamped for the progress ring."""
    percentage = min(consumed / goal * 100, MAX_PERCENTAGE) if goal > 0 else 0.0
    return GoalProgress(
        consumed=consumed,
        goal=goal,
        percentage=percentage,
        remaining=max(0, goal - consumed),
    )
