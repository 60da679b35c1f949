"""Calorie estimation service using LLMs."""

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.errors import EstimationError, TransientEstimationError

_logger = logging.getLogger(__name__)

_NUMBER_PATTERN = re.compile(r"\d{1,3}(?:,\d{3})+(?!\d)|\d+")
_BARE_INTEGER_PATTERN = re.compile(r"(?:\d{1,3}(?:,\d{3})+|\d+)\.?")

FOOD_PROMPT = (
    "You are a calorie estimation expert. Analyze the following food description "
    "and provide only a single integer representing the estimated total calories. "
    'Do not include any other text, units, or explanations. Food: "{description}"'
)
WORKOUT_PROMPT = (
    "You are a fitness expert. Analyze the following workout description and "
    "provide only a single integer representing the estimated total calories "
    "burned. Assume an average person's weight and intensity. Do not include any "
    'other text, units, or explanations. Workout: "{description}"'
)


class TextGenerationClient(Protocol):
    """Interface for single-prompt text generation."""

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        timeout: float,
    ) -> str:
        """Return the raw text reply for a prompt."""


@dataclass
class EstimationService:
    """Service that prompts for calorie estimates and parses the replies."""

    client: TextGenerationClient
    model: str
    reasoning_effort: str | None = None
    store: bool = False
    timeout_seconds: float = 15.0
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def estimate_food_calories(self, description: str) -> int:
        """Estimate calories consumed for a food description."""
        return await self._estimate(
            FOOD_PROMPT.format(description=description), action="food"
        )

    async def estimate_workout_calories(self, description: str) -> int:
        """Estimate calories burned for a workout description."""
        return await self._estimate(
            WORKOUT_PROMPT.format(description=description), action="workout"
        )

    async def _estimate(self, prompt: str, *, action: str) -> int:
        text = await self._call_with_retry(prompt, action=action)
        return parse_calorie_estimate(text)

    async def _call_with_retry(self, prompt: str, *, action: str) -> str:
        """Call the client, retrying transient failures a bounded number of times."""
        attempt = 0
        while True:
            try:
                return await self.client.generate(
                    model=self.model,
                    reasoning_effort=self.reasoning_effort,
                    store=self.store,
                    prompt=prompt,
                    timeout=self.timeout_seconds,
                )
            except EstimationError as exc:
                attempt += 1
                _logger.warning(
                    "Estimation %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    _status_code_from_exception(exc),
                    exc,
                )
                if (
                    not isinstance(exc, TransientEstimationError)
                    or attempt > self.retry_attempts
                ):
                    raise
                await asyncio.sleep(self.retry_delay_seconds)
            except Exception as exc:
                raise EstimationError(f"Estimation {action} failed: {exc}") from exc


def parse_calorie_estimate(text: str) -> int:
    """Extract the calorie integer from a model reply.

    A bare integer is accepted as-is. Otherwise the reply must contain exactly
    one number; replies with no number or several numbers are rejected.
    """
    cleaned = text.strip()
    if _BARE_INTEGER_PATTERN.fullmatch(cleaned):
        return _to_int(cleaned.rstrip("."))
    numbers = _NUMBER_PATTERN.findall(cleaned)
    if not numbers:
        raise EstimationError(f"No number found in estimate reply: {cleaned!r}")
    if len(numbers) > 1:
        raise EstimationError(f"Ambiguous estimate reply: {cleaned!r}")
    return _to_int(numbers[0])


def _to_int(raw: str) -> int:
    return max(0, int(raw.replace(",", "")))


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception chain, if available."""
    for candidate in (exc, exc.__cause__):
        status_code = getattr(candidate, "status_code", None)
        if isinstance(status_code, int):
            return str(status_code)
    return "n/a"
