"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer, build_estimation_service
from calorie_tracker.services.estimation import TextGenerationClient
from calorie_tracker.services.tracker import EntryAggregator


@dataclass
class FakeTextClient(TextGenerationClient):
    """Fake text client that replays queued replies or errors."""

    replies: list[object] = field(default_factory=lambda: ["350"])
    prompts: list[str] = field(default_factory=list)
    timeouts: list[float] = field(default_factory=list)

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        timeout: float,
    ) -> str:
        self.prompts.append(prompt)
        self.timeouts.append(timeout)
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return str(reply)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="openai-key",
        estimation_retry_delay_seconds=0,
        environment="test",
    )


@pytest.fixture
def text_client() -> FakeTextClient:
    return FakeTextClient()


@pytest.fixture
def container(settings: Settings, text_client: FakeTextClient) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        aggregator=EntryAggregator(),
        estimation_service=build_estimation_service(settings, text_client),
        close_resources=close_resources,
    )
