"""OpenAI Responses API client for calorie estimation prompts."""

from dataclasses import dataclass

import openai
from openai import AsyncOpenAI

from calorie_tracker.domain.errors import EstimationError, TransientEstimationError
from calorie_tracker.services.estimation import TextGenerationClient

_TRANSIENT_ERRORS = (
    openai.APIConnectionError,
    openai.RateLimitError,
    openai.InternalServerError,
)


@dataclass
class OpenAITextClient(TextGenerationClient):
    """Text generation client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAITextClient":
        """Create an OpenAI text client without SDK-level retries."""
        return cls(client=AsyncOpenAI(api_key=api_key, max_retries=0))

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        timeout: float,
    ) -> str:
        """Call OpenAI Responses API and return the output text."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": prompt,
            "store": store,
            "timeout": timeout,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        try:
            response = await self.client.responses.create(**request_payload)
        except _TRANSIENT_ERRORS as exc:
            raise TransientEstimationError(f"OpenAI request failed: {exc}") from exc
        except openai.OpenAIError as exc:
            raise EstimationError(f"OpenAI request failed: {exc}") from exc

        output_text = response.output_text
        if not output_text:
            raise EstimationError("OpenAI returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
