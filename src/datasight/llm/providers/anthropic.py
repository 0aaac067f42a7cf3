"""Claude provider backed by the Anthropic async SDK."""

import os
from typing import Any

import anthropic
from pydantic import BaseModel

from datasight.core.logging import get_logger
from datasight.core.models.base import Result
from datasight.llm.providers.base import LLMProvider, LLMRequest, LLMResponse

logger = get_logger(__name__)

# Claude has no JSON response mode; this is appended to the system prompt
JSON_ONLY_INSTRUCTION = (
    "Reply with a single JSON object and nothing else: "
    "no markdown fences, no commentary before or after it."
)


class AnthropicConfig(BaseModel):
    """Settings for the ``anthropic`` entry in llm.yaml."""

    api_key_env: str
    default_model: str
    models: dict[str, str]
    max_retries: int = 3
    timeout_seconds: float = 120.0


class AnthropicProvider(LLMProvider):
    """Send requests to Claude.

    Rate limits, overload and connection errors are retried by the SDK
    itself (``max_retries``, exponential backoff).
    """

    def __init__(self, config: AnthropicConfig):
        """Create the async client.

        Raises:
            ValueError: If the API key variable named in the config is unset
        """
        self.config = config

        api_key = os.getenv(config.api_key_env)
        if not api_key:
            raise ValueError(
                f"{config.api_key_env} is not set. "
                "Export it or add it to a .env file to use AI insights."
            )

        self.client = anthropic.AsyncAnthropic(
            api_key=api_key,
            max_retries=config.max_retries,
            timeout=config.timeout_seconds,
        )

    def get_model_for_tier(self, tier: str) -> str:
        return self.config.models.get(tier, self.config.default_model)

    def _message_params(self, request: LLMRequest) -> dict[str, Any]:
        params: dict[str, Any] = {
            "model": self.get_model_for_tier(request.model_tier),
            "max_tokens": request.max_tokens,
            "temperature": request.temperature,
            "messages": [{"role": "user", "content": request.prompt}],
        }
        system = "\n\n".join(
            part
            for part in (
                request.system,
                JSON_ONLY_INSTRUCTION if request.response_format == "json" else None,
            )
            if part
        )
        if system:
            params["system"] = system
        return params

    async def complete(self, request: LLMRequest) -> Result[LLMResponse]:
        """Run one message round-trip; API failures come back as ``Result.fail``."""
        try:
            message = await self.client.messages.create(**self._message_params(request))
        except anthropic.APIError as e:
            logger.warning("anthropic_request_failed", error=str(e))
            return Result.fail(f"Anthropic API error: {e}")

        text = "".join(block.text for block in message.content if block.type == "text")
        if not text:
            kinds = [block.type for block in message.content]
            return Result.fail(f"Claude returned no text (content blocks: {kinds})")

        usage = message.usage
        logger.debug(
            "llm_completed",
            model=message.model,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
        )
        return Result.ok(
            LLMResponse(
                content=text,
                model=message.model,
                input_tokens=usage.input_tokens,
                output_tokens=usage.output_tokens,
            )
        )
