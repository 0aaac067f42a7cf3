"""Provider interface the insight features talk to."""

from abc import ABC, abstractmethod
from typing import Literal

from pydantic import BaseModel

from datasight.core.models import Result


class LLMRequest(BaseModel):
    """One prompt to send to a model."""

    prompt: str
    system: str | None = None
    max_tokens: int = 4000
    temperature: float = 0.0
    response_format: Literal["json", "text"] = "json"
    model_tier: str = "balanced"


class LLMResponse(BaseModel):
    """Model output plus token usage."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int
    cached: bool = False  # served from LLMCache


class LLMProvider(ABC):
    """A backend able to complete an ``LLMRequest``."""

    @abstractmethod
    async def complete(self, request: LLMRequest) -> Result[LLMResponse]:
        """Send the request; errors are returned as ``Result.fail``."""

    @abstractmethod
    def get_model_for_tier(self, tier: str) -> str:
        """Concrete model name for a tier such as ``fast`` or ``balanced``."""
