"""Base class for LLM features with common functionality."""

from datasight.core.logging import get_logger
from datasight.core.models import Result
from datasight.llm.cache import LLMCache
from datasight.llm.config import LLMConfig
from datasight.llm.prompts import PromptRenderer
from datasight.llm.providers.base import LLMProvider, LLMRequest, LLMResponse

logger = get_logger(__name__)


class LLMFeature:
    """Base class for LLM features.

    Provides common functionality:
    - LLM calling with caching
    - Configuration access
    - Prompt rendering
    """

    def __init__(
        self,
        config: LLMConfig,
        provider: LLMProvider,
        prompt_renderer: PromptRenderer,
        cache: LLMCache,
    ):
        """Initialize LLM feature.

        Args:
            config: LLM configuration
            provider: LLM provider instance
            prompt_renderer: Prompt template renderer
            cache: Response cache
        """
        self.config = config
        self.provider = provider
        self.renderer = prompt_renderer
        self.cache = cache

    async def _call_llm(
        self,
        feature_name: str,
        prompt: str,
        temperature: float,
        model_tier: str,
        system: str | None = None,
    ) -> Result[LLMResponse]:
        """Call LLM with caching.

        Args:
            feature_name: Feature name (data_insights, custom_analysis)
            prompt: Rendered user prompt
            temperature: Temperature for generation
            model_tier: Model tier ('fast' or 'balanced')
            system: Rendered system prompt, if any

        Returns:
            Result containing LLMResponse or error
        """
        model = self.provider.get_model_for_tier(model_tier)
        cache_prompt = f"{system or ''}\n\n{prompt}"

        cached = self.cache.get(feature=feature_name, prompt=cache_prompt, model=model)
        if cached:
            logger.debug("llm_cache_hit", feature=feature_name, model=model)
            return Result.ok(cached)

        request = LLMRequest(
            prompt=prompt,
            system=system,
            max_tokens=self.config.limits.max_output_tokens_per_request,
            temperature=temperature,
            response_format="json",
            model_tier=model_tier,
        )

        result = await self.provider.complete(request)
        if not result.success or not result.value:
            return result

        self.cache.put(
            feature=feature_name,
            prompt=cache_prompt,
            model=model,
            response=result.value,
            ttl_seconds=self.config.limits.cache_ttl_seconds,
        )

        return result
