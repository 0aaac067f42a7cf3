"""LLM module - AI-powered insights over tabular data.

Only a compact table summary (types, distinct counts, a few sample values
and numeric ranges) is sent to the model, never the raw rows.

Example usage:

    from datasight.llm import LLMService
    from datasight.llm.config import load_llm_config

    service = LLMService(load_llm_config())
    result = await service.generate_insights(table)

    if result.success:
        print(result.value.executive_summary)
"""

from typing import Any

from datasight.llm.cache import LLMCache
from datasight.llm.config import LLMConfig, load_llm_config
from datasight.llm.features import DataInsights, InsightsFeature, KeyMetric
from datasight.llm.prompts import PromptRenderer
from datasight.llm.providers import LLMProvider, create_provider
from datasight.llm.summary import ColumnSummary, TableSummary, summarize_table

__all__ = [
    "LLMService",
    "LLMConfig",
    "load_llm_config",
    "LLMCache",
    "DataInsights",
    "KeyMetric",
    "ColumnSummary",
    "TableSummary",
    "summarize_table",
]


class LLMService:
    """Main service facade for LLM features.

    Manages provider initialization, caching, and prompt rendering.
    """

    def __init__(
        self,
        config: LLMConfig,
        provider: LLMProvider | None = None,
        prompt_renderer: PromptRenderer | None = None,
    ):
        """Initialize LLM service.

        Args:
            config: LLM configuration
            provider: Provider to use instead of the configured one
            prompt_renderer: Renderer to use instead of the default prompts dir

        Raises:
            ValueError: If provider configuration is invalid
        """
        self.config = config

        if provider is None:
            if config.active_provider not in config.providers:
                raise ValueError(
                    f"Active provider '{config.active_provider}' not found in config. "
                    f"Available: {list(config.providers.keys())}"
                )
            provider_config = config.providers[config.active_provider]
            provider = create_provider(config.active_provider, provider_config.model_dump())

        self.provider = provider
        self.cache = LLMCache()
        self.renderer = prompt_renderer or PromptRenderer()

        self.insights = InsightsFeature(
            config=config,
            provider=self.provider,
            prompt_renderer=self.renderer,
            cache=self.cache,
        )

    # Convenience methods that delegate to features

    async def generate_insights(self, *args: Any, **kwargs: Any) -> Any:
        """Generate insights. See InsightsFeature.generate_insights()."""
        return await self.insights.generate_insights(*args, **kwargs)

    async def answer_question(self, *args: Any, **kwargs: Any) -> Any:
        """Answer a question. See InsightsFeature.answer_question()."""
        return await self.insights.answer_question(*args, **kwargs)
