"""LLM provider implementations and factory."""

from typing import Any

from datasight.llm.providers.base import LLMProvider, LLMRequest, LLMResponse

__all__ = ["LLMProvider", "LLMRequest", "LLMResponse", "create_provider"]


def create_provider(provider_name: str, provider_config: dict[str, Any]) -> LLMProvider:
    """Create LLM provider based on configuration.

    Args:
        provider_name: Provider name ('anthropic')
        provider_config: Provider-specific configuration dict

    Returns:
        Initialized LLM provider

    Raises:
        ValueError: If provider name is unknown
    """
    if provider_name == "anthropic":
        from datasight.llm.providers.anthropic import AnthropicConfig, AnthropicProvider

        config = AnthropicConfig(**provider_config)
        return AnthropicProvider(config)

    raise ValueError(f"Unknown LLM provider: {provider_name}. Supported providers: anthropic")
