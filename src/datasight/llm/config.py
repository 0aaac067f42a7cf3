"""LLM configuration models and loader.

Loads configuration from config/llm.yaml and provides typed access
to all LLM settings: providers, features, limits, privacy.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from datasight.core.config import get_settings


class ProviderConfig(BaseModel):
    """Configuration for a single LLM provider."""

    api_key_env: str
    default_model: str
    models: dict[str, str]
    max_retries: int = 3
    timeout_seconds: float = 120.0


class FeatureConfig(BaseModel):
    """Configuration for an LLM feature."""

    enabled: bool = True
    model_tier: str = "balanced"
    prompt_file: str | None = None
    description: str = ""


class LLMFeatures(BaseModel):
    """All LLM features configuration."""

    data_insights: FeatureConfig
    custom_analysis: FeatureConfig


class LLMLimits(BaseModel):
    """Cost and size limits."""

    max_output_tokens_per_request: int = 4000
    max_rows: int | None = None  # None: DATASIGHT_LLM_MAX_ROWS
    max_summary_chars: int = 40000
    cache_ttl_seconds: int = 86400  # 24 hours


class LLMPrivacy(BaseModel):
    """Privacy settings for data sent to the LLM."""

    max_sample_values: int = 5
    sensitive_patterns: list[str] = Field(default_factory=list)


class LLMConfig(BaseModel):
    """Complete LLM configuration from llm.yaml."""

    version: str = "1.0.0"
    providers: dict[str, ProviderConfig]
    active_provider: str
    features: LLMFeatures
    limits: LLMLimits = Field(default_factory=LLMLimits)
    privacy: LLMPrivacy = Field(default_factory=LLMPrivacy)


def load_llm_config(config_path: Path | None = None) -> LLMConfig:
    """Load LLM configuration from YAML.

    Args:
        config_path: Path to llm.yaml. If None, uses llm.yaml in the
            configured config directory

    Returns:
        Parsed LLM configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
        pydantic.ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = get_settings().config_path / "llm.yaml"

    if not config_path.exists():
        raise FileNotFoundError(
            f"LLM config not found: {config_path}. Create config/llm.yaml from the template."
        )

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return LLMConfig(**data)
