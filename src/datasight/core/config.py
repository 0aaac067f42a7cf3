"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_config_dir() -> Path:
    """Find the config directory by walking up from the package location.

    Looks for a 'config/' directory containing llm.yaml and prompts/.
    Falls back to relative Path("config") if not found.
    """
    # src/datasight/core/config.py -> core/ -> datasight/ -> src/ -> root/
    package_dir = Path(__file__).resolve().parent.parent.parent.parent
    candidate = package_dir / "config"
    if candidate.is_dir():
        return candidate

    # Fallback: relative path (works when CWD is project root)
    return Path("config")


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: DATASIGHT_
    """

    model_config = SettingsConfigDict(
        env_prefix="DATASIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars (like ANTHROPIC_API_KEY)
    )

    # Configuration paths
    config_path: Path = Field(
        default_factory=_find_config_dir,
        description="Path to configuration files (llm.yaml, prompts/)",
    )

    # Type detection
    type_detection_threshold: float = Field(
        default=0.9,
        ge=0.0,
        le=1.0,
        description="Share of non-empty values that must match a type",
    )

    # Statistics
    outlier_iqr_multiplier: float = Field(
        default=1.5,
        description="IQR multiplier for the outlier fences",
    )

    # Profiling
    profile_histogram_buckets: int = Field(
        default=20,
        description="Number of histogram buckets",
    )
    profile_top_k_values: int = Field(
        default=5,
        description="Number of top values to track for string columns",
    )
    profile_sample_values: int = Field(
        default=5,
        description="Number of distinct sample values per column",
    )

    # LLM
    llm_max_rows: int = Field(
        default=5000,
        ge=1,
        description="Rows summarized before data is sent to the LLM",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Level used when no -v flag is given",
    )
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
