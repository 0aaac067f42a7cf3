"""Fixtures for LLM tests."""

from pathlib import Path

import pytest

from datasight.llm.cache import LLMCache
from datasight.llm.config import LLMConfig, load_llm_config
from datasight.llm.prompts import PromptRenderer

CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"


@pytest.fixture
def config_dir() -> Path:
    return CONFIG_DIR


@pytest.fixture
def llm_config(config_dir) -> LLMConfig:
    return load_llm_config(config_dir / "llm.yaml")


@pytest.fixture
def renderer(config_dir) -> PromptRenderer:
    return PromptRenderer(config_dir / "prompts")


@pytest.fixture
def cache() -> LLMCache:
    return LLMCache()


@pytest.fixture
def mock_anthropic_key(monkeypatch):
    """Mock Anthropic API key for testing."""
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-REDACTED")
