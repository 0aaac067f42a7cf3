"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from datasight.core.config import Settings, get_settings


def test_defaults():
    settings = Settings()

    assert settings.type_detection_threshold == 0.9
    assert settings.outlier_iqr_multiplier == 1.5
    assert settings.llm_max_rows == 5000
    assert settings.log_level == "WARNING"
    assert (settings.config_path / "llm.yaml").exists()


def test_environment_override(monkeypatch):
    monkeypatch.setenv("DATASIGHT_TYPE_DETECTION_THRESHOLD", "0.75")
    monkeypatch.setenv("DATASIGHT_PROFILE_HISTOGRAM_BUCKETS", "8")

    settings = get_settings()

    assert settings.type_detection_threshold == 0.75
    assert settings.profile_histogram_buckets == 8


def test_threshold_is_a_share():
    with pytest.raises(ValidationError):
        Settings(type_detection_threshold=1.5)


def test_settings_are_cached():
    assert get_settings() is get_settings()
