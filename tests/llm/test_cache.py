"""Tests for the in-memory LLM response cache."""

from datetime import UTC, datetime, timedelta

from datasight.llm.cache import LLMCache
from datasight.llm.providers.base import LLMResponse


def _response(content: str = "{}") -> LLMResponse:
    return LLMResponse(content=content, model="m", input_tokens=1, output_tokens=1)


def test_miss_then_hit(cache):
    assert cache.get("data_insights", "prompt", "m") is None

    cache.put("data_insights", "prompt", "m", _response("hello"), ttl_seconds=60)
    hit = cache.get("data_insights", "prompt", "m")

    assert hit.content == "hello"
    assert hit.cached


def test_stored_response_is_not_mutated(cache):
    original = _response()
    cache.put("f", "p", "m", original)
    cache.get("f", "p", "m")

    assert not original.cached


def test_key_includes_feature_prompt_and_model(cache):
    cache.put("f", "p", "m", _response())

    assert cache.get("other", "p", "m") is None
    assert cache.get("f", "other", "m") is None
    assert cache.get("f", "p", "other") is None


def test_expired_entries_are_dropped(cache):
    cache.put("f", "p", "m", _response(), ttl_seconds=60)
    key = LLMCache._compute_cache_key("f", "p", "m")
    response, _ = cache._entries[key]
    cache._entries[key] = (response, datetime.now(UTC) - timedelta(seconds=1))

    assert cache.get("f", "p", "m") is None
    assert len(cache) == 0


def test_zero_ttl_never_expires(cache):
    cache.put("f", "p", "m", _response(), ttl_seconds=0)
    assert cache.get("f", "p", "m") is not None


def test_clear(cache):
    cache.put("f", "p", "m", _response())
    cache.clear()

    assert len(cache) == 0


def test_cache_key_is_stable():
    assert LLMCache._compute_cache_key("f", "p", "m") == LLMCache._compute_cache_key("f", "p", "m")
    assert len(LLMCache._compute_cache_key("f", "p", "m")) == 64
