"""LLM response caching to avoid redundant API calls.

Responses are kept in process memory. Cache key is computed from
feature, prompt and model.
"""

import hashlib
import json
from datetime import UTC, datetime, timedelta

from datasight.llm.providers.base import LLMResponse


class LLMCache:
    """Cache LLM responses to avoid redundant API calls.

    Cache key is computed from:
    - Feature name (data_insights, custom_analysis)
    - Prompt text (system and user)
    - Model name

    Entries expire after their TTL.
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[LLMResponse, datetime | None]] = {}

    @staticmethod
    def _compute_cache_key(feature: str, prompt: str, model: str) -> str:
        """SHA256 over the canonical JSON of the key fields."""
        key_data = {
            "feature": feature,
            "prompt": prompt,
            "model": model,
        }
        key_json = json.dumps(key_data, sort_keys=True)
        return hashlib.sha256(key_json.encode()).hexdigest()

    def get(self, feature: str, prompt: str, model: str) -> LLMResponse | None:
        """Get cached response if available and not expired."""
        key = self._compute_cache_key(feature, prompt, model)
        entry = self._entries.get(key)
        if entry is None:
            return None

        response, expires_at = entry
        if expires_at is not None and expires_at <= datetime.now(UTC):
            del self._entries[key]
            return None

        return response.model_copy(update={"cached": True})

    def put(
        self,
        feature: str,
        prompt: str,
        model: str,
        response: LLMResponse,
        ttl_seconds: int | None = None,
    ) -> None:
        """Store a response. A TTL of None or 0 never expires."""
        key = self._compute_cache_key(feature, prompt, model)
        expires_at = datetime.now(UTC) + timedelta(seconds=ttl_seconds) if ttl_seconds else None
        self._entries[key] = (response, expires_at)

    def clear(self) -> None:
        """Drop all entries, e.g. after the table changed."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
