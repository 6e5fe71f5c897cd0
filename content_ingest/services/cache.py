"""
Analysis Cache Service

Caches classification results so re-submitting the same page text does not
cost another LLM call.

Pattern: Repository pattern with Redis storage
"""

import hashlib
import json
from typing import Any, Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError


class CacheError(Exception):
    """Base exception for cache errors."""

    pass


DEFAULT_CACHE_TTL_SECONDS = 86400  # 1 day


class AnalysisCache:
    """
    Redis-backed cache of parsed classification results.

    Keys are derived from the model name and a sha256 of the text, so a model
    change never serves an answer produced by another model.

    Attributes:
        redis: Redis client for persistence
        ttl_seconds: Cache TTL in seconds
    """

    KEY_PREFIX = "cache:analysis:"

    def __init__(
        self,
        redis_client: Redis,
        ttl_seconds: Optional[int] = None,
    ) -> None:
        self._redis = redis_client
        self._ttl_seconds = ttl_seconds or DEFAULT_CACHE_TTL_SECONDS

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def generate_key(self, model: str, text: str) -> str:
        """Build the cache key for a (model, text) pair."""
        digest = hashlib.sha256(text.encode("utf-8")).hexdigest()[:32]
        return f"{self.KEY_PREFIX}{model}:{digest}"

    async def get(self, model: str, text: str) -> Optional[dict[str, Any]]:
        """
        Return the cached result, or None on a miss.

        Raises:
            CacheError: On Redis failures or corrupt entries.
        """
        try:
            data = await self._redis.get(self.generate_key(model, text))
            if not data:
                return None
            return json.loads(data)
        except Exception as e:
            raise CacheError(f"Failed to get cached analysis: {e}") from e

    async def set(self, model: str, text: str, result: dict[str, Any]) -> bool:
        """Store a result with the configured TTL."""
        try:
            await self._redis.set(
                self.generate_key(model, text),
                json.dumps(result, default=str),
                ex=self._ttl_seconds,
            )
            return True
        except Exception as e:
            raise CacheError(f"Failed to cache analysis: {e}") from e

    async def ping(self) -> bool:
        try:
            return bool(await self._redis.ping())
        except (RedisError, OSError):
            return False

    async def close(self) -> None:
        await self._redis.aclose()
