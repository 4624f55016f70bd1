"""In-memory cache backend implementation."""

from datetime import timedelta

from cachetools import TTLCache  # type: ignore[import-untyped]


class InMemoryCacheBackend:
    """Process-local backend for single-worker deployments and tests.

    Entries expire after ``default_ttl`` seconds. TTLCache has one TTL
    for the whole cache, so the ``ttl`` passed to ``set`` is not used;
    run the Redis backend when per-write expiry matters.
    """

    def __init__(self, maxsize: int = 1000, default_ttl: float = 300.0) -> None:
        self._cache: TTLCache[str, bytes] = TTLCache(maxsize=maxsize, ttl=default_ttl)

    async def get(self, key: str) -> bytes | None:
        return self._cache.get(key)

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        self._cache[key] = value

    async def delete(self, key: str) -> bool:
        return self._cache.pop(key, None) is not None

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._cache.clear()
