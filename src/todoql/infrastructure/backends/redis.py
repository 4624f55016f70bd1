"""Redis cache backend implementation."""

from datetime import timedelta
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from todoql.core.errors import CacheBackendError


class RedisCacheBackend:
    """Shares the cached todo list between workers through Redis.

    Keys are namespaced with ``key_prefix`` unless they already carry it.
    Every ``RedisError`` surfaces as ``CacheBackendError`` so callers
    never depend on the redis exception hierarchy.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "todoql",
        default_ttl: Optional[int] = 300,
        client: Optional[redis.Redis] = None,
    ) -> None:
        """Initialize the Redis cache backend.

        Args:
            redis_url: Redis connection URL. Ignored when ``client`` is given.
            key_prefix: Namespace for cache keys.
            default_ttl: Seconds to keep entries stored without a ``ttl``;
                None keeps them until deleted.
            client: Pre-built client.
        """
        self._redis: redis.Redis = client or redis.from_url(redis_url)  # type: ignore
        self._key_prefix = key_prefix
        self._default_ttl = default_ttl

    def _key(self, key: str) -> str:
        if key.startswith(f"{self._key_prefix}:"):
            return key
        return f"{self._key_prefix}:{key}"

    async def get(self, key: str) -> Optional[bytes]:
        try:
            return await self._redis.get(self._key(key))
        except RedisError as e:
            raise CacheBackendError(f"Redis GET {key} failed: {e}") from e

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: Optional[timedelta] = None,
    ) -> None:
        seconds = int(ttl.total_seconds()) if ttl is not None else self._default_ttl
        try:
            if seconds is None:
                await self._redis.set(self._key(key), value)
            else:
                await self._redis.setex(self._key(key), seconds, value)
        except RedisError as e:
            raise CacheBackendError(f"Redis SET {key} failed: {e}") from e

    async def delete(self, key: str) -> bool:
        try:
            return await self._redis.delete(self._key(key)) > 0
        except RedisError as e:
            raise CacheBackendError(f"Redis DEL {key} failed: {e}") from e

    async def ping(self) -> bool:
        try:
            return bool(await self._redis.ping())
        except RedisError:
            return False

    async def close(self) -> None:
        await self._redis.aclose()
