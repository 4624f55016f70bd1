"""No-op cache backend."""

from datetime import timedelta


class NullCacheBackend:
    """Cache backend that never stores anything.

    Every read is a miss. Used when caching is disabled, e.g. in the
    testing environment where no cache server is available.
    """

    async def get(self, key: str) -> bytes | None:
        return None

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        return None

    async def delete(self, key: str) -> bool:
        return False

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        return None
