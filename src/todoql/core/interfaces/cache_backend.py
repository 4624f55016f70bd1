"""Cache backend interface."""

from datetime import timedelta
from typing import Protocol


class ICacheBackend(Protocol):
    """Key-value store holding the cached todo list.

    Only one key is ever used, so backends need plain get/set/delete.
    Distributed backends raise ``CacheBackendError`` when unreachable;
    the cache-aside strategy downgrades those failures to misses.
    """

    async def get(self, key: str) -> bytes | None:
        """Return the stored bytes, or None when absent or expired."""
        ...

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        """Store bytes under ``key``, expiring after ``ttl`` when given."""
        ...

    async def delete(self, key: str) -> bool:
        """Remove ``key``. Returns whether it was present."""
        ...

    async def ping(self) -> bool:
        """Report whether the backend is reachable."""
        ...

    async def close(self) -> None:
        """Release any connection held by the backend."""
        ...
