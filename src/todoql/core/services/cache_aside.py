"""Cache-aside strategy for a single fixed cache key."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from todoql.core.entities.cache_config import CacheConfig
from todoql.core.errors import CacheBackendError, SerializationError
from todoql.core.interfaces.cache_backend import ICacheBackend
from todoql.core.interfaces.serializer import ISerializer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheAside(Generic[T]):
    """Wraps a loader with a cache-aside policy keyed by one fixed key.

    On a hit the cached value is returned without calling the loader.
    On a miss the loader runs and its result is stored under the key.
    Loader failures propagate and nothing is cached.

    ``dump`` converts the loaded value into something the serializer
    understands and ``load`` converts it back.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        serializer: ISerializer,
        config: CacheConfig | None = None,
        dump: Callable[[T], Any] | None = None,
        load: Callable[[Any], T] | None = None,
    ) -> None:
        """Initialize the strategy.

        Args:
            backend: The cache backend to use for storage.
            serializer: The serializer for encoding/decoding values.
            config: Optional cache configuration. Uses defaults if not provided.
            dump: Optional conversion applied before serialization.
            load: Optional conversion applied after deserialization.
        """
        self._backend = backend
        self._serializer = serializer
        self._config = config or CacheConfig()
        self._dump = dump or (lambda value: value)
        self._load = load or (lambda value: value)

        # Bumped by every invalidation; a load started before a bump is not stored
        self._generation = 0

        # Statistics
        self._hits = 0
        self._misses = 0

    @property
    def key(self) -> str:
        """The fixed cache key."""
        return self._config.cache_key

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, and total requests.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "total": self._hits + self._misses,
        }

    async def get_or_load(self, loader: Callable[[], Awaitable[T]]) -> T:
        """Return the cached value, or load and cache it on a miss.

        Args:
            loader: Coroutine function querying the source of truth.

        Returns:
            The cached or freshly loaded value.
        """
        if not self._config.enabled:
            return await loader()

        cached = await self._read()
        if cached is not None:
            self._hits += 1
            logger.debug("Cache HIT for %s", self.key)
            return cached

        self._misses += 1
        logger.debug("Cache MISS for %s", self.key)

        generation = self._generation
        value = await loader()
        if generation != self._generation:
            logger.debug("Not caching %s: invalidated during load", self.key)
            return value

        await self._write(value)
        if generation != self._generation:
            await self._delete()
        return value

    async def invalidate(self) -> bool:
        """Delete the cached value.

        Loads still in flight when this runs will not store their result.
        Backend failures are logged and reported as False so that they
        never mask the write that triggered the invalidation.

        Returns:
            True if a cached value was deleted, False otherwise.
        """
        if not self._config.enabled:
            return False

        self._generation += 1
        return await self._delete()

    async def _delete(self) -> bool:
        try:
            deleted = await self._backend.delete(self.key)
        except CacheBackendError as e:
            logger.warning("Could not invalidate %s: %s", self.key, e)
            return False

        logger.debug("Invalidated %s (existed: %s)", self.key, deleted)
        return deleted

    def reset_stats(self) -> None:
        """Reset hit and miss counters."""
        self._hits = 0
        self._misses = 0

    async def _read(self) -> T | None:
        try:
            data = await self._backend.get(self.key)
        except CacheBackendError as e:
            logger.warning("Cache read failed for %s: %s", self.key, e)
            return None

        if data is None:
            return None

        try:
            return self._load(self._serializer.deserialize(data))
        except SerializationError as e:
            logger.warning("Discarding unreadable cache entry %s: %s", self.key, e)
            return None

    async def _write(self, value: T) -> None:
        try:
            serialized = self._serializer.serialize(self._dump(value))
            await self._backend.set(self.key, serialized, self._config.ttl)
        except (CacheBackendError, SerializationError) as e:
            logger.warning("Cache write failed for %s: %s", self.key, e)
