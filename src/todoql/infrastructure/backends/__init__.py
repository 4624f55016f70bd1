"""Cache backend implementations."""

from todoql.infrastructure.backends.memory import InMemoryCacheBackend
from todoql.infrastructure.backends.null import NullCacheBackend
from todoql.infrastructure.backends.redis import RedisCacheBackend

__all__ = [
    "InMemoryCacheBackend",
    "NullCacheBackend",
    "RedisCacheBackend",
]
