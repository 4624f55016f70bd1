"""Infrastructure layer implementations for todoql."""

from todoql.infrastructure.backends import (
    InMemoryCacheBackend,
    NullCacheBackend,
    RedisCacheBackend,
)
from todoql.infrastructure.repositories import SqliteTodoRepository
from todoql.infrastructure.serializers import JsonSerializer

__all__ = [
    "InMemoryCacheBackend",
    "NullCacheBackend",
    "RedisCacheBackend",
    "SqliteTodoRepository",
    "JsonSerializer",
]
