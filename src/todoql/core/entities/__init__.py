"""Domain entities for todoql."""

from todoql.core.entities.cache_config import CacheConfig
from todoql.core.entities.todo import Todo

__all__ = [
    "CacheConfig",
    "Todo",
]
