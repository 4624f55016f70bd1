"""Cache configuration entity."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass
class CacheConfig:
    """Cache configuration.

    The list-all query is cached under a single key built from
    ``key_prefix`` and ``list_key``. Every write deletes that key.
    """

    enabled: bool = True
    ttl: timedelta | None = None
    key_prefix: str = "todoql"
    list_key: str = "todos"

    def __post_init__(self) -> None:
        """Set default TTL if not provided."""
        if self.ttl is None:
            self.ttl = timedelta(minutes=5)

    @property
    def cache_key(self) -> str:
        """The fixed key holding the cached list of todos."""
        return f"{self.key_prefix}:{self.list_key}"
