"""Runtime configuration loaded from the environment."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta

from todoql.core.entities.cache_config import CacheConfig

CACHE_BACKENDS = ("redis", "memory", "none")


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Application settings.

    ``testing`` disables the cache client entirely, the same way the
    cache adapter was never registered in the testing environment.
    """

    database_path: str = "data/todoql.db"
    cache_backend: str = "redis"
    redis_url: str = "redis://localhost:6379"
    cache_ttl: int = 300
    cache_key_prefix: str = "todoql"
    testing: bool = False
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    def __post_init__(self) -> None:
        if self.testing:
            self.cache_backend = "none"
        if self.cache_backend not in CACHE_BACKENDS:
            raise ValueError(
                f"Unknown cache backend {self.cache_backend!r}, "
                f"expected one of {', '.join(CACHE_BACKENDS)}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Load settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.
        """
        env = os.environ if environ is None else environ
        return cls(
            database_path=env.get("DATABASE_PATH", "data/todoql.db"),
            cache_backend=env.get("CACHE_BACKEND", "redis").lower(),
            redis_url=env.get("REDIS_URL", "redis://localhost:6379"),
            cache_ttl=int(env.get("CACHE_TTL", "300")),
            cache_key_prefix=env.get("CACHE_KEY_PREFIX", "todoql"),
            testing=_as_bool(env.get("TESTING")),
            debug=_as_bool(env.get("DEBUG")),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            host=env.get("HOST", "0.0.0.0"),
            port=int(env.get("PORT", "8000")),
        )

    @property
    def cache_config(self) -> CacheConfig:
        return CacheConfig(
            enabled=self.cache_backend != "none",
            ttl=timedelta(seconds=self.cache_ttl),
            key_prefix=self.cache_key_prefix,
        )


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
