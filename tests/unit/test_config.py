"""Tests for Settings."""

from datetime import timedelta

import pytest

from todoql.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        settings = Settings.from_env({})

        assert settings.cache_backend == "redis"
        assert settings.redis_url == "redis://localhost:6379"
        assert settings.cache_ttl == 300
        assert settings.debug is False

    def test_from_env(self) -> None:
        settings = Settings.from_env(
            {
                "DATABASE_PATH": "/tmp/todos.db",
                "CACHE_BACKEND": "Memory",
                "CACHE_TTL": "60",
                "CACHE_KEY_PREFIX": "app",
                "DEBUG": "true",
                "LOG_LEVEL": "debug",
            }
        )

        assert settings.database_path == "/tmp/todos.db"
        assert settings.cache_backend == "memory"
        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.cache_config.ttl == timedelta(seconds=60)
        assert settings.cache_config.cache_key == "app:todos"

    def test_testing_disables_cache(self) -> None:
        settings = Settings.from_env({"TESTING": "1", "CACHE_BACKEND": "redis"})

        assert settings.cache_backend == "none"
        assert settings.cache_config.enabled is False

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unknown cache backend"):
            Settings(cache_backend="memcached")
