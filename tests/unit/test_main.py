"""Tests for application wiring."""

from pathlib import Path
from unittest.mock import patch

from todoql.config import Settings
from todoql.infrastructure.backends import (
    InMemoryCacheBackend,
    NullCacheBackend,
    RedisCacheBackend,
)
from todoql.main import build_cache_backend, build_container, create_app, run


class TestBuildCacheBackend:
    def test_redis(self) -> None:
        backend = build_cache_backend(Settings(cache_backend="redis"))
        assert isinstance(backend, RedisCacheBackend)

    def test_memory(self) -> None:
        backend = build_cache_backend(Settings(cache_backend="memory"))
        assert isinstance(backend, InMemoryCacheBackend)

    def test_testing_uses_null_backend(self) -> None:
        backend = build_cache_backend(Settings(testing=True))
        assert isinstance(backend, NullCacheBackend)


class TestBuildContainer:
    def test_service_shares_list_cache(self, tmp_path: Path) -> None:
        container = build_container(
            Settings(database_path=str(tmp_path / "todos.db"), cache_backend="memory")
        )

        assert container.todo_service.list_cache is container.list_cache
        assert container.repository.path == tmp_path / "todos.db"

    def test_routes(self, tmp_path: Path) -> None:
        container = build_container(
            Settings(database_path=str(tmp_path / "todos.db"), testing=True)
        )
        app = create_app(container=container)

        paths = {route.path for route in app.routes}
        assert {"/graphql", "/health", "/cache/stats", "/cache/clear"} <= paths
        assert app.state.container is container


class TestRun:
    def test_module_builds_no_app_on_import(self) -> None:
        import todoql.main

        assert "app" not in vars(todoql.main)

    def test_run_uses_app_factory(self) -> None:
        with (
            patch("todoql.main.configure_logging") as configure_logging,
            patch("uvicorn.run") as uvicorn_run,
        ):
            run()

        configure_logging.assert_called_once()
        uvicorn_run.assert_called_once()
        args, kwargs = uvicorn_run.call_args
        assert args == ("todoql.main:create_app",)
        assert kwargs["factory"] is True
