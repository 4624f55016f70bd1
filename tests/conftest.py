"""Pytest configuration for todoql tests."""

from datetime import timedelta
from pathlib import Path

import pytest
import pytest_asyncio

from todoql import (
    CacheAside,
    CacheConfig,
    InMemoryCacheBackend,
    JsonSerializer,
    SqliteTodoRepository,
    Todo,
    TodoService,
    dump_todos,
    load_todos,
)


@pytest.fixture
def cache_backend() -> InMemoryCacheBackend:
    return InMemoryCacheBackend(maxsize=100)


@pytest.fixture
def list_cache(cache_backend: InMemoryCacheBackend) -> CacheAside[list[Todo]]:
    """Create a list cache backed by memory."""
    return CacheAside(
        backend=cache_backend,
        serializer=JsonSerializer(),
        config=CacheConfig(ttl=timedelta(minutes=5)),
        dump=dump_todos,
        load=load_todos,
    )


@pytest_asyncio.fixture
async def repository(tmp_path: Path) -> SqliteTodoRepository:
    """Create an initialized repository in a temporary database."""
    repo = SqliteTodoRepository(tmp_path / "todos.db")
    await repo.init()
    return repo


@pytest.fixture
def todo_service(
    repository: SqliteTodoRepository, list_cache: CacheAside[list[Todo]]
) -> TodoService:
    return TodoService(repository=repository, list_cache=list_cache)
