"""Tests for core entities."""

from datetime import timedelta

from todoql import CacheConfig, Todo


class TestTodo:
    """Tests for Todo."""

    def test_defaults_to_not_done(self) -> None:
        todo = Todo(id="1", task="buy milk")
        assert todo.done is False

    def test_to_dict(self) -> None:
        todo = Todo(id="1", task="buy milk", done=True)
        assert todo.to_dict() == {"id": "1", "task": "buy milk", "done": True}

    def test_from_dict_coerces_sqlite_values(self) -> None:
        """Rows store done as an integer."""
        todo = Todo.from_dict({"id": "1", "task": "buy milk", "done": 1})

        assert todo == Todo(id="1", task="buy milk", done=True)
        assert todo.done is True


class TestCacheConfig:
    """Tests for CacheConfig."""

    def test_default_ttl(self) -> None:
        config = CacheConfig()
        assert config.ttl == timedelta(minutes=5)

    def test_cache_key(self) -> None:
        config = CacheConfig(key_prefix="app", list_key="all-todos")
        assert config.cache_key == "app:all-todos"

    def test_default_cache_key(self) -> None:
        assert CacheConfig().cache_key == "todoql:todos"
