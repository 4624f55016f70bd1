"""Repository implementations."""

from todoql.infrastructure.repositories.sqlite import SqliteTodoRepository

__all__ = ["SqliteTodoRepository"]
