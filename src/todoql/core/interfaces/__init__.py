"""Core interfaces (Protocol classes) for todoql."""

from todoql.core.interfaces.cache_backend import ICacheBackend
from todoql.core.interfaces.serializer import ISerializer
from todoql.core.interfaces.todo_repository import ITodoRepository

__all__ = [
    "ICacheBackend",
    "ISerializer",
    "ITodoRepository",
]
