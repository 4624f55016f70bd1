"""Core domain layer for todoql."""

from todoql.core.entities import CacheConfig, Todo
from todoql.core.errors import (
    CacheBackendError,
    FieldError,
    SerializationError,
    StorageError,
    TodoNotFoundError,
    TodoQLError,
    ValidationError,
)
from todoql.core.interfaces import ICacheBackend, ISerializer, ITodoRepository
from todoql.core.services import CacheAside, TodoService

__all__ = [
    # Entities
    "CacheConfig",
    "Todo",
    # Errors
    "TodoQLError",
    "FieldError",
    "ValidationError",
    "TodoNotFoundError",
    "StorageError",
    "CacheBackendError",
    "SerializationError",
    # Interfaces
    "ICacheBackend",
    "ISerializer",
    "ITodoRepository",
    # Services
    "CacheAside",
    "TodoService",
]
