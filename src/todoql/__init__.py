"""todoql - Todo GraphQL API with a cache-aside list query.

A small CRUD service exposing todos over GraphQL (Ariadne + FastAPI),
stored in SQLite, with the list-all query served through a cache
(Redis or in-memory) that every write invalidates.

Example:
    from todoql import (
        CacheAside,
        CacheConfig,
        InMemoryCacheBackend,
        JsonSerializer,
        SqliteTodoRepository,
        TodoService,
        dump_todos,
        load_todos,
    )

    repository = SqliteTodoRepository("data/todoql.db")
    list_cache = CacheAside(
        backend=InMemoryCacheBackend(),
        serializer=JsonSerializer(),
        config=CacheConfig(),
        dump=dump_todos,
        load=load_todos,
    )
    service = TodoService(repository=repository, list_cache=list_cache)

    todo = await service.create("buy milk")
    todos = await service.list_all()
"""

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
from todoql.core.services import (
    CacheAside,
    TodoService,
    dump_todos,
    escape,
    load_todos,
    sanitize_task,
    validate_task,
)
from todoql.infrastructure import (
    InMemoryCacheBackend,
    JsonSerializer,
    NullCacheBackend,
    RedisCacheBackend,
    SqliteTodoRepository,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
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
    # Core interfaces
    "ICacheBackend",
    "ISerializer",
    "ITodoRepository",
    # Core services
    "CacheAside",
    "TodoService",
    "dump_todos",
    "load_todos",
    "escape",
    "sanitize_task",
    "validate_task",
    # Infrastructure implementations
    "InMemoryCacheBackend",
    "NullCacheBackend",
    "RedisCacheBackend",
    "SqliteTodoRepository",
    "JsonSerializer",
]
