"""Core services for todoql."""

from todoql.core.services.cache_aside import CacheAside
from todoql.core.services.todo_service import TodoService, dump_todos, load_todos
from todoql.core.services.validation import (
    TASK_MAX_LENGTH,
    escape,
    sanitize_task,
    validate_task,
)

__all__ = [
    "CacheAside",
    "TodoService",
    "dump_todos",
    "load_todos",
    "TASK_MAX_LENGTH",
    "escape",
    "sanitize_task",
    "validate_task",
]
