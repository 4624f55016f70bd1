"""Todo service - read and write operations on todos."""

import logging
from dataclasses import replace
from typing import Any

from todoql.core.entities.todo import Todo
from todoql.core.errors import TodoNotFoundError
from todoql.core.interfaces.todo_repository import ITodoRepository
from todoql.core.services.cache_aside import CacheAside
from todoql.core.services.validation import sanitize_task, validate_task

logger = logging.getLogger(__name__)


def dump_todos(todos: list[Todo]) -> list[dict[str, Any]]:
    return [todo.to_dict() for todo in todos]


def load_todos(data: list[dict[str, Any]]) -> list[Todo]:
    return [Todo.from_dict(item) for item in data]


class TodoService:
    """Domain service for todos.

    ``list_all`` is served through the cache-aside strategy. Every
    successful write invalidates the cached list before returning, so
    a read following an acknowledged write always sees it.
    """

    def __init__(
        self,
        repository: ITodoRepository,
        list_cache: CacheAside[list[Todo]],
    ) -> None:
        """Initialize the service.

        Args:
            repository: The todo repository.
            list_cache: Cache-aside strategy guarding ``find_all``.
        """
        self._repository = repository
        self._list_cache = list_cache

    @property
    def list_cache(self) -> CacheAside[list[Todo]]:
        return self._list_cache

    async def list_all(self) -> list[Todo]:
        """Return all todos, from the cache when possible."""
        return await self._list_cache.get_or_load(self._repository.find_all)

    async def find_by_id(self, todo_id: str) -> Todo | None:
        """Return a todo by id, or None. Never cached."""
        return await self._repository.find_by_id(todo_id)

    async def create(self, task: str) -> Todo:
        """Create a todo.

        Args:
            task: The raw task text.

        Returns:
            The created todo with ``done=False``.

        Raises:
            ValidationError: If the task is empty or too long.
        """
        validate_task(task, target={"task": task})

        todo = await self._repository.create(sanitize_task(task), done=False)
        await self._list_cache.invalidate()

        logger.info("Created todo %s", todo.id)
        return todo

    async def update(
        self,
        todo_id: str,
        task: str | None = None,
        done: bool | None = None,
    ) -> Todo:
        """Update a todo's task and/or done flag.

        Args:
            todo_id: Id of the todo to update.
            task: Optional new task text.
            done: Optional new done flag.

        Returns:
            The updated todo.

        Raises:
            ValidationError: If ``task`` is given and invalid.
            TodoNotFoundError: If the todo does not exist.
        """
        if task is not None:
            target: dict[str, Any] = {"task": task}
            if done is not None:
                target["done"] = done
            validate_task(task, target=target)

        existing = await self._repository.find_by_id(todo_id)
        if existing is None:
            raise TodoNotFoundError(todo_id)

        changes: dict[str, Any] = {}
        if task is not None:
            changes["task"] = sanitize_task(task)
        if done is not None:
            changes["done"] = done

        todo = replace(existing, **changes)
        if not await self._repository.save(todo):
            raise TodoNotFoundError(todo_id)
        await self._list_cache.invalidate()

        logger.info("Updated todo %s", todo.id)
        return todo

    async def remove(self, todo_id: str) -> bool:
        """Delete a todo.

        Raises:
            TodoNotFoundError: If the todo does not exist.
        """
        existing = await self._repository.find_by_id(todo_id)
        if existing is None:
            raise TodoNotFoundError(todo_id)

        if not await self._repository.remove(todo_id):
            raise TodoNotFoundError(todo_id)
        await self._list_cache.invalidate()

        logger.info("Removed todo %s", todo_id)
        return True
