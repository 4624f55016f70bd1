"""Todo repository interface."""

from typing import Protocol

from todoql.core.entities.todo import Todo


class ITodoRepository(Protocol):
    """Contract for todo persistence.

    Repositories only delegate to the storage engine. They do not
    validate, sanitize or cache.
    """

    async def find_all(self) -> list[Todo]:
        """Return every stored todo in insertion order."""
        ...

    async def find_by_id(self, todo_id: str) -> Todo | None:
        """Return the todo with the given id, or None."""
        ...

    async def create(self, task: str, done: bool = False) -> Todo:
        """Insert a new todo.

        The storage layer generates the id.

        Returns:
            The persisted todo.
        """
        ...

    async def save(self, todo: Todo) -> bool:
        """Persist changes to an existing todo.

        Returns:
            True if a row was updated, False if the todo no longer exists.
        """
        ...

    async def remove(self, todo_id: str) -> bool:
        """Delete a todo by id.

        Returns:
            True if a row was deleted, False otherwise.
        """
        ...

    async def ping(self) -> bool:
        """Check connectivity to the storage engine."""
        ...
