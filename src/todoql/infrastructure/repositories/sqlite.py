"""SQLite todo repository backed by aiosqlite."""

import logging
import sqlite3
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from todoql.core.entities.todo import Todo
from todoql.core.errors import StorageError

logger = logging.getLogger(__name__)


class SqliteTodoRepository:
    """Todo repository storing rows in a SQLite database file.

    A connection is opened per operation. ``sqlite3.Error`` raised by
    the driver is re-raised as ``StorageError``.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the repository.

        Args:
            path: Path to the SQLite database file.
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @asynccontextmanager
    async def _connect(self) -> AsyncIterator[aiosqlite.Connection]:
        """Open a connection, translating driver errors."""
        try:
            db = await aiosqlite.connect(self._path)
        except sqlite3.Error as e:
            raise StorageError(f"Could not open database {self._path}: {e}") from e

        db.row_factory = aiosqlite.Row
        try:
            yield db
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {e}") from e
        finally:
            await db.close()

    async def init(self) -> None:
        """Create the todos table if it does not exist."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        async with self._connect() as db:
            await db.execute("""
                CREATE TABLE IF NOT EXISTS todos (
                    id TEXT PRIMARY KEY,
                    task TEXT NOT NULL,
                    done INTEGER NOT NULL DEFAULT 0
                )
            """)
            await db.commit()
        logger.info("Database ready at %s", self._path)

    async def find_all(self) -> list[Todo]:
        async with self._connect() as db:
            cursor = await db.execute(
                "SELECT id, task, done FROM todos ORDER BY rowid"
            )
            rows = await cursor.fetchall()
        return [Todo.from_dict(dict(row)) for row in rows]

    async def find_by_id(self, todo_id: str) -> Todo | None:
        async with self._connect() as db:
            cursor = await db.execute(
                "SELECT id, task, done FROM todos WHERE id = ?", (todo_id,)
            )
            row = await cursor.fetchone()
        return Todo.from_dict(dict(row)) if row is not None else None

    async def create(self, task: str, done: bool = False) -> Todo:
        todo = Todo(id=str(uuid.uuid4()), task=task, done=done)
        async with self._connect() as db:
            await db.execute(
                "INSERT INTO todos (id, task, done) VALUES (?, ?, ?)",
                (todo.id, todo.task, int(todo.done)),
            )
            await db.commit()
        return todo

    async def save(self, todo: Todo) -> bool:
        async with self._connect() as db:
            cursor = await db.execute(
                "UPDATE todos SET task = ?, done = ? WHERE id = ?",
                (todo.task, int(todo.done), todo.id),
            )
            updated = cursor.rowcount > 0
            await db.commit()
        return updated

    async def remove(self, todo_id: str) -> bool:
        async with self._connect() as db:
            cursor = await db.execute("DELETE FROM todos WHERE id = ?", (todo_id,))
            deleted = cursor.rowcount > 0
            await db.commit()
        return deleted

    async def ping(self) -> bool:
        """Run a trivial query against the database."""
        async with self._connect() as db:
            cursor = await db.execute("SELECT 1")
            row = await cursor.fetchone()
        return row is not None
