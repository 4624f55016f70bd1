"""Exceptions raised by todoql."""

from dataclasses import dataclass, field
from typing import Any


class TodoQLError(Exception):
    """Base class for all todoql errors."""

    code = "INTERNAL_SERVER_ERROR"
    status_code = 500


@dataclass
class FieldError:
    """Constraint failures for a single input property.

    ``constraints`` maps a rule name (``isNotEmpty``, ``maxLength``)
    to its human readable message.
    """

    property: str
    value: Any
    constraints: dict[str, str] = field(default_factory=dict)
    target: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "value": self.value,
            "property": self.property,
            "children": [],
            "constraints": self.constraints,
        }


class ValidationError(TodoQLError):
    """Raised when input fails one or more declared constraints."""

    code = "BAD_USER_INPUT"
    status_code = 400

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = errors
        super().__init__("Bad Request Exception")

    @property
    def response(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "message": [error.to_dict() for error in self.errors],
            "error": "Bad Request",
        }


class TodoNotFoundError(TodoQLError):
    """Raised when a referenced todo does not exist."""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, todo_id: str) -> None:
        self.todo_id = todo_id
        super().__init__(f'Todo with id "{todo_id}" was not found')

    @property
    def response(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "message": str(self),
            "error": "Not Found",
        }


class StorageError(TodoQLError):
    """Raised when the storage engine fails."""


class CacheBackendError(TodoQLError):
    """Raised when the cache backend cannot be reached or fails."""


class SerializationError(TodoQLError):
    """Raised when serialization or deserialization fails."""
