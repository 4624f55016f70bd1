"""Serializer interface for the cached todo list."""

from typing import Any, Protocol


class ISerializer(Protocol):
    """Turns the cached todo list into bytes and back.

    The list reaches the serializer already dumped to plain rows
    (``[{"id": ..., "task": ..., "done": ...}, ...]``), so implementations
    only have to deal with JSON-compatible values.
    """

    def serialize(self, value: list[dict[str, Any]]) -> bytes:
        """Encode todo rows for the cache backend.

        Raises:
            SerializationError: If a row holds a value that cannot be encoded.
        """
        ...

    def deserialize(self, data: bytes) -> list[dict[str, Any]]:
        """Decode bytes read from the cache backend into todo rows.

        Raises:
            SerializationError: If the cached bytes are corrupt.
        """
        ...
