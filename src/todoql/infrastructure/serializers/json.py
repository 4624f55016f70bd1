"""JSON serializer for the cached todo list."""

import json
from typing import Any

from todoql.core.errors import SerializationError


class JsonSerializer:
    """Stores todo rows as UTF-8 (or ``encoding``) JSON.

    Escaped task text such as ``&lt;b&gt;`` is kept verbatim; JSON
    only escapes quotes and control characters.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def serialize(self, value: list[dict[str, Any]]) -> bytes:
        try:
            return json.dumps(value).encode(self._encoding)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot encode todo list: {e}") from e

    def deserialize(self, data: bytes) -> list[dict[str, Any]]:
        try:
            return json.loads(data.decode(self._encoding))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SerializationError(f"Corrupt cached todo list: {e}") from e
