"""Tests for JsonSerializer."""

import pytest

from todoql import SerializationError
from todoql.infrastructure.serializers.json import JsonSerializer


class TestJsonSerializer:
    """Tests for JsonSerializer."""

    @pytest.fixture
    def serializer(self) -> JsonSerializer:
        return JsonSerializer()

    def test_todo_rows(self, serializer: JsonSerializer) -> None:
        rows = [
            {"id": "1", "task": "buy milk", "done": False},
            {"id": "2", "task": "walk", "done": True},
        ]
        result = serializer.serialize(rows)

        assert isinstance(result, bytes)
        assert serializer.deserialize(result) == rows

    def test_escaped_task_kept_verbatim(self, serializer: JsonSerializer) -> None:
        task = "&lt;script&gt;&lt;&#x2F;script&gt;"
        result = serializer.serialize([{"id": "1", "task": task, "done": False}])

        assert task.encode() in result

    def test_unencodable_row(self, serializer: JsonSerializer) -> None:
        with pytest.raises(SerializationError):
            serializer.serialize([{"id": object(), "task": "x", "done": False}])

    @pytest.mark.parametrize("data", [b"not valid json {", b"\xff\xfe"])
    def test_corrupt_bytes(self, serializer: JsonSerializer, data: bytes) -> None:
        with pytest.raises(SerializationError):
            serializer.deserialize(data)

    def test_custom_encoding(self) -> None:
        serializer = JsonSerializer(encoding="utf-16")
        rows = [{"id": "1", "task": "café", "done": False}]

        assert serializer.deserialize(serializer.serialize(rows)) == rows
