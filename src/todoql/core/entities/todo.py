"""Todo entity."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Todo:
    """A single todo record.

    The ``task`` value is always stored in its sanitized form.
    """

    id: str
    task: str
    done: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the todo."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Todo":
        """Build a todo from a mapping (e.g. a cached or database row).

        Args:
            data: Mapping with ``id``, ``task`` and ``done`` keys.

        Returns:
            A new Todo instance.
        """
        return cls(
            id=str(data["id"]),
            task=data["task"],
            done=bool(data["done"]),
        )
