"""GraphQL error formatting for todoql errors."""

from typing import Any

from ariadne import format_error, unwrap_graphql_error
from graphql import GraphQLError

from todoql.core.errors import TodoNotFoundError, TodoQLError, ValidationError

INTERNAL_ERROR_MESSAGE = "Internal server error"


def format_todo_error(error: GraphQLError, debug: bool = False) -> dict[str, Any]:
    """Format an error raised while executing a todo operation.

    Validation and not-found errors carry their response under
    ``extensions.exception.response``. Other application errors are
    reported with a generic message unless ``debug`` is set.
    """
    formatted = format_error(error, debug)
    original = unwrap_graphql_error(error)

    if original is None:
        return formatted

    extensions = formatted.setdefault("extensions", {})

    if isinstance(original, (ValidationError, TodoNotFoundError)):
        extensions["code"] = original.code
        extensions["exception"] = {
            "response": original.response,
            "status": original.status_code,
            "message": str(original),
        }
        return formatted

    extensions["code"] = (
        original.code if isinstance(original, TodoQLError) else "INTERNAL_SERVER_ERROR"
    )
    if not debug:
        formatted["message"] = INTERNAL_ERROR_MESSAGE
    return formatted
