"""Todo GraphQL ASGI app for Ariadne."""

from typing import Any

from ariadne import make_executable_schema
from ariadne.asgi import GraphQL
from graphql import GraphQLSchema

from todoql.adapters.ariadne.errors import format_todo_error
from todoql.adapters.ariadne.resolvers import resolvers
from todoql.adapters.ariadne.schema import TYPE_DEFS
from todoql.core.services.todo_service import TodoService


def create_schema() -> GraphQLSchema:
    """Build the executable todo schema."""
    return make_executable_schema(TYPE_DEFS, *resolvers)


class TodoGraphQL(GraphQL):
    """Ariadne GraphQL app serving the todo schema.

    The todo service is handed to resolvers through the context value,
    and errors are formatted with ``format_todo_error``. Queries sent
    with GET are executed instead of serving the explorer.

    Example::

        app = TodoGraphQL(todo_service, debug=True)
    """

    def __init__(
        self,
        todo_service: TodoService,
        schema: GraphQLSchema | None = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("error_formatter", format_todo_error)
        kwargs.setdefault("execute_get_queries", True)
        self._todo_service = todo_service

        super().__init__(
            schema or create_schema(),
            context_value=self.get_context_value,
            **kwargs,
        )

    @property
    def todo_service(self) -> TodoService:
        return self._todo_service

    def get_context_value(self, request: Any, data: Any = None) -> dict[str, Any]:
        return {
            "request": request,
            "todo_service": self._todo_service,
        }
