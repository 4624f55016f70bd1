"""GraphQL resolvers for the todo API."""

from typing import Any

from ariadne import MutationType, QueryType

from todoql.core.entities.todo import Todo
from todoql.core.services.todo_service import TodoService


def _service(info: Any) -> TodoService:
    return info.context["todo_service"]


# =============================================================================
# Query Resolvers
# =============================================================================

query = QueryType()


@query.field("findTodoById")
async def resolve_find_todo_by_id(_, info, id: str) -> Todo | None:
    return await _service(info).find_by_id(id)


@query.field("getAllTodos")
async def resolve_get_all_todos(_, info) -> list[Todo]:
    """
    Get all todos.

    Cached under a single key; invalidated by every mutation below.
    """
    return await _service(info).list_all()


# =============================================================================
# Mutation Resolvers
# =============================================================================

mutation = MutationType()


@mutation.field("createTodo")
async def resolve_create_todo(_, info, input: dict[str, Any]) -> Todo:
    return await _service(info).create(input["task"])


@mutation.field("updateTodo")
async def resolve_update_todo(_, info, id: str, input: dict[str, Any]) -> Todo:
    return await _service(info).update(
        id,
        task=input.get("task"),
        done=input.get("done"),
    )


@mutation.field("removeTodo")
async def resolve_remove_todo(_, info, id: str) -> bool:
    return await _service(info).remove(id)


# Export all resolvers
resolvers = [query, mutation]
