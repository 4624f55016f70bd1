"""Ariadne framework adapter for todoql."""

from todoql.adapters.ariadne.errors import format_todo_error
from todoql.adapters.ariadne.graphql import TodoGraphQL, create_schema
from todoql.adapters.ariadne.resolvers import resolvers
from todoql.adapters.ariadne.schema import TYPE_DEFS

__all__ = [
    "TodoGraphQL",
    "create_schema",
    "format_todo_error",
    "resolvers",
    "TYPE_DEFS",
]
