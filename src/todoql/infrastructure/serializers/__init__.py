"""Serializer implementations."""

from todoql.infrastructure.serializers.json import JsonSerializer

__all__ = ["JsonSerializer"]
