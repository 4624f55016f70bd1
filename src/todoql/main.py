"""FastAPI application wiring the todo GraphQL API."""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from todoql.adapters.ariadne import TodoGraphQL
from todoql.config import Settings, configure_logging
from todoql.core.entities.todo import Todo
from todoql.core.errors import StorageError
from todoql.core.interfaces.cache_backend import ICacheBackend
from todoql.core.services.cache_aside import CacheAside
from todoql.core.services.todo_service import TodoService, dump_todos, load_todos
from todoql.infrastructure.backends import (
    InMemoryCacheBackend,
    NullCacheBackend,
    RedisCacheBackend,
)
from todoql.infrastructure.repositories import SqliteTodoRepository
from todoql.infrastructure.serializers import JsonSerializer

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """Objects composed once at process start."""

    settings: Settings
    repository: SqliteTodoRepository
    cache_backend: ICacheBackend
    list_cache: CacheAside[list[Todo]]
    todo_service: TodoService


def build_cache_backend(settings: Settings) -> ICacheBackend:
    if settings.cache_backend == "redis":
        return RedisCacheBackend(
            redis_url=settings.redis_url,
            key_prefix=settings.cache_key_prefix,
            default_ttl=settings.cache_ttl,
        )
    if settings.cache_backend == "memory":
        return InMemoryCacheBackend(default_ttl=float(settings.cache_ttl))
    return NullCacheBackend()


def build_container(settings: Settings) -> Container:
    """Compose repository, cache and service from settings."""
    repository = SqliteTodoRepository(settings.database_path)
    cache_backend = build_cache_backend(settings)
    list_cache: CacheAside[list[Todo]] = CacheAside(
        backend=cache_backend,
        serializer=JsonSerializer(),
        config=settings.cache_config,
        dump=dump_todos,
        load=load_todos,
    )
    return Container(
        settings=settings,
        repository=repository,
        cache_backend=cache_backend,
        list_cache=list_cache,
        todo_service=TodoService(repository=repository, list_cache=list_cache),
    )


def create_app(
    settings: Settings | None = None,
    container: Container | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Settings to use. Loaded from the environment if omitted.
        container: Pre-built container, mainly for tests.
    """
    if container is None:
        container = build_container(settings or Settings.from_env())
    settings = container.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Initializing database at %s", settings.database_path)
        await container.repository.init()
        logger.info("Using %s cache backend", settings.cache_backend)
        yield
        logger.info("Closing cache backend")
        await container.cache_backend.close()

    app = FastAPI(
        title="todoql",
        description="Todo GraphQL API with a cached list query",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.container = container

    graphql_app = TodoGraphQL(container.todo_service, debug=settings.debug)
    app.add_route("/graphql", graphql_app.handle_request, methods=["GET", "POST"])

    @app.get("/health")
    async def health_check():
        try:
            await container.repository.ping()
        except StorageError as e:
            logger.warning("Health check failed: %s", e)
            database = {"status": "down", "message": str(e)}
            return JSONResponse(
                status_code=503,
                content={
                    "status": "error",
                    "info": {},
                    "error": {"database": database},
                    "details": {"database": database},
                },
            )

        database = {"status": "up"}
        return {
            "status": "ok",
            "info": {"database": database},
            "error": {},
            "details": {"database": database},
        }

    @app.get("/cache/stats")
    async def cache_stats() -> dict[str, Any]:
        config = container.list_cache.config
        return {
            "stats": container.list_cache.stats,
            "reachable": await container.cache_backend.ping(),
            "config": {
                "enabled": config.enabled,
                "backend": settings.cache_backend,
                "key": config.cache_key,
                "ttl": config.ttl.total_seconds() if config.ttl else None,
            },
        }

    @app.post("/cache/clear")
    async def clear_cache() -> dict[str, Any]:
        deleted = await container.list_cache.invalidate()
        container.list_cache.reset_stats()
        return {"status": "cleared", "deleted": deleted}

    return app


def run() -> None:
    """Run the application with uvicorn.

    Equivalent to ``uvicorn --factory todoql.main:create_app``.
    """
    import uvicorn

    settings = Settings.from_env()
    configure_logging(settings)
    uvicorn.run(
        "todoql.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
