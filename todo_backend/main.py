"""Main FastAPI application for the todo API."""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from todo_backend.api.routes import router as api_router
from todo_backend.logging_utils import configure_logging, reset_request_id, set_request_id
from todo_backend.repositories.todo_repository import TodoRepository
from todo_backend.settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log application startup and shutdown."""
    settings = get_settings()
    logger.info(
        "Starting Todo API (environment=%s, default_page_size=%s, max_page_size=%s)",
        settings.environment,
        settings.default_page_size,
        settings.max_page_size,
    )
    yield
    logger.info(
        "Shutting down Todo API with %s stored todos",
        len(app.state.todo_repository),
    )


def create_app(repository: TodoRepository | None = None) -> FastAPI:
    """Build the application around a single todo repository.

    The repository lives on ``app.state`` for the lifetime of the process and
    is handed to request handlers through ``get_todo_repository``. Nothing is
    persisted, so every new application starts empty with ids counting from 1.
    """
    configure_logging(get_settings().log_level)

    app = FastAPI(
        title="Todo API",
        description="In-memory todo list with soft delete and cursor pagination",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.todo_repository = repository if repository is not None else TodoRepository()

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(request_token)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with basic API info."""
        return {
            "message": "Todo API",
            "endpoints": "/api/todos",
        }

    @app.get("/health")
    def read_health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api_router, prefix="/api")
    app.include_router(api_router)
    return app


app = create_app()
