"""API dependencies for todo management."""

from fastapi import Depends, Request

from todo_backend.repositories.todo_repository import TodoRepository
from todo_backend.services.todo_service import TodoService


def get_todo_repository(request: Request) -> TodoRepository:
    """Dependency returning the repository owned by the running application."""
    return request.app.state.todo_repository


def get_todo_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """Dependency for getting todo service instance."""
    return TodoService(repository)
