"""Todo service - business logic layer."""

from __future__ import annotations

import logging
from typing import List, Optional

from todo_backend.models.todo import Todo
from todo_backend.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


class TodoService:
    """Service for todo business logic."""

    def __init__(self, repository: Optional[TodoRepository] = None) -> None:
        self.repository = repository if repository is not None else TodoRepository()

    def create_todo(self, text: str) -> int:
        """Create a new todo item and return its id."""
        todo_id = self.repository.create(text)
        logger.info("Created todo id=%s", todo_id)
        return todo_id

    def get_todo_by_id(self, todo_id: int) -> Optional[Todo]:
        """Get a specific todo by ID."""
        todo = self.repository.get_by_id(todo_id)
        if todo is None:
            logger.debug("Todo id=%s not found", todo_id)
        return todo

    def get_todos(self, *, after_id: Optional[int] = None, limit: int = 100) -> List[Todo]:
        """Get one page of todos, resuming after ``after_id``."""
        todos = self.repository.list_page(after_id=after_id, limit=limit)
        logger.debug(
            "Listed %s todos (after_id=%s, limit=%s)", len(todos), after_id, limit
        )
        return todos

    def update_todo(self, todo_id: int, text: str) -> Optional[Todo]:
        """Replace the text of an existing todo item and return the updated todo."""
        if not self.repository.update_text(todo_id, text):
            logger.info("Update skipped, todo id=%s not found", todo_id)
            return None
        logger.info("Updated todo id=%s", todo_id)
        return self.repository.get_by_id(todo_id)

    def delete_todo(self, todo_id: int) -> bool:
        """Soft-delete a todo item."""
        deleted = self.repository.mark_deleted(todo_id)
        if deleted:
            logger.info("Deleted todo id=%s", todo_id)
        else:
            logger.info("Delete skipped, todo id=%s not found", todo_id)
        return deleted
