"""Todo repository - data access layer."""

from __future__ import annotations

from typing import List, Optional

from todo_backend.models.todo import Todo


class TodoRepository:
    """Repository for todo data access with in-memory storage.

    Records are never removed: deleting a todo only sets its ``deleted`` flag,
    so ids stay stable and are never reused. Reads skip deleted records and
    hand out copies, leaving stored records untouched by callers.
    """

    def __init__(self) -> None:
        self._todos: dict[int, Todo] = {}
        self._next_id = 1

    @property
    def next_id(self) -> int:
        """Id that the next created todo will receive."""
        return self._next_id

    def create(self, text: str) -> int:
        """Store a new todo and return its id."""
        todo_id = self._next_id
        self._todos[todo_id] = Todo(id=todo_id, text=text, deleted=False)
        self._next_id = todo_id + 1
        return todo_id

    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        """Get a visible todo by ID."""
        todo = self._todos.get(todo_id)
        if todo is None or todo.deleted:
            return None
        return todo.model_copy()

    def list_page(self, *, after_id: Optional[int] = None, limit: int = 100) -> List[Todo]:
        """Get up to ``limit`` visible todos with ids strictly greater than ``after_id``."""
        if limit <= 0:
            return []
        visible = sorted(
            (todo for todo in self._todos.values() if not todo.deleted),
            key=lambda todo: todo.id,
        )
        if after_id is not None:
            visible = [todo for todo in visible if todo.id > after_id]
        return [todo.model_copy() for todo in visible[:limit]]

    def update_text(self, todo_id: int, text: str) -> bool:
        """Replace the text of a visible todo."""
        todo = self._todos.get(todo_id)
        if todo is None or todo.deleted:
            return False
        todo.text = text
        return True

    def mark_deleted(self, todo_id: int) -> bool:
        """Soft-delete a todo; repeated deletes keep reporting success."""
        todo = self._todos.get(todo_id)
        if todo is None:
            return False
        todo.deleted = True
        return True

    def __len__(self) -> int:
        return len(self._todos)
