"""Pydantic models for the todo API."""

from .todo import Todo, TodoCreate, TodoCreated, TodoUpdate

__all__ = [
    "Todo",
    "TodoCreate",
    "TodoCreated",
    "TodoUpdate",
]
