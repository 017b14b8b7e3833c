"""Test configuration for the todo backend."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from todo_backend.main import create_app  # noqa: E402
from todo_backend.repositories.todo_repository import TodoRepository  # noqa: E402
from todo_backend.services.todo_service import TodoService  # noqa: E402
from todo_backend.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings():
    """Re-read environment settings for each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def repository() -> TodoRepository:
    """Provide an empty repository."""
    return TodoRepository()


@pytest.fixture
def todo_service(repository: TodoRepository) -> TodoService:
    """Create todo service for testing."""
    return TodoService(repository)


@pytest.fixture
def client(repository: TodoRepository) -> TestClient:
    """Provide a TestClient for an application backed by ``repository``."""
    return TestClient(create_app(repository))
