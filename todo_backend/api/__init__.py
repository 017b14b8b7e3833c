"""HTTP routes and dependencies for the todo API."""

from .routes import router

__all__ = ["router"]
