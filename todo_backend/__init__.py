"""In-memory todo list service with soft delete and cursor pagination."""

__version__ = "1.0.0"
