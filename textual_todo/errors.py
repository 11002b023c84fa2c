from __future__ import annotations

from typing import Optional


class TodoError(Exception):
    """Base class for todo application errors."""


class ValidationError(TodoError):
    """Raised when a todo cannot be created from the given input."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class PersistenceError(TodoError):
    """Base class for storage failures. Always recovered locally."""


class PersistenceReadError(PersistenceError):
    """Persisted todos could not be read or decoded."""


class PersistenceWriteError(PersistenceError):
    """Todos could not be written to storage."""
