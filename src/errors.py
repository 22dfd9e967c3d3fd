"""Error types raised by the task store and command handler.

Every error carries the message shown to the user. The handler prints it
behind the error glyph; callers that want to react programmatically catch
the specific subclass instead of reading the text.
"""
from __future__ import annotations

from typing import Optional


class TaskCliError(Exception):
    """Base class for every failure a command can report."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UsageError(TaskCliError):
    """Wrong number of arguments for a command."""


class EmptyDescriptionError(UsageError):
    def __init__(self) -> None:
        super().__init__("Description cannot be empty")


class ParseError(TaskCliError):
    """An argument was present but could not be parsed."""


class InvalidIdError(ParseError):
    def __init__(self, raw: str):
        super().__init__("ID must be a number")
        self.raw = raw


class InvalidStatusError(ParseError):
    def __init__(self, raw: str):
        super().__init__("Invalid status. Allowed: todo, in-progress, done")
        self.raw = raw


class TaskNotFoundError(TaskCliError):
    def __init__(self, task_id: int):
        super().__init__("Task not found")
        self.task_id = task_id


class StorageError(TaskCliError):
    """Reading, creating, encoding or writing the tasks file failed.

    ``operation`` is "loading" or "saving".
    """

    def __init__(self, operation: str, detail: object, path: Optional[str] = None):
        super().__init__(f"Error {operation} tasks: {detail}")
        self.operation = operation
        self.detail = detail
        self.path = path


class StorageDecodeError(StorageError):
    """The tasks file exists but does not hold a valid task array."""

    def __init__(self, detail: object, path: Optional[str] = None):
        super().__init__("loading", detail, path)
