"""Error kinds raised by the task store and snapshot persistence.

Every error is recoverable: the caller reports it and keeps running with
the in-memory task list as the source of truth.
"""

from pathlib import Path


class TodoError(Exception):
    """Base class for todolist errors.

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TodoError):
    """Input failed a content rule (e.g. an empty description)."""


class SelectionError(TodoError):
    """An operation needed a target task but got none or an out-of-range index.

    Attributes:
        index: The index that was requested, or None if nothing was selected
    """

    def __init__(self, message: str, index: int | None = None):
        super().__init__(message)
        self.index = index


class PersistenceError(TodoError):
    """The snapshot file could not be read or written, or its content is malformed.

    Attributes:
        path: Snapshot file involved
        cause: Underlying exception, also chained as ``__cause__``
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message
