"""Ordered, write-through task store.

Tasks are addressed by their current position in the list; there is no
identifier that survives deletions. This is only sound with a single
interactive view and a single process.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING

from todolist.errors import PersistenceError, SelectionError, ValidationError
from todolist.logging import Loggers
from todolist.tasks.models import Task

if TYPE_CHECKING:
    from todolist.persistence.snapshot import SnapshotPersistence

logger = Loggers.store()

ConfirmCallback = Callable[[Task], bool]


class TaskStore:
    """In-memory task list with validated, persisted mutations.

    Every successful mutation writes the whole list through
    SnapshotPersistence before returning. If that write fails the
    mutation is kept and the PersistenceError propagates to the caller.

    Example:
        >>> store, error = TaskStore.open(SnapshotPersistence("tasks.json"))
        >>> store.add("Buy milk")
        >>> store.toggle_complete(0)
        >>> store.delete(0, confirm=lambda task: True)
    """

    def __init__(
        self,
        persistence: "SnapshotPersistence",
        tasks: Iterable[Task] | None = None,
    ) -> None:
        self._persistence = persistence
        self._tasks: list[Task] = list(tasks or [])

    @classmethod
    def open(
        cls, persistence: "SnapshotPersistence"
    ) -> tuple["TaskStore", PersistenceError | None]:
        """Restore the store from its snapshot.

        A snapshot that cannot be read leaves the store empty; the error is
        returned so the caller can report it.

        Returns:
            Tuple of (store, load error or None)
        """
        try:
            tasks = persistence.load()
        except PersistenceError as e:
            logger.warning("store_restore_failed", error=str(e))
            return cls(persistence), e
        logger.info("store_restored", count=len(tasks))
        return cls(persistence, tasks), None

    # -------------------- queries --------------------

    @property
    def tasks(self) -> list[Task]:
        """Copy of the task list in display order."""
        return list(self._tasks)

    def get(self, index: int) -> Task:
        """Get the task at a display position.

        Raises:
            SelectionError: If index is out of range
        """
        return self._tasks[self._check_index(index)]

    def is_empty(self) -> bool:
        return not self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    # -------------------- mutations --------------------

    def add(self, description: str) -> Task:
        """Append a new, incomplete task.

        Args:
            description: Task text; surrounding whitespace is trimmed

        Returns:
            The created task

        Raises:
            ValidationError: If the description is empty after trimming
            PersistenceError: If the snapshot write fails (task is still added)
        """
        text = self._clean(description)
        task = Task(description=text)
        self._tasks.append(task)
        logger.debug("task_added", index=len(self._tasks) - 1)
        self._save()
        return task

    def toggle_complete(self, index: int) -> Task:
        """Flip the completion flag of the task at index.

        Raises:
            SelectionError: If index is out of range
            PersistenceError: If the snapshot write fails (toggle is kept)
        """
        task = self._tasks[self._check_index(index)]
        task.toggle()
        logger.debug("task_toggled", index=index, completed=task.completed)
        self._save()
        return task

    def edit(self, index: int, new_description: str | None) -> Task | None:
        """Replace the description of the task at index.

        Args:
            index: Display position
            new_description: New text, or None if the edit was cancelled

        Returns:
            The edited task, or None if cancelled

        Raises:
            SelectionError: If index is out of range
            ValidationError: If the new text is empty after trimming
            PersistenceError: If the snapshot write fails (edit is kept)
        """
        task = self._tasks[self._check_index(index)]
        if new_description is None:
            logger.debug("task_edit_cancelled", index=index)
            return None
        task.description = self._clean(new_description)
        logger.debug("task_edited", index=index)
        self._save()
        return task

    def delete(self, index: int, confirm: ConfirmCallback) -> Task | None:
        """Remove the task at index once the caller confirms.

        Args:
            index: Display position
            confirm: Called with the target task; removal happens only if
                it returns True

        Returns:
            The removed task, or None if confirmation was declined

        Raises:
            SelectionError: If index is out of range
            PersistenceError: If the snapshot write fails (removal is kept)
        """
        position = self._check_index(index)
        if not confirm(self._tasks[position]):
            logger.debug("task_delete_declined", index=index)
            return None
        task = self._tasks.pop(position)
        logger.debug("task_deleted", index=index)
        self._save()
        return task

    # -------------------- helpers --------------------

    def _check_index(self, index: int | None) -> int:
        if index is None:
            raise SelectionError("No task selected.")
        if index < 0 or index >= len(self._tasks):
            logger.debug("task_selection_invalid", index=index, size=len(self._tasks))
            raise SelectionError(f"No task at position {index}.", index=index)
        return index

    @staticmethod
    def _clean(description: str) -> str:
        text = description.strip()
        if not text:
            raise ValidationError("Task description cannot be empty.")
        return text

    def _save(self) -> None:
        self._persistence.save(self._tasks)
