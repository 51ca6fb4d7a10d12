"""Whole-list snapshot persistence.

The task list is stored as one JSON document at a fixed path:

    {
      "tasks": [
        {"description": "Buy milk", "completed": false},
        ...
      ]
    }

Every save rewrites the whole file; there are no incremental updates.
"""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from todolist.errors import PersistenceError
from todolist.logging import Loggers
from todolist.persistence._utils import atomic_write_json
from todolist.tasks.models import Task

if TYPE_CHECKING:
    from todolist.config import BaseSettings

logger = Loggers.persistence()

TASKS_KEY = "tasks"


class SnapshotPersistence:
    """Saves and restores the full task list at a fixed path.

    A missing file is the first-run state and loads as an empty list.
    Anything else that prevents reading back the exact list (I/O errors,
    invalid JSON, unexpected structure) raises PersistenceError.
    """

    def __init__(self, path: str | Path):
        """Initialize snapshot persistence.

        Args:
            path: Snapshot file location
        """
        self.path = Path(path)

    @classmethod
    def from_settings(cls, settings: "BaseSettings") -> "SnapshotPersistence":
        """Create persistence for the data file configured in settings."""
        return cls(settings.tasks_path)

    def exists(self) -> bool:
        """Check if a snapshot file is present."""
        return self.path.exists()

    def save(self, tasks: Iterable[Task]) -> Path:
        """Write the full ordered task list, replacing previous contents.

        Args:
            tasks: Tasks in display order

        Returns:
            Path to the written snapshot

        Raises:
            PersistenceError: If the file cannot be written
        """
        records = [task.to_dict() for task in tasks]
        try:
            atomic_write_json(self.path, {TASKS_KEY: records})
        except (OSError, TypeError, ValueError) as e:
            logger.error("snapshot_save_failed", path=str(self.path), error=str(e))
            raise PersistenceError(
                "Error saving tasks", path=self.path, cause=e
            ) from e

        logger.debug("snapshot_saved", path=str(self.path), count=len(records))
        return self.path

    def load(self) -> list[Task]:
        """Read the task list back in the order it was saved.

        Returns:
            List of tasks, empty if no snapshot exists yet

        Raises:
            PersistenceError: If the file cannot be read or does not hold
                a task list
        """
        if not self.path.exists():
            logger.info("snapshot_missing", path=str(self.path))
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            logger.error("snapshot_load_failed", path=str(self.path), error=str(e))
            raise PersistenceError(
                "Error loading tasks", path=self.path, cause=e
            ) from e

        try:
            tasks = self._decode(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error("snapshot_invalid", path=str(self.path), error=str(e))
            raise PersistenceError(
                "Error loading tasks: unexpected snapshot content",
                path=self.path,
                cause=e,
            ) from e

        logger.debug("snapshot_loaded", path=str(self.path), count=len(tasks))
        return tasks

    @staticmethod
    def _decode(data: Any) -> list[Task]:
        if not isinstance(data, dict):
            raise TypeError(f"snapshot must be an object, got {type(data).__name__}")
        records = data[TASKS_KEY]
        if not isinstance(records, list):
            raise TypeError(f"'{TASKS_KEY}' must be a list, got {type(records).__name__}")
        return [Task.from_dict(record) for record in records]
