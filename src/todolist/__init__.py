"""todolist - a single-user to-do list with write-through file persistence.

The package is organised around two pieces:

- TaskStore: an ordered list of tasks with add/edit/toggle/delete
  operations, addressed by display position
- SnapshotPersistence: writes the whole list to one JSON file after every
  change and restores it at startup

The terminal front end in todolist.cli drives both.
"""

from todolist.config import (
    BaseSettings,
    SettingsContext,
    SettingsValidationError,
    get_settings,
    reload_settings,
    set_settings,
    validate_settings,
)
from todolist.errors import PersistenceError, SelectionError, TodoError, ValidationError
from todolist.persistence import SnapshotPersistence
from todolist.tasks import Task, TaskStore

__version__ = "0.1.0"

__all__ = [
    # Tasks
    "Task",
    "TaskStore",
    "SnapshotPersistence",
    # Errors
    "TodoError",
    "ValidationError",
    "SelectionError",
    "PersistenceError",
    # Settings
    "BaseSettings",
    "SettingsContext",
    "SettingsValidationError",
    "get_settings",
    "set_settings",
    "reload_settings",
    "validate_settings",
]
