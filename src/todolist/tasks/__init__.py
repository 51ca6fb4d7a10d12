"""Task list model and store.

Example:
    >>> store = TaskStore(SnapshotPersistence("tasks.json"))
    >>> store.add("Write report")
    >>> store.toggle_complete(0)
    >>> [str(task) for task in store]
    ['[DONE] Write report']
"""

from todolist.tasks.models import Task
from todolist.tasks.store import ConfirmCallback, TaskStore

__all__ = ["ConfirmCallback", "Task", "TaskStore"]
