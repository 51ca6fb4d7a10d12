"""Snapshot persistence for the task list."""

from todolist.persistence.snapshot import SnapshotPersistence

__all__ = ["SnapshotPersistence"]
