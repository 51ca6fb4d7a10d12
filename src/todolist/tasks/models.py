"""Task record."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Task:
    """A single to-do entry.

    The description is expected to be non-empty; the store trims and
    rejects empty input before constructing or updating a Task.
    """

    description: str
    completed: bool = False

    def toggle(self) -> None:
        """Flip the completion flag in place."""
        self.completed = not self.completed

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Build a Task from its snapshot record.

        Raises:
            TypeError: If the record or one of its fields has the wrong type
            KeyError: If a field is missing
            ValueError: If the description is empty
        """
        if not isinstance(data, dict):
            raise TypeError(f"task record must be an object, got {type(data).__name__}")
        description = data["description"]
        if not isinstance(description, str):
            raise TypeError(
                f"description must be a string, got {type(description).__name__}"
            )
        if not description.strip():
            raise ValueError("description must not be empty")
        completed = data["completed"]
        if not isinstance(completed, bool):
            raise TypeError(
                f"completed must be a boolean, got {type(completed).__name__}"
            )
        return cls(description=description, completed=completed)

    def __str__(self) -> str:
        return ("[DONE] " if self.completed else "[TODO] ") + self.description
