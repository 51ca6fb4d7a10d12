"""Slash commands that mutate the task list.

Each command calls one TaskStore operation, which writes the snapshot
before returning, then redraws the list. Errors raised by the store are
reported by the app's command dispatcher.
"""

from typing import Any

from todolist.cli.commands import Command, CommandCategory, parse_task_number


class AddCommand(Command):
    """Append a task."""

    def __init__(self) -> None:
        super().__init__(
            name="add",
            description="Add a new task",
            aliases=["a"],
            usage="/add <description>",
            examples=["/add Buy milk"],
            category=CommandCategory.TASKS,
        )

    async def execute(self, args: str, app: Any) -> None:
        task = app.store.add(args)
        app.add_success(f"Added: {task.description}")
        app.show_tasks()


class ToggleCommand(Command):
    """Mark a task complete or incomplete."""

    def __init__(self) -> None:
        super().__init__(
            name="toggle",
            description="Mark a task complete/incomplete",
            aliases=["done", "t"],
            usage="/toggle <n>",
            examples=["/toggle 1", "/done 3"],
            category=CommandCategory.TASKS,
        )

    async def execute(self, args: str, app: Any) -> None:
        index = parse_task_number(args, "mark complete/incomplete")
        task = app.store.toggle_complete(index)
        state = "complete" if task.completed else "incomplete"
        app.add_success(f"Marked {state}: {task.description}")
        app.show_tasks()


class EditCommand(Command):
    """Change a task's description."""

    def __init__(self) -> None:
        super().__init__(
            name="edit",
            description="Edit a task description",
            aliases=["e"],
            usage="/edit <n>",
            examples=["/edit 2"],
            category=CommandCategory.TASKS,
        )

    async def execute(self, args: str, app: Any) -> None:
        index = parse_task_number(args, "edit")
        current = app.store.get(index)
        new_description = await app.ask_text("Edit task: ", default=current.description)
        if new_description is None:
            app.add_message("Edit cancelled.")
            return
        task = app.store.edit(index, new_description)
        app.add_success(f"Updated: {task.description}")
        app.show_tasks()


class DeleteCommand(Command):
    """Remove a task after confirmation."""

    def __init__(self) -> None:
        super().__init__(
            name="delete",
            description="Delete a task (asks for confirmation)",
            aliases=["rm", "del"],
            usage="/delete <n>",
            examples=["/delete 1"],
            category=CommandCategory.TASKS,
        )

    async def execute(self, args: str, app: Any) -> None:
        index = parse_task_number(args, "delete")
        target = app.store.get(index)
        answer = await app.confirm(
            f"Are you sure you want to delete '{target.description}'?"
        )
        removed = app.store.delete(index, confirm=lambda task: answer)
        if removed is None:
            app.add_message("Delete cancelled.")
            return
        app.add_success(f"Deleted: {removed.description}")
        app.show_tasks()


TASK_COMMANDS: tuple[type[Command], ...] = (
    AddCommand,
    ToggleCommand,
    EditCommand,
    DeleteCommand,
)

__all__ = [
    "AddCommand",
    "DeleteCommand",
    "EditCommand",
    "TASK_COMMANDS",
    "ToggleCommand",
]
