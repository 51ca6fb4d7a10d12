"""Slash command registry and base command class.

Example of creating a custom command:

    from todolist.cli.commands import Command, CommandCategory

    class ClearDoneCommand(Command):
        '''Remove completed tasks.'''

        def __init__(self):
            super().__init__(
                name="cleardone",
                description="Remove completed tasks",
                usage="/cleardone",
                category=CommandCategory.TASKS,
            )

        async def execute(self, args: str, app: Any) -> None:
            ...
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any

from todolist.errors import SelectionError

if TYPE_CHECKING:
    from todolist.cli.app import TodoApp


class CommandCategory(Enum):
    """Categories for organizing commands."""

    GENERAL = "general"
    TASKS = "tasks"


class Command(ABC):
    """Base class for slash commands.

    Subclass this to create custom commands. Override execute() to
    implement command behavior.
    """

    def __init__(
        self,
        name: str,
        description: str,
        aliases: list[str] | None = None,
        usage: str | None = None,
        examples: list[str] | None = None,
        category: CommandCategory = CommandCategory.GENERAL,
    ) -> None:
        """Initialize the command.

        Args:
            name: Command name (used as /name)
            description: Short description of what the command does
            aliases: Alternative names for the command
            usage: Usage string showing syntax (e.g., "/cmd <arg>")
            examples: List of example usages
            category: Category for organizing in help
        """
        self.name = name
        self.description = description
        self.aliases = aliases or []
        self.usage = usage or f"/{name}"
        self.examples = examples or []
        self.category = category

    @abstractmethod
    async def execute(self, args: str, app: "TodoApp | Any") -> None:
        """Execute the command with given arguments.

        Args:
            args: Command arguments string (everything after the command name)
            app: The CLI application instance
        """
        pass

    def get_help(self) -> str:
        """Get detailed help text for this command."""
        lines = [
            f"/{self.name}",
            f"  {self.description}",
            "",
            f"Usage: {self.usage}",
        ]

        if self.aliases:
            lines.append(f"Aliases: {', '.join(f'/{a}' for a in self.aliases)}")

        if self.examples:
            lines.append("")
            lines.append("Examples:")
            for example in self.examples:
                lines.append(f"  {example}")

        return "\n".join(lines)


def parse_task_number(args: str, action: str) -> int:
    """Convert a 1-based task number typed by the user into a list index.

    Args:
        args: Raw command arguments
        action: What the selection is for, used in the error message

    Returns:
        0-based index into the task list

    Raises:
        SelectionError: If no number was given or it is not an integer
    """
    token = args.strip().split(maxsplit=1)[0] if args.strip() else ""
    if not token:
        raise SelectionError(f"Please select a task to {action}.")
    try:
        number = int(token)
    except ValueError:
        raise SelectionError(f"'{token}' is not a task number.") from None
    return number - 1


class CommandRegistry:
    """Registry for managing slash commands."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._categories: dict[CommandCategory, list[Command]] = {
            cat: [] for cat in CommandCategory
        }

    def register(self, command: Command) -> None:
        """Register a command and its aliases."""
        self._commands[command.name] = command
        for alias in command.aliases:
            self._commands[alias] = command

        if command not in self._categories[command.category]:
            self._categories[command.category].append(command)

    def get(self, name: str) -> Command | None:
        """Get a command by name or alias."""
        return self._commands.get(name)

    def all_commands(self) -> list[Command]:
        """Get all unique commands (excluding aliases)."""
        seen: set[str] = set()
        commands: list[Command] = []
        for cmd in self._commands.values():
            if cmd.name not in seen:
                seen.add(cmd.name)
                commands.append(cmd)
        return commands

    def by_category(self, category: CommandCategory) -> list[Command]:
        """Get commands in a specific category."""
        return self._categories.get(category, [])

    def get_completions(self) -> list[str]:
        """Get all command names and aliases for auto-completion."""
        return list(self._commands.keys())
