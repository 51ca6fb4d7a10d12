"""Built-in slash commands for the CLI."""

from typing import Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from todolist.cli.commands import Command, CommandCategory


class HelpCommand(Command):
    """Display help information about available commands."""

    def __init__(self) -> None:
        super().__init__(
            name="help",
            description="Show available commands and usage information",
            usage="/help [command]",
            examples=["/help", "/help edit"],
            category=CommandCategory.GENERAL,
        )

    async def execute(self, args: str, app: Any) -> None:
        """Display help information."""
        name = args.strip().lstrip("/")
        if name:
            command = app.command_registry.get(name)
            if command is None:
                app.add_error(f"Unknown command: /{name}")
                return
            app.add_message(command.get_help())
            return

        table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
        table.add_column("Command", style="bold cyan", no_wrap=True)
        table.add_column("Aliases", style="dim", no_wrap=True)
        table.add_column("Description")

        for category in CommandCategory:
            commands = app.command_registry.by_category(category)
            if not commands:
                continue
            table.add_row(Text(category.value.title(), style="bold"), "", "")
            for cmd in sorted(commands, key=lambda c: c.name):
                aliases = ", ".join(f"/{a}" for a in cmd.aliases) if cmd.aliases else ""
                table.add_row(Text(cmd.usage), Text(aliases), Text(cmd.description))

        panel = Panel(table, title="[bold]Available Commands[/bold]", border_style="cyan")
        app.console.print(panel)
        app.add_message("Text without a leading / is added as a new task.")


class ListCommand(Command):
    """Show the task list."""

    def __init__(self) -> None:
        super().__init__(
            name="list",
            description="Show all tasks",
            aliases=["ls"],
            category=CommandCategory.TASKS,
        )

    async def execute(self, args: str, app: Any) -> None:
        app.show_tasks()


class ExitCommand(Command):
    """Exit the application."""

    def __init__(self) -> None:
        super().__init__(
            name="exit",
            description="Exit the application",
            aliases=["quit"],
            category=CommandCategory.GENERAL,
        )

    async def execute(self, args: str, app: Any) -> None:
        """Exit the application."""
        app.stop()
