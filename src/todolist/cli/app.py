"""Terminal front end for the task list.

This module provides the interactive application that:
1. Restores the task list from its snapshot at startup
2. Routes slash commands to the task store (plain text adds a task)
3. Redraws the list with rich after every change
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Iterable
from typing import Any

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from todolist.cli.builtin_commands import ExitCommand, HelpCommand, ListCommand
from todolist.cli.commands import Command, CommandRegistry
from todolist.cli.task_commands import TASK_COMMANDS
from todolist.config import (
    BaseSettings,
    SettingsValidationError,
    get_settings,
    validate_settings,
)
from todolist.errors import PersistenceError, SelectionError, TodoError, ValidationError
from todolist.logging import Loggers, bind_context, configure_logging
from todolist.persistence.snapshot import SnapshotPersistence
from todolist.tasks.models import Task
from todolist.tasks.store import TaskStore

logger = Loggers.cli()

PROMPT = ">>> "
STATUS_TEXT = "Ctrl+C: cancel | Ctrl+D: exit | /help: commands"

MESSAGE_STYLES = {
    "system": "dim italic",
    "error": "bold red",
    "warning": "yellow",
    "success": "green",
}


# === Slash Command Completer ===


class SlashCommandCompleter(Completer):
    """Completer that only triggers for slash commands."""

    def __init__(self, commands: list[str]) -> None:
        """Initialize with a list of command names (without leading slash).

        Args:
            commands: List of command names, e.g., ["help", "add", "quit"]
        """
        self.commands = sorted(commands)

    def get_completions(self, document: Document, complete_event):
        """Yield completions only when text starts with /."""
        text = document.text_before_cursor

        if not text.startswith("/") or " " in text:
            return

        partial = text[1:].lower()

        for cmd in self.commands:
            if cmd.lower().startswith(partial):
                yield Completion(
                    text=f"/{cmd}",
                    start_position=-len(text),
                    display=f"/{cmd}",
                )


# === Rendering ===


def render_tasks(tasks: Iterable[Task]) -> Panel:
    """Build the task list panel.

    Completed tasks get a check mark and struck-through, dimmed text;
    open tasks get an empty circle. Numbers are 1-based.
    """
    body = Text()
    for number, task in enumerate(tasks, start=1):
        if number > 1:
            body.append("\n")
        body.append(f"{number:>3}. ", style="bold cyan")
        if task.completed:
            body.append("✓ ", style="green")
            body.append(task.description, style="strike dim")
        else:
            body.append("○ ")
            body.append(task.description)

    if not body.plain:
        body = Text("No tasks yet. Type a description and press Enter.", style="dim")

    return Panel(body, title="[bold]To-Do List[/bold]", border_style="cyan")


# === Application ===


class TodoApp:
    """Interactive to-do list application.

    Owns the task store for the session. Commands mutate the store; every
    mutation has already been written to the snapshot when the command
    returns, so exiting needs no final save.
    """

    def __init__(
        self,
        settings: BaseSettings | None = None,
        session: PromptSession | Any | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize the application.

        Args:
            settings: Optional settings override
            session: Optional prompt session (tests pass a stub)
            console: Optional rich console for output
        """
        self._settings = settings or get_settings()
        configure_logging(self._settings)
        bind_context(data_file=str(self._settings.tasks_path))

        logger.info("app_starting", app_name=self._settings.app_name)

        self.console = console or Console()

        # === Task Store (restored from snapshot) ===
        self.persistence = SnapshotPersistence.from_settings(self._settings)
        self.store, self.load_error = TaskStore.open(self.persistence)

        # === Command Registry ===
        self.command_registry = CommandRegistry()
        self._register_commands()

        # === UI ===
        self.session = session or PromptSession(
            message=PROMPT,
            history=InMemoryHistory(),
            completer=SlashCommandCompleter(self.command_registry.get_completions()),
            complete_while_typing=True,
            bottom_toolbar=STATUS_TEXT,
        )

        self.should_exit = False

    @property
    def settings(self) -> BaseSettings:
        """Get the application settings."""
        return self._settings

    def stop(self) -> None:
        """Stop the application after the current command."""
        self.should_exit = True

    def _register_commands(self) -> None:
        self.command_registry.register(HelpCommand())
        self.command_registry.register(ListCommand())
        self.command_registry.register(ExitCommand())
        for command_cls in TASK_COMMANDS:
            self.command_registry.register(command_cls())

    # -------------------- output --------------------

    def add_message(self, text: str, kind: str = "system") -> None:
        self.console.print(Text(text, style=MESSAGE_STYLES.get(kind, "")))

    def add_error(self, text: str) -> None:
        self.add_message(text, "error")

    def add_warning(self, text: str) -> None:
        self.add_message(text, "warning")

    def add_success(self, text: str) -> None:
        self.add_message(text, "success")

    def show_tasks(self) -> None:
        """Redraw the current task list."""
        self.console.print(render_tasks(self.store.tasks))

    def report_error(self, error: TodoError) -> None:
        """Show a store or persistence error without stopping the loop."""
        if isinstance(error, ValidationError):
            self.add_warning(error.message)
        elif isinstance(error, SelectionError):
            if error.index is not None:
                # Store indices are 0-based, the list shows 1-based numbers
                self.add_message(f"There is no task {error.index + 1}.")
            else:
                self.add_message(error.message)
        elif isinstance(error, PersistenceError):
            self.add_error(str(error))
        else:
            self.add_error(error.message)

    # -------------------- input --------------------

    async def ask_text(self, message: str, default: str = "") -> str | None:
        """Prompt for a line of text.

        Returns:
            The entered text, or None if the user cancelled (Ctrl+C / Ctrl+D)
        """
        try:
            return await self.session.prompt_async(message, default=default)
        except (KeyboardInterrupt, EOFError):
            return None

    async def confirm(self, question: str) -> bool:
        """Ask a yes/no question; anything but yes is a no."""
        answer = await self.ask_text(f"{question} [y/N] ")
        return answer is not None and answer.strip().lower() in ("y", "yes")

    async def process_input(self, user_input: str) -> None:
        """Process one line of user input.

        Args:
            user_input: The raw user input string
        """
        user_input = user_input.strip()

        if not user_input:
            return

        if user_input.startswith("/"):
            await self._handle_command(user_input)
        else:
            await self._run_command(self.command_registry.get("add"), user_input)

    async def _handle_command(self, user_input: str) -> None:
        """Handle slash command execution.

        Args:
            user_input: The command string starting with /
        """
        parts = user_input[1:].split(maxsplit=1)
        command_name = parts[0] if parts else ""
        args = parts[1] if len(parts) > 1 else ""

        command = self.command_registry.get(command_name)
        if command is None:
            self.add_error(f"Unknown command: /{command_name}")
            self.add_message("Type /help to see available commands")
            return

        await self._run_command(command, args)

    async def _run_command(self, command: Command, args: str) -> None:
        logger.debug("executing_command", command=command.name, args=args)
        try:
            await command.execute(args, self)
            logger.debug("command_completed", command=command.name)
        except TodoError as e:
            logger.debug("command_failed", command=command.name, error=str(e))
            self.report_error(e)
            if isinstance(e, PersistenceError):
                # The change is kept in memory even though it was not saved
                self.show_tasks()

    # -------------------- main loop --------------------

    async def run(self) -> None:
        """Run the main application loop."""
        logger.info("repl_starting", tasks=len(self.store))

        if self.load_error is not None:
            self.report_error(self.load_error)
            self.add_warning("Starting with an empty list.")
        self.show_tasks()

        while not self.should_exit:
            try:
                text = await self.session.prompt_async(PROMPT)
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            await self.process_input(text)

        logger.info("app_ending")
        self.add_message("Goodbye!")


def main() -> None:
    """Console entry point."""
    settings = get_settings()
    try:
        validate_settings(settings)
    except SettingsValidationError as e:
        Console(stderr=True).print(Text(str(e), style=MESSAGE_STYLES["error"]))
        sys.exit(1)

    app = TodoApp(settings)
    asyncio.run(app.run())
