"""Terminal front end for todolist."""

from todolist.cli.app import SlashCommandCompleter, TodoApp, main, render_tasks
from todolist.cli.commands import Command, CommandCategory, CommandRegistry

__all__ = [
    "Command",
    "CommandCategory",
    "CommandRegistry",
    "SlashCommandCompleter",
    "TodoApp",
    "main",
    "render_tasks",
]
