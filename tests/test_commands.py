"""Tests for command registry and base command class."""

from unittest.mock import MagicMock

import pytest

from todolist.cli.commands import (
    Command,
    CommandCategory,
    CommandRegistry,
    parse_task_number,
)
from todolist.errors import SelectionError


class MockCommand(Command):
    """Mock command for testing."""

    def __init__(
        self,
        name: str = "test",
        description: str = "Test command",
        aliases: list[str] | None = None,
        category: CommandCategory = CommandCategory.GENERAL,
    ):
        super().__init__(name, description, aliases, category=category)
        self.executed = False
        self.last_args = None
        self.last_app = None

    async def execute(self, args: str, app) -> None:
        """Record execution details."""
        self.executed = True
        self.last_args = args
        self.last_app = app


class TestCommand:
    """Tests for Command base class."""

    def test_command_initialization(self):
        cmd = MockCommand("toggle", "Toggle a task", aliases=["done", "t"])

        assert cmd.name == "toggle"
        assert cmd.description == "Toggle a task"
        assert cmd.aliases == ["done", "t"]
        assert cmd.usage == "/toggle"

    def test_command_no_aliases(self):
        cmd = MockCommand("exit", "Exit the application")

        assert cmd.aliases == []

    @pytest.mark.asyncio
    async def test_command_execute(self):
        cmd = MockCommand()
        app = MagicMock()

        await cmd.execute("arg1 arg2", app)

        assert cmd.executed
        assert cmd.last_args == "arg1 arg2"
        assert cmd.last_app == app

    def test_get_help(self):
        cmd = MockCommand("edit", "Edit a task", aliases=["e"])
        cmd.examples = ["/edit 2"]

        help_text = cmd.get_help()

        assert "/edit" in help_text
        assert "Edit a task" in help_text
        assert "Aliases: /e" in help_text
        assert "/edit 2" in help_text


class TestParseTaskNumber:
    """Tests for converting user task numbers to list indices."""

    def test_one_based(self):
        assert parse_task_number("1", "edit") == 0
        assert parse_task_number("  12 ", "edit") == 11

    def test_extra_words_ignored(self):
        assert parse_task_number("3 please", "delete") == 2

    def test_missing_number(self):
        with pytest.raises(SelectionError, match="Please select a task to delete"):
            parse_task_number("", "delete")

    def test_not_a_number(self):
        with pytest.raises(SelectionError, match="not a task number"):
            parse_task_number("first", "edit")

    def test_zero_maps_out_of_range(self):
        # 0 becomes -1, which the store rejects
        assert parse_task_number("0", "edit") == -1


class TestCommandRegistry:
    """Tests for CommandRegistry class."""

    def test_empty_registry(self):
        registry = CommandRegistry()

        assert registry.all_commands() == []
        assert registry.get("nonexistent") is None
        assert registry.get_completions() == []

    def test_register_command(self):
        registry = CommandRegistry()
        cmd = MockCommand("list", "Show tasks")

        registry.register(cmd)

        assert registry.get("list") is cmd
        assert registry.all_commands() == [cmd]

    def test_aliases_resolve_to_command(self):
        registry = CommandRegistry()
        cmd = MockCommand("delete", "Delete", aliases=["rm", "del"])

        registry.register(cmd)

        assert registry.get("rm") is cmd
        assert registry.get("del") is cmd
        assert registry.all_commands() == [cmd]
        assert sorted(registry.get_completions()) == ["del", "delete", "rm"]

    def test_by_category(self):
        registry = CommandRegistry()
        general = MockCommand("help", "Help")
        task = MockCommand("add", "Add", category=CommandCategory.TASKS)

        registry.register(general)
        registry.register(task)
        registry.register(task)

        assert registry.by_category(CommandCategory.GENERAL) == [general]
        assert registry.by_category(CommandCategory.TASKS) == [task]
