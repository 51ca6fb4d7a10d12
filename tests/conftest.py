"""Shared test fixtures and utilities for todolist tests.

Provides:
- MockContext for isolating tests from global settings state
- Temporary workspace fixtures
- Persistence and store fixtures backed by a temporary snapshot file
"""

import os
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest

from todolist.config import BaseSettings, reload_settings, set_settings
from todolist.persistence import SnapshotPersistence
from todolist.tasks import TaskStore


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Resetting global settings singleton
    - Providing a temporary workspace directory
    - Clearing TODOLIST_* environment variables

    Usage:
        with MockContext() as ctx:
            settings = ctx.settings
            workspace = ctx.workspace_dir
    """

    def __init__(self, **settings_kwargs):
        """Initialize mock context.

        Args:
            **settings_kwargs: Settings overrides
        """
        self._settings_kwargs = settings_kwargs
        self._temp_dir: tempfile.TemporaryDirectory | None = None
        self._settings: BaseSettings | None = None
        self._original_env: dict[str, str] = {}

    def __enter__(self) -> "MockContext":
        """Enter the mock context."""
        self._temp_dir = tempfile.TemporaryDirectory()
        workspace_dir = Path(self._temp_dir.name)

        for var in [name for name in os.environ if name.startswith("TODOLIST_")]:
            self._original_env[var] = os.environ.pop(var)

        self._settings = BaseSettings(
            workspace_dir=workspace_dir,
            **self._settings_kwargs,
        )
        set_settings(self._settings)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the mock context and clean up."""
        os.environ.update(self._original_env)

        reload_settings()

        if self._temp_dir:
            self._temp_dir.cleanup()

    @property
    def settings(self) -> BaseSettings:
        """Get the test settings instance."""
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings

    @property
    def workspace_dir(self) -> Path:
        """Get the temporary workspace directory."""
        if self._temp_dir is None:
            raise RuntimeError("MockContext not entered")
        return Path(self._temp_dir.name)


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated test context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def temp_workspace(tmp_path: Path) -> Path:
    """Fixture providing a temporary workspace directory."""
    workspace = tmp_path / "workspace"
    workspace.mkdir(parents=True)
    return workspace


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Fixture running the test without any environment variables."""
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    """Fixture providing a snapshot file location that does not exist yet."""
    return tmp_path / "data" / "tasks.json"


@pytest.fixture
def persistence(snapshot_path: Path) -> SnapshotPersistence:
    """Fixture providing persistence backed by a temporary file."""
    return SnapshotPersistence(snapshot_path)


@pytest.fixture
def store(persistence: SnapshotPersistence) -> TaskStore:
    """Fixture providing an empty store."""
    return TaskStore(persistence)
