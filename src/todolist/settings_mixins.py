"""Settings mixins for application identity, storage layout, and CLI output.

AppSettingsMixin: Application identity and disk layout (app_name, workspace, data file).
CLISettingsMixin: Logging settings for the terminal front end.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator


class AppSettingsMixin:
    """Settings for application identity and disk layout.

    Mixin class that provides:
    - Application name and workspace directory
    - Path expansion for workspace_dir and data_file
    - The resolved snapshot location (tasks_path)

    Should be composed with BaseSettings via multiple inheritance.
    """

    app_name: str = Field(
        default="todolist",
        title="App Name",
        description="Application name, also used for config directories",
    )

    workspace_dir: Path = Field(
        default_factory=lambda: Path.home() / ".todolist",
        title="Workspace Directory",
        description="Directory holding the task snapshot",
    )

    data_file: Path | None = Field(
        default=None,
        title="Data File",
        description="Task snapshot file; relative paths resolve against workspace_dir",
    )

    @field_validator("workspace_dir", "data_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path | None) -> Path | None:
        """Expand ~ in paths."""
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v

    @property
    def tasks_path(self) -> Path:
        """Fixed location of the task snapshot."""
        if self.data_file is None:
            return self.workspace_dir / "tasks.json"
        if self.data_file.is_absolute():
            return self.data_file
        return self.workspace_dir / self.data_file


class CLISettingsMixin:
    """Settings for CLI output.

    Note: This is a mixin, not a BaseSettings subclass, to avoid
    MRO issues when composed with other settings classes.
    """

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for dev, json for production)",
    )
