"""Configuration for todolist.

Settings Management:
    The module provides both global singleton and context-based settings:

    1. Global singleton (simple cases):
        set_settings(my_settings)
        settings = get_settings()

    2. Context-based (isolated contexts, tests):
        with SettingsContext(my_settings):
            settings = get_settings()  # Returns my_settings

Settings Loading Priority (highest to lowest):
    1. Environment variables (TODOLIST_* prefix)
    2. Project config (./.todolist/settings.json)
    3. User config (~/.todolist/settings.json)
    4. .env file
    5. Default values
"""

from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Generator, Tuple, Type

from pydantic_settings import (
    BaseSettings as PydanticBaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from todolist.logging import Loggers
from todolist.settings_mixins import AppSettingsMixin, CLISettingsMixin

__all__ = [
    "BaseSettings",
    "SettingsContext",
    "SettingsValidationError",
    "get_settings",
    "set_settings",
    "reload_settings",
    "validate_settings",
]

APP_NAME = "todolist"

logger = Loggers.config()


def _get_json_config_source(
    settings_cls: Type[PydanticBaseSettings],
    json_file: Path,
) -> PydanticBaseSettingsSource | None:
    """Create a JSON config source if the file exists.

    Args:
        settings_cls: The settings class
        json_file: Path to JSON config file

    Returns:
        JsonConfigSettingsSource if file exists, None otherwise
    """
    if not json_file.exists():
        return None
    return JsonConfigSettingsSource(settings_cls, json_file=json_file)


class BaseSettings(AppSettingsMixin, CLISettingsMixin, PydanticBaseSettings):
    """Settings for the todolist application.

    Settings are loaded from (in order of precedence):
    1. Constructor arguments
    2. Environment variables (TODOLIST_ prefix)
    3. Project config (./.todolist/settings.json)
    4. User config (~/.todolist/settings.json)
    5. .env file
    6. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="TODOLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[PydanticBaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Layer JSON config files between environment and .env.

        Note: JSON sources are only included if the files exist.
        """
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
        ]

        project_json = _get_json_config_source(
            settings_cls,
            Path.cwd() / f".{APP_NAME}" / "settings.json",
        )
        if project_json:
            sources.append(project_json)

        user_json = _get_json_config_source(
            settings_cls,
            Path.home() / f".{APP_NAME}" / "settings.json",
        )
        if user_json:
            sources.append(user_json)

        sources.append(dotenv_settings)

        return tuple(sources)


# Context variable for settings (takes precedence over global singleton)
_settings_context: ContextVar[BaseSettings | None] = ContextVar(
    "settings_context", default=None
)

_settings_instance: BaseSettings | None = None


def get_settings() -> BaseSettings:
    """Get the current settings instance.

    Resolution order:
    1. Context variable (set via SettingsContext)
    2. Global singleton (set via set_settings)
    3. Fresh BaseSettings instance (created on first access)
    """
    context_settings = _settings_context.get()
    if context_settings is not None:
        return context_settings

    global _settings_instance
    if _settings_instance is None:
        _settings_instance = BaseSettings()
    return _settings_instance


def set_settings(settings: BaseSettings) -> None:
    """Set the global settings instance."""
    global _settings_instance
    _settings_instance = settings


@contextmanager
def SettingsContext(settings: BaseSettings) -> Generator[BaseSettings, None, None]:
    """Context manager for using specific settings within a block.

    Example:
        with SettingsContext(test_settings):
            store_path = get_settings().tasks_path

    Args:
        settings: Settings to use within the context

    Yields:
        The settings instance
    """
    token = _settings_context.set(settings)
    try:
        yield settings
    finally:
        _settings_context.reset(token)


def reload_settings() -> BaseSettings:
    """Reload settings (clears global singleton and context cache).

    Returns:
        Fresh BaseSettings instance
    """
    global _settings_instance
    _settings_instance = None
    _settings_context.set(None)
    return get_settings()


class SettingsValidationError(Exception):
    """Raised when settings validation fails."""

    pass


def validate_settings(settings: BaseSettings) -> None:
    """Validate settings for runtime use.

    Checks that the snapshot location can hold a file.

    Raises:
        SettingsValidationError: If validation fails
    """
    errors = []

    path = settings.tasks_path
    if path.is_dir():
        errors.append(f"Data file '{path}' is a directory.")
    elif settings.workspace_dir.exists() and not settings.workspace_dir.is_dir():
        errors.append(f"Workspace '{settings.workspace_dir}' is not a directory.")

    if errors:
        logger.warning("settings_invalid", errors=errors)
        raise SettingsValidationError("\n".join(errors))
