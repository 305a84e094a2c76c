# src/storyshelf/errors.py
from __future__ import annotations


class StoryshelfError(Exception):
    """Base exception for all storyshelf errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigError(StoryshelfError):
    """Raised when config is missing or invalid."""


class MissingSettingError(ConfigError):
    """Raised when a required configuration value is absent."""

    def __init__(self, setting_name: str, message: str | None = None) -> None:
        detail = message or f"Missing required setting: {setting_name}"
        super().__init__(
            detail,
            hint=f"Set `{setting_name}` in the config file or pass it on the command line.",
        )
        self.setting_name = setting_name


class RepositoryError(StoryshelfError):
    """Base error for repository related failures."""


class ContentSourceError(RepositoryError):
    """Raised when a content entry cannot be read."""


class ContentNotFoundError(ContentSourceError):
    """Raised when a content entry does not exist."""
