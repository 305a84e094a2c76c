"""Storyshelf public API."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from storyshelf.repositories import StoryRepository
from storyshelf.story import Episodes, Story

try:
    __version__ = version("storyshelf")
except PackageNotFoundError:  # pragma: no cover - during source-only use
    __version__ = "unknown"

__all__ = ["Episodes", "Story", "StoryRepository", "__version__"]
