"""Public interface for storyshelf repositories."""

from .content_source import ContentSource, DirectoryContentSource, MemoryContentSource
from .story_repository import StoryRepository, sort_stories
from .types import StoryRepositoryConfig

__all__ = [
    "ContentSource",
    "DirectoryContentSource",
    "MemoryContentSource",
    "StoryRepository",
    "StoryRepositoryConfig",
    "sort_stories",
]
