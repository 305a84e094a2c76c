"""Story queries over a content source."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from storyshelf.errors import ContentNotFoundError, ContentSourceError
from storyshelf.story import Story, assemble_story
from storyshelf.utils.dates import parse_story_date
from storyshelf.utils.filenames import is_story_filename

from .content_source import ContentSource, DirectoryContentSource

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _sort_key(story: Story) -> tuple[int, float, str]:
    if story.date is None:
        return (1, 0.0, story.title)
    parsed = parse_story_date(story.date)
    # Unparsable dates rank as the epoch: oldest of the dated stories.
    timestamp = parsed.timestamp() if parsed is not None else 0.0
    return (0, -timestamp, "")


def sort_stories(stories: Iterable[Story]) -> list[Story]:
    """Newest dated stories first, then undated stories by title."""

    return sorted(stories, key=_sort_key)


class StoryRepository:
    """Lists and resolves stories, hiding those dated in the future."""

    def __init__(
        self,
        source: ContentSource,
        *,
        encoding: str = "utf-8",
        clock: Clock = utc_now,
        logger: logging.Logger | None = None,
    ) -> None:
        self._source = source
        self._encoding = encoding
        self._clock = clock
        self._logger = logger or logging.getLogger("storyshelf.repository")

    @classmethod
    def from_settings(
        cls, settings: Mapping[str, Any], logger: logging.Logger | None = None
    ) -> StoryRepository:
        source = DirectoryContentSource.from_settings(settings)
        return cls(source, encoding=source.config.encoding, logger=logger)

    def list_stories(self) -> list[Story]:
        now = self._clock()
        stories: list[Story] = []
        for name in self._source.list_names():
            if not is_story_filename(name):
                self._logger.debug("Ignoring entry with unsupported name: %s", name)
                continue
            story = self._load(name)
            if story is None or not self._is_visible(story, now):
                continue
            stories.append(story)
        return sort_stories(stories)

    def get_story(self, filename: str) -> Story | None:
        if not is_story_filename(filename):
            self._logger.debug("Rejected story lookup: %r", filename)
            return None
        story = self._load(filename)
        if story is None or not self._is_visible(story, self._clock()):
            return None
        return story

    def _load(self, name: str) -> Story | None:
        try:
            raw = self._source.read(name)
        except ContentNotFoundError:
            self._logger.debug("Story not found: %s", name)
            return None
        except ContentSourceError as exc:
            self._logger.warning("Skipping unreadable story %s: %s", name, exc)
            return None
        return assemble_story(raw, name, encoding=self._encoding)

    def _is_visible(self, story: Story, now: datetime) -> bool:
        if story.date is None:
            return True
        parsed = parse_story_date(story.date)
        if parsed is None:
            self._logger.warning(
                "Unrecognised date %r in %s; treating story as published",
                story.date,
                story.filename,
            )
            return True
        if parsed > now:
            self._logger.debug("Hiding %s until %s", story.filename, story.date)
            return False
        return True
