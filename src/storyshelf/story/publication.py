"""Publication state of stories and their episodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storyshelf.story.types import Story

EPISODE_MARKER_LIMIT = 5


class PublicationState(str, Enum):
    UNPUBLISHED = "unpublished"
    PUBLISHED = "published"
    COMPLETE = "complete"
    PARTIAL = "partial"


@dataclass(frozen=True, slots=True)
class PublicationStatus:
    state: PublicationState
    published_count: int
    total_count: int
    episode_numbers: tuple[int, ...] = ()

    @property
    def is_published(self) -> bool:
        return self.state is not PublicationState.UNPUBLISHED

    @property
    def label(self) -> str:
        if self.state is PublicationState.COMPLETE:
            return "Fully published"
        if self.state is PublicationState.PARTIAL:
            numbers = ", ".join(str(number) for number in self.episode_numbers)
            return f"Part {numbers} published"
        if self.state is PublicationState.PUBLISHED:
            return "Published"
        return "Not published"


@dataclass(frozen=True, slots=True)
class EpisodeMarkers:
    published: tuple[bool, ...]
    truncated: bool


def is_episode_published(story: Story, number: int) -> bool:
    """Whether episode ``number`` (1-based) is published.

    An explicit episode list takes precedence over the whole-story flag.
    """

    if story.published_episodes:
        return number in story.published_episodes
    return story.published


def publication_status(story: Story) -> PublicationStatus:
    total = story.episodes.count
    if story.published_episodes:
        numbers = tuple(sorted(story.published_episodes))
        state = (
            PublicationState.COMPLETE
            if len(numbers) == total
            else PublicationState.PARTIAL
        )
        return PublicationStatus(
            state=state,
            published_count=len(numbers),
            total_count=total,
            episode_numbers=numbers,
        )
    if story.published:
        return PublicationStatus(
            state=PublicationState.PUBLISHED,
            published_count=total,
            total_count=total,
            episode_numbers=tuple(range(1, total + 1)),
        )
    return PublicationStatus(
        state=PublicationState.UNPUBLISHED, published_count=0, total_count=total
    )


def episode_markers(story: Story, limit: int = EPISODE_MARKER_LIMIT) -> EpisodeMarkers:
    shown = min(story.episodes.count, limit)
    return EpisodeMarkers(
        published=tuple(
            is_episode_published(story, number) for number in range(1, shown + 1)
        ),
        truncated=story.episodes.count > limit,
    )
