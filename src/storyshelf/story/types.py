"""Story data classes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Frontmatter:
    """Metadata block and remaining body of a story file."""

    title: str
    body: str
    date: str | None = None
    published: bool = False
    published_episodes: frozenset[int] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class HeadingToken:
    """A level-1 heading and the offset of the line it starts."""

    text: str
    offset: int


@dataclass(frozen=True, slots=True)
class Episodes:
    count: int
    titles: tuple[str, ...] = ()
    content: tuple[str, ...] = ()

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.count < 1:
            raise ValueError("Episode count must be at least 1.")
        if len(self.content) != self.count:
            raise ValueError(
                f"Episode content length {len(self.content)} does not match count {self.count}."
            )

    @property
    def has_intro(self) -> bool:
        """True when the first episode is text that precedes every heading."""

        return bool(self.titles) and self.count > len(self.titles)

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "titles": list(self.titles),
            "content": list(self.content),
        }


@dataclass(frozen=True, slots=True)
class Story:
    """A parsed story file, recomputed on every repository query."""

    filename: str
    title: str
    body: str
    excerpt: str
    episodes: Episodes
    date: str | None = None
    published: bool = False
    published_episodes: frozenset[int] = field(default_factory=frozenset)

    def to_dict(self) -> dict[str, Any]:
        """Record shape consumed by the presentation layer."""

        return {
            "filename": self.filename,
            "title": self.title,
            "body": self.body,
            "excerpt": self.excerpt,
            "date": self.date,
            "published": self.published,
            "published_episodes": sorted(self.published_episodes),
            "episodes": self.episodes.to_dict(),
        }
