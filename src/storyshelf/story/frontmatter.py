"""Frontmatter extraction for story files."""

from __future__ import annotations

import logging
import re

from storyshelf.story.types import Frontmatter
from storyshelf.utils.filenames import title_from_filename

DELIMITER = "---"

_logger = logging.getLogger("storyshelf.story")
_LEADING_INT = re.compile(r"[+-]?\d+")


def _field_pattern(key: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(key)}:[ \t]*(?P<value>\S.*)$", re.MULTILINE)


_TITLE = _field_pattern("title")
_DATE = _field_pattern("date")
_PUBLISHED = _field_pattern("published")
_PUBLISHED_EPISODES = _field_pattern("published_episodes")


def split_frontmatter(text: str) -> tuple[str, str] | None:
    """Return ``(frontmatter, rest)`` around the first two delimiters.

    Only the first two occurrences count; any later ``---`` stays in ``rest``.
    """

    first = text.find(DELIMITER)
    if first < 0:
        return None
    second = text.find(DELIMITER, first + len(DELIMITER))
    if second < 0:
        return None
    return text[first + len(DELIMITER) : second], text[second + len(DELIMITER) :]


def _field(pattern: re.Pattern[str], frontmatter: str) -> str | None:
    match = pattern.search(frontmatter)
    if not match:
        return None
    return match.group("value").strip()


def _coerce_int(value: str) -> int:
    match = _LEADING_INT.match(value)
    if not match:
        _logger.debug("Non-numeric published episode %r read as 0", value)
        return 0
    return int(match.group())


def parse_episode_list(value: str) -> frozenset[int]:
    """Parse ``[1, 3, 4]`` into episode numbers; anything else is empty."""

    stripped = value.strip()
    if not stripped.startswith("[") or "]" not in stripped:
        return frozenset()
    raw = stripped[1 : stripped.index("]")]
    # `[ ]` still holds one blank part, read as 0 like any non-numeric part.
    if not raw:
        return frozenset()
    return frozenset(_coerce_int(part.strip()) for part in raw.split(","))


def parse_frontmatter(text: str, filename: str) -> Frontmatter:
    default_title = title_from_filename(filename)
    parts = split_frontmatter(text)
    if parts is None:
        return Frontmatter(title=default_title, body=text)

    frontmatter, rest = parts
    title = _field(_TITLE, frontmatter) or default_title
    date = _field(_DATE, frontmatter)
    published_value = _field(_PUBLISHED, frontmatter)
    published = published_value is not None and published_value.lower() == "yes"
    episodes_value = _field(_PUBLISHED_EPISODES, frontmatter)
    published_episodes = (
        parse_episode_list(episodes_value) if episodes_value else frozenset()
    )
    return Frontmatter(
        title=title,
        body=rest.strip(),
        date=date,
        published=published,
        published_episodes=published_episodes,
    )
