"""Story filename helpers."""

from __future__ import annotations

import re

STORY_SUFFIX = ".md"
_FILENAME_REGEX = re.compile(r"[A-Za-z0-9_-]+\.md")


def is_story_filename(value: str) -> bool:
    """Return True for bare story names such as ``my-story.md``.

    Anything carrying a path separator, whitespace or another extension is
    rejected, so callers can use the result before touching storage.
    """

    return _FILENAME_REGEX.fullmatch(value) is not None


def title_from_filename(filename: str) -> str:
    stem = filename.removesuffix(STORY_SUFFIX).replace("-", " ")
    return " ".join(word[:1].upper() + word[1:] for word in stem.split(" "))
