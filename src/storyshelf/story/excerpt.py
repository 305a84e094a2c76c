"""Plain-text teaser for story listings."""

from __future__ import annotations

import re

EXCERPT_LENGTH = 300
ELLIPSIS = "..."

_HEADING_MARKER = re.compile(r"^#+\s*", re.MULTILINE)
_BOLD = re.compile(r"\*\*(.*?)\*\*", re.DOTALL)
_ITALIC = re.compile(r"\*(.*?)\*", re.DOTALL)
_NEWLINES = re.compile(r"\n+")
_TAGS = re.compile(r"<!--.*?-->|</?[A-Za-z!][^>]*>", re.DOTALL)


def to_plain_text(content: str) -> str:
    # Bold must go before italic or ``**`` pairs are read as empty italics.
    text = _HEADING_MARKER.sub("", content)
    text = _BOLD.sub(r"\1", text)
    text = _ITALIC.sub(r"\1", text)
    text = _NEWLINES.sub(" ", text)
    text = _TAGS.sub("", text)
    return text.strip()


def generate_excerpt(content: str, length: int = EXCERPT_LENGTH) -> str:
    text = to_plain_text(content)
    if len(text) > length:
        return text[:length] + ELLIPSIS
    return text
