"""Episode segmentation on level-1 headings."""

from __future__ import annotations

from collections.abc import Iterator

from storyshelf.story.types import Episodes, HeadingToken

# Leading text longer than this (once trimmed) is kept as an intro episode.
INTRO_MIN_LENGTH = 20


def _heading_text(line: str) -> str | None:
    if len(line) < 2 or line[0] != "#" or not line[1].isspace():
        return None
    text = line[1:].strip()
    return text or None


def scan_headings(body: str) -> Iterator[HeadingToken]:
    """Yield level-1 headings in document order.

    ``## Sub`` and deeper headings are ordinary text.
    """

    offset = 0
    for line in body.split("\n"):
        text = _heading_text(line)
        if text is not None:
            yield HeadingToken(text=text, offset=offset)
        offset += len(line) + 1


def segment_episodes(body: str) -> Episodes:
    headings = list(scan_headings(body))
    if not headings:
        return Episodes(count=1, content=(body,))

    content: list[str] = []
    intro = body[: headings[0].offset].strip()
    if len(intro) > INTRO_MIN_LENGTH:
        content.append(intro)

    ends = [heading.offset for heading in headings[1:]] + [len(body)]
    for heading, end in zip(headings, ends):
        content.append(body[heading.offset : end].strip())

    return Episodes(
        count=len(content),
        titles=tuple(heading.text for heading in headings),
        content=tuple(content),
    )
