"""Build Story records from raw file content."""

from __future__ import annotations

from storyshelf.story.episodes import segment_episodes
from storyshelf.story.excerpt import generate_excerpt
from storyshelf.story.frontmatter import parse_frontmatter
from storyshelf.story.types import Story


def decode_content(raw: bytes | str, encoding: str = "utf-8") -> str:
    if isinstance(raw, str):
        return raw
    return raw.decode(encoding, errors="replace")


def assemble_story(raw: bytes | str, filename: str, encoding: str = "utf-8") -> Story:
    meta = parse_frontmatter(decode_content(raw, encoding), filename)
    episodes = segment_episodes(meta.body)
    first_episode = episodes.content[0] if episodes.content else meta.body
    return Story(
        filename=filename,
        title=meta.title,
        body=meta.body,
        excerpt=generate_excerpt(first_episode),
        episodes=episodes,
        date=meta.date,
        published=meta.published,
        published_episodes=meta.published_episodes,
    )
