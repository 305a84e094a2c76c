from .assembler import assemble_story
from .episodes import scan_headings, segment_episodes
from .excerpt import generate_excerpt
from .frontmatter import parse_frontmatter
from .publication import (
    EpisodeMarkers,
    PublicationState,
    PublicationStatus,
    episode_markers,
    is_episode_published,
    publication_status,
)
from .types import Episodes, Frontmatter, HeadingToken, Story

__all__ = [
    "EpisodeMarkers",
    "Episodes",
    "Frontmatter",
    "HeadingToken",
    "PublicationState",
    "PublicationStatus",
    "Story",
    "assemble_story",
    "episode_markers",
    "generate_excerpt",
    "is_episode_published",
    "parse_frontmatter",
    "publication_status",
    "scan_headings",
    "segment_episodes",
]
