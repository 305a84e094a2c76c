"""pipelines"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from storyshelf import config
from storyshelf.errors import StoryshelfError
from storyshelf.logging import get_logger
from storyshelf.repositories import StoryRepository
from storyshelf.story import Story, episode_markers, publication_status


def _merge_config(cli_options: Mapping[str, Any] | None) -> dict[str, Any]:
    return config.get_config(cli_options or {})


def _build_repository(settings: Mapping[str, Any], name: str) -> StoryRepository:
    logger = get_logger(f"storyshelf.{name}", bool(settings.get("verbose", False)))
    return StoryRepository.from_settings(settings, logger=logger)


def _format_markers(story: Story) -> str:
    markers = episode_markers(story)
    dots = "".join("x" if published else "-" for published in markers.published)
    suffix = "+" if markers.truncated else ""
    intro = ", intro" if story.episodes.has_intro else ""
    return f"{story.episodes.count} parts [{dots}{suffix}]{intro}"


def format_story_summary(story: Story) -> str:
    details = [story.date or "undated"]
    status = publication_status(story)
    if status.is_published:
        details.append(status.label)
    if story.episodes.count > 1:
        details.append(_format_markers(story))
    lines = [story.title, f"  {story.filename} | " + " | ".join(details)]
    if story.excerpt:
        lines.append(f"  {story.excerpt}")
    return "\n".join(lines)


def run_list(cli_options: Mapping[str, Any] | None = None) -> int:
    """
    List command
    """

    settings = _merge_config(cli_options)
    repository = _build_repository(settings, "list")
    stories = repository.list_stories()

    if settings.get("json"):
        print(
            json.dumps(
                [story.to_dict() for story in stories], ensure_ascii=False, indent=2
            )
        )
        return 0

    if not stories:
        print(f"No stories found in {settings['content_dir']}")
        return 0
    print("\n\n".join(format_story_summary(story) for story in stories))
    return 0


def run_show(cli_options: Mapping[str, Any] | None = None) -> int:
    """
    Show command
    """

    settings = _merge_config(cli_options)
    filename = str(settings.get("filename") or "")
    repository = _build_repository(settings, "show")
    story = repository.get_story(filename)
    if story is None:
        raise StoryshelfError(
            f"Story not found: {filename}",
            hint="Use `storyshelf list` to see the available stories.",
        )

    episode = settings.get("episode")
    if episode is None:
        print(json.dumps(story.to_dict(), ensure_ascii=False, indent=2))
        return 0

    number = int(episode)
    if not 1 <= number <= story.episodes.count:
        raise StoryshelfError(
            f"Episode {number} does not exist in {filename}",
            hint=f"Choose an episode between 1 and {story.episodes.count}.",
        )
    print(story.episodes.content[number - 1])
    return 0


def run_init(cli_options: Mapping[str, Any] | None = None) -> int:
    """
    Init command
    """

    result = config.initialize_config(cli_options)
    if result.config_created:
        print(f"Config: created {result.config_path}")
    elif result.config_updated_keys:
        keys = ", ".join(result.config_updated_keys)
        print(f"Config: added {keys} to {result.config_path}")
    else:
        print(f"Config: {result.config_path} (unchanged)")
    state = "created" if result.content_dir_created else "exists"
    print(f"Content: {result.content_dir} ({state})")
    return 0
