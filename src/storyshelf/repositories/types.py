"""Repository data classes."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from storyshelf.errors import ConfigError, MissingSettingError


# --- Config. ---
@dataclass(frozen=True, slots=True)
class StoryRepositoryConfig:
    """Settings needed to read stories from a content directory."""

    content_dir: Path
    encoding: str = "utf-8"
    pattern: str = "*.md"

    def __post_init__(self) -> None:  # type: ignore[override]
        object.__setattr__(self, "content_dir", Path(self.content_dir).expanduser())

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> StoryRepositoryConfig:
        content_dir = settings.get("content_dir")
        if not content_dir:
            raise MissingSettingError("content_dir")
        encoding = str(settings.get("content_encoding") or "utf-8")
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ConfigError(
                f"Unknown content encoding: {encoding}",
                hint="Set `content_encoding` to a Python codec name such as \"utf-8\".",
            ) from exc
        return cls(content_dir=Path(content_dir), encoding=encoding)
