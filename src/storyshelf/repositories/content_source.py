"""
Read-only access to story files.

The parsing core only sees names and bytes; everything filesystem specific
lives here.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from storyshelf.errors import ContentNotFoundError, ContentSourceError

from .types import StoryRepositoryConfig


@runtime_checkable
class ContentSource(Protocol):
    def list_names(self) -> Sequence[str]:
        """Names of all story entries; empty when the source is unavailable."""
        ...

    def read(self, name: str) -> bytes:
        """Raw bytes of ``name``; raises ContentSourceError when unreadable."""
        ...


@dataclass(slots=True)
class DirectoryContentSource:
    """Markdown files directly inside one directory."""

    config: StoryRepositoryConfig

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> DirectoryContentSource:
        return cls(StoryRepositoryConfig.from_settings(settings))

    def list_names(self) -> Sequence[str]:
        content_dir = self.config.content_dir
        if not content_dir.is_dir():
            return ()
        try:
            return sorted(
                path.name
                for path in content_dir.glob(self.config.pattern)
                if path.is_file()
            )
        except OSError:
            return ()

    def resolve(self, name: str) -> Path:
        return self.config.content_dir / name

    def read(self, name: str) -> bytes:
        path = self.resolve(name)
        if not path.is_file():
            raise ContentNotFoundError(f"Story file not found: {path}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise ContentSourceError(f"Failed to read story file: {path}") from exc


@dataclass(slots=True)
class MemoryContentSource:
    """In-memory entries, mainly for tests and embedding."""

    entries: dict[str, bytes] = field(default_factory=dict)
    reads: list[str] = field(init=False, default_factory=list, repr=False)

    def list_names(self) -> Sequence[str]:
        return sorted(self.entries)

    def read(self, name: str) -> bytes:
        self.reads.append(name)
        try:
            return self.entries[name]
        except KeyError as exc:
            raise ContentNotFoundError(f"Story entry not found: {name}") from exc
