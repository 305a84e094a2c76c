from __future__ import annotations

from pathlib import Path

import pytest

from storyshelf import config
from storyshelf.errors import ConfigError, MissingSettingError
from storyshelf.repositories import StoryRepositoryConfig


def test_initialize_config_creates_files(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.toml"
    content_dir = tmp_path / "stories"
    result = config.initialize_config(
        {"config_path": str(cfg_path), "content_dir": str(content_dir)}
    )
    assert result.config_created is True
    assert result.content_dir_created is True
    assert content_dir.is_dir()
    text = cfg_path.read_text(encoding="utf-8")
    assert f'content_dir = "{content_dir}"' in text
    assert "verbose = false" in text


def test_initialize_config_appends_missing_keys(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.toml"
    content_dir = tmp_path / "stories"
    cfg_path.write_text(f'content_dir = "{content_dir}"\n', encoding="utf-8")

    result = config.initialize_config({"config_path": str(cfg_path)})
    assert result.config_created is False
    assert result.config_updated_keys == ["content_encoding", "verbose"]
    assert result.content_dir == content_dir.resolve()
    assert content_dir.is_dir()


def test_get_config_merges_sources(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text(
        'content_dir = "/file"\ncontent_encoding = "latin-1"\n', encoding="utf-8"
    )
    monkeypatch.setenv("STORYSHELF_CONTENT_DIR", "/env")
    monkeypatch.setenv("STORYSHELF_VERBOSE", "yes")

    merged = config.get_config({"config_path": str(cfg_path), "content_dir": "/cli"})
    assert merged["content_dir"] == "/cli"
    assert merged["content_encoding"] == "latin-1"
    assert merged["verbose"] is True
    assert merged["config_path"] == str(cfg_path)


def test_get_config_defaults_without_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STORYSHELF_CONTENT_DIR", raising=False)
    merged = config.get_config({"config_path": str(tmp_path / "missing.toml")})
    assert merged["content_dir"] == "content"
    assert merged["content_encoding"] == "utf-8"


def test_get_config_rejects_invalid_toml(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text("content_dir = \n", encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        config.get_config({"config_path": str(cfg_path)})
    assert excinfo.value.hint


def test_default_config_path_is_path() -> None:
    path = config._default_config_path()
    assert isinstance(path, Path)
    assert path.name == "config.toml"


def test_story_repository_config_from_settings(tmp_path: Path) -> None:
    repo_config = StoryRepositoryConfig.from_settings(
        {"content_dir": str(tmp_path), "content_encoding": "latin-1"}
    )
    assert repo_config.content_dir == tmp_path
    assert repo_config.encoding == "latin-1"


def test_story_repository_config_requires_content_dir() -> None:
    with pytest.raises(MissingSettingError) as excinfo:
        StoryRepositoryConfig.from_settings({"content_dir": ""})
    assert excinfo.value.setting_name == "content_dir"


def test_story_repository_config_rejects_unknown_encoding(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as excinfo:
        StoryRepositoryConfig.from_settings(
            {"content_dir": str(tmp_path), "content_encoding": "utf-9"}
        )
    assert "utf-9" in str(excinfo.value)
    assert excinfo.value.hint
