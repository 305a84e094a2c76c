from __future__ import annotations

from pathlib import Path

import pytest

from storyshelf import pipelines
from storyshelf.errors import StoryshelfError
from storyshelf.story import assemble_story


def test_format_story_summary_single_episode() -> None:
    story = assemble_story("---\npublished: yes\n---\nA quiet tale.", "quiet.md")
    summary = pipelines.format_story_summary(story)
    assert summary.splitlines() == [
        "Quiet",
        "  quiet.md | undated | Published",
        "  A quiet tale.",
    ]


def test_format_story_summary_marks_truncated_episodes() -> None:
    body = "\n".join(f"# Part {number}\ntext" for number in range(1, 7))
    story = assemble_story(f"---\ndate: 2024-01-01\n---\n{body}", "long.md")
    summary = pipelines.format_story_summary(story)
    assert "  long.md | 2024-01-01 | 6 parts [-----+]" in summary


def test_run_list_uses_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "one.md").write_text("First story.", encoding="utf-8")
    settings = {"content_dir": str(tmp_path), "content_encoding": "utf-8", "verbose": False}
    monkeypatch.setattr(pipelines.config, "get_config", lambda _opts: settings)

    assert pipelines.run_list({}) == 0
    assert "One" in capsys.readouterr().out


def test_run_show_raises_for_missing_story(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    settings = {"content_dir": str(tmp_path), "filename": "gone.md"}
    monkeypatch.setattr(pipelines.config, "get_config", lambda _opts: settings)

    with pytest.raises(StoryshelfError) as excinfo:
        pipelines.run_show({})
    assert excinfo.value.hint


def test_run_init_reports_paths(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "config.toml"
    content_dir = tmp_path / "content"

    pipelines.run_init({"config_path": str(config_path), "content_dir": str(content_dir)})
    pipelines.run_init({"config_path": str(config_path), "content_dir": str(content_dir)})

    output = capsys.readouterr().out.splitlines()
    assert output[0].startswith("Config: created")
    assert output[1].endswith("(created)")
    assert output[2].endswith("(unchanged)")
    assert output[3].endswith("(exists)")


def test_format_story_summary_notes_intro_episode() -> None:
    body = "An introduction that is clearly long enough.\n# One\nA\n# Two\nB"
    story = assemble_story(body, "intro.md")
    assert story.episodes.has_intro is True
    assert "3 parts [---], intro" in pipelines.format_story_summary(story)
