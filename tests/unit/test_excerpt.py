from __future__ import annotations

from storyshelf.story.excerpt import ELLIPSIS, generate_excerpt, to_plain_text


def test_plain_text_strips_markup() -> None:
    content = "# Part One\nIt was **very** dark and *cold*.\n\nThe <em>end</em>."
    assert to_plain_text(content) == "Part One It was very dark and cold. The end."


def test_plain_text_emphasis_may_span_lines() -> None:
    assert to_plain_text("**bold\ntext** and *it\nalic*") == "bold text and it alic"


def test_plain_text_removes_heading_runs_on_every_line() -> None:
    assert to_plain_text("## Sub\ntext\n### Deeper") == "Sub text Deeper"


def test_plain_text_removes_comments() -> None:
    assert to_plain_text("Visible<!-- hidden\nnote --> text") == "Visible text"


def test_excerpt_short_text_is_untouched() -> None:
    assert generate_excerpt("Short story.") == "Short story."


def test_excerpt_truncates_long_text() -> None:
    excerpt = generate_excerpt("word " * 100)
    assert len(excerpt) == 303
    assert excerpt.endswith(ELLIPSIS)
    assert excerpt[:300] == ("word " * 100)[:300]


def test_excerpt_exactly_at_limit_has_no_ellipsis() -> None:
    text = "a" * 300
    assert generate_excerpt(text) == text


def test_plain_text_keeps_comparison_operators() -> None:
    assert to_plain_text("If a < b and c > d then stop.") == "If a < b and c > d then stop."
    assert to_plain_text("x<3 <b>bold</b> </p>") == "x<3 bold"
