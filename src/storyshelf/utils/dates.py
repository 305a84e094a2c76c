"""Free-form story date parsing."""

from __future__ import annotations

from datetime import datetime
from email.utils import parsedate_to_datetime

# Written forms tried after ISO 8601 and RFC 2822.
_FALLBACK_FORMATS = (
    "%d-%m-%Y",
    "%d-%m-%Y %H:%M",
    "%d-%m-%Y %H:%M:%S",
    "%d.%m.%Y",
    "%d.%m.%Y %H:%M",
    "%d.%m.%Y %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
)


def _as_aware(value: datetime) -> datetime:
    # Naive values are read as local time.
    if value.tzinfo is None:
        return value.astimezone()
    return value


def parse_story_date(value: str | None) -> datetime | None:
    """Parse a frontmatter date into an aware datetime.

    Returns None for empty or unrecognised values; the caller decides what an
    unparsable date means.
    """

    if value is None:
        return None
    text = value.strip()
    if not text:
        return None

    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return _as_aware(datetime.fromisoformat(iso_text))
    except (ValueError, OverflowError):
        pass

    # Some authors paste RFC822/RFC2822-like dates.
    try:
        return _as_aware(parsedate_to_datetime(text))
    except (TypeError, ValueError, IndexError, OverflowError):
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return _as_aware(datetime.strptime(text, fmt))
        except (ValueError, OverflowError):
            continue
    return None


def is_future(value: str | None, now: datetime) -> bool:
    """True only when ``value`` parses to a moment strictly after ``now``."""

    parsed = parse_story_date(value)
    return parsed is not None and parsed > now
