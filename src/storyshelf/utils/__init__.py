from .dates import is_future, parse_story_date
from .filenames import STORY_SUFFIX, is_story_filename, title_from_filename

__all__ = [
    "STORY_SUFFIX",
    "is_future",
    "is_story_filename",
    "parse_story_date",
    "title_from_filename",
]
