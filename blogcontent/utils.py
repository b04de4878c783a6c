import datetime
import math
import re

DEFAULT_WORDS_PER_MINUTE = 225

# Applied in order; each pattern maps to its replacement.
_MARKDOWN_STRIPPERS = [
    (re.compile(r"```[\s\S]*?```"), ""),  # fenced code blocks
    (re.compile(r"`[^`]*`"), ""),  # inline code
    (re.compile(r"!\[[^\]]*\]\([^)]*\)"), ""),  # images
    (re.compile(r"\[([^\]]*)\]\([^)]*\)"), r"\1"),  # links keep their text
    (re.compile(r"^#{1,6}\s+", re.MULTILINE), ""),  # heading markers
    (re.compile(r"(\*\*|__)(.*?)\1"), r"\2"),  # bold
    (re.compile(r"(\*|_)(.*?)\1"), r"\2"),  # italics
    (re.compile(r"<[^>]*>"), ""),  # html tags
    (re.compile(r"\A---\s*\n[\s\S]*?\n---\s*(\n|\Z)"), ""),  # leftover frontmatter
]


def calculate_reading_time(
    text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> int:
    """Estimated minutes to read a Markdown body, never less than one."""
    for pattern, replacement in _MARKDOWN_STRIPPERS:
        text = pattern.sub(replacement, text)
    words = text.split()
    return max(1, math.ceil(len(words) / words_per_minute))


def ts_from_str(date_str: str) -> int:
    """Milliseconds since the epoch for a YYYY-MM-DD date at UTC midnight."""
    day = datetime.date.fromisoformat(date_str)
    midnight = datetime.datetime(
        day.year, day.month, day.day, tzinfo=datetime.timezone.utc
    )
    return int(midnight.timestamp() * 1000)
