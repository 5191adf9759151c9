"""Text predicates used by the specification conditions.

Patterns are compiled once at import time and never mutated.
"""

import re
from re import Pattern

# Optional "owner/repo" prefix, then "#" and digits; must cover the whole token
ISSUE_PATTERN: Pattern[str] = re.compile(r"(?:[-\w]+/[-\w]+)?#\d+")

# John Gruber's liberal URL matcher: scheme-prefixed, www-prefixed and bare
# domain forms, tolerating balanced parentheses inside the URL.
URL_PATTERN: Pattern[str] = re.compile(
    r"""\b((?:[a-z][\w-]+:(?:/{1,3}|[a-z0-9%])|www\d{0,3}[.]|[a-z0-9.\-]+[.][a-z]{2,4}/)"""
    r"""(?:[^\s()<>]+|\(([^\s()<>]+|(\([^\s()<>]+\)))*\))+"""
    r"""(?:\(([^\s()<>]+|(\([^\s()<>]+\)))*\)|[^\s`!()\[\]{};:'".,<>?«»“”‘’]))""",
    re.IGNORECASE,
)


def is_long_enough(text: str | None, required_length: int) -> bool:
    """Return True when the text is strictly longer than ``required_length``."""
    return len(text or "") > required_length


def contains_pattern(text: str | None, pattern: Pattern[str], *, whole_token: bool = False) -> bool:
    """Check whether any whitespace-separated token of ``text`` matches ``pattern``.

    Args:
        text: The text to scan. ``None`` is treated as empty.
        pattern: Compiled pattern to test each token against.
        whole_token: Require the pattern to span the entire token instead of
            occurring anywhere inside it.

    Returns:
        True if at least one token matches.
    """
    match = pattern.fullmatch if whole_token else pattern.search
    return any(match(token) for token in (text or "").split())


def contains_url(text: str | None) -> bool:
    return contains_pattern(text, URL_PATTERN)


def contains_issue_number(text: str | None) -> bool:
    return contains_pattern(text, ISSUE_PATTERN, whole_token=True)
