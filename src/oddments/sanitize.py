"""Free-text sanitizing for record fields.

Pipeline shape:
- drop control characters (ASCII 0-31 and DEL)
- drop anything outside the allow-list
- collapse whitespace runs, trim
- check the result is non-empty and within the caller's limit

Disallowed characters are removed, not rejected, so the length limit applies
to what is left.
"""

from __future__ import annotations
import re
from typing import Optional

from .errors import EmptyInputError, NullInputError, TooLongError


ALLOWED_PUNCTUATION = ".,_-@#:/'+!?()&%"

_CONTROL = re.compile(r"[\x00-\x1f\x7f]")
# ASCII whitespace only: NBSP and other Unicode spaces are dropped, not kept
_SPACE = r" \t\n\x0b\f\r"
# \w also covers "_" and non-ASCII letters and digits
_DISALLOWED = re.compile(r"[^\w" + _SPACE + re.escape(ALLOWED_PUNCTUATION) + r"]")
_WHITESPACE = re.compile(r"[" + _SPACE + r"]+")


def clean(raw: str) -> str:
    """Apply the cleaning steps without validating the result."""
    s = _CONTROL.sub("", raw)
    s = _DISALLOWED.sub("", s)
    return _WHITESPACE.sub(" ", s).strip()


def sanitize_line(raw: Optional[str], max_len: int) -> str:
    """Clean a free-text line and validate it.

    Raises:
        NullInputError: `raw` is None.
        EmptyInputError: nothing is left after cleaning.
        TooLongError: the cleaned text is longer than `max_len`.
    """
    if raw is None:
        raise NullInputError("Input is required")

    s = clean(raw)
    if not s:
        raise EmptyInputError("Input cannot be empty")
    if len(s) > max_len:
        raise TooLongError(f"Input too long (max {max_len})")
    return s
