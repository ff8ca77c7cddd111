"""Time string helpers for motion form fields.

Durations are stored as whole seconds and entered/displayed as
colon-separated strings, most significant unit first:

    mm:ss, hh:mm:ss, ddd:hh:mm:ss, y:ddd:hh:mm:ss

Seconds, minutes and hours pad to 2 digits, days to 3, years are
unpadded and unbounded. At least two segments are always rendered,
so 5 seconds is "00:05".

A bare digit string is read as shorthand and goes through the same
colon insertion used for partial form entry ("130" -> "01:30").
"""

from __future__ import annotations

import math
import re
from typing import Literal

# Size of each unit in terms of the next smaller one: s, m, h, d, y
UNITS: tuple[float, ...] = (60, 60, 24, 365, math.inf)
PADDING: tuple[int | None, ...] = (2, 2, 2, 3, None)
MIN_SEGMENTS: int = 2

MAX_SAFE_INTEGER: int = 2**53 - 1
# Significant digits of the largest safe integer
MAX_SAFE_DIGITS: int = len(str(MAX_SAFE_INTEGER))

RoundingMode = Literal["floor", "round", "ceil"]

# ASCII only; matched with fullmatch so a trailing newline is rejected
_DIGITS = re.compile(r"[0-9]+")


def _safe_integer(n: int) -> int | None:
    if 0 <= n <= MAX_SAFE_INTEGER:
        return n
    return None


def parse_whole_number(text: str) -> int | None:
    """Read an ASCII digit string as a non-negative safe integer.

    Leading zeroes are allowed. Anything else (signs, whitespace,
    non-ASCII digits, values beyond MAX_SAFE_INTEGER) gives None.
    """
    if not _DIGITS.fullmatch(text):
        return None
    significant = text.lstrip("0")
    if len(significant) > MAX_SAFE_DIGITS:
        return None
    return _safe_integer(int(significant or "0"))


def _stringify_segments(segments: list[int]) -> str:
    """Render least-significant-first segments as a time string."""
    rendered = []
    for i, n in enumerate(segments):
        width = PADDING[i] if i < len(PADDING) else None
        rendered.append(str(n).zfill(width) if width is not None else str(n))
    return ":".join(reversed(rendered))


def parse_time(time_str: str) -> int | None:
    """Parse a time string into a number of seconds.

    Accepted: "45", "0:45", "00:45", ":45", ":30:00", "1:30:00".
    Rejected: "::45", "14:95", "25:61:61", "-5".

    Segments other than the most significant must be below their unit;
    padding is not enforced ("0:1" is one second).

    Args:
        time_str: The time string.

    Returns:
        The number of seconds, or None if the string is invalid.
    """
    segments = time_str.split(":")[::-1]

    if len(segments) == 1:
        colonized = add_colons(segments[0], require_min_segments=False)
        if ":" in colonized:
            return parse_time(colonized)
        return parse_whole_number(colonized)

    if len(segments) > len(UNITS):
        return None

    *lower, top = segments
    values: list[int] = []
    for i, segment in enumerate(lower):
        value = parse_whole_number(segment)
        if value is None or value >= UNITS[i]:
            return None
        values.append(value)
    top_value = parse_whole_number(top) if top else 0
    if top_value is None:
        return None
    values.append(top_value)

    secs = 0
    scale = 1
    for i, value in enumerate(values):
        secs += scale * value
        if i < len(UNITS) - 1:
            scale *= int(UNITS[i])

    return _safe_integer(secs)


def stringify_time(secs: float, rounding: RoundingMode = "ceil") -> str | None:
    """Convert a number of seconds into a time string.

    Args:
        secs: The number of seconds.
        rounding: How fractional seconds are brought to an integer.

    Returns:
        The time string, or None if negative, non-finite or too large.
    """
    if not math.isfinite(secs):
        return None

    if rounding == "floor":
        whole = math.floor(secs)
    elif rounding == "round":
        whole = math.floor(secs + 0.5)
    else:
        whole = math.ceil(secs)

    if whole < 0 or whole > MAX_SAFE_INTEGER:
        return None

    segments: list[int] = []
    n = whole
    for unit in UNITS:
        if math.isinf(unit):
            segments.append(n)
            break
        n, remainder = divmod(n, int(unit))
        segments.append(remainder)
        if n <= 0:
            break

    while len(segments) < MIN_SEGMENTS:
        segments.append(0)

    return _stringify_segments(segments)


def add_colons(num_str: str, require_min_segments: bool = True) -> str:
    """Insert colons into a digit string.

    The digits are chunked from the right by unit width and any
    overflow is carried into the next unit: "90" becomes "01:30",
    "130" becomes "01:30" as well.

    Args:
        num_str: The digit string.
        require_min_segments: Pad the result to at least mm:ss.

    Returns:
        The colon-separated string, or the input unchanged if it is
        not purely ASCII digits or has more significant digits than a
        safe integer.
    """
    if not _DIGITS.fullmatch(num_str) or len(num_str.lstrip("0")) > MAX_SAFE_DIGITS:
        return num_str

    chunks: list[int] = []
    end = len(num_str)
    unit_index = 0
    while end > 0:
        width = PADDING[unit_index] if unit_index < len(PADDING) else None
        length = min(end, width) if width is not None else end
        chunks.append(int(num_str[end - length : end].lstrip("0") or "0"))
        end -= length
        unit_index += 1

    u = 0
    while u < len(UNITS) - 1 and u < len(chunks):
        carry, chunks[u] = divmod(chunks[u], int(UNITS[u]))
        if carry == 0 and u == len(chunks) - 1:
            break
        if u + 1 == len(chunks):
            chunks.append(0)
        chunks[u + 1] += carry
        u += 1

    if require_min_segments:
        while len(chunks) < MIN_SEGMENTS:
            chunks.append(0)

    return _stringify_segments(chunks)


def sanitize_time(time_str: str | None) -> str:
    """Normalize partially typed input into a time string.

    Colons and leading zeroes are dropped before colon insertion,
    so "1:3:0" and "0130" both become "01:30".

    Args:
        time_str: Raw field contents.

    Returns:
        The sanitized time string ("" stays "").
    """
    if time_str is None:
        return ""
    digits = time_str.replace(":", "").lstrip("0")
    if not digits:
        return ""
    return add_colons(digits)
