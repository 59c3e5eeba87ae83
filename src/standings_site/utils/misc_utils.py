# src/standings_site/utils/misc_utils.py
import re
from typing import Any, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(value: Any) -> Optional[int]:
    """Parses a base-10 integer the way JavaScript's parseInt does.

    Leading whitespace and a sign are accepted, parsing stops at the first
    non-digit, and anything without leading digits is not a number (None).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        # parseInt(String(95.7)) -> 95; NaN/inf have no digits
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def is_blank(value: Any) -> bool:
    """True for the values a URL filter treats as 'not given'."""
    return value is None or value == ""
