"""Input checks shared by the services."""

from __future__ import annotations

import re
from typing import Any

# local part of word chars / hyphens with dot-separated segments, then one
# or more dotted domain labels and a 2-7 letter top-level label.
# ASCII only: \w must not match accented or CJK letters.
EMAIL_PATTERN = re.compile(r"^[\w-]+(\.[\w-]+)*@([\w-]+\.)+[a-zA-Z]{2,7}$", re.ASCII)

# orders.quantity is a 32-bit INTEGER column
MAX_QUANTITY = 2**31 - 1


def is_missing(value: Any) -> bool:
    """True for None, blank strings, and numeric zero."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    return False


def any_missing(*values: Any) -> bool:
    return any(is_missing(v) for v in values)


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None
