"""Pure field predicates shared by both forms."""

from __future__ import annotations

import re
from typing import Any

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_RE = re.compile(r"^[0-9]{10,15}$")
# ASCII classes for digits and symbols; no line terminators anywhere.
_STRONG_PASSWORD_RE = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[\W_])[^\n\r\u2028\u2029]{8,}$",
    re.ASCII,
)


def required(value: Any) -> bool:
    """True when ``value`` is present and not blank once stringified."""
    return value is not None and str(value).strip() != ""


def is_email(value: Any) -> bool:
    return isinstance(value, str) and _EMAIL_RE.fullmatch(value) is not None


def is_phone(value: Any) -> bool:
    """10 to 15 ASCII digits and nothing else."""
    return isinstance(value, str) and _PHONE_RE.fullmatch(value) is not None


def is_strong_password(value: Any) -> bool:
    """8+ chars with lowercase, uppercase, digit and a symbol (underscore counts)."""
    return isinstance(value, str) and _STRONG_PASSWORD_RE.fullmatch(value) is not None


def match(a: Any, b: Any) -> bool:
    return type(a) is type(b) and a == b


def is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def coerce_quantity(text: str) -> int:
    """Turn raw quantity input into an int.

    Blank input becomes 0 (left for validation to reject); anything that is not
    a whole number falls back to 1.
    """
    raw = text.strip()
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError:
        return 1
