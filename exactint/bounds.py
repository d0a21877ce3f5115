"""
Signed 64-bit integer domain.

Python ints never wrap, so a value escaping the domain is detected and reported
as `Int64OverflowError` rather than silently truncated.
"""

from __future__ import annotations

from .errors import Int64OverflowError


INT64_MIN: int = -(1 << 63)
INT64_MAX: int = (1 << 63) - 1


def require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def in_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def checked_int64(name: str, value: int) -> int:
    """Return *value* unchanged, or raise if it does not fit in int64."""
    if not in_int64(value):
        raise Int64OverflowError(name, value)
    return value


def require_int64(name: str, value: int) -> None:
    require_int(name, value)
    checked_int64(name, value)
