"""Lightweight validation helpers."""

from typing import Any

from utils.error_handling import InvalidQueryError


def ensure_present(value: Any, field: str) -> None:
    """Raise ValueError if value is falsy."""
    if value in (None, "", []):
        raise ValueError(f"{field} is required")


def ensure_query(value: Any) -> str:
    """
    Shape check for an inbound FAQ query.

    Only type and emptiness are checked; whitespace-only text is accepted and
    later normalizes to an empty string.
    """
    if not isinstance(value, str) or not value:
        raise InvalidQueryError()
    return value
