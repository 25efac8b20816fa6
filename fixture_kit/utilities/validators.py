"""
Input validation utilities.

This module provides validation functions for the options accepted by the
public fill and verify entry points.
"""

from collections.abc import Iterable


def validate_non_negative_int(value: int, name: str) -> None:
    """Validate that a value is an integer greater than or equal to zero."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_non_empty_string(value: str, name: str) -> None:
    """Validate that a string is not empty."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} cannot be empty")


def normalize_field_names(names: Iterable[str] | str | None) -> frozenset[str]:
    """Turn a caller-supplied ignore list into a frozenset of field names."""
    if names is None:
        return frozenset()
    if isinstance(names, str):
        names = (names,)

    normalized = set()
    for name in names:
        validate_non_empty_string(name, "Ignored field name")
        normalized.add(name)
    return frozenset(normalized)
