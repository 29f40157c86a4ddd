"""Shared validation helpers for SIWK message fields.

Private module -- not part of the public API. Used by the message builder to
check loosely typed input (values coming from YAML, JSON, or untyped callers)
and to turn every violation into a structured
[FieldValidationError][siwk.core.exceptions.FieldValidationError].
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from siwk.core.exceptions import FieldValidationError


def validate_provided(value: Any, name: str) -> None:
    """Raise if *value* is not a non-empty ``str``."""
    if not isinstance(value, str) or not value:
        raise FieldValidationError(name, "must be provided")


def validate_min_length(value: Any, name: str, minimum: int) -> None:
    """Raise if *value* is not a ``str`` of at least *minimum* characters."""
    if not isinstance(value, str) or len(value) < minimum:
        raise FieldValidationError(name, f"must be at least {minimum} characters", value)


def validate_literal(value: Any, name: str, expected: str) -> None:
    """Raise unless *value* equals *expected*."""
    if value != expected:
        raise FieldValidationError(name, f"must be '{expected}'", value)


def validate_single_line(value: Any, name: str) -> None:
    """Raise if *value* is not a ``str`` or contains a newline."""
    if not isinstance(value, str) or "\n" in value:
        raise FieldValidationError(name, "must not include newline", value)


def validate_str_sequence(value: Any, name: str) -> list[str]:
    """Return *value* as a list of non-empty strings, otherwise raise.

    A bare ``str`` or ``bytes`` is rejected whole rather than iterated.
    Elements are checked in order and the first offending one is reported.
    """
    if isinstance(value, str | bytes) or not isinstance(value, Sequence):
        raise FieldValidationError(name, "must be a valid string", value)
    return [validate_non_empty_str(item, name) for item in value]


def validate_non_empty_str(value: Any, name: str) -> str:
    """Return *value* if it is a non-empty ``str``, otherwise raise.

    ``None`` and non-string values are rejected with their string form as the
    provided value.
    """
    if not isinstance(value, str) or not value:
        raise FieldValidationError(name, "must be a valid string", value)
    return value
