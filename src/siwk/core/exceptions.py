"""siwk exception hierarchy.

Provides typed exceptions for every failure the library reports. The two
validation errors also derive from ``ValueError`` so callers that only catch
the builtin keep working.

Exception hierarchy:

```text
SiwkError (base -- never raised directly)
├── ConfigurationError          -- bad YAML, config schema violations
├── AddressClassificationError  -- address without a known network prefix
└── FieldValidationError        -- message field rejected by the builder
```

See Also:
    [classify_address()][siwk.models.address.classify_address]: Raises
        [AddressClassificationError][siwk.core.exceptions.AddressClassificationError].
    [MessageBuilder][siwk.message.builder.MessageBuilder]: Raises
        [FieldValidationError][siwk.core.exceptions.FieldValidationError]
        and lets address errors propagate unwrapped.
    [SiwkConfig][siwk.message.config.SiwkConfig]: Raises
        [ConfigurationError][siwk.core.exceptions.ConfigurationError].
"""

from __future__ import annotations

from typing import Any


class SiwkError(Exception):
    """Base exception for all siwk errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(SiwkError):
    """Invalid or missing configuration (YAML file, config schema, CLI flags)."""


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class AddressClassificationError(SiwkError, ValueError):
    """Address does not start with any recognized network prefix.

    Attributes:
        address: The offending input, exactly as supplied.
    """

    def __init__(self, address: Any) -> None:
        self.address = address
        super().__init__(f'Address "{address}" is invalid.')


_UNSET: Any = object()


class FieldValidationError(SiwkError, ValueError):
    """A message field violated one of the builder's rules.

    Attributes:
        field: Name of the offending field (wire name, e.g. ``nonce``).
        reason: Human-readable rule that was violated.
        value: The provided value, or ``None`` when none was reported.
            Use ``has_value`` to tell a reported ``None`` from no value.
        has_value: Whether a provided value is part of the error.

    Examples:
        ```python
        str(FieldValidationError("nonce", "must be at least 8 characters", "123"))
        # 'Invalid SIWK message field "nonce": must be at least 8 characters. Provided value: 123'
        ```
    """

    def __init__(self, field: str, reason: str, value: Any = _UNSET) -> None:
        self.field = field
        self.reason = reason
        self.has_value = value is not _UNSET
        self.value = value if self.has_value else None

        message = f'Invalid SIWK message field "{field}": {reason}.'
        if self.has_value:
            message += f" Provided value: {value}"
        super().__init__(message)
