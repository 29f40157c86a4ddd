"""Timestamp rendering for the SIWK wire format."""

from __future__ import annotations

from datetime import UTC, datetime


def format_timestamp(value: datetime) -> str:
    """Render *value* as ISO-8601 UTC with millisecond precision and a ``Z`` suffix.

    Naive datetimes are taken to be UTC already; aware datetimes are
    converted to UTC first.

    Examples:
        ```python
        format_timestamp(datetime(2024, 12, 31, 23, 59, 59, tzinfo=UTC))
        # '2024-12-31T23:59:59.000Z'
        ```
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    utc = value.astimezone(UTC).replace(tzinfo=None)
    return utc.isoformat(timespec="milliseconds") + "Z"
