"""Injectable time sources.

The message builder reads the current time only through a ``Clock`` so tests
can pin the ``Issued At`` line.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime


Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock that always returns the same instant.

    Examples:
        ```python
        clock = FixedClock(datetime(2024, 1, 1, tzinfo=UTC))
        MessageBuilder(clock=clock).build(fields)
        ```
    """

    instant: datetime

    def __call__(self) -> datetime:
        return self.instant
