"""Core layer: exceptions, logging, YAML loading, and time sources.

Sits at the bottom of the package -- depends only on the standard library
and PyYAML, and is imported by ``siwk.models`` and ``siwk.message``.

Attributes:
    SiwkError: Base of the exception hierarchy.
        See [siwk.core.exceptions][].
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][siwk.core.logger.Logger].
    load_yaml: Safe YAML loading with ``yaml.safe_load()``.
        See [load_yaml()][siwk.core.yaml.load_yaml].
    Clock: Callable returning the current time, injected into the builder.
        See [siwk.core.clock][].
"""

from .clock import Clock, FixedClock, system_clock
from .exceptions import (
    AddressClassificationError,
    ConfigurationError,
    FieldValidationError,
    SiwkError,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "AddressClassificationError",
    "Clock",
    "ConfigurationError",
    "FieldValidationError",
    "FixedClock",
    "Logger",
    "SiwkError",
    "StructuredFormatter",
    "format_kv_pairs",
    "load_yaml",
    "system_clock",
]
