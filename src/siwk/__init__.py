r"""siwk -- Sign-In With Kaspa message builder and address classifier.

Builds the canonical, human-readable text a Kaspa wallet signs to prove
control of an address during a sign-in flow, and classifies Kaspa addresses
by network prefix. Signing, verification, and wallet access are left to the
caller.

Imports flow strictly downward:

```text
            __main__          Command-line entry point
               |
            message           Builder, timestamp format, configuration
            /     \
       models      |          Frozen dataclasses and enums (zero I/O)
            \     /
             core             Exceptions, logging, YAML, clocks
```

Note:
    Top-level imports (``from siwk import MessageBuilder``) use lazy loading
    and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("siwk")

__all__ = [
    "Address",
    "AddressClassificationError",
    "AddressNetwork",
    "ConfigurationError",
    "FieldValidationError",
    "FixedClock",
    "MessageBuilder",
    "NetworkId",
    "SiwkConfig",
    "SiwkError",
    "SiwkMessageFields",
    "classify_address",
    "create_siwk_message",
    "format_timestamp",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "AddressClassificationError": ("siwk.core", "AddressClassificationError"),
    "ConfigurationError": ("siwk.core", "ConfigurationError"),
    "FieldValidationError": ("siwk.core", "FieldValidationError"),
    "FixedClock": ("siwk.core", "FixedClock"),
    "SiwkError": ("siwk.core", "SiwkError"),
    "Address": ("siwk.models", "Address"),
    "AddressNetwork": ("siwk.models", "AddressNetwork"),
    "NetworkId": ("siwk.models", "NetworkId"),
    "SiwkMessageFields": ("siwk.models", "SiwkMessageFields"),
    "classify_address": ("siwk.models", "classify_address"),
    "MessageBuilder": ("siwk.message", "MessageBuilder"),
    "SiwkConfig": ("siwk.message", "SiwkConfig"),
    "create_siwk_message": ("siwk.message", "create_siwk_message"),
    "format_timestamp": ("siwk.message", "format_timestamp"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'siwk' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
