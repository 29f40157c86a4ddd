"""Message layer: validation, rendering, and configuration of SIWK messages.

Attributes:
    MessageBuilder: Validates a
        [SiwkMessageFields][siwk.models.message.SiwkMessageFields] record and
        renders the canonical text. See [siwk.message.builder][].
    create_siwk_message: Function form of
        [MessageBuilder.build()][siwk.message.builder.MessageBuilder.build].
    format_timestamp: ISO-8601 UTC renderer with millisecond precision.
    SiwkConfig: Pydantic model for YAML-described message requests.
"""

from .builder import MessageBuilder, create_siwk_message
from .config import LoggingConfig, MessageConfig, SiwkConfig
from .format import format_timestamp


__all__ = [
    "LoggingConfig",
    "MessageBuilder",
    "MessageConfig",
    "SiwkConfig",
    "create_siwk_message",
    "format_timestamp",
]
