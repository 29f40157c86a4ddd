"""
SIWK message construction.

Validates a [SiwkMessageFields][siwk.models.message.SiwkMessageFields] record
and renders the canonical multi-line text a wallet signs. The text is a wire
contract shared by signer and verifier, so punctuation, label capitalization,
blank-line placement, and timestamp format are fixed.

Rendered layout (optional lines in brackets):

```text
{scheme://}{domain} wants you to sign in with your Kaspa account:
{address}

[{statement}
]
URI: {uri}
Version: {version}
Network ID: {network_id}
[Nonce: {nonce}]
Issued At: {issued_at}
[Expiration Time: {expiration_time}]
[Not Before: {not_before}]
[Request ID: {request_id}]
[Resources:
- {resource}
...]
```

Examples:
    ```python
    from siwk.message import MessageBuilder
    from siwk.models import SiwkMessageFields

    builder = MessageBuilder()
    text = builder.build(
        SiwkMessageFields(
            address="kaspa:qqk948c2dy6cp0vdg7fqx9xttc47q4qdazunhmfv8u24v77uvmxhycc2uj3yn",
            network_id="mainnet",
            domain="example.com",
            uri="https://example.com",
            version="1",
        )
    )
    ```
"""

from __future__ import annotations

from siwk.core.clock import Clock, system_clock
from siwk.core.exceptions import FieldValidationError
from siwk.core.logger import Logger
from siwk.models._validation import (
    validate_literal,
    validate_min_length,
    validate_provided,
    validate_single_line,
    validate_str_sequence,
)
from siwk.models.address import Address, classify_address
from siwk.models.constants import MIN_NONCE_LENGTH, SIWK_VERSION
from siwk.models.message import SiwkMessageFields

from .format import format_timestamp


class MessageBuilder:
    """Validates SIWK message fields and renders the message text.

    Holds no per-call state: one instance can be shared freely. The only
    non-deterministic input, the current time used when ``issued_at`` is
    omitted, comes from the injected clock.

    Args:
        clock: Callable returning the current time. Defaults to
            [system_clock()][siwk.core.clock.system_clock].
        logger: Structured logger. Defaults to ``Logger("siwk.builder")``.

    See Also:
        [create_siwk_message()][siwk.message.builder.create_siwk_message]:
            Function form for one-off calls.
    """

    def __init__(self, clock: Clock = system_clock, logger: Logger | None = None) -> None:
        self._clock = clock
        self._logger = logger or Logger("siwk.builder")

    def build(self, fields: SiwkMessageFields) -> str:
        """Validate *fields* and return the rendered message.

        Rules are checked in a fixed order and the first violation wins:
        domain, nonce, uri, version, statement, address, resources.

        Raises:
            FieldValidationError: If a field breaks a rule.
            AddressClassificationError: If the address has no known network
                prefix. Not wrapped in a field error.
        """
        try:
            address, resources = self._validate(fields)
        except FieldValidationError as e:
            self._logger.debug("siwk_field_invalid", field=e.field, reason=e.reason)
            raise

        lines = self._render(fields, address, resources)
        self._logger.debug(
            "siwk_message_built",
            domain=fields.domain,
            network=address.network,
            lines=len(lines),
        )
        return "\n".join(lines)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @staticmethod
    def _validate(fields: SiwkMessageFields) -> tuple[Address, list[str] | None]:
        validate_provided(fields.domain, "domain")
        if fields.nonce is not None:
            validate_min_length(fields.nonce, "nonce", MIN_NONCE_LENGTH)
        validate_provided(fields.uri, "uri")
        validate_literal(fields.version, "version", SIWK_VERSION)
        if fields.statement is not None:
            validate_single_line(fields.statement, "statement")

        address = classify_address(fields.address)

        resources = None
        if fields.resources is not None:
            resources = validate_str_sequence(fields.resources, "resources")

        return address, resources

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _render(
        self,
        fields: SiwkMessageFields,
        address: Address,
        resources: list[str] | None,
    ) -> list[str]:
        origin = f"{fields.scheme}://{fields.domain}" if fields.scheme else fields.domain

        lines = [
            f"{origin} wants you to sign in with your Kaspa account:",
            address.value,
            "",
        ]
        if fields.statement:
            lines.append(fields.statement)
        lines.append("")

        lines.append(f"URI: {fields.uri}")
        lines.append(f"Version: {fields.version}")
        lines.append(f"Network ID: {fields.network_id}")
        if fields.nonce is not None:
            lines.append(f"Nonce: {fields.nonce}")

        issued_at = fields.issued_at if fields.issued_at is not None else self._clock()
        lines.append(f"Issued At: {format_timestamp(issued_at)}")

        if fields.expiration_time is not None:
            lines.append(f"Expiration Time: {format_timestamp(fields.expiration_time)}")
        if fields.not_before is not None:
            lines.append(f"Not Before: {format_timestamp(fields.not_before)}")
        if fields.request_id:
            lines.append(f"Request ID: {fields.request_id}")

        if resources is not None:
            lines.append("Resources:")
            lines.extend(f"- {resource}" for resource in resources)

        return lines


def create_siwk_message(fields: SiwkMessageFields, *, clock: Clock = system_clock) -> str:
    """Build a message with a throwaway [MessageBuilder][siwk.message.builder.MessageBuilder]."""
    return MessageBuilder(clock=clock).build(fields)
