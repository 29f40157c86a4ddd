"""
Input record for a SIWK (Sign-In With Kaspa) message request.

The record is a plain immutable container: it does not validate itself. The
[MessageBuilder][siwk.message.builder.MessageBuilder] owns the validation
rules and their order, so a record built from untrusted input can always be
constructed and then rejected with a precise field error.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .address import Address


@dataclass(frozen=True, slots=True)
class SiwkMessageFields:
    """Immutable description of one authentication message request.

    Attributes:
        address: Kaspa address performing the signing, raw or classified.
        network_id: Network the session is bound to (e.g. ``mainnet``).
        domain: RFC 3986 authority requesting the signing.
        uri: RFC 3986 URI referring to the subject of the signing.
        version: Message version; only ``"1"`` is accepted.
        statement: Single-line human-readable assertion the user signs.
        nonce: Random token chosen by the relying party, at least 8 characters.
        expiration_time: When the signed message stops being valid.
        issued_at: When the message was generated. Defaults to the builder's
            clock when omitted.
        not_before: When the signed message becomes valid.
        request_id: System-specific identifier of the sign-in request.
        resources: References the user wishes to have resolved as part of
            authentication. Stored as a tuple.
        scheme: RFC 3986 URI scheme of the request origin.

    Examples:
        ```python
        fields = SiwkMessageFields(
            address="kaspa:qqk948c2dy6cp0vdg7fqx9xttc47q4qdazunhmfv8u24v77uvmxhycc2uj3yn",
            network_id="mainnet",
            domain="example.com",
            uri="https://example.com",
            version="1",
            resources=["https://example.com/terms"],
        )
        fields.resources  # ('https://example.com/terms',)
        ```
    """

    address: Address | str
    network_id: str
    domain: str
    uri: str
    version: str
    statement: str | None = None
    nonce: str | None = None
    expiration_time: datetime | None = None
    issued_at: datetime | None = None
    not_before: datetime | None = None
    request_id: str | None = None
    resources: Sequence[Any] | None = field(default=None)
    scheme: str | None = None

    def __post_init__(self) -> None:
        # Freeze the caller's list; other values are checked by the builder
        if isinstance(self.resources, list):
            object.__setattr__(self, "resources", tuple(self.resources))
