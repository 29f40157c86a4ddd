"""Frozen dataclasses and enums describing SIWK requests and Kaspa addresses.

The models layer holds no I/O. It depends only on ``siwk.core`` for the
exception types raised during address classification.

Attributes:
    Address: Address string tagged with its
        [AddressNetwork][siwk.models.constants.AddressNetwork].
    classify_address: Prefix classifier producing an
        [Address][siwk.models.address.Address].
    SiwkMessageFields: Input record consumed by the message builder.
    AddressNetwork: mainnet, testnet, devnet, or simnet.
    NetworkId: Network identifiers reported by Kaspa wallets.

See Also:
    [siwk.message][]: Builder that validates and renders
        [SiwkMessageFields][siwk.models.message.SiwkMessageFields].
"""

from .address import Address, classify_address
from .constants import (
    ADDRESS_PREFIXES,
    MIN_NONCE_LENGTH,
    SIWK_VERSION,
    AddressNetwork,
    NetworkId,
)
from .message import SiwkMessageFields


__all__ = [
    "ADDRESS_PREFIXES",
    "MIN_NONCE_LENGTH",
    "SIWK_VERSION",
    "Address",
    "AddressNetwork",
    "NetworkId",
    "SiwkMessageFields",
    "classify_address",
]
