"""Shared constants for the models layer.

Defines the network enumerations and the literal values of the SIWK wire
format. Placing them here keeps the address and message modules free of
circular imports.

See Also:
    [siwk.models.address][]: Uses [AddressNetwork][siwk.models.constants.AddressNetwork]
        and ``ADDRESS_PREFIXES`` to classify raw address strings.
    [siwk.message.builder][]: Uses ``SIWK_VERSION`` and ``MIN_NONCE_LENGTH``
        while validating a message request.
"""

from __future__ import annotations

from enum import StrEnum


class AddressNetwork(StrEnum):
    """Network variant an address belongs to, derived from its prefix.

    Each address is classified into exactly one variant by
    [classify_address()][siwk.models.address.classify_address]. The prefix
    is the only thing inspected; the address body is never validated.

    Attributes:
        MAINNET: Address starting with ``kaspa:``.
        TESTNET: Address starting with ``kaspatest:``.
        DEVNET: Address starting with ``kaspadev:``.
        SIMNET: Address starting with ``kaspasim:``.

    Examples:
        ```python
        classify_address("kaspa:qqk948...").network      # AddressNetwork.MAINNET
        classify_address("kaspatest:qrzq27...").network  # AddressNetwork.TESTNET
        ```
    """

    MAINNET = "mainnet"
    TESTNET = "testnet"
    DEVNET = "devnet"
    SIMNET = "simnet"


class NetworkId(StrEnum):
    """Network identifiers reported by Kaspa wallets.

    The message ``Network ID`` line accepts any string; these members are the
    values wallets return from ``getNetwork()``.
    """

    MAINNET = "mainnet"
    TESTNET_10 = "testnet-10"
    DEVNET = "devnet"
    SIMNET = "simnet"


# Checked in this order during classification.
ADDRESS_PREFIXES: dict[AddressNetwork, str] = {
    AddressNetwork.MAINNET: "kaspa:",
    AddressNetwork.TESTNET: "kaspatest:",
    AddressNetwork.DEVNET: "kaspadev:",
    AddressNetwork.SIMNET: "kaspasim:",
}

SIWK_VERSION = "1"
MIN_NONCE_LENGTH = 8
