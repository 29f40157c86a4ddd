"""
Prefix-tagged Kaspa addresses.

Classifies a raw address string into one of the four Kaspa network variants
by its literal prefix (``kaspa:``, ``kaspatest:``, ``kaspadev:``,
``kaspasim:``). Classification is purely syntactic: the address body is kept
verbatim, with no case folding, trimming, length, charset or checksum check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from siwk.core.exceptions import AddressClassificationError

from .constants import ADDRESS_PREFIXES, AddressNetwork


@dataclass(frozen=True, slots=True)
class Address:
    """Immutable address string tagged with its network variant.

    Attributes:
        value: The address exactly as supplied.
        network: The [AddressNetwork][siwk.models.constants.AddressNetwork]
            matched by the prefix.

    Examples:
        ```python
        address = classify_address("kaspa:qqk948c2dy6cp0vdg7fqx9xttc47q4qdazunhmfv8u24v77uvmxhycc2uj3yn")
        address.network  # AddressNetwork.MAINNET
        str(address)     # 'kaspa:qqk948c2...'
        ```
    """

    value: str
    network: AddressNetwork

    def __post_init__(self) -> None:
        """Reject a value that does not carry the prefix of ``network``.

        Raises:
            AddressClassificationError: If ``value`` is not a string or its
                prefix does not belong to ``network``.
        """
        prefix = ADDRESS_PREFIXES.get(self.network)
        if prefix is None or not isinstance(self.value, str) or not self.value.startswith(prefix):
            raise AddressClassificationError(self.value)

    def __str__(self) -> str:
        return self.value

    @property
    def prefix(self) -> str:
        return ADDRESS_PREFIXES[self.network]

    @property
    def payload(self) -> str:
        """The part after the network prefix, unvalidated."""
        return self.value[len(self.prefix) :]


def classify_address(raw: Any) -> Address:
    """Tag *raw* with the network its prefix belongs to.

    All four prefixes are tried in order (mainnet, testnet, devnet, simnet)
    with a case-sensitive match. An [Address][siwk.models.address.Address]
    passed in is returned unchanged; its prefix was checked on construction.

    Raises:
        AddressClassificationError: If *raw* is not a string or carries none
            of the recognized prefixes.
    """
    if isinstance(raw, Address):
        return raw
    if isinstance(raw, str):
        for network, prefix in ADDRESS_PREFIXES.items():
            if raw.startswith(prefix):
                return Address(value=raw, network=network)
    raise AddressClassificationError(raw)
