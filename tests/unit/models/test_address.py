"""
Unit tests for models.address module.

Tests:
- Classification of every network prefix
- Input preserved verbatim (case, body length, charset)
- Rejection of unknown, empty, wrongly cased, and non-string input
- Address immutability and helpers
"""

from dataclasses import FrozenInstanceError

import pytest

from siwk.core.exceptions import AddressClassificationError
from siwk.models import Address, AddressNetwork, classify_address


VALID = [
    (
        "kaspa:qqk948c2dy6cp0vdg7fqx9xttc47q4qdazunhmfv8u24v77uvmxhycc2uj3yn",
        AddressNetwork.MAINNET,
    ),
    (
        "kaspatest:qrzq2766zyqqpnlsmnwflm7kzgzz5d3yut7096kxpyqcg566t6836zjwcx4lp",
        AddressNetwork.TESTNET,
    ),
    (
        "kaspadev:qrzq2766zyqqpnlsmnwflm7kzgzz5d3yut7096kxpyqcg566t6836zjwcx4lp",
        AddressNetwork.DEVNET,
    ),
    (
        "kaspasim:qrzq2766zyqqpnlsmnwflm7kzgzz5d3yut7096kxpyqcg566t6836zjwcx4lp",
        AddressNetwork.SIMNET,
    ),
]


class TestClassification:
    """Recognized prefixes."""

    @pytest.mark.parametrize(("raw", "network"), VALID)
    def test_network_detected(self, raw, network):
        address = classify_address(raw)
        assert address.network == network
        assert address.value == raw

    @pytest.mark.parametrize(
        "raw",
        [
            "kaspa:",
            "kaspa:x",
            "kaspa:FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF",
            "kaspa:qqk948c2dy6cp0vdg7fqx9xttc47q4qdazu",
            "kaspa:not a real address!",
            "kaspatest:ÄÖÜ",
        ],
    )
    def test_body_not_validated(self, raw):
        assert classify_address(raw).value == raw

    def test_case_preserved(self):
        raw = "kaspa:QQK948C2DY6CP0VDG7FQX9XTTC47Q4QDAZUNHMFV8U24V77UVMXHYCC2UJ3YN"
        assert str(classify_address(raw)) == raw

    def test_whitespace_not_trimmed(self):
        raw = "kaspa:abc "
        assert classify_address(raw).value == raw

    def test_address_instance_passthrough(self):
        address = classify_address(VALID[0][0])
        assert classify_address(address) is address


class TestRejection:
    """Input without a recognized prefix."""

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "not-an-address",
            "qqk948c2dy6cp0vdg7fqx9xttc47q4qdazunhmfv8u24v77uvmxhycc2uj3yn",
            "KASPA:qqk948c2dy6cp0vdg7fqx9xttc47q4qdazunhmfv8u24v77uvmxhycc2uj3yn",
            "Kaspatest:qrzq2766",
            "kaspa",
            "kaspatestnet:qrzq2766",
            " kaspa:qqk948",
            "bitcoin:bc1qxy2kgdygjrsqtzq2n0yrf2493p83kkfjhx0wlh",
        ],
    )
    def test_unknown_prefix(self, raw):
        with pytest.raises(AddressClassificationError) as exc_info:
            classify_address(raw)
        assert exc_info.value.address == raw
        assert str(exc_info.value) == f'Address "{raw}" is invalid.'

    @pytest.mark.parametrize("raw", [None, 42, b"kaspa:abc"])
    def test_non_string(self, raw):
        with pytest.raises(AddressClassificationError):
            classify_address(raw)

    def test_is_value_error(self):
        with pytest.raises(ValueError, match="is invalid"):
            classify_address("nope")


class TestAddress:
    """Address dataclass behaviour."""

    def test_frozen(self):
        address = classify_address(VALID[0][0])
        with pytest.raises(FrozenInstanceError):
            address.value = "kaspa:other"  # type: ignore[misc]

    def test_equality_and_hash(self):
        a = classify_address(VALID[1][0])
        b = Address(value=VALID[1][0], network=AddressNetwork.TESTNET)
        assert a == b
        assert hash(a) == hash(b)

    @pytest.mark.parametrize(
        ("raw", "prefix", "payload"),
        [
            ("kaspa:abc", "kaspa:", "abc"),
            ("kaspatest:def", "kaspatest:", "def"),
            ("kaspadev:", "kaspadev:", ""),
            ("kaspasim:ghi", "kaspasim:", "ghi"),
        ],
    )
    def test_prefix_and_payload(self, raw, prefix, payload):
        address = classify_address(raw)
        assert address.prefix == prefix
        assert address.payload == payload


class TestAddressConstruction:
    """Direct construction enforces the prefix of the tagged network."""

    @pytest.mark.parametrize("network", list(AddressNetwork))
    def test_foreign_value_rejected(self, network):
        with pytest.raises(AddressClassificationError) as exc_info:
            Address(value="bitcoin:abc", network=network)
        assert exc_info.value.address == "bitcoin:abc"

    @pytest.mark.parametrize(
        ("value", "network"),
        [
            ("kaspatest:xyz", AddressNetwork.MAINNET),
            ("kaspa:xyz", AddressNetwork.TESTNET),
            ("kaspasim:xyz", AddressNetwork.DEVNET),
            ("kaspadev:xyz", AddressNetwork.SIMNET),
        ],
    )
    def test_mismatched_network_rejected(self, value, network):
        with pytest.raises(AddressClassificationError):
            Address(value=value, network=network)

    @pytest.mark.parametrize("value", [None, 42, b"kaspa:abc"])
    def test_non_string_value_rejected(self, value):
        with pytest.raises(AddressClassificationError):
            Address(value=value, network=AddressNetwork.MAINNET)  # type: ignore[arg-type]

    def test_unknown_network_rejected(self):
        with pytest.raises(AddressClassificationError):
            Address(value="kaspa:abc", network="mainnet-ish")  # type: ignore[arg-type]

    def test_matching_network_accepted(self):
        address = Address(value="kaspadev:xyz", network=AddressNetwork.DEVNET)
        assert address.payload == "xyz"
