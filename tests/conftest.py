"""
Pytest configuration and shared fixtures for siwk tests.

Provides:
- A fixed clock pinned to a known instant
- A minimal valid message field record
"""

import logging
from datetime import UTC, datetime

import pytest

from siwk.core.clock import FixedClock
from siwk.message.builder import MessageBuilder
from siwk.models import SiwkMessageFields


MAINNET_ADDRESS = "kaspa:qqk948c2dy6cp0vdg7fqx9xttc47q4qdazunhmfv8u24v77uvmxhycc2uj3yn"

FIXED_INSTANT = datetime(2024, 6, 1, 12, 30, 45, 123456, tzinfo=UTC)


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Builder Fixtures
# ============================================================================


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned to ``FIXED_INSTANT``."""
    return FixedClock(FIXED_INSTANT)


@pytest.fixture
def builder(fixed_clock: FixedClock) -> MessageBuilder:
    """Builder reading time from the fixed clock."""
    return MessageBuilder(clock=fixed_clock)


@pytest.fixture
def base_fields() -> SiwkMessageFields:
    """Minimal valid request: required fields only."""
    return SiwkMessageFields(
        address=MAINNET_ADDRESS,
        network_id="kaspa_mainnet",
        domain="example.com",
        uri="https://example.com",
        version="1",
    )
