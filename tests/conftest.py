"""Shared registry fixtures."""

import pytest

from conversion_sdk.core.config import ConversionConfig
from conversion_sdk.registry.snapshot import RegistrySnapshot

# Converter layout of the reference network: anchor symbol -> connector tokens
LAYOUT = [
    ('ETHBNT', ['ETH', 'BNT']),
    ('AAABNT', ['AAA', 'BNT']),
    ('BBBBNT', ['BBB', 'BNT']),
    ('CCCBNT', ['CCC', 'BNT']),
    ('AAABNTBNT', ['AAABNT', 'BNT']),
    ('BBBBNTBNT', ['BBBBNT', 'BNT']),
    ('DDDAAABNTBNT', ['DDD', 'AAABNTBNT']),
]

LAYOUT_TOKENS = ['ETH', 'BNT', 'AAA', 'BBB', 'CCC', 'DDD'] + [anchor for anchor, _ in LAYOUT]


def build_registry(layout):
    registry = RegistrySnapshot()
    for anchor, connectors in layout:
        registry.add_converter(anchor, connectors)
    return registry


@pytest.fixture
def bnt_registry():
    """Three pools sharing BNT, routed through BNT."""
    return build_registry([
        ('ETHBNT', ['ETH', 'BNT']),
        ('AAABNT', ['AAA', 'BNT']),
        ('BBBBNT', ['BBB', 'BNT']),
    ])


@pytest.fixture
def layout_registry():
    """The reference network, routed through ETH."""
    return build_registry(LAYOUT)


@pytest.fixture
def config():
    """Test configuration."""
    return ConversionConfig(
        registry_url="http://localhost:8545",
        anchor_token="ETH",
        request_timeout=5.0,
        max_retries=2,
        retry_delay=0.01
    )


@pytest.fixture
def layout_tokens():
    """Every token of the reference network, anchors included."""
    return list(LAYOUT_TOKENS)
