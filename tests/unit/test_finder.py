"""Unit tests for conversion path queries."""

import pytest

from conversion_sdk.core.config import ConversionConfig
from conversion_sdk.core.types import ConversionPathResult
from conversion_sdk.pathfinding.finder import ConversionPathFinder, find_path, format_path
from conversion_sdk.registry.snapshot import RegistrySnapshot
from conversion_sdk.core.exceptions import (
    ConfigurationError,
    ValidationError,
    PathDepthExceededError,
)

from tests import TEST_ADDRESSES


class TestFindPath:
    """Test the path query function."""

    def test_between_two_pools(self, bnt_registry):
        assert find_path('AAA', 'BBB', 'BNT', bnt_registry) == [
            'AAA', 'AAABNT', 'BNT', 'BBBBNT', 'BBB'
        ]

    def test_to_anchor_token(self, bnt_registry):
        assert find_path('AAA', 'BNT', 'BNT', bnt_registry) == ['AAA', 'AAABNT', 'BNT']

    def test_from_anchor_token(self, bnt_registry):
        assert find_path('BNT', 'ETH', 'BNT', bnt_registry) == ['BNT', 'ETHBNT', 'ETH']

    def test_unknown_source(self, bnt_registry):
        assert find_path('XYZ', 'BNT', 'BNT', bnt_registry) == []

    def test_unknown_target(self, bnt_registry):
        assert find_path('AAA', 'XYZ', 'BNT', bnt_registry) == []

    def test_same_token(self, bnt_registry):
        for token in ['ETH', 'BNT', 'AAA', 'BBB', 'AAABNT']:
            assert find_path(token, token, 'BNT', bnt_registry) == [token]

    def test_same_unknown_token(self, bnt_registry):
        assert find_path('XYZ', 'XYZ', 'BNT', bnt_registry) == []


class TestReferenceNetwork:
    """Test every pair of tokens of the reference network, routed through ETH."""

    @pytest.mark.parametrize("source, target, expected", [
        ('AAA', 'BBB', ['AAA', 'AAABNT', 'BNT', 'BBBBNT', 'BBB']),
        ('ETH', 'AAA', ['ETH', 'ETHBNT', 'BNT', 'AAABNT', 'AAA']),
        ('BNT', 'CCC', ['BNT', 'CCCBNT', 'CCC']),
        ('AAABNT', 'ETH', ['AAABNT', 'AAABNT', 'BNT', 'ETHBNT', 'ETH']),
        ('AAABNT', 'BBB', ['AAABNT', 'AAABNT', 'BNT', 'BBBBNT', 'BBB']),
        ('AAABNTBNT', 'AAA', ['AAABNTBNT', 'AAABNTBNT', 'AAABNT', 'AAABNT', 'AAA']),
        ('DDD', 'BBBBNTBNT', [
            'DDD', 'DDDAAABNTBNT',
            'AAABNTBNT', 'AAABNTBNT',
            'AAABNT', 'AAABNT',
            'BNT', 'BBBBNT',
            'BBBBNT', 'BBBBNTBNT',
            'BBBBNTBNT',
        ]),
    ])
    def test_known_paths(self, layout_registry, source, target, expected):
        assert find_path(source, target, 'ETH', layout_registry) == expected

    def test_every_pair_is_connected(self, layout_registry, layout_tokens):
        for source in layout_tokens:
            for target in layout_tokens:
                path = find_path(source, target, 'ETH', layout_registry)
                assert path[0] == source
                assert path[-1] == target
                assert len(path) % 2 == 1

    def test_same_token(self, layout_registry, layout_tokens):
        for token in layout_tokens:
            assert find_path(token, token, 'ETH', layout_registry) == [token]

    def test_symmetric(self, layout_registry, layout_tokens):
        for source in layout_tokens:
            for target in layout_tokens:
                forward = find_path(source, target, 'ETH', layout_registry)
                backward = find_path(target, source, 'ETH', layout_registry)
                assert forward == list(reversed(backward)), (source, target)

    def test_unreachable_token(self, layout_registry, layout_tokens):
        for token in layout_tokens:
            assert find_path('XYZ', token, 'ETH', layout_registry) == []
            assert find_path(token, 'XYZ', 'ETH', layout_registry) == []


class TestFormatPath:
    """Test path rendering."""

    def test_raw_tokens(self):
        assert format_path(['AAA', 'AAABNT', 'BNT']) == '[AAA, AAABNT, BNT]'

    def test_symbols(self):
        symbols = {TEST_ADDRESSES['source']: 'AAA'}
        path = [TEST_ADDRESSES['source'], TEST_ADDRESSES['anchor']]
        assert format_path(path, symbols) == f"[AAA, {TEST_ADDRESSES['anchor']}]"

    def test_empty(self):
        assert format_path([]) == '[]'


class TestConversionPathFinderInit:
    """Test ConversionPathFinder initialization."""

    def test_anchor_from_argument(self, bnt_registry):
        finder = ConversionPathFinder(bnt_registry, anchor_token='BNT')
        assert finder.anchor_token == 'BNT'
        assert finder.max_depth is None

    def test_anchor_from_config(self, layout_registry, config):
        finder = ConversionPathFinder(layout_registry, config=config)
        assert finder.anchor_token == 'ETH'
        assert finder.max_depth == config.max_path_depth

    def test_argument_overrides_config(self, bnt_registry, config):
        finder = ConversionPathFinder(bnt_registry, anchor_token='BNT', config=config)
        assert finder.anchor_token == 'BNT'

    def test_missing_anchor(self, bnt_registry):
        finder = ConversionPathFinder(bnt_registry)
        with pytest.raises(ConfigurationError):
            finder.find_path('AAA', 'BBB')

    def test_invalid_anchor(self, bnt_registry):
        with pytest.raises(ValidationError) as exc_info:
            ConversionPathFinder(bnt_registry, anchor_token=TEST_ADDRESSES['zero'])
        assert exc_info.value.field == 'anchor_token'

    def test_depth_limit_disabled(self, bnt_registry):
        config = ConversionConfig(registry_url="http://localhost:8545", max_path_depth=0)
        finder = ConversionPathFinder(bnt_registry, anchor_token='BNT', config=config)
        assert finder.max_depth is None


class TestConversionPathFinder:
    """Test queries through ConversionPathFinder."""

    def test_find_path(self, bnt_registry):
        finder = ConversionPathFinder(bnt_registry, anchor_token='BNT')
        assert finder.find_path('AAA', 'BBB') == ['AAA', 'AAABNT', 'BNT', 'BBBBNT', 'BBB']
        assert finder.find_path('AAA', 'BNT') == ['AAA', 'AAABNT', 'BNT']

    def test_find_path_unknown_token(self, bnt_registry):
        finder = ConversionPathFinder(bnt_registry, anchor_token='BNT')
        assert finder.find_path('XYZ', 'BNT') == []

    def test_set_anchor_token(self, layout_registry):
        finder = ConversionPathFinder(layout_registry, anchor_token='ETH')
        assert finder.find_path('AAA', 'BNT') == ['AAA', 'AAABNT', 'BNT']

        finder.set_anchor_token('BNT')

        assert finder.anchor_token == 'BNT'
        assert finder.find_path('ETH', 'BNT') == ['ETH', 'ETHBNT', 'BNT']

    def test_find_conversion_path(self, bnt_registry):
        finder = ConversionPathFinder(bnt_registry, anchor_token='BNT')

        result = finder.find_conversion_path('AAA', 'BBB')

        assert isinstance(result, ConversionPathResult)
        assert result.source_token == 'AAA'
        assert result.target_token == 'BBB'
        assert result.anchor_token == 'BNT'
        assert result.found
        assert result.hop_count == 2

    def test_find_conversion_path_not_found(self, bnt_registry):
        finder = ConversionPathFinder(bnt_registry, anchor_token='BNT')

        result = finder.find_conversion_path('AAA', 'XYZ')

        assert not result.found
        assert result.hop_count == 0
        assert result.path == []

    @pytest.mark.parametrize("source, target, field", [
        ('', 'BBB', 'source_token'),
        ('AAA', '', 'target_token'),
        (None, 'BBB', 'source_token'),
        (TEST_ADDRESSES['zero'], 'BBB', 'source_token'),
        ('AAA', TEST_ADDRESSES['zero'], 'target_token'),
    ])
    def test_invalid_tokens(self, bnt_registry, source, target, field):
        finder = ConversionPathFinder(bnt_registry, anchor_token='BNT')

        with pytest.raises(ValidationError) as exc_info:
            finder.find_path(source, target)

        assert exc_info.value.field == field

    def test_depth_limit_from_config(self):
        registry = RegistrySnapshot()
        registry.add_converter('C2', ['T1', 'Z'])
        registry.add_converter('C1', ['T0', 'T1'])
        config = ConversionConfig(
            registry_url="http://localhost:8545",
            anchor_token='Z',
            max_path_depth=1
        )
        finder = ConversionPathFinder(registry, config=config)

        assert finder.find_path('T1', 'Z') == ['T1', 'C2', 'Z']
        with pytest.raises(PathDepthExceededError):
            finder.find_path('T0', 'Z')

    def test_addresses_are_opaque(self):
        registry = RegistrySnapshot()
        pool = '0x4444444444444444444444444444444444444444'
        registry.add_converter(pool, [TEST_ADDRESSES['source'], TEST_ADDRESSES['anchor']])
        finder = ConversionPathFinder(registry, anchor_token=TEST_ADDRESSES['anchor'])

        assert finder.find_path(TEST_ADDRESSES['source'], TEST_ADDRESSES['anchor']) == [
            TEST_ADDRESSES['source'], pool, TEST_ADDRESSES['anchor']
        ]
