#!/usr/bin/env python3
"""
Example: Conversion Path Finding

This example demonstrates:
- Building an in-memory registry snapshot
- Finding conversion paths through an anchor token
- Querying a remote registry service
- Basic error handling

Requirements:
- Set CONVERSION_REGISTRY_URL and CONVERSION_ANCHOR_TOKEN for the remote example
- Network access to the registry service
"""

import asyncio
import logging
import os
from pathlib import Path
import sys

# Add the src directory to the path so we can import the SDK modules
project_dir = Path(__file__).parent.parent
src_dir = project_dir / "src"
sys.path.insert(0, str(src_dir))

from conversion_sdk.core.config import ConversionConfig
from conversion_sdk.registry.snapshot import RegistrySnapshot
from conversion_sdk.pathfinding.finder import ConversionPathFinder, format_path
from conversion_sdk.pathfinding.service import ConversionPathService
from conversion_sdk.core.exceptions import ConversionSDKError, ValidationError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

LAYOUT = [
    ('ETHBNT', ['ETH', 'BNT']),
    ('AAABNT', ['AAA', 'BNT']),
    ('BBBBNT', ['BBB', 'BNT']),
    ('CCCBNT', ['CCC', 'BNT']),
    ('AAABNTBNT', ['AAABNT', 'BNT']),
    ('BBBBNTBNT', ['BBBBNT', 'BNT']),
    ('DDDAAABNTBNT', ['DDD', 'AAABNTBNT']),
]


def example_local_registry():
    """Find paths between every pair of tokens of a small network."""
    print("\n=== Local Registry Example ===")

    registry = RegistrySnapshot()
    for anchor, connectors in LAYOUT:
        registry.add_converter(anchor, connectors)

    finder = ConversionPathFinder(registry, anchor_token='ETH')
    tokens = ['ETH', 'BNT', 'AAA', 'BBB', 'CCC', 'DDD']

    for source in tokens:
        for target in tokens:
            path = finder.find_path(source, target)
            print(f"path from {source} to {target} = {format_path(path)}")

    try:
        finder.find_path('', 'AAA')
    except ValidationError as e:
        print(f"Rejected query: {e.message}")


async def example_remote_registry():
    """Find a path against a remote registry service."""
    print("\n=== Remote Registry Example ===")

    source = os.environ.get('SOURCE_TOKEN')
    target = os.environ.get('TARGET_TOKEN')
    if not source or not target:
        print("Set SOURCE_TOKEN and TARGET_TOKEN to query a remote registry")
        return

    config = ConversionConfig.from_env()

    try:
        async with ConversionPathService(config) as service:
            is_healthy = await service.client.health_check()
            print(f"Registry service healthy: {is_healthy}")
            if not is_healthy:
                return

            result = await service.find_path(source, target)
            if result.found:
                print(f"Found path with {result.hop_count} conversions: {format_path(result.path)}")
            else:
                print(f"No path from {source} to {target}")

    except ConversionSDKError as e:
        logger.error(f"Path query failed: {e.message}")


def main():
    example_local_registry()
    asyncio.run(example_remote_registry())


if __name__ == "__main__":
    main()
