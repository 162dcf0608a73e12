"""Test configuration and utilities for Conversion SDK."""

import logging
import sys
from pathlib import Path

# Add the src directory to the path so we can import the SDK modules
test_dir = Path(__file__).parent
project_dir = test_dir.parent
src_dir = project_dir / "src"
sys.path.insert(0, str(src_dir))

# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

# Suppress noisy logs during testing
logging.getLogger('aiohttp').setLevel(logging.WARNING)
logging.getLogger('asyncio').setLevel(logging.WARNING)

# Test addresses for consistent testing
TEST_ADDRESSES = {
    'source': '0x1111111111111111111111111111111111111111',
    'target': '0x2222222222222222222222222222222222222222',
    'anchor': '0x3333333333333333333333333333333333333333',
    'zero': '0x0000000000000000000000000000000000000000',
}
