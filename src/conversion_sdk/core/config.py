"""Configuration management for the Conversion SDK."""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ConversionConfig:
    """Configuration for the Conversion SDK."""
    registry_url: str
    anchor_token: Optional[str] = None
    request_timeout: float = 30.0
    max_retries: int = 3
    retry_delay: float = 1.0
    max_path_depth: int = 64

    @property
    def path_depth_limit(self) -> Optional[int]:
        """Depth limit handed to the path discoverer, None when disabled."""
        return self.max_path_depth if self.max_path_depth > 0 else None

    @classmethod
    def from_env(cls) -> 'ConversionConfig':
        """Load configuration from environment variables."""
        return cls(
            registry_url=os.environ.get('CONVERSION_REGISTRY_URL', 'http://localhost:8545'),
            anchor_token=os.environ.get('CONVERSION_ANCHOR_TOKEN') or None,
            request_timeout=float(os.environ.get('REQUEST_TIMEOUT', '30.0')),
            max_retries=int(os.environ.get('MAX_RETRIES', '3')),
            retry_delay=float(os.environ.get('RETRY_DELAY', '1.0')),
            max_path_depth=int(os.environ.get('MAX_PATH_DEPTH', '64'))
        )

    @classmethod
    def local(cls, anchor_token: Optional[str] = None) -> 'ConversionConfig':
        """Configuration for a registry service running on localhost."""
        return cls(
            registry_url="http://localhost:8545",
            anchor_token=anchor_token
        )
