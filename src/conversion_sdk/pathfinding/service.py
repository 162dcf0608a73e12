"""Conversion path queries against a remote converter registry."""

import logging
from typing import Optional

from .finder import ConversionPathFinder, validate_find_path_params
from ..core.config import ConversionConfig
from ..core.types import ConversionPathResult
from ..core.exceptions import ConfigurationError
from ..registry.client import RegistryClient

logger = logging.getLogger(__name__)


class ConversionPathService:
    """Loads a registry snapshot per query and finds the path over it."""

    def __init__(self, config: ConversionConfig, client: Optional[RegistryClient] = None):
        """Initialize the service.

        Args:
            config: Conversion configuration, must name the anchor token
            client: Registry client, created from ``config`` when omitted
        """
        if not config.anchor_token:
            raise ConfigurationError("ConversionPathService requires an anchor token")

        self.config = config
        self.client = client or RegistryClient(config)

    async def __aenter__(self):
        """Async context manager entry."""
        await self.client._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.client.close()

    async def find_path(self, source_token: str, target_token: str) -> ConversionPathResult:
        """Find a conversion path between two tokens of the remote registry.

        Raises:
            ValidationError: A token is empty or the zero address
            RegistryError: The registry returned inconsistent data
            RPCError: The registry service failed
        """
        params = validate_find_path_params(source_token, target_token)

        snapshot = await self.client.load_snapshot(
            [params.source_token, params.target_token],
            anchor_token=self.config.anchor_token
        )
        finder = ConversionPathFinder(snapshot, config=self.config)
        return finder.find_conversion_path(params.source_token, params.target_token)
