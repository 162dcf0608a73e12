"""In-memory converter registry snapshot."""

import logging
from typing import Dict, Iterable, List, Optional

from .base import ConverterRegistry
from ..core.exceptions import RegistryError

logger = logging.getLogger(__name__)


class RegistrySnapshot(ConverterRegistry):
    """Frozen-in-time view of a converter registry held in memory.

    Built either from explicit maps (as the registry client does after
    crawling a remote registry) or incrementally with ``add_converter``.
    """

    def __init__(
        self,
        anchors: Iterable[str] = (),
        convertible_token_anchors: Optional[Dict[str, List[str]]] = None,
        owners: Optional[Dict[str, str]] = None,
        connectors: Optional[Dict[str, List[str]]] = None
    ):
        self._anchors = set(anchors)
        self._convertible_token_anchors: Dict[str, List[str]] = {
            token: list(items) for token, items in (convertible_token_anchors or {}).items()
        }
        self._owners: Dict[str, str] = dict(owners or {})
        self._connectors: Dict[str, List[str]] = {
            converter: list(tokens) for converter, tokens in (connectors or {}).items()
        }

    def add_converter(
        self,
        anchor: str,
        connector_tokens: List[str],
        converter: Optional[str] = None
    ) -> str:
        """Register a converter and the anchor it owns.

        Args:
            anchor: Anchor token of the converter
            connector_tokens: Tokens convertible through the converter, in order
            converter: Converter identifier, defaults to the anchor itself

        Returns:
            The converter identifier
        """
        if anchor in self._anchors:
            raise RegistryError(f"Anchor already registered: {anchor}", token=anchor)

        converter = converter or anchor
        self._anchors.add(anchor)
        self._owners[anchor] = converter
        self._connectors[converter] = list(connector_tokens)

        for token in connector_tokens:
            self._convertible_token_anchors.setdefault(token, []).append(anchor)

        logger.debug(f"Registered converter {converter} for anchor {anchor}: {connector_tokens}")
        return converter

    @property
    def anchors(self) -> List[str]:
        """All registered anchors."""
        return sorted(self._anchors)

    def is_anchor(self, token: str) -> bool:
        return token in self._anchors

    def get_convertible_token_anchors(self, token: str) -> List[str]:
        return list(self._convertible_token_anchors.get(token, []))

    def owner_of(self, anchor: str) -> str:
        try:
            return self._owners[anchor]
        except KeyError:
            raise RegistryError(f"Unknown anchor: {anchor}", token=anchor)

    def connector_token_count(self, converter: str) -> int:
        return len(self._get_connectors(converter))

    def connector_token_at(self, converter: str, index: int) -> str:
        connectors = self._get_connectors(converter)
        if not 0 <= index < len(connectors):
            raise RegistryError(
                f"Connector index {index} out of range for converter {converter}",
                token=converter,
                details={'index': index, 'count': len(connectors)}
            )
        return connectors[index]

    def _get_connectors(self, converter: str) -> List[str]:
        try:
            return self._connectors[converter]
        except KeyError:
            raise RegistryError(f"Unknown converter: {converter}", token=converter)
