"""Conversion path queries between two tokens through the anchor token."""

import logging
from typing import Dict, List, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from .discoverer import find_path_to_anchor
from .merger import merge_paths
from ..core.config import ConversionConfig
from ..core.types import ConversionPathResult, FindPathParams, validate_token
from ..core.exceptions import ConfigurationError, ValidationError
from ..registry.base import ConverterRegistry

logger = logging.getLogger(__name__)


def find_path(
    source_token: str,
    target_token: str,
    anchor_token: str,
    registry: ConverterRegistry,
    max_depth: Optional[int] = None
) -> List[str]:
    """Find a conversion path from source to target through the anchor token.

    Args:
        source_token: Token to convert from
        target_token: Token to convert to
        anchor_token: Token every route passes through
        registry: Registry answering the queries
        max_depth: Maximum conversions on each side, None for no limit

    Returns:
        Alternating token / anchor path, empty if either side is unreachable
    """
    source_path = find_path_to_anchor(source_token, anchor_token, registry, max_depth)
    target_path = find_path_to_anchor(target_token, anchor_token, registry, max_depth)
    return merge_paths(source_path, target_path)


def format_path(path: Sequence[str], symbols: Optional[Dict[str, str]] = None) -> str:
    """Render a path as ``[AAA, AAABNT, BNT]`` using optional token symbols."""
    symbols = symbols or {}
    return "[" + ", ".join(symbols.get(token, token) for token in path) + "]"


class ConversionPathFinder:
    """Finds conversion paths over a registry using a configured anchor token."""

    def __init__(
        self,
        registry: ConverterRegistry,
        anchor_token: Optional[str] = None,
        config: Optional[ConversionConfig] = None
    ):
        """Initialize the path finder.

        Args:
            registry: Registry answering the queries
            anchor_token: Anchor token, defaults to the one in ``config``
            config: Optional configuration providing the anchor token and depth limit
        """
        self.registry = registry
        self.config = config
        self.max_depth = config.path_depth_limit if config else None
        self._anchor_token: Optional[str] = None

        anchor_token = anchor_token or (config.anchor_token if config else None)
        if anchor_token is not None:
            self.set_anchor_token(anchor_token)

    @property
    def anchor_token(self) -> str:
        """The anchor token every path is routed through."""
        if self._anchor_token is None:
            raise ConfigurationError("Anchor token has not been configured")
        return self._anchor_token

    def set_anchor_token(self, anchor_token: str) -> None:
        """Replace the anchor token used for subsequent queries.

        Raises:
            ValidationError: The token is empty or the zero address
        """
        try:
            validate_token(anchor_token)
        except ValueError as e:
            raise ValidationError(str(e), field='anchor_token', value=anchor_token)

        logger.info(f"Anchor token set to {anchor_token}")
        self._anchor_token = anchor_token

    def find_path(self, source_token: str, target_token: str) -> List[str]:
        """Find a conversion path between two tokens.

        Raises:
            ValidationError: A token is empty or the zero address
            ConfigurationError: No anchor token is configured
            PathDepthExceededError: A route is longer than the configured limit
        """
        return self.find_conversion_path(source_token, target_token).path

    def find_conversion_path(self, source_token: str, target_token: str) -> ConversionPathResult:
        """Find a conversion path and return it with the query that produced it."""
        params = validate_find_path_params(source_token, target_token)
        anchor_token = self.anchor_token

        logger.info(f"Finding path from {params.source_token} to {params.target_token} via {anchor_token}")

        path = find_path(
            params.source_token,
            params.target_token,
            anchor_token,
            self.registry,
            self.max_depth
        )

        if path:
            logger.info(f"Found path with {len(path) // 2} conversions: {format_path(path)}")
        else:
            logger.info(f"No path from {params.source_token} to {params.target_token}")

        return ConversionPathResult(
            source_token=params.source_token,
            target_token=params.target_token,
            anchor_token=anchor_token,
            path=path
        )


def validate_find_path_params(source_token: str, target_token: str) -> FindPathParams:
    """Validate the tokens of a path query.

    Raises:
        ValidationError: A token is empty or the zero address
    """
    try:
        return FindPathParams(source_token=source_token, target_token=target_token)
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = str(error['loc'][0]) if error.get('loc') else None
        value = source_token if field == 'source_token' else target_token
        raise ValidationError(f"Invalid {field}: {value!r}", field=field, value=value)
