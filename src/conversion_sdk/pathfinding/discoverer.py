"""Depth-first discovery of a token's route to the anchor token."""

import logging
from typing import Iterator, List, Optional, Tuple

from ..core.exceptions import PathDepthExceededError
from ..registry.base import ConverterRegistry

logger = logging.getLogger(__name__)


class _Frame:
    """One token on the search stack and the edge currently being followed."""

    __slots__ = ('token', 'anchor', 'edges')

    def __init__(self, token: str, registry: ConverterRegistry):
        self.token = token
        self.anchor: Optional[str] = None
        self.edges = _iter_edges(token, registry)


def _iter_edges(token: str, registry: ConverterRegistry) -> Iterator[Tuple[str, str]]:
    """Yield (anchor, connector token) pairs leaving a token, in registry order.

    Registry queries are issued lazily, one anchor at a time, so a search that
    succeeds early never asks about anchors it does not need.
    """
    if registry.is_anchor(token):
        anchors = [token]
    else:
        anchors = registry.get_convertible_token_anchors(token)

    for anchor in anchors:
        converter = registry.owner_of(anchor)
        for i in range(registry.connector_token_count(converter)):
            connector = registry.connector_token_at(converter, i)
            if connector != token:
                yield anchor, connector


def find_path_to_anchor(
    token: str,
    anchor_token: str,
    registry: ConverterRegistry,
    max_depth: Optional[int] = None
) -> List[str]:
    """Find the first route from a token to the anchor token.

    Anchors are tried in registry order and, within each anchor's converter,
    connector tokens are tried in registry order; the first connector that
    leads to the anchor token wins. The result is therefore the first path in
    registry order, not necessarily the shortest one.

    Tokens already on the stack or already exhausted are not expanded again,
    which keeps the search finite on cyclic registries.

    Args:
        token: Token to start from
        anchor_token: Token every route must end at
        registry: Registry answering the queries
        max_depth: Maximum number of conversions, None for no limit

    Returns:
        Alternating token / anchor list from ``token`` to ``anchor_token``,
        ``[token]`` if ``token`` is the anchor token, empty if unreachable

    Raises:
        PathDepthExceededError: The search needed more than ``max_depth`` hops
    """
    if token == anchor_token:
        return [token]

    visited = {token}
    stack = [_Frame(token, registry)]

    while stack:
        frame = stack[-1]
        edge = next(frame.edges, None)
        if edge is None:
            logger.debug(f"No route to {anchor_token} from {frame.token}")
            stack.pop()
            continue

        frame.anchor, connector = edge

        if connector == anchor_token:
            path = []
            for f in stack:
                path.extend((f.token, f.anchor))
            path.append(anchor_token)
            return path

        if connector in visited:
            logger.debug(f"Skipping already visited token {connector}")
            continue

        if max_depth is not None and len(stack) >= max_depth:
            raise PathDepthExceededError(
                f"Route from {token} exceeds {max_depth} conversions at {connector}",
                token=token,
                max_depth=max_depth
            )

        visited.add(connector)
        stack.append(_Frame(connector, registry))

    return []
