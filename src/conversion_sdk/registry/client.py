"""JSON-RPC client for a remote converter registry service."""

import asyncio
import logging
from collections import deque
from typing import Optional, Dict, Any, Iterable, List
import aiohttp
from aiohttp import ClientTimeout, ClientError

from .snapshot import RegistrySnapshot
from ..core.config import ConversionConfig
from ..core.types import RPCRequest, RPCResponse
from ..core.exceptions import (
    RegistryError,
    RPCError,
    NetworkError,
    TimeoutError as SDKTimeoutError,
    RateLimitError
)

logger = logging.getLogger(__name__)

# JSON-RPC error code returned by the registry service for unknown anchors/converters
UNKNOWN_ENTRY_ERROR_CODE = -32004


class RegistryClient:
    """Async RPC client for a converter registry service."""

    def __init__(self, config: ConversionConfig):
        """Initialize the registry client.

        Args:
            config: Conversion configuration containing the registry URL and settings
        """
        self.config = config
        self.session: Optional[aiohttp.ClientSession] = None
        self._closed = False

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self):
        """Ensure aiohttp session is created."""
        if self.session is None or self.session.closed:
            timeout = ClientTimeout(total=self.config.request_timeout)
            self.session = aiohttp.ClientSession(
                timeout=timeout,
                headers={
                    'Content-Type': 'application/json',
                    'User-Agent': 'Conversion-Python-SDK/0.1.0'
                }
            )

    async def close(self):
        """Close the HTTP session."""
        if self.session and not self.session.closed:
            await self.session.close()
        self._closed = True

    async def _make_rpc_call(
        self,
        method: str,
        params: list,
        timeout: Optional[float] = None
    ) -> Any:
        """Make a JSON-RPC call with retry logic.

        Args:
            method: RPC method name
            params: RPC parameters
            timeout: Request timeout override

        Returns:
            RPC result data

        Raises:
            RPCError: RPC call failed
            RegistryError: The registry does not know the requested entry
            NetworkError: Network connectivity issues
            TimeoutError: Request timed out
        """
        if self._closed:
            raise RuntimeError("Client has been closed")

        await self._ensure_session()

        request = RPCRequest(
            method=method,
            params=params
        )

        last_exception = None

        for attempt in range(self.config.max_retries + 1):
            try:
                logger.debug(f"RPC call attempt {attempt + 1}: {method} {params}")

                async with self.session.post(
                    self.config.registry_url,
                    json=request.model_dump(),
                    timeout=ClientTimeout(total=timeout or self.config.request_timeout)
                ) as response:

                    # Handle rate limiting
                    if response.status == 429:
                        retry_after = int(response.headers.get('Retry-After', 60))
                        raise RateLimitError(
                            "Rate limit exceeded",
                            retry_after=retry_after,
                            details={'status_code': response.status}
                        )

                    # Handle other HTTP errors
                    if response.status >= 400:
                        error_text = await response.text()
                        raise RPCError(
                            f"HTTP {response.status}: {error_text}",
                            method=method,
                            status_code=response.status,
                            response_data=error_text
                        )

                    # Parse JSON response
                    try:
                        json_data = await response.json()
                    except Exception as e:
                        raise RPCError(
                            f"Failed to parse JSON response: {e}",
                            method=method,
                            status_code=response.status
                        )

                    # Validate RPC response format
                    try:
                        rpc_response = RPCResponse(**json_data)
                    except Exception as e:
                        raise RPCError(
                            f"Invalid RPC response format: {e}",
                            method=method,
                            response_data=json_data
                        )

                    if rpc_response.error:
                        error = rpc_response.error
                        error_code = error.get('code', -1)
                        error_message = error.get('message', 'Unknown RPC error')

                        if error_code == UNKNOWN_ENTRY_ERROR_CODE:
                            raise RegistryError(
                                error_message,
                                token=params[0] if params else None,
                                details={'rpc_error': error}
                            )
                        raise RPCError(
                            f"RPC error {error_code}: {error_message}",
                            method=method,
                            response_data=error,
                            details={'rpc_error': error}
                        )

                    return rpc_response.result

            except (ClientError, asyncio.TimeoutError) as e:
                last_exception = e
                if attempt < self.config.max_retries:
                    delay = self.config.retry_delay * (2 ** attempt)  # Exponential backoff
                    logger.warning(f"RPC call failed, retrying in {delay}s: {e}")
                    await asyncio.sleep(delay)
                    continue
                break

            except (RPCError, RegistryError):
                # Don't retry RPC-level errors
                raise

        # All retries failed
        if isinstance(last_exception, asyncio.TimeoutError):
            raise SDKTimeoutError(
                f"RPC call timed out after {self.config.max_retries + 1} attempts",
                timeout_duration=self.config.request_timeout
            )
        else:
            raise NetworkError(
                f"Network error after {self.config.max_retries + 1} attempts: {last_exception}"
            )

    async def is_anchor(self, token: str) -> bool:
        """Check whether a token is a converter anchor."""
        return bool(await self._make_rpc_call('registry_isAnchor', [token]))

    async def get_convertible_token_anchors(self, token: str) -> List[str]:
        """Get the anchors a token is convertible through, in registry order."""
        result = await self._make_rpc_call('registry_getConvertibleTokenAnchors', [token])
        return list(result or [])

    async def owner_of(self, anchor: str) -> str:
        """Get the converter owning an anchor."""
        result = await self._make_rpc_call('registry_ownerOf', [anchor])
        if not result:
            raise RegistryError(f"Anchor has no owner: {anchor}", token=anchor)
        return result

    async def connector_token_count(self, converter: str) -> int:
        """Get the number of connector tokens of a converter."""
        return int(await self._make_rpc_call('registry_connectorTokenCount', [converter]))

    async def connector_token_at(self, converter: str, index: int) -> str:
        """Get a converter's connector token by index."""
        return await self._make_rpc_call('registry_connectorTokenAt', [converter, index])

    async def load_snapshot(
        self,
        tokens: Iterable[str],
        anchor_token: Optional[str] = None
    ) -> RegistrySnapshot:
        """Load every token and converter reachable from the given tokens.

        The anchor token is recorded but never expanded: the path finder stops
        as soon as it reaches it.

        Args:
            tokens: Tokens to start crawling from
            anchor_token: Token at which crawling stops

        Returns:
            Registry snapshot preserving the remote registry's ordering
        """
        anchors: List[str] = []
        token_anchors: Dict[str, List[str]] = {}
        owners: Dict[str, str] = {}
        connectors: Dict[str, List[str]] = {}

        pending = deque(dict.fromkeys(tokens))
        seen = set(pending)

        while pending:
            token = pending.popleft()
            if token == anchor_token:
                continue

            if await self.is_anchor(token):
                candidates = [token]
            else:
                candidates = await self.get_convertible_token_anchors(token)
                token_anchors[token] = candidates

            for anchor in candidates:
                if anchor in owners:
                    continue
                anchors.append(anchor)
                converter = await self.owner_of(anchor)
                owners[anchor] = converter

                if converter not in connectors:
                    count = await self.connector_token_count(converter)
                    connectors[converter] = [
                        await self.connector_token_at(converter, i) for i in range(count)
                    ]

                for connector in connectors[converter]:
                    if connector not in seen:
                        seen.add(connector)
                        pending.append(connector)

        logger.info(
            f"Loaded registry snapshot: {len(seen)} tokens, {len(owners)} anchors, "
            f"{len(connectors)} converters"
        )

        return RegistrySnapshot(
            anchors=anchors,
            convertible_token_anchors=token_anchors,
            owners=owners,
            connectors=connectors
        )

    async def health_check(self) -> bool:
        """Check if the registry service is healthy.

        Returns:
            True if service is healthy, False otherwise
        """
        try:
            await self._make_rpc_call(
                'net_version',
                [],
                timeout=5.0
            )
            return True
        except Exception as e:
            logger.warning(f"Registry health check failed: {e}")
            return False
