"""
Core module for Conversion SDK.

This module contains the configuration, types and exceptions shared by the
registry and path finding modules.
"""

from .config import ConversionConfig
from .types import (
    ZERO_ADDRESS,
    TokenRole,
    PathStep,
    FindPathParams,
    ConversionPathResult,
    RPCRequest,
    RPCResponse,
    validate_token,
)
from .exceptions import (
    ConversionSDKError,
    ConfigurationError,
    ValidationError,
    PathfindingError,
    PathDepthExceededError,
    RegistryError,
    RPCError,
    NetworkError,
    TimeoutError,
    RateLimitError,
)

__all__ = [
    # Configuration
    "ConversionConfig",

    # Core types
    "ZERO_ADDRESS",
    "TokenRole",
    "PathStep",
    "FindPathParams",
    "ConversionPathResult",
    "RPCRequest",
    "RPCResponse",
    "validate_token",

    # Exceptions
    "ConversionSDKError",
    "ConfigurationError",
    "ValidationError",
    "PathfindingError",
    "PathDepthExceededError",
    "RegistryError",
    "RPCError",
    "NetworkError",
    "TimeoutError",
    "RateLimitError",
]
