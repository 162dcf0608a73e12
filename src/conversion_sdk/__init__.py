"""
Conversion SDK for Python

A Python SDK for finding conversion paths between tokens over a registry of
converters, routing every path through a configured anchor token.
"""

__version__ = "0.1.0"

# Core configuration and types
from .core.config import ConversionConfig
from .core.types import (
    TokenRole,
    PathStep,
    FindPathParams,
    ConversionPathResult,
)

# Registry access
from .registry.base import ConverterRegistry
from .registry.snapshot import RegistrySnapshot
from .registry.client import RegistryClient

# Path finding
from .pathfinding.discoverer import find_path_to_anchor
from .pathfinding.merger import merge_paths, collapse_cycles
from .pathfinding.finder import ConversionPathFinder, find_path, format_path
from .pathfinding.service import ConversionPathService

# Exceptions
from .core.exceptions import (
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

# Main exports for public API
__all__ = [
    # Version info
    "__version__",

    # Configuration
    "ConversionConfig",

    # Core types
    "TokenRole",
    "PathStep",
    "FindPathParams",
    "ConversionPathResult",

    # Registry
    "ConverterRegistry",
    "RegistrySnapshot",
    "RegistryClient",

    # Path finding
    "find_path_to_anchor",
    "merge_paths",
    "collapse_cycles",
    "find_path",
    "format_path",
    "ConversionPathFinder",
    "ConversionPathService",

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
