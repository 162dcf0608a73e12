"""
Registry module for Conversion SDK.

This module provides the read-only registry interface used by the path
finder, an in-memory snapshot implementation and an RPC client for remote
registry services.
"""

from .base import ConverterRegistry
from .snapshot import RegistrySnapshot
from .client import RegistryClient

__all__ = [
    "ConverterRegistry",
    "RegistrySnapshot",
    "RegistryClient",
]
