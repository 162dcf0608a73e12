"""
Pathfinding module for Conversion SDK.

This module provides conversion path discovery: routes from a token to the
anchor token, merging of two routes into a single path, and query front-ends.
"""

from .discoverer import find_path_to_anchor
from .merger import merge_paths, collapse_cycles, tag_path
from .finder import ConversionPathFinder, find_path, format_path, validate_find_path_params
from .service import ConversionPathService

__all__ = [
    "find_path_to_anchor",
    "merge_paths",
    "collapse_cycles",
    "tag_path",
    "ConversionPathFinder",
    "find_path",
    "format_path",
    "validate_find_path_params",
    "ConversionPathService",
]
