"""
Core entities module for linesift.

This module provides access to all core entity classes used throughout
the application.
"""

from .search_entity import (
    SearchOptions,
    SearchResult,
    SearchResponse,
    ProcessOutput
)

__all__ = [
    'SearchOptions',
    'SearchResult',
    'SearchResponse',
    'ProcessOutput'
]
