"""
linesift: search a directory tree with ripgrep and get back ordered
match and context lines.
"""

from .core.entities import SearchOptions, SearchResult, SearchResponse
from .shared.exceptions import (
    SearchError,
    InvalidOptionsError,
    ProcessSpawnFailedError,
    OutputDecodeFailedError,
    SearchTimeoutError
)

__version__ = "1.0.0"

__all__ = [
    'SearchOptions',
    'SearchResult',
    'SearchResponse',
    'SearchError',
    'InvalidOptionsError',
    'ProcessSpawnFailedError',
    'OutputDecodeFailedError',
    'SearchTimeoutError'
]
