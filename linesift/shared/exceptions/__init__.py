from .search_errors import (
    SearchError,
    InvalidOptionsError,
    ProcessSpawnFailedError,
    OutputDecodeFailedError,
    SearchTimeoutError
)
from .error_context import ErrorContext, ErrorContextManager

__all__ = [
    'SearchError',
    'InvalidOptionsError',
    'ProcessSpawnFailedError',
    'OutputDecodeFailedError',
    'SearchTimeoutError',
    'ErrorContext',
    'ErrorContextManager'
]
