"""
Core interfaces module for linesift.

This module provides access to all core interfaces used throughout
the application.
"""

from .service_interface import SearchServiceInterface
from .client_interface import ProcessRunnerInterface

__all__ = [
    'SearchServiceInterface',
    'ProcessRunnerInterface'
]
