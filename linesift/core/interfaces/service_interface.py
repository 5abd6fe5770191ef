"""
Service interface definitions for search business logic.

This module defines the abstract interface that search service
implementations must follow.
"""

from abc import ABC, abstractmethod
from typing import List

from ..entities import (
    SearchOptions,
    SearchResult,
    SearchResponse
)


class SearchServiceInterface(ABC):
    """Interface for search service operations."""

    @abstractmethod
    async def search(self, options: SearchOptions) -> List[SearchResult]:
        """
        Search a directory tree for a pattern.

        Args:
            options: Search options

        Returns:
            List[SearchResult]: Match and context lines ordered by path and line

        Raises:
            SearchError: If the options are invalid or the engine fails
        """
        pass

    @abstractmethod
    async def search_with_stats(self, options: SearchOptions) -> SearchResponse:
        """
        Search and return results with counts and timing.

        Args:
            options: Search options

        Returns:
            SearchResponse: Results plus diagnostics
        """
        pass
