"""
Query handlers for search operations.
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass

from ...core.entities import SearchOptions, SearchResponse
from ...core.interfaces import SearchServiceInterface


@dataclass
class SearchFilesQuery:
    """Query to search a directory tree."""
    options: SearchOptions
    metadata: Optional[Dict[str, Any]] = None


class SearchHandler:
    """
    Handler for search queries.

    This class processes queries by delegating to the
    application service.
    """

    def __init__(self, service: SearchServiceInterface):
        """
        Initialize the handler.

        Args:
            service: Search application service
        """
        self.service = service

    async def handle_search(
        self,
        query: SearchFilesQuery
    ) -> SearchResponse:
        """
        Handle search query.

        Args:
            query: Search query

        Returns:
            SearchResponse: Search results
        """
        response = await self.service.search_with_stats(query.options)
        if query.metadata:
            response.metadata.update(query.metadata)
        return response
