"""
Domain service for search operations.

This module contains pure business logic for search operations,
separated from infrastructure concerns.
"""

import re
from typing import List, Dict, Any, Optional, Tuple

from ...core.entities import (
    SearchOptions,
    SearchResult,
    SearchResponse
)


class SearchDomainService:
    """
    Domain service for search operations.

    This service contains pure business logic for search, with no
    dependencies on external systems or infrastructure.
    """

    @staticmethod
    def create_search_result(
        path: str,
        line_number: int,
        content: str,
        is_match: bool
    ) -> SearchResult:
        """
        Create a search result.

        Args:
            path: File path as reported by the engine
            line_number: 1-based line number
            content: Line text without trailing newline
            is_match: Whether the line matched, as opposed to context

        Returns:
            SearchResult: Search result object
        """
        return SearchResult(
            path=path,
            line_number=line_number,
            content=content,
            is_match=is_match
        )

    @staticmethod
    def sort_results(results: List[SearchResult]) -> List[SearchResult]:
        """
        Order results by path, then line number.

        The sort is stable, so records sharing a path and line keep
        their arrival order, and sorting sorted input is a no-op.

        Args:
            results: Results in arrival order

        Returns:
            List[SearchResult]: New, ordered list
        """
        return sorted(results, key=lambda r: (r.path, r.line_number))

    @staticmethod
    def create_search_response(
        results: List[SearchResult],
        query_time_ms: float,
        options: SearchOptions,
        metadata: Optional[Dict[str, Any]] = None
    ) -> SearchResponse:
        """
        Create a search response.

        Args:
            results: Ordered search results
            query_time_ms: Search execution time in milliseconds
            options: Options the search ran with
            metadata: Optional response metadata

        Returns:
            SearchResponse: Search response object
        """
        match_count = sum(1 for r in results if r.is_match)
        return SearchResponse(
            results=results,
            total_results=len(results),
            match_count=match_count,
            context_count=len(results) - match_count,
            query_time_ms=query_time_ms,
            options=options,
            metadata=metadata or {}
        )

    @staticmethod
    def highlight_spans(content: str, pattern: str) -> List[Tuple[str, bool]]:
        """
        Split a line into plain and highlighted segments.

        The pattern is matched literally and case-insensitively, which is
        how results are shown to users regardless of the regex the engine
        actually ran.

        Args:
            content: Line text
            pattern: Search pattern

        Returns:
            List[Tuple[str, bool]]: (segment, is_highlighted) pairs whose
                segments concatenate back to content
        """
        if not pattern:
            return [(content, False)] if content else []

        regex = re.compile(f"({re.escape(pattern)})", re.IGNORECASE)
        spans = []
        for index, part in enumerate(regex.split(content)):
            if part:
                # split() puts captured groups at odd indices
                spans.append((part, index % 2 == 1))
        return spans
