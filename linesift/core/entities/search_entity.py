"""
Data models for the linesift search functionality.

This module contains all data classes used to represent search options,
result lines, and related metadata.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Tuple
from datetime import datetime, timezone


def _as_tuple(value: Any) -> Tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return value


def _as_list(value: Any) -> Any:
    return list(value) if isinstance(value, (list, tuple)) else value


@dataclass(frozen=True)
class SearchOptions:
    """
    Represents a search request with all its parameters.

    Options are immutable once constructed; the invocation builder
    derives a fresh argument list from them on every call.
    """
    pattern: str
    directory: str = "."
    case_sensitive: bool = True
    search_hidden: bool = False
    max_depth: int = 5
    file_type: Optional[str] = None
    include_globs: Tuple[str, ...] = ()
    exclude_globs: Tuple[str, ...] = ()
    context_lines: int = 0

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        defaults: Optional[Dict[str, Any]] = None
    ) -> 'SearchOptions':
        """
        Build options from caller input.

        Args:
            data: Raw option values, e.g. a decoded JSON body
            defaults: Optional fallback values for missing keys

        Returns:
            SearchOptions: Constructed options

        Values are not coerced; wrongly typed input is left for the
        invocation builder to reject.

        Raises:
            KeyError: If no pattern is given
        """
        merged = {**(defaults or {}), **{k: v for k, v in data.items() if v is not None}}
        return cls(
            pattern=merged["pattern"],
            directory=merged.get("directory", "."),
            case_sensitive=merged.get("case_sensitive", True),
            search_hidden=merged.get("search_hidden", False),
            max_depth=merged.get("max_depth", 5),
            file_type=merged.get("file_type"),
            include_globs=_as_tuple(merged.get("include_globs")),
            exclude_globs=_as_tuple(merged.get("exclude_globs")),
            context_lines=merged.get("context_lines", 0)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to dictionary representation."""
        return {
            'pattern': self.pattern,
            'directory': self.directory,
            'case_sensitive': self.case_sensitive,
            'search_hidden': self.search_hidden,
            'max_depth': self.max_depth,
            'file_type': self.file_type,
            'include_globs': _as_list(self.include_globs),
            'exclude_globs': _as_list(self.exclude_globs),
            'context_lines': self.context_lines
        }


@dataclass(frozen=True)
class SearchResult:
    """
    Represents a single line returned from a search.

    ``is_match`` is true for lines matching the pattern and false for
    context lines pulled in by a nearby match.
    """
    path: str
    line_number: int
    content: str
    is_match: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary representation."""
        return {
            'path': self.path,
            'line_number': self.line_number,
            'content': self.content,
            'is_match': self.is_match
        }


@dataclass
class SearchResponse:
    """
    Represents the complete response from a search operation.

    This class contains the ordered result lines along with counts and
    timing about the search operation itself.
    """
    results: List[SearchResult]
    total_results: int
    match_count: int
    context_count: int
    query_time_ms: float
    options: SearchOptions
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert response to dictionary representation."""
        return {
            'results': [result.to_dict() for result in self.results],
            'total_results': self.total_results,
            'match_count': self.match_count,
            'context_count': self.context_count,
            'query_time_ms': self.query_time_ms,
            'options': self.options.to_dict(),
            'timestamp': self.timestamp.isoformat(),
            'metadata': self.metadata
        }


@dataclass(frozen=True)
class ProcessOutput:
    """Captured output of one finished engine process."""
    stdout: bytes
    stderr: bytes
    returncode: int
