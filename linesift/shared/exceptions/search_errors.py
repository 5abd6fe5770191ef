"""
Search error taxonomy.

Every failure of a search request surfaces to the caller as one of
these types. None of them is retried internally.
"""

from typing import Any, Dict, List, Optional

from ..validation.validator_interface import ValidationIssue


class SearchError(Exception):
    """
    Base class for all search failures.

    Carries a human-readable message and optional structured context
    for logging and error payloads.
    """

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "context": self.context
        }


class InvalidOptionsError(SearchError):
    """Raised before any process is spawned when the options are invalid."""

    def __init__(
        self,
        message: str,
        issues: Optional[List[ValidationIssue]] = None,
        **context: Any
    ):
        super().__init__(message, **context)
        self.issues = issues or []

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["issues"] = [issue.to_dict() for issue in self.issues]
        return data


class ProcessSpawnFailedError(SearchError):
    """Raised when the search engine could not be located or launched."""


class OutputDecodeFailedError(SearchError):
    """Raised when the captured engine output is not valid text."""


class SearchTimeoutError(SearchError):
    """Raised when the engine did not finish within the configured timeout."""
