"""
Output formatter for CLI commands.

This module provides consistent formatting for CLI output,
including search result listings, tables, and JSON.
"""

from typing import Any, Dict, List, Optional, Union
import json
import sys
from tabulate import tabulate
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ....core.entities import SearchResult
from ....domain.search import SearchDomainService


class OutputFormatter:
    """
    Formatter for CLI command output.

    Results go to stdout; status panels and errors go to stderr so
    that piped output stays clean.
    """

    MATCH_SEPARATOR = ":"
    CONTEXT_SEPARATOR = "-"

    def __init__(self, use_rich: bool = True):
        """
        Initialize the formatter.

        Args:
            use_rich: Whether to use rich formatting
        """
        self.use_rich = use_rich
        self.console = Console() if use_rich else None
        self.error_console = Console(stderr=True) if use_rich else None

    def format_results(
        self,
        results: List[SearchResult],
        pattern: str = ""
    ) -> Union[Text, str]:
        """
        Format search results grep-style.

        Match lines read ``path:line:content`` with occurrences of the
        pattern highlighted; context lines read ``path-line-content``
        and are dimmed.

        Args:
            results: Ordered search results
            pattern: Pattern to highlight, matched literally

        Returns:
            Union[Text, str]: Rich text, or a tabulate table in plain mode
        """
        if not self.use_rich:
            return self.format_table(
                [
                    {
                        "Path": r.path,
                        "Line": r.line_number,
                        "Kind": "match" if r.is_match else "context",
                        "Content": r.content
                    }
                    for r in results
                ],
                headers=["Path", "Line", "Kind", "Content"]
            )

        text = Text()
        for index, result in enumerate(results):
            if index:
                text.append("\n")
            sep = self.MATCH_SEPARATOR if result.is_match else self.CONTEXT_SEPARATOR
            text.append(result.path, style="magenta")
            text.append(sep)
            text.append(str(result.line_number), style="green")
            text.append(sep)
            if result.is_match:
                for segment, highlighted in SearchDomainService.highlight_spans(result.content, pattern):
                    text.append(segment, style="bold red" if highlighted else None)
            else:
                text.append(result.content, style="dim")
        return text

    def format_table(
        self,
        data: List[Dict[str, Any]],
        headers: List[str]
    ) -> str:
        """
        Format rows as a plain-text table.

        Args:
            data: List of dictionaries containing row data
            headers: Column keys, in display order

        Returns:
            str: tabulate table
        """
        return tabulate(
            [[row.get(key, "") for key in headers] for row in data],
            headers=headers,
            tablefmt="plain"
        )

    def format_json(
        self,
        data: Union[Dict[str, Any], List[Any]]
    ) -> str:
        """
        Format data as indented JSON.

        Args:
            data: Data to format

        Returns:
            str: Formatted JSON
        """
        return json.dumps(data, indent=2, ensure_ascii=False)

    def format_error(
        self,
        message: str,
        details: str
    ) -> Union[Panel, str]:
        """
        Format error message.

        Args:
            message: Error message
            details: Error details

        Returns:
            Union[Panel, str]: Formatted error
        """
        if self.use_rich:
            error_text = Text(message, style="bold red")
            error_text.append("\n" + details, style="red")
            return Panel(error_text, title="Error", border_style="red")
        else:
            return f"Error: {message}\n{details}"

    def format_success(
        self,
        message: str,
        details: Optional[str] = None
    ) -> Union[Text, str]:
        """
        Format success message.

        Args:
            message: Success message
            details: Optional success details

        Returns:
            Union[Text, str]: Formatted success message
        """
        if self.use_rich:
            success_text = Text(message, style="bold green")
            if details:
                success_text.append(" (" + details + ")", style="green")
            return success_text
        else:
            if details:
                return f"{message} ({details})"
            return message

    def print(self, content: Any) -> None:
        """
        Print content to stdout.

        Args:
            content: Content to print
        """
        if self.use_rich:
            self.console.print(content, soft_wrap=True, markup=False, highlight=False)
        else:
            print(content)

    def print_error(self, content: Any) -> None:
        """
        Print status or error content to stderr.

        Args:
            content: Content to print
        """
        if self.use_rich:
            self.error_console.print(content, soft_wrap=True, markup=False, highlight=False)
        else:
            print(content, file=sys.stderr)
