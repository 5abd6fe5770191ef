"""
Search commands for CLI.

This module provides the command handler for directory searches.
"""

from ...cli.handlers.cli_handler import CommandHandler, CommandResult
from ...cli.formatters.output_formatter import OutputFormatter
from ....core.entities import SearchOptions
from ....core.interfaces import SearchServiceInterface
from ....shared.exceptions import SearchError
from ....shared.logging import LogFormatter


class SearchCommand(CommandHandler):
    """
    Command handler for directory search.

    Runs one search and prints match and context lines, or the full
    response as JSON.
    """

    def __init__(
        self,
        formatter: OutputFormatter,
        search_service: SearchServiceInterface
    ):
        """
        Initialize the handler.

        Args:
            formatter: Output formatter
            search_service: Search service
        """
        super().__init__(formatter)
        self.search_service = search_service

    async def execute(
        self,
        options: SearchOptions,
        output_json: bool = False,
        **kwargs
    ) -> CommandResult:
        """
        Execute the search command.

        Args:
            options: Search options
            output_json: Print the response as JSON instead of lines
            **kwargs: Additional arguments

        Returns:
            CommandResult: Command execution result; data holds the
                SearchResponse on success
        """
        try:
            response = await self.search_service.search_with_stats(options)
        except SearchError as e:
            return self.handle_error(e, "Search failed")

        if output_json:
            self.formatter.print(self.formatter.format_json(response.to_dict()))
            return CommandResult(
                success=True,
                message="Search completed",
                data=response
            )

        if not response.results:
            return self.handle_success("No results found", data=response)

        self.formatter.print(
            self.formatter.format_results(response.results, options.pattern)
        )
        return self.handle_success(
            "Search completed",
            data=response,
            details=(
                f"{response.match_count} matches, "
                f"{response.context_count} context lines in "
                f"{LogFormatter.format_duration(response.query_time_ms / 1000)}"
            )
        )
