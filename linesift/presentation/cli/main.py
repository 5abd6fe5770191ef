"""
Command-line entry point for linesift.

Exit status follows grep: 0 when something matched, 1 when nothing
did, 2 on error.
"""

import asyncio
import sys
from typing import Optional, Tuple

import click

from .commands.search_commands import SearchCommand
from .formatters.output_formatter import OutputFormatter
from ...application.services.search_application_service import SearchApplicationService
from ...core.entities import SearchOptions
from ...infrastructure.config import ConfigManager
from ...shared.logging import LogLevel, configure_logging

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("pattern")
@click.argument("directory", default=".")
@click.option("-i", "--ignore-case", is_flag=True, help="Match case-insensitively.")
@click.option("--hidden", is_flag=True, help="Search hidden files and ignore .gitignore-style rules.")
@click.option("-d", "--max-depth", type=int, default=None, help="Directory depth limit, 1-10.")
@click.option("-t", "--type", "file_type", default=None, help="Engine file type, e.g. py.")
@click.option("-g", "--glob", "include_globs", multiple=True, help="Include files matching glob.")
@click.option("-x", "--exclude", "exclude_globs", multiple=True, help="Exclude files matching glob.")
@click.option("-C", "--context", "context_lines", type=int, default=None, help="Lines of context around matches.")
@click.option("--json", "output_json", is_flag=True, help="Print the full response as JSON.")
@click.option("--plain", is_flag=True, help="Plain table output without colors.")
@click.option("--timeout", type=float, default=None, help="Seconds before the search is aborted; 0 disables.")
@click.option("--config-dir", type=click.Path(file_okay=False), default=None, help="Directory holding base.yaml.")
@click.option("-v", "--verbose", is_flag=True, help="Log search diagnostics to stderr.")
def cli(
    pattern: str,
    directory: str,
    ignore_case: bool,
    hidden: bool,
    max_depth: Optional[int],
    file_type: Optional[str],
    include_globs: Tuple[str, ...],
    exclude_globs: Tuple[str, ...],
    context_lines: Optional[int],
    output_json: bool,
    plain: bool,
    timeout: Optional[float],
    config_dir: Optional[str],
    verbose: bool
) -> None:
    """Search DIRECTORY for PATTERN and print matching lines with context."""
    formatter = OutputFormatter(use_rich=not plain)

    config_manager = ConfigManager(config_dir=config_dir)
    try:
        config = config_manager.load_config()
    except ValueError as e:
        formatter.print_error(formatter.format_error("Invalid configuration", str(e)))
        sys.exit(EXIT_ERROR)

    if timeout is not None:
        config.config["engine"]["timeout_seconds"] = timeout

    options = SearchOptions.from_dict(
        {
            "pattern": pattern,
            "directory": directory,
            "case_sensitive": False if ignore_case else None,
            "search_hidden": True if hidden else None,
            "max_depth": max_depth,
            "file_type": file_type,
            "include_globs": include_globs or None,
            "exclude_globs": exclude_globs or None,
            "context_lines": context_lines
        },
        defaults=config_manager.get_search_defaults()
    )

    level = LogLevel.parse(config.get_log_level()) if verbose else LogLevel.WARNING
    logger = configure_logging("linesift.cli", level=level)
    logger.add_context(interface="cli")
    service = SearchApplicationService(config=config, logger=logger)
    result = asyncio.run(
        SearchCommand(formatter, service).execute(options=options, output_json=output_json)
    )

    if not result.success:
        sys.exit(EXIT_ERROR)
    sys.exit(EXIT_FOUND if result.data.results else EXIT_NOT_FOUND)


if __name__ == "__main__":
    cli()
