"""
Application service for the linesift search operation.

Wires the invocation builder, the process runner and the result
assembler together, and provides the Flask HTTP entry point with
/health and /search endpoints.
"""

import asyncio
import os
import time
from typing import Any, Dict, List, Optional

from ...core.entities import SearchOptions, SearchResult, SearchResponse
from ...core.interfaces import ProcessRunnerInterface, SearchServiceInterface
from ...domain.search import InvocationBuilder, ResultAssembler, SearchDomainService
from ...infrastructure.config import ConfigManager, EnvironmentConfig
from ...infrastructure.external.process_runner import AsyncProcessRunner
from ...shared.exceptions import (
    ErrorContextManager,
    InvalidOptionsError,
    OutputDecodeFailedError,
    ProcessSpawnFailedError,
    SearchError,
    SearchTimeoutError
)
from ...shared.logging import LoggerInterface, LogLevel, configure_logging

# ripgrep exits 1 when nothing matched
_NORMAL_EXIT_CODES = (0, 1)
_STDERR_LOG_LIMIT = 500


class SearchApplicationService(SearchServiceInterface):
    """
    Runs one search per call.

    Nothing is shared between calls apart from the injected
    collaborators, so concurrent searches are independent.
    """

    def __init__(
        self,
        runner: Optional[ProcessRunnerInterface] = None,
        config: Optional[EnvironmentConfig] = None,
        logger: Optional[LoggerInterface] = None
    ):
        """
        Initialize the service.

        Args:
            runner: Process runner; defaults to AsyncProcessRunner
            config: Loaded configuration; defaults to ConfigManager()
            logger: Logger; defaults to a structured logger
        """
        self.config = config or ConfigManager().load_config()
        self.runner = runner or AsyncProcessRunner()
        self.logger = logger or configure_logging(
            "linesift.search",
            level=LogLevel.parse(self.config.get_log_level())
        )

    def is_engine_available(self) -> bool:
        """Whether the configured engine executable resolves."""
        executable = self.config.get_engine_executable()
        return self.runner.resolve_executable(executable) is not None

    async def search(self, options: SearchOptions) -> List[SearchResult]:
        """
        Search a directory tree for a pattern.

        Args:
            options: Search options

        Returns:
            List[SearchResult]: Ordered match and context lines; empty
                when nothing matched

        Raises:
            InvalidOptionsError: Before spawning, if the options are invalid
            ProcessSpawnFailedError: If the engine could not be started
            OutputDecodeFailedError: If the engine output is not text
            SearchTimeoutError: If the configured timeout elapsed
        """
        response = await self.search_with_stats(options)
        return response.results

    async def search_with_stats(self, options: SearchOptions) -> SearchResponse:
        """
        Search and return results with counts and timing.

        Args:
            options: Search options

        Returns:
            SearchResponse: Results plus diagnostics
        """
        started = time.perf_counter()
        try:
            args = InvocationBuilder.build(options)
            executable = self.config.get_engine_executable()
            timeout = self.config.get_engine_timeout()
            self.logger.debug(
                "Running search engine",
                executable=executable,
                arg_count=len(args),
                timeout_seconds=timeout
            )
            output = await self.runner.run(executable, args, timeout=timeout)

            if output.returncode not in _NORMAL_EXIT_CODES:
                # Output is still parsed best-effort below
                self.logger.warning(
                    "Search engine exited with an error status",
                    exit_code=output.returncode,
                    stderr=output.stderr.decode("utf-8", "replace")[:_STDERR_LOG_LIMIT],
                    stdout_bytes=len(output.stdout)
                )

            results, stats = ResultAssembler.assemble_with_stats(output.stdout)
        except SearchError as e:
            context = ErrorContextManager.create_context(
                e,
                directory=options.directory,
                duration_ms=_elapsed_ms(started)
            )
            self.logger.warning("Search failed", **context.to_dict())
            raise

        duration_ms = _elapsed_ms(started)
        response = SearchDomainService.create_search_response(
            results,
            query_time_ms=duration_ms,
            options=options,
            metadata={
                "exit_code": output.returncode,
                "assembly": stats.to_dict()
            }
        )

        self.logger.info(
            "Search completed",
            directory=options.directory,
            results=response.total_results,
            matches=response.match_count,
            context_lines=response.context_count,
            ignored_events=stats.ignored,
            malformed_lines=stats.malformed,
            exit_code=output.returncode,
            duration_ms=duration_ms
        )
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 3)


# ---------------------------------------------------------------------- #
# Flask HTTP entry point
# ---------------------------------------------------------------------- #

_ERROR_STATUS = {
    InvalidOptionsError: 400,
    OutputDecodeFailedError: 502,
    ProcessSpawnFailedError: 503,
    SearchTimeoutError: 504
}


def _status_for(error: SearchError) -> int:
    for error_type, status in _ERROR_STATUS.items():
        if isinstance(error, error_type):
            return status
    return 500


def _create_app(
    service: Optional[SearchApplicationService] = None,
    config_manager: Optional[ConfigManager] = None
):
    """Create and configure the Flask application."""
    from flask import Flask, request, jsonify
    from functools import wraps

    app = Flask(__name__)
    config_manager = config_manager or ConfigManager()
    logger = configure_logging("linesift.http")
    logger.add_context(interface="http")

    # ----- API key auth middleware -----
    def _require_api_key(f):
        @wraps(f)
        def decorated(*args, **kwargs):
            api_key = os.getenv("LINESIFT_API_KEY", "")
            if not api_key:
                # No key configured => auth disabled
                return f(*args, **kwargs)
            auth_header = request.headers.get("Authorization", "")
            if auth_header.startswith("Bearer "):
                token = auth_header[7:]
            else:
                token = auth_header
            if token != api_key:
                return jsonify({"error": "Unauthorized"}), 401
            return f(*args, **kwargs)
        return decorated

    # Lazy-init the service (built once on first request)
    _services: Dict[str, Any] = {}
    if service is not None:
        _services["instance"] = service

    def _get_service() -> SearchApplicationService:
        if "instance" not in _services:
            config = config_manager.load_config()
            logger.set_level(LogLevel.parse(config.get_log_level()))
            _services["instance"] = SearchApplicationService(
                config=config,
                logger=logger
            )
        return _services["instance"]

    @app.route("/health", methods=["GET"])
    def health():
        """Health check endpoint (no auth required)."""
        try:
            available = _get_service().is_engine_available()
        except ValueError as e:
            logger.error("Invalid configuration", error=str(e))
            return jsonify({"status": "unhealthy", "error": str(e)}), 503
        if available:
            return jsonify({"status": "healthy"}), 200
        return jsonify({"status": "degraded", "error": "search engine not found"}), 503

    @app.route("/search", methods=["POST"])
    @_require_api_key
    def search_endpoint():
        """Search endpoint accepting a JSON body of search options."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        if not isinstance(data.get("pattern"), str):
            return jsonify({"error": "Missing 'pattern' field"}), 400

        try:
            search_service = _get_service()
            defaults = config_manager.get_search_defaults()
        except ValueError as e:
            logger.error("Invalid configuration", error=str(e))
            return jsonify({"error": "Invalid configuration", "message": str(e)}), 503

        options = SearchOptions.from_dict(data, defaults=defaults)

        try:
            response = asyncio.run(search_service.search_with_stats(options))
        except SearchError as e:
            return jsonify(e.to_dict()), _status_for(e)
        except Exception as e:
            logger.exception("Search request failed", exc_info=e)
            return jsonify({"error": "Search failed"}), 500

        body = response.to_dict()
        body["count"] = response.total_results
        return jsonify(body)

    return app


def main():
    """Entry point for the search HTTP service."""
    config = ConfigManager().load_config()
    debug = os.getenv("FLASK_DEBUG", "0") == "1"

    app = _create_app()
    logger = configure_logging("linesift.server", level=LogLevel.parse(config.get_log_level()))
    logger.info(
        "Starting linesift search service",
        host=config.get_server_host(),
        port=config.get_server_port()
    )
    app.run(host=config.get_server_host(), port=config.get_server_port(), debug=debug)


if __name__ == "__main__":
    main()
