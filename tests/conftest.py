"""
Test configuration and fixtures for linesift tests.
"""

import copy
import io
import json
import pytest
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, Mock

from linesift.core.entities import ProcessOutput, SearchOptions
from linesift.application.services.search_application_service import SearchApplicationService
from linesift.infrastructure.config import DEFAULT_CONFIG, EnvironmentConfig
from linesift.shared.logging import LogLevel, StructuredLogger

_ENV_VARS = (
    "APP_ENV",
    "LINESIFT_CONFIG_DIR",
    "LINESIFT_RG_PATH",
    "LINESIFT_TIMEOUT",
    "LINESIFT_HOST",
    "LINESIFT_PORT",
    "LINESIFT_API_KEY",
    "LOG_LEVEL",
)


class RgStream:
    """Builds ripgrep --json output for tests."""

    @staticmethod
    def match(path: str, line_number: int, text: str) -> Dict[str, Any]:
        return {
            "type": "match",
            "data": {
                "path": {"text": path},
                "lines": {"text": text + "\n"},
                "line_number": line_number,
                "absolute_offset": 0,
                "submatches": [],
            },
        }

    @staticmethod
    def context(path: str, line_number: int, text: str) -> Dict[str, Any]:
        return {
            "type": "context",
            "data": {
                "path": {"text": path},
                "lines": {"text": text + "\n"},
                "line_number": line_number,
                "absolute_offset": 0,
                "submatches": [],
            },
        }

    @staticmethod
    def begin(path: str) -> Dict[str, Any]:
        return {"type": "begin", "data": {"path": {"text": path}}}

    @staticmethod
    def end(path: str) -> Dict[str, Any]:
        return {"type": "end", "data": {"path": {"text": path}, "stats": {}}}

    @staticmethod
    def summary() -> Dict[str, Any]:
        return {
            "type": "summary",
            "data": {"elapsed_total": {"secs": 0, "nanos": 1000}, "stats": {"matches": 0}},
        }

    @staticmethod
    def output(*events: Any) -> bytes:
        """Join events into stdout bytes; strings are written verbatim."""
        lines = [e if isinstance(e, str) else json.dumps(e) for e in events]
        return ("\n".join(lines) + "\n").encode("utf-8")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment variables out of configuration."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def rg() -> RgStream:
    """ripgrep output builder."""
    return RgStream()


@pytest.fixture
def engine_config() -> EnvironmentConfig:
    """Default configuration, isolated from any config files."""
    return EnvironmentConfig(copy.deepcopy(DEFAULT_CONFIG))


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def test_logger(log_stream, request) -> StructuredLogger:
    """Structured logger writing to an in-memory stream."""
    return StructuredLogger(
        name=f"linesift.test.{request.node.name}",
        level=LogLevel.DEBUG,
        output=log_stream,
    )


def make_runner(
    stdout: bytes = b"",
    returncode: int = 0,
    stderr: bytes = b"",
    side_effect: Optional[BaseException] = None,
) -> Mock:
    runner = Mock()
    runner.resolve_executable.return_value = "/usr/bin/rg"
    if side_effect is not None:
        runner.run = AsyncMock(side_effect=side_effect)
    else:
        runner.run = AsyncMock(
            return_value=ProcessOutput(stdout=stdout, stderr=stderr, returncode=returncode)
        )
    return runner


@pytest.fixture
def runner_factory():
    """Factory for mock process runners."""
    return make_runner


@pytest.fixture
def service_factory(engine_config, test_logger):
    """Build a SearchApplicationService around a given runner."""
    def _factory(runner) -> SearchApplicationService:
        return SearchApplicationService(
            runner=runner,
            config=engine_config,
            logger=test_logger,
        )
    return _factory


@pytest.fixture
def basic_options() -> SearchOptions:
    return SearchOptions(pattern="hello", directory="src", max_depth=3)


def read_log_entries(stream: io.StringIO) -> List[Dict[str, Any]]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


@pytest.fixture
def log_entries(log_stream):
    """Callable returning the decoded log records written so far."""
    return lambda: read_log_entries(log_stream)
