"""
Result assembler for the engine's JSON-lines output.

ripgrep's --json mode writes one event object per line:

    {"type": "match", "data": {"path": {"text": "a.txt"},
                               "line_number": 5,
                               "lines": {"text": "hello\\n"}, ...}}

Only ``match`` and ``context`` events become results. Other known
kinds (``begin``, ``end``, ``summary``) are ignored, and lines that do
not decode to a usable event are skipped rather than failing the search.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from ...core.entities import SearchResult
from ...shared.exceptions import OutputDecodeFailedError
from .search_domain_service import SearchDomainService

MATCH = "match"
CONTEXT = "context"
RETAINED_KINDS = (MATCH, CONTEXT)

ENCODING = "utf-8"


class EventOutcome(Enum):
    """What happened to one line of engine output."""
    RETAINED = "retained"
    IGNORED = "ignored"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class DecodedLine:
    """Outcome of decoding one output line."""
    outcome: EventOutcome
    kind: Optional[str] = None
    result: Optional[SearchResult] = None


@dataclass
class AssemblyStats:
    """Per-search counters for bounded diagnostics."""
    lines: int = 0
    retained: int = 0
    ignored: int = 0
    malformed: int = 0

    def record(self, decoded: DecodedLine) -> None:
        self.lines += 1
        if decoded.outcome is EventOutcome.RETAINED:
            self.retained += 1
        elif decoded.outcome is EventOutcome.IGNORED:
            self.ignored += 1
        else:
            self.malformed += 1

    def to_dict(self) -> Dict[str, int]:
        return {
            "lines": self.lines,
            "retained": self.retained,
            "ignored": self.ignored,
            "malformed": self.malformed
        }


def _text_field(data: Dict[str, Any], key: str) -> Optional[str]:
    container = data.get(key)
    if not isinstance(container, dict):
        return None
    text = container.get("text")
    return text if isinstance(text, str) else None


def _strip_newline(text: str) -> str:
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


class ResultAssembler:
    """
    Turns captured engine stdout into ordered search results.

    The whole output is decoded up front, each non-blank line is
    decoded independently, and the retained records are stably
    sorted by (path, line_number).
    """

    @staticmethod
    def decode_event(line: str) -> DecodedLine:
        """
        Decode a single output line.

        Args:
            line: One line of engine output, without its newline

        Returns:
            DecodedLine: RETAINED with a result, IGNORED for other
                event kinds, or MALFORMED for anything unusable
        """
        # Deeply nested input exhausts the decoder's recursion limit
        try:
            event = json.loads(line)
        except (ValueError, RecursionError):
            return DecodedLine(EventOutcome.MALFORMED)

        if not isinstance(event, dict):
            return DecodedLine(EventOutcome.MALFORMED)

        kind = event.get("type")
        if not isinstance(kind, str):
            return DecodedLine(EventOutcome.MALFORMED)
        if kind not in RETAINED_KINDS:
            return DecodedLine(EventOutcome.IGNORED, kind=kind)

        data = event.get("data")
        if not isinstance(data, dict):
            return DecodedLine(EventOutcome.MALFORMED, kind=kind)

        path = _text_field(data, "path")
        content = _text_field(data, "lines")
        line_number = data.get("line_number")

        # bool is an int subclass; true/false is not a line number
        if (
            path is None
            or content is None
            or isinstance(line_number, bool)
            or not isinstance(line_number, int)
            or line_number < 1
        ):
            return DecodedLine(EventOutcome.MALFORMED, kind=kind)

        return DecodedLine(
            EventOutcome.RETAINED,
            kind=kind,
            result=SearchDomainService.create_search_result(
                path=path,
                line_number=line_number,
                content=_strip_newline(content),
                is_match=(kind == MATCH)
            )
        )

    @classmethod
    def assemble_with_stats(
        cls,
        raw_output: Union[bytes, str]
    ) -> Tuple[List[SearchResult], AssemblyStats]:
        """
        Assemble results and report per-line outcomes.

        Args:
            raw_output: Captured engine stdout

        Returns:
            Tuple[List[SearchResult], AssemblyStats]: Ordered results and
                counters

        Raises:
            OutputDecodeFailedError: If the output is not valid UTF-8
        """
        if isinstance(raw_output, bytes):
            try:
                text = raw_output.decode(ENCODING)
            except UnicodeDecodeError as e:
                raise OutputDecodeFailedError(
                    f"Search output is not valid {ENCODING}: {e.reason}",
                    position=e.start
                ) from e
        else:
            text = raw_output

        stats = AssemblyStats()
        results: List[SearchResult] = []

        # Split on \n only: JSON strings may legally hold U+2028 and
        # friends, which str.splitlines() would break on
        for line in text.split("\n"):
            line = line.rstrip("\r")
            if not line.strip():
                continue
            decoded = cls.decode_event(line)
            stats.record(decoded)
            if decoded.result is not None:
                results.append(decoded.result)

        return SearchDomainService.sort_results(results), stats

    @classmethod
    def assemble(cls, raw_output: Union[bytes, str]) -> List[SearchResult]:
        """
        Assemble ordered results from captured engine stdout.

        Args:
            raw_output: Captured engine stdout

        Returns:
            List[SearchResult]: Results ordered by path and line number;
                empty when nothing matched

        Raises:
            OutputDecodeFailedError: If the output is not valid UTF-8
        """
        results, _ = cls.assemble_with_stats(raw_output)
        return results
