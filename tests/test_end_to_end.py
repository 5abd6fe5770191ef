"""
End-to-end searches against a real ripgrep binary.

Skipped when rg is not installed.
"""

import asyncio
import shutil
import pytest

from linesift.core.entities import SearchOptions
from linesift.infrastructure.external.process_runner import AsyncProcessRunner

pytestmark = pytest.mark.skipif(shutil.which("rg") is None, reason="ripgrep not installed")


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_text("intro\nhello world\noutro\n")
    (tmp_path / "b.py").write_text("print('Hello')\n")
    (tmp_path / ".secret").write_text("hello hidden\n")
    nested = tmp_path / "one" / "two" / "three"
    nested.mkdir(parents=True)
    (nested / "deep.txt").write_text("hello deep\n")
    return tmp_path


def _search(service_factory, **options):
    service = service_factory(AsyncProcessRunner())
    return asyncio.run(service.search(SearchOptions(**options)))


class TestEndToEnd:
    """Searches through the real engine."""

    def test_match_with_context(self, service_factory, tree):
        results = _search(service_factory, pattern="hello", directory=str(tree / "a.txt"), context_lines=1)
        assert [(r.line_number, r.content, r.is_match) for r in results] == [
            (1, "intro", False),
            (2, "hello world", True),
            (3, "outro", False),
        ]

    def test_case_insensitive_and_type(self, service_factory, tree):
        results = _search(
            service_factory, pattern="hello", directory=str(tree),
            case_sensitive=False, file_type="py",
        )
        assert [r.content for r in results] == ["print('Hello')"]

    def test_hidden_files(self, service_factory, tree):
        visible = _search(service_factory, pattern="hidden", directory=str(tree))
        hidden = _search(service_factory, pattern="hidden", directory=str(tree), search_hidden=True)
        assert visible == []
        assert [r.content for r in hidden] == ["hello hidden"]

    def test_depth_limit(self, service_factory, tree):
        shallow = _search(service_factory, pattern="deep", directory=str(tree), max_depth=1)
        deep = _search(service_factory, pattern="deep", directory=str(tree), max_depth=4)
        assert shallow == []
        assert len(deep) == 1

    def test_exclude_glob(self, service_factory, tree):
        results = _search(
            service_factory, pattern="hello", directory=str(tree),
            exclude_globs=("*.txt",),
        )
        assert results == []

    def test_missing_directory_is_empty(self, service_factory, tmp_path):
        assert _search(service_factory, pattern="x", directory=str(tmp_path / "nope")) == []
