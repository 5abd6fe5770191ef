"""
Tests for building ripgrep command lines.
"""

import dataclasses
import pytest

from linesift.core.entities import SearchOptions
from linesift.domain.search import InvocationBuilder
from linesift.shared.exceptions import InvalidOptionsError


def _flag_values(args, flag):
    return [args[i + 1] for i, arg in enumerate(args[:-1]) if arg == flag]


class TestInvocationBuilder:
    """Test suite for the invocation builder."""

    def test_minimal_options(self):
        """Test the argument list for default options."""
        args = InvocationBuilder.build(SearchOptions(pattern="foo", directory="/tmp/x", max_depth=2))
        assert args == [
            "--json", "-H", "-n", "-C", "0",
            "--max-depth", "2",
            "--", "foo", "/tmp/x",
        ]

    def test_all_options_in_order(self):
        """Test that every option lands in its fixed position."""
        options = SearchOptions(
            pattern="needle",
            directory="repo",
            case_sensitive=False,
            search_hidden=True,
            max_depth=10,
            file_type="py",
            include_globs=("*.py", "src/**"),
            exclude_globs=("build/**", "*.min.js"),
            context_lines=3,
        )
        assert InvocationBuilder.build(options) == [
            "--json", "-H", "-n", "-C", "3",
            "-i",
            "--hidden", "--no-ignore",
            "-t", "py",
            "-g", "*.py",
            "-g", "src/**",
            "-g", "!build/**",
            "-g", "!*.min.js",
            "--max-depth", "10",
            "--", "needle", "repo",
        ]

    @pytest.mark.parametrize("depth", range(1, 11))
    def test_depth_in_range_is_accepted(self, depth):
        """Test that depths 1 through 10 build."""
        args = InvocationBuilder.build(SearchOptions(pattern="x", max_depth=depth))
        assert _flag_values(args, "--max-depth") == [str(depth)]

    @pytest.mark.parametrize("depth", [0, 11, -1, 100])
    def test_depth_out_of_range_is_rejected(self, depth):
        """Test that depths outside 1..10 fail before anything runs."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            InvocationBuilder.build(SearchOptions(pattern="x", max_depth=depth))
        assert "max_depth" in str(exc_info.value)
        assert [issue.field for issue in exc_info.value.issues] == ["max_depth"]

    def test_non_integer_depth_is_rejected(self):
        """Test that strings and booleans are not depths."""
        for depth in ("3", True, 2.5):
            with pytest.raises(InvalidOptionsError):
                InvocationBuilder.build(SearchOptions(pattern="x", max_depth=depth))

    def test_negative_context_is_rejected(self):
        """Test that context_lines must not be negative."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            InvocationBuilder.build(SearchOptions(pattern="x", context_lines=-1))
        assert exc_info.value.issues[0].field == "context_lines"

    def test_wrong_field_types_are_reported_together(self):
        """Test that every bad field is listed in one error."""
        options = SearchOptions(pattern=5, case_sensitive="no", max_depth=0)
        with pytest.raises(InvalidOptionsError) as exc_info:
            InvocationBuilder.build(options)
        fields = {issue.field for issue in exc_info.value.issues}
        assert fields == {"pattern", "case_sensitive", "max_depth"}

    def test_zero_context_is_valid(self):
        """Test that zero context lines is passed through."""
        args = InvocationBuilder.build(SearchOptions(pattern="x", context_lines=0))
        assert _flag_values(args, "-C") == ["0"]

    def test_case_sensitive_omits_ignore_case_flag(self):
        """Test that -i only appears for case-insensitive searches."""
        assert "-i" not in InvocationBuilder.build(SearchOptions(pattern="x"))
        assert "-i" in InvocationBuilder.build(SearchOptions(pattern="x", case_sensitive=False))

    def test_hidden_flags_are_coupled(self):
        """Test that hidden search always disables ignore files too."""
        hidden = InvocationBuilder.build(SearchOptions(pattern="x", search_hidden=True))
        plain = InvocationBuilder.build(SearchOptions(pattern="x", search_hidden=False))
        assert "--hidden" in hidden and "--no-ignore" in hidden
        assert "--hidden" not in plain and "--no-ignore" not in plain
        assert hidden.index("--no-ignore") == hidden.index("--hidden") + 1

    def test_empty_file_type_is_treated_as_absent(self):
        """Test that an empty type filter adds nothing."""
        for file_type in (None, ""):
            args = InvocationBuilder.build(SearchOptions(pattern="x", file_type=file_type))
            assert "-t" not in args

    def test_empty_globs_produce_no_tokens(self):
        """Test that empty glob entries are dropped."""
        options = SearchOptions(
            pattern="x",
            include_globs=("", "*.rs", ""),
            exclude_globs=("", "target/**"),
        )
        args = InvocationBuilder.build(options)
        assert _flag_values(args, "-g") == ["*.rs", "!target/**"]
        assert "" not in args
        assert "!" not in args

    def test_pattern_and_directory_are_last(self):
        """Test that hostile-looking values stay discrete positional tokens."""
        options = SearchOptions(pattern="--files; rm -rf /", directory="-C")
        args = InvocationBuilder.build(options)
        assert args[-3:] == ["--", "--files; rm -rf /", "-C"]

    def test_deterministic(self):
        """Test that identical options build identical lists."""
        options = SearchOptions(
            pattern="x",
            include_globs=("b", "a", "c"),
            exclude_globs=("z", "y"),
        )
        first = InvocationBuilder.build(options)
        second = InvocationBuilder.build(dataclasses.replace(options))
        assert first == second
        assert first is not second

    def test_options_are_not_mutated(self):
        """Test that building leaves the options untouched."""
        options = SearchOptions(pattern="x", include_globs=("", "*.py"), exclude_globs=("",))
        before = options.to_dict()
        args = InvocationBuilder.build(options)
        args.append("--extra")
        assert options.to_dict() == before
        assert "--extra" not in InvocationBuilder.build(options)

    def test_validate_reports_without_raising(self):
        """Test that validate returns issues instead of raising."""
        result = InvocationBuilder.validate(SearchOptions(pattern="x", max_depth=0))
        assert not result.is_valid
        assert result.errors[0].value == 0
