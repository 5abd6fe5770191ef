"""
Invocation builder for the external search engine.

Translates SearchOptions into the ordered argument vector ripgrep
expects. Pure: no I/O, and the options are never mutated.
"""

from typing import List

from ...core.entities import SearchOptions
from ...shared.exceptions import InvalidOptionsError
from ...shared.validation import (
    CustomRule,
    RangeRule,
    TypeRule,
    ValidationEngine,
    ValidationResult
)

MIN_DEPTH = 1
MAX_DEPTH = 10

# ripgrep flags
JSON_OUTPUT = "--json"
WITH_FILENAME = "-H"
LINE_NUMBER = "-n"
CONTEXT = "-C"
IGNORE_CASE = "-i"
HIDDEN = "--hidden"
NO_IGNORE = "--no-ignore"
FILE_TYPE = "-t"
GLOB = "-g"
MAX_DEPTH_FLAG = "--max-depth"
NEGATION = "!"
END_OF_OPTIONS = "--"


def _all_strings(value, context=None) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


def _optional_string(value, context=None) -> bool:
    return value is None or isinstance(value, str)


def _create_options_engine() -> ValidationEngine:
    engine = ValidationEngine()
    engine.add_rules("max_depth", [
        TypeRule("max_depth must be an integer", int),
        RangeRule(
            f"max_depth must be between {MIN_DEPTH} and {MAX_DEPTH}",
            min_value=MIN_DEPTH,
            max_value=MAX_DEPTH
        )
    ])
    engine.add_rules("context_lines", [
        TypeRule("context_lines must be an integer", int),
        RangeRule("context_lines must not be negative", min_value=0)
    ])
    engine.add_rule("case_sensitive", TypeRule("case_sensitive must be a boolean", bool))
    engine.add_rule("search_hidden", TypeRule("search_hidden must be a boolean", bool))
    engine.add_rule("pattern", TypeRule("pattern must be a string", str))
    engine.add_rule("directory", TypeRule("directory must be a string", str))
    engine.add_rule("file_type", CustomRule("file_type must be a string", _optional_string))
    engine.add_rule("include_globs", CustomRule("include_globs must be strings", _all_strings))
    engine.add_rule("exclude_globs", CustomRule("exclude_globs must be strings", _all_strings))
    return engine


class InvocationBuilder:
    """
    Builds ripgrep command lines from search options.

    Argument order matters: ripgrep treats the last two tokens as
    the pattern and the search root, and repeated flags are not
    idempotent, so each flag is emitted at most once per rule.
    """

    _engine = _create_options_engine()

    @classmethod
    def validate(cls, options: SearchOptions) -> ValidationResult:
        """
        Validate options without building anything.

        Args:
            options: Search options

        Returns:
            ValidationResult: Validation result
        """
        return cls._engine.validate(options.to_dict())

    @classmethod
    def build(cls, options: SearchOptions) -> List[str]:
        """
        Build the argument list for one search.

        Args:
            options: Search options

        Returns:
            List[str]: Fresh list of discrete argument tokens

        Raises:
            InvalidOptionsError: If max_depth is outside [1, 10] or
                another field has the wrong shape
        """
        result = cls.validate(options)
        if not result.is_valid:
            errors = result.errors
            raise InvalidOptionsError(
                "; ".join(issue.message for issue in errors),
                issues=errors,
                fields=[issue.field for issue in errors]
            )

        args = [
            JSON_OUTPUT,
            WITH_FILENAME,
            LINE_NUMBER,
            CONTEXT, str(options.context_lines)
        ]

        if not options.case_sensitive:
            args.append(IGNORE_CASE)

        # Hidden traversal always comes with ignore-file bypass
        if options.search_hidden:
            args.extend([HIDDEN, NO_IGNORE])

        if options.file_type:
            args.extend([FILE_TYPE, options.file_type])

        for glob in options.include_globs:
            if glob:
                args.extend([GLOB, glob])

        for glob in options.exclude_globs:
            if glob:
                args.extend([GLOB, NEGATION + glob])

        args.extend([MAX_DEPTH_FLAG, str(options.max_depth)])

        # Positional: pattern then search root, always last. The separator
        # keeps a pattern such as "--files" from being read as a flag.
        args.extend([END_OF_OPTIONS, options.pattern, options.directory])
        return args
