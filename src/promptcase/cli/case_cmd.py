"""CLI for case conversion: promptcase case <camel|pascal|kebab|dot> <text...>."""

from __future__ import annotations

import sys

from promptcase.casing import ConversionOptions, Style, convert
from promptcase.cli.parse_common import parse_flags, path_resolver
from promptcase.helpers import read_file_or_default

USAGE = (
    "Usage: promptcase case <camel|pascal|kebab|dot> <text...> [--file <path>]\n"
    "       [--acronyms | --no-acronyms] [--digit-prefix <s> | --no-digit-prefix] [--keep-case]"
)

SWITCHES = ("--acronyms", "--no-acronyms", "--no-digit-prefix", "--keep-case")


def parse_case_argv(argv: list[str]) -> tuple[Style, str, ConversionOptions]:
    """Parse case argv (after 'case'). Returns (style, text, options). Raises ValueError on bad input."""
    parsed, seen, rest = parse_flags(
        argv,
        ("digit_prefix", "--digit-prefix", "_", None),
        ("file", "--file", None, path_resolver),
        switches=SWITCHES,
    )
    if not rest:
        msg = "missing style"
        raise ValueError(msg)
    try:
        style = Style(rest[0].lower())
    except ValueError:
        msg = f"Unknown style: {rest[0]} (expected one of: {', '.join(s.value for s in Style)})"
        raise ValueError(msg) from None

    words = rest[1:]
    if parsed["file"] is not None:
        if not parsed["file"].is_file():
            msg = f"File not found: {parsed['file']}"
            raise ValueError(msg)
        words = [*words, read_file_or_default(parsed["file"])]
    if not words:
        msg = "missing text to convert"
        raise ValueError(msg)

    preserve: bool | None = None
    if "--acronyms" in seen:
        preserve = True
    if "--no-acronyms" in seen:
        preserve = False
    digit_prefix = False if "--no-digit-prefix" in seen else parsed["digit_prefix"]
    options = ConversionOptions(
        preserve_acronyms=preserve,
        digit_prefix=digit_prefix,
        lowercase="--keep-case" not in seen,
    )
    return style, " ".join(words), options


def run_case_argv(argv: list[str] | None = None) -> None:
    """promptcase case ... ; argv defaults to sys.argv[2:]."""
    if argv is None:
        argv = sys.argv[2:]
    try:
        style, text, options = parse_case_argv(argv)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(1)
    print(convert(text, options, style))
    sys.exit(0)
