"""CLI for prompts: promptcase prompt render <file.yaml> | case-task <style> <text...>."""

from __future__ import annotations

import sys
from pathlib import Path

import yaml

from promptcase.casing import ConversionOptions
from promptcase.cli.parse_common import parse_flags
from promptcase.prompts import build_case_task_prompt, render_prompt_file


def run_prompt_render_argv(argv: list[str]) -> None:
    """promptcase prompt render <file.yaml>."""
    if len(argv) != 1:
        print("Usage: promptcase prompt render <file.yaml>", file=sys.stderr)
        sys.exit(1)
    path = Path(argv[0])
    if not path.is_file():
        print(f"❌ Prompt file not found: {path}", file=sys.stderr)
        sys.exit(1)
    try:
        prompt = render_prompt_file(path)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(prompt)
    sys.exit(0)


def run_prompt_case_task_argv(argv: list[str]) -> None:
    """promptcase prompt case-task <style> <text...> [--audience <s>] [--no-acronyms]."""
    parsed, seen, rest = parse_flags(
        argv,
        ("audience", "--audience", "", None),
        switches=("--no-acronyms",),
    )
    if len(rest) < 2:
        print(
            "Usage: promptcase prompt case-task <style> <text...> [--audience <s>] [--no-acronyms]",
            file=sys.stderr,
        )
        sys.exit(1)
    options = ConversionOptions(preserve_acronyms=False) if "--no-acronyms" in seen else None
    try:
        prompt = build_case_task_prompt(
            " ".join(rest[1:]), rest[0].lower(), options, audience=parsed["audience"]
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(prompt)
    sys.exit(0)


def run_prompt_argv(argv: list[str] | None = None) -> None:
    """Dispatch promptcase prompt <subcommand>; argv defaults to sys.argv[2:]."""
    if argv is None:
        argv = sys.argv[2:]
    if not argv:
        print("Usage: promptcase prompt <subcommand> [args...]", file=sys.stderr)
        print("Subcommands: render, case-task", file=sys.stderr)
        sys.exit(1)
    sub = argv[0].lower()
    if sub == "render":
        run_prompt_render_argv(argv[1:])
    elif sub == "case-task":
        run_prompt_case_task_argv(argv[1:])
    else:
        print(f"Error: Unknown prompt subcommand: {sub}", file=sys.stderr)
        sys.exit(1)
