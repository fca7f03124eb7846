"""Main CLI entry point for promptcase."""

import logging
import os
import sys

from promptcase.cli import case_cmd, prompt_cmd


def _configure_logging() -> None:
    level = os.environ.get("PROMPTCASE_LOG_LEVEL", "")
    if level:
        logging.basicConfig(level=level.upper(), format="%(levelname)s %(name)s: %(message)s")


def main() -> None:
    """Main CLI entry point."""
    _configure_logging()
    if len(sys.argv) < 2:
        print("Usage: promptcase <command> [args...]", file=sys.stderr)
        print("Commands:", file=sys.stderr)
        print(
            "  case <camel|pascal|kebab|dot> <text...>  - Convert text to a case style",
            file=sys.stderr,
        )
        print("  prompt render <file.yaml>                - Build a prompt from a YAML file", file=sys.stderr)
        print(
            "  prompt case-task <style> <text...>       - Build a case-conversion task prompt",
            file=sys.stderr,
        )
        sys.exit(1)

    command = sys.argv[1]

    if command == "case":
        case_cmd.run_case_argv(sys.argv[2:])
    elif command == "prompt":
        prompt_cmd.run_prompt_argv(sys.argv[2:])
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
