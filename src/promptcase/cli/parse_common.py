"""Shared CLI argument parsing for value flags (--digit-prefix, --file) and switches (--no-acronyms)."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any


def parse_flags(
    argv: list[str],
    *specs: tuple[str, str, Any, Callable[[str], Any] | None],
    switches: tuple[str, ...] = (),
) -> tuple[dict[str, Any], set[str], list[str]]:
    """Parse optional --flag value pairs and bare switches from argv in one pass.

    Each spec is (key, flag_str, default, converter); converter can be None for strings.
    Returns (dict of key -> value, switches seen, remaining positional argv).
    A "--" ends option parsing; everything after it is positional.
    """
    result: dict[str, Any] = {}
    for key, _flag, default, _converter in specs:
        result[key] = default() if callable(default) else default

    seen: set[str] = set()
    rest: list[str] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            rest.extend(argv[i + 1 :])
            break
        if arg in switches:
            seen.add(arg)
            i += 1
            continue
        matched = False
        for key, flag_str, _default, converter in specs:
            if arg == flag_str and i + 1 < len(argv):
                result[key] = converter(argv[i + 1]) if converter else argv[i + 1]
                i += 2
                matched = True
                break
        if not matched:
            rest.append(arg)
            i += 1
    return result, seen, rest


def path_resolver(s: str) -> Path:
    """Resolve a path argument to absolute Path (e.g. --file, prompt files)."""
    return Path(s).resolve()
