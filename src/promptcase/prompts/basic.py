"""Basic prompt: labeled sections (task, audience, constraints, input, desired output).

Usage:
    build_basic_prompt(
        task="Summarize the following text in one sentence.",
        constraints="Max 25 words. No analysis.",
        input="...",
    )
"""

from __future__ import annotations

from typing import Any

from promptcase.helpers import coerce_text

SECTION_SEPARATOR = "\n\n"


class MissingFieldError(ValueError):
    """A required prompt field is absent or empty."""

    def __init__(self, field: str, msg: str | None = None) -> None:
        self.field = field
        super().__init__(msg or f"`{field}` is required")


def require_task(task: Any) -> str:
    """Return task as text. Raises MissingFieldError when it is None or empty."""
    text = coerce_text(task)
    if not text:
        raise MissingFieldError("task")
    return text


def section(label: str, value: Any) -> str | None:
    """'Label: value', or None when value is empty."""
    text = coerce_text(value)
    return f"{label}: {text}" if text else None


def join_sections(sections: list[str | None]) -> str:
    return SECTION_SEPARATOR.join(s for s in sections if s is not None)


def build_basic_prompt(
    task: Any = None,
    audience: Any = "",
    constraints: Any = "",
    input: Any = "",  # noqa: A002
    desired_output: Any = "",
) -> str:
    """Build a zero-shot prompt. Empty optional sections are omitted."""
    return join_sections(
        [
            f"Task: {require_task(task)}",
            section("Audience", audience),
            section("Constraints", constraints),
            section("Input", input),
            section("Desired output", desired_output),
        ]
    )
