"""Case-conversion task prompt: a basic prompt whose desired output comes from the converter."""

from __future__ import annotations

from typing import Any

from promptcase.casing import ConversionOptions, Style, convert
from promptcase.helpers import coerce_text
from promptcase.prompts.basic import build_basic_prompt

_STYLE_TASKS: dict[Style, tuple[str, str]] = {
    Style.CAMEL: (
        "Convert a string to camelCase format.",
        "First word lowercase, subsequent words capitalized with no spaces.",
    ),
    Style.PASCAL: (
        "Convert a string to PascalCase format.",
        "Every word capitalized with no spaces.",
    ),
    Style.KEBAB: (
        "Convert a string to kebab-case format.",
        "All words lowercase, joined by single hyphens, no leading or trailing hyphen.",
    ),
    Style.DOT: (
        "Convert a string to dot.case format.",
        "Words joined by single dots, no leading or trailing dot.",
    ),
}


def build_case_task_prompt(
    value: Any,
    style: Style | str = Style.CAMEL,
    options: ConversionOptions | None = None,
    audience: Any = "",
) -> str:
    """Prompt asking for value in style, with the expected answer filled in."""
    style = Style(style)
    if style is Style.CAMEL and options is not None and options.pascal_case:
        style = Style.PASCAL
    task, constraints = _STYLE_TASKS[style]
    return build_basic_prompt(
        task=task,
        audience=audience,
        constraints=constraints,
        input=coerce_text(value),
        desired_output=convert(value, options, style),
    )
