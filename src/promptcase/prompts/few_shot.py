"""Few-shot prompt: task plus numbered Input/Output examples.

Examples are mappings with "input"/"output" keys. When a key is missing the
alternates are used instead ("inputs" or "example", "outputs" or "result"),
serialized as JSON. A two-item (input, output) tuple or list also works.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from promptcase.helpers import coerce_text
from promptcase.prompts.basic import MissingFieldError, join_sections, require_task, section


def _field(example: Mapping[str, Any], key: str, alternates: tuple[str, ...]) -> str:
    if key in example:
        return coerce_text(example[key])
    for alt in alternates:
        if example.get(alt) is not None:
            return json.dumps(example[alt], ensure_ascii=False, default=str)
    return json.dumps("")


def format_example(idx: int, example: Any) -> str:
    """Render example number idx (0-based) as an 'Example N:' block."""
    if isinstance(example, Mapping):
        ex_input = _field(example, "input", ("inputs", "example"))
        ex_output = _field(example, "output", ("outputs", "result"))
    elif isinstance(example, (list, tuple)) and len(example) == 2:
        ex_input, ex_output = coerce_text(example[0]), coerce_text(example[1])
    else:
        msg = f"Example {idx + 1} must be a mapping or an (input, output) pair, got {type(example).__name__}"
        raise TypeError(msg)
    return f"Example {idx + 1}:\nInput: {ex_input}\nOutput: {ex_output}"


def build_few_shot_prompt(
    task: Any = None,
    instructions: Any = "",
    constraints: Any = "",
    examples: list[Any] | tuple[Any, ...] | None = None,
    input: Any = "",  # noqa: A002
    desired_output: Any = "",
) -> str:
    """Build a few-shot prompt. Raises MissingFieldError without a task or examples."""
    task_text = require_task(task)
    if not isinstance(examples, (list, tuple)) or not examples:
        raise MissingFieldError("examples", "`examples` must be a non-empty list")

    parts: list[str | None] = [
        f"Task: {task_text}",
        section("Instructions", instructions),
        section("Constraints", constraints),
        "Examples:",
    ]
    parts.extend(format_example(i, ex) for i, ex in enumerate(examples))
    parts.append(section("Input", input))
    parts.append(section("Desired output", desired_output))
    return join_sections(parts)
