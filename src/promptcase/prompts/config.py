"""Prompt file loading.

Prompt file YAML format:
- kind (optional): basic (default) or few_shot
- task: required by both kinds
- audience: basic only
- instructions: few_shot only
- constraints, input, desired_output: optional
- examples: few_shot only; list of {input, output} mappings

Keys may be written in any case style (desiredOutput, desired-output, desired_output).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from promptcase.casing import to_kebab_case
from promptcase.helpers import load_yaml_mapping
from promptcase.prompts.basic import build_basic_prompt
from promptcase.prompts.few_shot import build_few_shot_prompt

logger = logging.getLogger(__name__)

PROMPT_FIELDS: dict[str, tuple[str, ...]] = {
    "basic": ("task", "audience", "constraints", "input", "desired_output"),
    "few_shot": ("task", "instructions", "constraints", "examples", "input", "desired_output"),
}

_BUILDERS = {
    "basic": build_basic_prompt,
    "few_shot": build_few_shot_prompt,
}


def normalize_key(key: Any) -> str:
    """Any-case key -> snake_case (desiredOutput -> desired_output)."""
    return to_kebab_case(key).replace("-", "_")


def load_prompt_config(config_path: Path) -> dict[str, Any]:
    """Load a prompt file and normalize it.

    Returns:
        {"kind": ..., "fields": {...}} with only the fields the kind accepts.
    """
    data = load_yaml_mapping(config_path)
    normalized = {normalize_key(k): v for k, v in data.items()}

    kind = normalize_key(normalized.pop("kind", "basic") or "basic")
    if kind not in PROMPT_FIELDS:
        msg = f"Unknown prompt kind {kind!r} in {config_path} (expected one of: {', '.join(PROMPT_FIELDS)})"
        raise ValueError(msg)

    allowed = PROMPT_FIELDS[kind]
    fields: dict[str, Any] = {}
    for key, value in normalized.items():
        if key not in allowed:
            logger.warning("Ignoring unknown %s prompt key %r in %s", kind, key, config_path)
            continue
        fields[key] = value
    return {"kind": kind, "fields": fields}


def render_prompt_file(config_path: Path) -> str:
    """Load a prompt file and build the prompt. Builder errors (MissingFieldError) propagate."""
    config = load_prompt_config(config_path)
    return _BUILDERS[config["kind"]](**config["fields"])
