"""Prompt builders: basic, few-shot, case-conversion task, and YAML prompt files."""

from promptcase.prompts.basic import MissingFieldError, build_basic_prompt
from promptcase.prompts.case_task import build_case_task_prompt
from promptcase.prompts.config import load_prompt_config, render_prompt_file
from promptcase.prompts.few_shot import build_few_shot_prompt, format_example

__all__ = [
    "MissingFieldError",
    "build_basic_prompt",
    "build_case_task_prompt",
    "build_few_shot_prompt",
    "format_example",
    "load_prompt_config",
    "render_prompt_file",
]
