"""Tests for promptcase.prompts.config (YAML prompt files)."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

from promptcase.prompts import MissingFieldError, load_prompt_config, render_prompt_file
from promptcase.prompts.config import normalize_key

WriteFile = Callable[..., Path]


class TestNormalizeKey:
    @pytest.mark.parametrize("key", ["desiredOutput", "desired-output", "desired_output", "DesiredOutput"])
    def test_any_case_to_snake(self, key: str) -> None:
        assert normalize_key(key) == "desired_output"


class TestLoadPromptConfig:
    def test_basic_defaults_kind(self, write_prompt_file: WriteFile) -> None:
        path = write_prompt_file("task: Summarize.\ndesiredOutput: One sentence.\n")
        config = load_prompt_config(path)
        assert config == {
            "kind": "basic",
            "fields": {"task": "Summarize.", "desired_output": "One sentence."},
        }

    def test_few_shot_kind_spelling(self, write_prompt_file: WriteFile) -> None:
        path = write_prompt_file(
            "kind: few-shot\ntask: t\nexamples:\n  - input: a\n    output: b\n"
        )
        config = load_prompt_config(path)
        assert config["kind"] == "few_shot"
        assert config["fields"]["examples"] == [{"input": "a", "output": "b"}]

    def test_drops_unknown_keys_with_warning(
        self, write_prompt_file: WriteFile, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = write_prompt_file("task: t\nexamples: [x]\ncolour: red\n")
        with caplog.at_level(logging.WARNING, logger="promptcase.prompts.config"):
            config = load_prompt_config(path)
        assert config["fields"] == {"task": "t"}
        assert "'examples'" in caplog.text
        assert "'colour'" in caplog.text

    def test_rejects_non_mapping(self, write_prompt_file: WriteFile) -> None:
        path = write_prompt_file("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_prompt_config(path)

    def test_rejects_unknown_kind(self, write_prompt_file: WriteFile) -> None:
        path = write_prompt_file("kind: chain\ntask: t\n")
        with pytest.raises(ValueError, match="Unknown prompt kind"):
            load_prompt_config(path)

    def test_invalid_yaml_propagates(self, write_prompt_file: WriteFile) -> None:
        path = write_prompt_file("task: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_prompt_config(path)


class TestRenderPromptFile:
    def test_basic(self, write_prompt_file: WriteFile) -> None:
        path = write_prompt_file(
            "task: Convert a string to camelCase format.\n"
            "input: Amazing job man\n"
            "desired_output: amazingJobMan\n"
        )
        assert render_prompt_file(path) == (
            "Task: Convert a string to camelCase format.\n\n"
            "Input: Amazing job man\n\n"
            "Desired output: amazingJobMan"
        )

    def test_few_shot(self, write_prompt_file: WriteFile) -> None:
        path = write_prompt_file(
            "kind: few_shot\n"
            "task: Label it.\n"
            "examples:\n"
            "  - {input: good, output: POSITIVE}\n"
            "  - {inputs: [1, 2], result: SUM}\n"
        )
        assert render_prompt_file(path) == (
            "Task: Label it.\n\nExamples:\n\n"
            "Example 1:\nInput: good\nOutput: POSITIVE\n\n"
            'Example 2:\nInput: [1, 2]\nOutput: "SUM"'
        )

    def test_missing_task(self, write_prompt_file: WriteFile) -> None:
        path = write_prompt_file("")
        with pytest.raises(MissingFieldError):
            render_prompt_file(path)

    def test_missing_examples(self, write_prompt_file: WriteFile) -> None:
        path = write_prompt_file("kind: few_shot\ntask: t\n")
        with pytest.raises(MissingFieldError) as exc_info:
            render_prompt_file(path)
        assert exc_info.value.field == "examples"
