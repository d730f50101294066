"""Configuration loading and normalization."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from config.models import Config, LoggingConfig, PromptConfig


_LOG_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")
_LOG_STREAMS = ("stderr", "stdout")


def _as_str(value: Any, default: str) -> str:
    if isinstance(value, str):
        return value
    return default


def _as_template(value: Any, default: str) -> str:
    # Templates are formatted with the answer text, which may be empty.
    text = _as_str(value, default)
    try:
        text.format(value="")
    except (AttributeError, IndexError, KeyError, ValueError):
        return default
    return text


def _as_choice(value: Any, choices: tuple[str, ...], default: str) -> str:
    if isinstance(value, str):
        for choice in choices:
            if value.lower() == choice.lower():
                return choice
        if value.upper() == "WARNING" and "WARN" in choices:
            return "WARN"
    return default


def _load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    return data


def config_from_dict(raw: Dict[str, Any]) -> Config:
    """Build a Config instance from a raw dictionary.

    Args:
        raw: Raw config dictionary. Unknown keys are ignored.

    Returns:
        Normalized Config instance.
    """
    prompts_raw = raw.get("prompts", {}) or {}
    logging_raw = raw.get("logging", {}) or {}
    defaults = PromptConfig()

    prompts = PromptConfig(
        question_suffix=_as_str(prompts_raw.get("question_suffix"), defaults.question_suffix),
        empty_message=_as_str(prompts_raw.get("empty_message"), defaults.empty_message),
        invalid_value_message=_as_template(
            prompts_raw.get("invalid_value_message"), defaults.invalid_value_message
        ),
        invalid_option_message=_as_template(
            prompts_raw.get("invalid_option_message"), defaults.invalid_option_message
        ),
        option_too_big_message=_as_template(
            prompts_raw.get("option_too_big_message"), defaults.option_too_big_message
        ),
    )
    logging = LoggingConfig(
        level=_as_choice(logging_raw.get("level"), _LOG_LEVELS, "WARN"),
        stream=_as_choice(logging_raw.get("stream"), _LOG_STREAMS, "stderr"),
    )
    return Config(prompts=prompts, logging=logging)


def load_config(path: Path | None) -> Config:
    """Load config data into a Config instance.

    Args:
        path: Optional path to a JSON config file. Defaults apply when None.

    Returns:
        Parsed Config instance.
    """
    if path is None:
        return config_from_dict({})
    return config_from_dict(_load_json(path))
