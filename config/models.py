"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PromptConfig:
    """Prompt formatting and diagnostic messages.

    Message templates are formatted with a single ``value`` field.
    """

    question_suffix: str = ": "
    empty_message: str = "Input must not be empty."
    invalid_value_message: str = "{value} is not valid"
    invalid_option_message: str = "{value} is not a valid option"
    option_too_big_message: str = "{value} is not a valid option (too big)"


@dataclass
class LoggingConfig:
    """Diagnostic logging settings."""

    level: str = "WARN"
    stream: str = "stderr"


@dataclass
class Config:
    """Top-level configuration container."""

    prompts: PromptConfig = field(default_factory=PromptConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
