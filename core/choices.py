"""Formatting and interpretation for numbered choice menus.

Options are shown to the user numbered from 1 and reported back as 0-based
indexes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from config.models import PromptConfig
from core.errors import InvalidDefaultError
from core.parsers import parse_unsigned


@dataclass(frozen=True)
class ChoiceOutcome:
    """Result of interpreting one answer to a choice prompt.

    Exactly one of ``index`` and ``message`` is set.
    """

    index: int | None = None
    message: str | None = None

    @property
    def accepted(self) -> bool:
        return self.index is not None


def check_default(options: Sequence[object], default: int | None) -> None:
    """Validate a default index against the options.

    Raises:
        InvalidDefaultError: If the default does not index into ``options``.
    """
    if default is None:
        return
    if isinstance(default, bool) or not isinstance(default, int) or not 0 <= default < len(options):
        raise InvalidDefaultError(default, len(options))


def format_choice_prompt(question: str, options: Sequence[object], default: int | None) -> str:
    """Render the menu line shown before reading a choice.

    Example: ``Color [1: "red", 2: "blue" (default: 2)]: ``
    """
    listed = ", ".join(f'{number}: "{option}"' for number, option in enumerate(options, 1))
    suffix = f" (default: {default + 1})" if default is not None else ""
    return f"{question} [{listed}{suffix}]: "


def interpret_choice(
    answer: str,
    option_count: int,
    default: int | None,
    prompts: PromptConfig | None = None,
) -> ChoiceOutcome:
    """Map a trimmed answer to an option index.

    Args:
        answer: Trimmed line typed by the user.
        option_count: Number of options on offer.
        default: Index returned for an empty answer, if any.
        prompts: Message templates; defaults apply when None.

    Returns:
        The selected index, or the diagnostic to show before asking again.
    """
    prompts = prompts or PromptConfig()
    if answer == "" and default is not None:
        return ChoiceOutcome(index=default)
    try:
        number = parse_unsigned(answer, 64)
    except ValueError:
        return ChoiceOutcome(message=prompts.invalid_option_message.format(value=answer))
    if number == 0:
        return ChoiceOutcome(message=prompts.invalid_option_message.format(value=answer))
    index = number - 1
    if index < option_count:
        return ChoiceOutcome(index=index)
    return ChoiceOutcome(message=prompts.option_too_big_message.format(value=str(index)))
