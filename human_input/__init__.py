"""Getting data from a human over stdin/stdout.

Every function prompts on ``sys.stdout``, reads one buffered line from
``sys.stdin`` and trims surrounding whitespace. Empty answers become None;
invalid answers are reported and asked again until a valid one arrives. Stream
errors propagate unchanged.

Example::

    from human_input import read_choice, read_custom_nonempty, uint16

    age = read_custom_nonempty("How old are you", uint16)
    color = read_choice("Favourite color", ["red", "green"], default=0)
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from config.models import PromptConfig
from core.console import Console
from core.errors import EndOfInputError, HumanInputError, InvalidDefaultError
from core.parsers import (
    Parser,
    boolean,
    decimal_number,
    int8,
    int16,
    int32,
    int64,
    integer,
    one_of,
    real,
    signed,
    uint8,
    uint16,
    uint32,
    uint64,
    unsigned,
    usize,
)
from core.prompter import Prompter

T = TypeVar("T")


def read_line_raw(question: str | None = None) -> str | None:
    """Read a trimmed line, printing ``question`` first if given."""
    return Prompter().read_line_raw(question)


def read_string(question: str) -> str | None:
    """Get a line of text; None when the answer is empty."""
    return Prompter().read_string(question)


def read_string_nonempty(question: str) -> str:
    """Get a line of text, asking again until it is not empty."""
    return Prompter().read_string_nonempty(question)


def read_string_noquestion() -> str | None:
    """Get a line of text without displaying a question."""
    return Prompter().read_string_noquestion()


def read_choice(question: str, options: Sequence[object], default: int | None = None) -> int:
    """Let the user choose one of ``options``; returns its 0-based index."""
    return Prompter().read_choice(question, options, default)


def read_custom(question: str, parse: Parser[T]) -> T | None:
    """Get a value converted by ``parse``; None when the answer is empty."""
    return Prompter().read_custom(question, parse)


def read_custom_nonempty(question: str, parse: Parser[T]) -> T:
    """Get a value converted by ``parse``, asking again until it succeeds."""
    return Prompter().read_custom_nonempty(question, parse)


def read_custom_noquestion(parse: Parser[T]) -> T | None:
    """Like :func:`read_custom` without displaying a question."""
    return Prompter().read_custom_noquestion(parse)


__all__ = [
    "Console",
    "EndOfInputError",
    "HumanInputError",
    "InvalidDefaultError",
    "Parser",
    "PromptConfig",
    "Prompter",
    "boolean",
    "decimal_number",
    "int8",
    "int16",
    "int32",
    "int64",
    "integer",
    "one_of",
    "read_choice",
    "read_custom",
    "read_custom_noquestion",
    "read_custom_nonempty",
    "read_line_raw",
    "read_string",
    "read_string_noquestion",
    "read_string_nonempty",
    "real",
    "signed",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "unsigned",
    "usize",
]
