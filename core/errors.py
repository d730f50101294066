"""Error types raised by the prompt helpers."""

from __future__ import annotations


class HumanInputError(Exception):
    """Base class for errors raised by human_input."""


class EndOfInputError(HumanInputError, EOFError):
    """Input ended while an answer was still required."""

    def __init__(self, question: str | None = None) -> None:
        self.question = question
        if question:
            message = f"Input ended before an answer to {question!r} was given"
        else:
            message = "Input ended before an answer was given"
        super().__init__(message)


class InvalidDefaultError(HumanInputError, ValueError):
    """A choice default that does not index into the options."""

    def __init__(self, default: int, option_count: int) -> None:
        self.default = default
        self.option_count = option_count
        super().__init__(
            f"default index must be in the options slice (got {default}, {option_count} option(s))"
        )
