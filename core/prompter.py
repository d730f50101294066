"""Prompt, validate and retry loops over line-buffered input."""

from __future__ import annotations

from typing import Sequence, TypeVar

from config.models import PromptConfig
from core.choices import check_default, format_choice_prompt, interpret_choice
from core.console import Console
from core.errors import EndOfInputError
from core.parsers import Parser
from logger import Logger, get_logger

T = TypeVar("T")


class Prompter:
    """Ask a human for values over a pair of text streams.

    The prompter holds no state between calls beyond its streams and settings.
    Every retry loop runs until a valid answer arrives or the stream fails;
    validation problems are reported to the user and never raised. Calls are
    not safe to interleave from several threads.

    Args:
        config: Prompt messages; defaults when None.
        console: Streams to use; the process stdin/stdout when None.
        logger: Diagnostic logger; the shared logger when None.
    """

    def __init__(
        self,
        config: PromptConfig | None = None,
        console: Console | None = None,
        logger: Logger | None = None,
    ) -> None:
        self.config = config or PromptConfig()
        self.console = console or Console()
        self.log = logger or get_logger()

    def _read_answer(self, question: str | None) -> str | None:
        """Show ``question`` and read one trimmed line.

        Returns:
            The trimmed text (possibly empty), or None at end of stream.
        """
        if question is not None:
            self.console.write(f"{question}{self.config.question_suffix}")
        self.console.flush()
        line = self.console.read_line()
        if line == "":
            self.log.debug(f"end of input after {question!r}")
            return None
        return line.strip()

    def _reject(self, raw: str, exc: Exception) -> None:
        self.log.debug(f"rejected {raw!r}: {exc!r}")
        self.console.say(self.config.invalid_value_message.format(value=raw))

    def read_line_raw(self, question: str | None = None) -> str | None:
        """Read a line, trimmed; None when it is empty or input has ended."""
        return self._read_answer(question) or None

    def read_string(self, question: str) -> str | None:
        """Ask ``question`` and return the trimmed answer, or None if empty."""
        return self.read_line_raw(question)

    def read_string_noquestion(self) -> str | None:
        """Read a trimmed line without printing a question first."""
        return self.read_line_raw(None)

    def read_string_nonempty(self, question: str) -> str:
        """Ask until a non-empty answer is given.

        Raises:
            EndOfInputError: If input ends before a non-empty line is read.
        """
        while True:
            answer = self._read_answer(question)
            if answer is None:
                raise EndOfInputError(question)
            if answer:
                return answer
            self.log.debug(f"empty answer to {question!r}, asking again")
            self.console.say(self.config.empty_message)

    def read_choice(self, question: str, options: Sequence[object], default: int | None = None) -> int:
        """Let the user pick one of ``options`` by number.

        The menu is printed before every attempt. An empty answer selects
        ``default`` when one is given.

        Args:
            question: Question shown before the numbered options.
            options: Option labels, shown 1-based.
            default: Optional 0-based index chosen by an empty answer.

        Returns:
            The 0-based index of the chosen option.

        Raises:
            InvalidDefaultError: If ``default`` is not a valid index.
            EndOfInputError: If input ends and there is no default.
        """
        check_default(options, default)
        prompt = format_choice_prompt(question, options, default)
        while True:
            self.console.write(prompt)
            answer = self._read_answer(None)
            if answer is None:
                if default is not None:
                    return default
                raise EndOfInputError(question)
            outcome = interpret_choice(answer, len(options), default, self.config)
            if outcome.index is not None:
                return outcome.index
            self.log.debug(f"invalid choice {answer!r} for {question!r}")
            self.console.say(outcome.message or "")

    def read_custom(self, question: str, parse: Parser[T]) -> T | None:
        """Ask for a value parsed by ``parse``; None if the answer is empty.

        Only unparsable answers are asked again; any exception raised by
        ``parse`` counts as unparsable.
        """
        while True:
            raw = self.read_string(question)
            if raw is None:
                return None
            try:
                return parse(raw)
            except Exception as exc:
                self._reject(raw, exc)

    def read_custom_nonempty(self, question: str, parse: Parser[T]) -> T:
        """Ask until a non-empty answer that ``parse`` accepts is given."""
        while True:
            raw = self.read_string_nonempty(question)
            try:
                return parse(raw)
            except Exception as exc:
                self._reject(raw, exc)

    def read_custom_noquestion(self, parse: Parser[T]) -> T | None:
        """Same as :meth:`read_custom` without printing a question."""
        while True:
            raw = self.read_string_noquestion()
            if raw is None:
                return None
            try:
                return parse(raw)
            except Exception as exc:
                self._reject(raw, exc)
