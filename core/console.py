"""Line-oriented access to the input and output streams."""

from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """Pair of text streams used for prompting.

    Streams left as None resolve to ``sys.stdin`` / ``sys.stdout`` each time they
    are used, so redirection after construction (or pytest capture) is honoured.
    """

    def __init__(self, input: TextIO | None = None, output: TextIO | None = None) -> None:
        self._input = input
        self._output = output

    @property
    def input(self) -> TextIO:
        return self._input or sys.stdin

    @property
    def output(self) -> TextIO:
        return self._output or sys.stdout

    def write(self, text: str) -> None:
        """Write text without a trailing newline."""
        self.output.write(text)

    def say(self, message: str) -> None:
        """Write a full line of text."""
        print(message, file=self.output)

    def flush(self) -> None:
        self.output.flush()

    def read_line(self) -> str:
        """Read one line, including its terminator.

        Returns:
            The raw line, or an empty string at end of stream. A last line
            without a terminator is returned as is.
        """
        return self.input.readline()
