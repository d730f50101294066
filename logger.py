"""Level-filtered diagnostic logger.

Diagnostics go to stderr unless told otherwise so they never interleave with
the prompts written to stdout.
"""

from __future__ import annotations

import sys
from typing import TextIO


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def _level_value(level: str) -> int:
    name = level.upper()
    if name == "WARNING":
        name = "WARN"
    return _LEVELS.get(name, _LEVELS["WARN"])


class Logger:
    """Minimal logger with level filtering and a swappable stream."""

    def __init__(self, level: str = "WARN", stream: TextIO | None = None, prefix: str = "human_input") -> None:
        self._level = _level_value(level)
        self._stream = stream
        self._prefix = prefix

    def set_level(self, level: str) -> None:
        self._level = _level_value(level)

    def set_stream(self, stream: TextIO | None) -> None:
        self._stream = stream

    def _write(self, level: str, message: str) -> None:
        stream = self._stream or sys.stderr
        print(f"[{self._prefix}] {level}: {message}", file=stream)

    def debug(self, message: str) -> None:
        if self._level <= _LEVELS["DEBUG"]:
            self._write("DEBUG", message)

    def info(self, message: str) -> None:
        if self._level <= _LEVELS["INFO"]:
            self._write("INFO", message)

    def warn(self, message: str) -> None:
        if self._level <= _LEVELS["WARN"]:
            self._write("WARN", message)

    def error(self, message: str) -> None:
        if self._level <= _LEVELS["ERROR"]:
            self._write("ERROR", message)


_LOGGER = Logger()


def get_logger() -> Logger:
    """Return the shared logger instance."""
    return _LOGGER


def configure_logging(level: str, stream_name: str = "stderr") -> Logger:
    """Apply logging settings to the shared logger.

    Args:
        level: One of DEBUG, INFO, WARN or ERROR.
        stream_name: ``"stdout"`` or ``"stderr"``.

    Returns:
        The shared logger.
    """
    _LOGGER.set_level(level)
    _LOGGER.set_stream(sys.stdout if stream_name == "stdout" else None)
    return _LOGGER
