"""Canonical text parsers for typed prompts.

A parser is any callable taking the trimmed answer and returning a value. Any
exception it raises marks the answer as invalid and the prompt loop asks
again. The parsers here raise ``ValueError``.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Callable, TypeVar

T = TypeVar("T")

Parser = Callable[[str], T]

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")

_TRUE_WORDS = {"y", "yes", "true", "t", "on", "1"}
_FALSE_WORDS = {"n", "no", "false", "f", "off", "0"}


def parse_unsigned(text: str, bits: int | None = None) -> int:
    """Parse a non-negative integer in plain decimal notation.

    Args:
        text: Text to parse. An optional leading ``+`` is allowed.
        bits: Optional width; values above ``2**bits - 1`` are rejected.

    Returns:
        The parsed integer.
    """
    if not _UNSIGNED_RE.fullmatch(text):
        raise ValueError(f"invalid digit found in {text!r}")
    value = int(text)
    if bits is not None and value > (1 << bits) - 1:
        raise ValueError(f"number too large to fit in {bits} bits: {text!r}")
    return value


def parse_signed(text: str, bits: int | None = None) -> int:
    """Parse an integer with an optional sign, range-checked to ``bits``."""
    if not _SIGNED_RE.fullmatch(text):
        raise ValueError(f"invalid digit found in {text!r}")
    value = int(text)
    if bits is not None:
        limit = 1 << (bits - 1)
        if not -limit <= value < limit:
            raise ValueError(f"number out of range for {bits} bits: {text!r}")
    return value


def unsigned(bits: int | None = None) -> Parser[int]:
    """Build an unsigned integer parser for a fixed width."""

    def _parse(text: str) -> int:
        return parse_unsigned(text, bits)

    _parse.__name__ = f"uint{bits}" if bits else "unsigned"
    return _parse


def signed(bits: int | None = None) -> Parser[int]:
    """Build a signed integer parser for a fixed width."""

    def _parse(text: str) -> int:
        return parse_signed(text, bits)

    _parse.__name__ = f"int{bits}" if bits else "integer"
    return _parse


uint8 = unsigned(8)
uint16 = unsigned(16)
uint32 = unsigned(32)
uint64 = unsigned(64)
usize = unsigned(64)

int8 = signed(8)
int16 = signed(16)
int32 = signed(32)
int64 = signed(64)
integer = signed()


def real(text: str) -> float:
    """Parse a finite floating point number."""
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    return value


def decimal_number(text: str) -> Decimal:
    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"invalid decimal literal: {text!r}") from exc
    if not value.is_finite():
        raise ValueError(f"not a finite number: {text!r}")
    return value


def boolean(text: str) -> bool:
    """Parse yes/no style answers."""
    word = text.lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"expected yes or no, got {text!r}")


def one_of(*words: str, case_sensitive: bool = False) -> Parser[str]:
    """Build a parser accepting only the given words.

    The canonical spelling from ``words`` is returned, regardless of the case
    the user typed when matching is case-insensitive.
    """
    if case_sensitive:
        lookup = {word: word for word in words}
    else:
        lookup = {word.lower(): word for word in words}

    def _parse(text: str) -> str:
        key = text if case_sensitive else text.lower()
        try:
            return lookup[key]
        except KeyError:
            raise ValueError(f"expected one of {', '.join(words)}") from None

    return _parse
