import io
import sys

import pytest

import human_input
from human_input import (
    EndOfInputError,
    InvalidDefaultError,
    read_choice,
    read_custom,
    read_custom_noquestion,
    read_custom_nonempty,
    read_line_raw,
    read_string,
    read_string_noquestion,
    read_string_nonempty,
    uint16,
    uint32,
)


def _feed(monkeypatch, text: str) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_read_string_uses_process_streams(monkeypatch, capsys) -> None:
    _feed(monkeypatch, "  Ada Lovelace \n")
    assert read_string("Please enter your name") == "Ada Lovelace"
    assert capsys.readouterr().out == "Please enter your name: "


def test_read_line_raw_and_noquestion(monkeypatch, capsys) -> None:
    _feed(monkeypatch, "\nsecond\n")
    assert read_line_raw() is None
    assert read_string_noquestion() == "second"
    assert capsys.readouterr().out == ""


def test_read_string_nonempty_prints_diagnostic(monkeypatch, capsys) -> None:
    _feed(monkeypatch, "\nx\n")
    assert read_string_nonempty("Name") == "x"
    assert capsys.readouterr().out == "Name: Input must not be empty.\nName: "


def test_read_choice_with_gender_options(monkeypatch, capsys) -> None:
    _feed(monkeypatch, "5\n1\n")
    assert read_choice("What is your gender", ["male", "female", "other"]) == 0
    out = capsys.readouterr().out
    assert out.count('What is your gender [1: "male", 2: "female", 3: "other"]: ') == 2
    assert "4 is not a valid option (too big)" in out


def test_read_choice_contract_failure(monkeypatch) -> None:
    _feed(monkeypatch, "\n")
    with pytest.raises(InvalidDefaultError):
        read_choice("What is your gender", ["male", "female", "other"], 5)


def test_read_custom_variants(monkeypatch, capsys) -> None:
    _feed(monkeypatch, "abc\n42\n\n9\n")
    assert read_custom_nonempty("What is your age", uint16) == 42
    assert read_custom("Visits", uint32) is None
    assert read_custom_noquestion(uint32) == 9
    out = capsys.readouterr().out
    assert out == "What is your age: abc is not valid\nWhat is your age: Visits: "


def test_end_of_input_is_reported(monkeypatch) -> None:
    _feed(monkeypatch, "")
    with pytest.raises(EndOfInputError):
        read_custom_nonempty("What is your age", uint16)


def test_public_names_are_exported() -> None:
    for name in human_input.__all__:
        assert hasattr(human_input, name), name
