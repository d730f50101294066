import pytest

from config.models import PromptConfig
from core.choices import ChoiceOutcome, check_default, format_choice_prompt, interpret_choice
from core.errors import InvalidDefaultError


def test_format_choice_prompt_lists_options_one_based() -> None:
    prompt = format_choice_prompt("Size", ["small", "large"], None)
    assert prompt == 'Size [1: "small", 2: "large"]: '


def test_format_choice_prompt_shows_default_one_based() -> None:
    prompt = format_choice_prompt("Size", ["small", "medium", "large"], 1)
    assert prompt == 'Size [1: "small", 2: "medium", 3: "large" (default: 2)]: '


def test_format_choice_prompt_accepts_non_string_labels() -> None:
    assert format_choice_prompt("N", [10, 20], None) == 'N [1: "10", 2: "20"]: '


def test_check_default_accepts_valid_indexes() -> None:
    check_default(["a", "b"], None)
    check_default(["a", "b"], 0)
    check_default(["a", "b"], 1)


@pytest.mark.parametrize("default", [2, 5, -1, True])
def test_check_default_rejects_bad_indexes(default) -> None:
    with pytest.raises(InvalidDefaultError):
        check_default(["a", "b"], default)


def test_invalid_default_error_is_a_value_error() -> None:
    err = InvalidDefaultError(3, 2)
    assert isinstance(err, ValueError)
    assert "default index must be in the options slice" in str(err)


@pytest.mark.parametrize(
    ("answer", "default", "expected"),
    [
        ("1", None, ChoiceOutcome(index=0)),
        ("3", None, ChoiceOutcome(index=2)),
        ("+2", None, ChoiceOutcome(index=1)),
        ("003", None, ChoiceOutcome(index=2)),
        ("", 1, ChoiceOutcome(index=1)),
        ("2", 0, ChoiceOutcome(index=1)),
    ],
)
def test_interpret_choice_accepts(answer: str, default, expected: ChoiceOutcome) -> None:
    outcome = interpret_choice(answer, 3, default)
    assert outcome == expected
    assert outcome.accepted


@pytest.mark.parametrize(
    ("answer", "message"),
    [
        ("", " is not a valid option"),
        ("x", "x is not a valid option"),
        ("0", "0 is not a valid option"),
        ("-2", "-2 is not a valid option"),
        ("4", "3 is not a valid option (too big)"),
        ("100", "99 is not a valid option (too big)"),
    ],
)
def test_interpret_choice_rejects(answer: str, message: str) -> None:
    outcome = interpret_choice(answer, 3, None)
    assert not outcome.accepted
    assert outcome.message == message


def test_interpret_choice_uses_configured_messages() -> None:
    prompts = PromptConfig(option_too_big_message="too big: {value}")
    assert interpret_choice("9", 2, None, prompts).message == "too big: 8"


def test_interpret_choice_numbers_beyond_64_bits_are_not_numbers() -> None:
    outcome = interpret_choice("99999999999999999999999", 3, None)
    assert outcome.message == "99999999999999999999999 is not a valid option"
    too_big = interpret_choice("18446744073709551615", 3, None)
    assert too_big.message == "18446744073709551614 is not a valid option (too big)"


def test_interpret_choice_formats_index_as_text() -> None:
    prompts = PromptConfig(option_too_big_message="{value[0]}.. is too big")
    assert interpret_choice("90", 2, None, prompts).message == "8.. is too big"
