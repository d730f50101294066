import io

import pytest

from core.console import Console
from core.person import Gender, InvalidNameError, Name, Person, parse_name, read_person
from core.prompter import Prompter


def test_parse_name_splits_given_and_family() -> None:
    assert parse_name("Ada Lovelace") == Name(given="Ada", family="Lovelace")
    assert parse_name("  Juan   de la Cruz ") == Name(given="Juan", family="de la Cruz")


@pytest.mark.parametrize("text", ["", "Plato", "   "])
def test_parse_name_requires_two_parts(text: str) -> None:
    with pytest.raises(InvalidNameError):
        parse_name(text)


def test_invalid_name_is_value_error() -> None:
    assert issubclass(InvalidNameError, ValueError)


def test_read_person_collects_all_fields() -> None:
    stdout = io.StringIO()
    console = Console(input=io.StringIO("Plato\nAda Lovelace\nold\n36\n4\n2\n"), output=stdout)

    person = read_person(Prompter(console=console))

    assert person == Person(name=Name("Ada", "Lovelace"), age=36, gender=Gender.FEMALE)
    out = stdout.getvalue()
    assert "Plato is not valid" in out
    assert "old is not valid" in out
    assert "3 is not a valid option (too big)" in out


def test_person_describe() -> None:
    person = Person(name=Name("Ada", "Lovelace"), age=36, gender=Gender.OTHER)
    assert person.describe() == (
        "Person {\n"
        "    name: Ada Lovelace,\n"
        "    age: 36,\n"
        "    gender: other,\n"
        "}"
    )
