"""Sample person record collected interactively."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.parsers import uint16
from core.prompter import Prompter


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @classmethod
    def from_prompt(cls, prompter: Prompter, question: str = "What is your gender") -> "Gender":
        """Ask for a gender using a numbered menu."""
        members = list(cls)
        index = prompter.read_choice(question, [member.value for member in members])
        return members[index]


class InvalidNameError(ValueError):
    """Text that is not a given name followed by a family name."""


@dataclass(frozen=True)
class Name:
    given: str
    family: str

    def __str__(self) -> str:
        return f"{self.given} {self.family}"


def parse_name(text: str) -> Name:
    """Split ``text`` into a given name and the remaining family name.

    The given name is the first whitespace-separated word; everything after it
    is the family name, so both parts must be present.

    Raises:
        InvalidNameError: If either part is missing.
    """
    parts = text.strip().split(None, 1)
    if len(parts) != 2:
        raise InvalidNameError(f"expected a given and a family name, got {text!r}")
    given, family = parts[0], parts[1].strip()
    return Name(given=given, family=family)


@dataclass(frozen=True)
class Person:
    name: Name
    age: int
    gender: Gender

    def describe(self) -> str:
        return "\n".join(
            [
                "Person {",
                f"    name: {self.name.given} {self.name.family},",
                f"    age: {self.age},",
                f"    gender: {self.gender.value},",
                "}",
            ]
        )


def read_person(prompter: Prompter) -> Person:
    """Collect a full person record, asking again on invalid answers."""
    name = prompter.read_custom_nonempty("What is your name", parse_name)
    age = prompter.read_custom_nonempty("What is your age", uint16)
    gender = Gender.from_prompt(prompter)
    return Person(name=name, age=age, gender=gender)
