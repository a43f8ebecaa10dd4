from __future__ import annotations

from typing import Callable, List, Protocol

from .schemas import CharacterRecord

BORDER = "•°" * 18 + "•"


def _frame(lines: List[str]) -> str:
    return "\n".join([BORDER, " ", *lines, " ", BORDER])


def format_character(c: CharacterRecord) -> str:
    if c.is_bachelor:
        marriage = "can get married to the player! ❤"
    else:
        marriage = "can NOT get married to the player! 💔"
    return _frame(
        [
            f"{c.name}'s birthday: {c.birthday_season.value} {c.birthday_day}",
            f"{c.name}'s favourite gift: {c.best_gift}",
            f"{c.name} {marriage}",
        ]
    )


def format_message(message: str) -> str:
    return _frame([message])


class Presenter(Protocol):
    def print_character(self, character: CharacterRecord) -> None:
        ...

    def print_message(self, message: str) -> None:
        ...


class Console:
    """Presenter writing framed blocks through `write` (print by default)."""

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self.write = write

    def print_character(self, character: CharacterRecord) -> None:
        self.write(format_character(character))

    def print_message(self, message: str) -> None:
        self.write(format_message(message))
