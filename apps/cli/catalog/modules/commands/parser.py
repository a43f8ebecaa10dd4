"""
Command parser for the catalog REPL.

Input lines are whitespace-separated: `<command> [args...]`. The keyword is
matched case-sensitively; anything outside the closed set parses as
UNRECOGNIZED (no exception), so the loop can reject it and keep going.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple


class CommandKind(Enum):
    ADD = "add"
    READ = "read"
    CHANGE = "change"
    QUIT = "quit"
    UNRECOGNIZED = "unrecognized"


KEYWORDS = {k.value: k for k in CommandKind if k is not CommandKind.UNRECOGNIZED}


@dataclass(frozen=True)
class ParsedCommand:
    kind: CommandKind
    arguments: Tuple[str, ...] = ()
    keyword: str = ""


def tokenize(line: str) -> Tuple[str, ...]:
    return tuple((line or "").split())


def parse_command(tokens: Sequence[str]) -> ParsedCommand:
    if not tokens:
        return ParsedCommand(kind=CommandKind.UNRECOGNIZED)
    keyword = tokens[0]
    kind = KEYWORDS.get(keyword, CommandKind.UNRECOGNIZED)
    return ParsedCommand(kind=kind, arguments=tuple(tokens[1:]), keyword=keyword)


def parse_line(line: str) -> Optional[ParsedCommand]:
    """None for blank lines; the loop skips them without a message."""
    tokens = tokenize(line)
    if not tokens:
        return None
    return parse_command(tokens)
