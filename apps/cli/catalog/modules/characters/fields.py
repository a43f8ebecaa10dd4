"""
Field registry: the closed set of mutable `characters` columns.

Column names interpolated into UPDATE statements come only from FIELDS,
never from user text; values are always bound as parameters.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Sequence, Tuple

from catalog.core.errors import UsageError, ValidationError

from . import values


class FieldKind(Enum):
    TEXT = "text"
    SEASON = "season"
    DAY = "day"
    BOOL = "bool"

    @property
    def takes_rest(self) -> bool:
        """Text fields consume every remaining token; the others exactly one."""
        return self is FieldKind.TEXT

    def parse(self, tokens: Sequence[str]) -> Any:
        if self.takes_rest:
            return values.parse_text(tokens)
        if len(tokens) != 1:
            raise UsageError(
                f"A {self.value} value is a single word, got {len(tokens)}.",
                details={"kind": self.value, "got": len(tokens)},
            )
        return _SINGLE_TOKEN_PARSERS[self](tokens[0])


_SINGLE_TOKEN_PARSERS: Dict[FieldKind, Callable[[str], Any]] = {
    FieldKind.SEASON: values.parse_season,
    FieldKind.DAY: values.parse_day,
    FieldKind.BOOL: values.parse_bool,
}


@dataclass(frozen=True)
class FieldDescriptor:
    field_name: str
    value_kind: FieldKind


FIELDS: Tuple[FieldDescriptor, ...] = (
    FieldDescriptor("name", FieldKind.TEXT),
    FieldDescriptor("birthday_season", FieldKind.SEASON),
    FieldDescriptor("birthday_day", FieldKind.DAY),
    FieldDescriptor("is_bachelor", FieldKind.BOOL),
    FieldDescriptor("best_gift", FieldKind.TEXT),
)

_BY_NAME: Dict[str, FieldDescriptor] = {f.field_name: f for f in FIELDS}


def field_names() -> Tuple[str, ...]:
    return tuple(f.field_name for f in FIELDS)


def resolve_field(token: str) -> FieldDescriptor:
    fd = _BY_NAME.get((token or "").strip().lower())
    if fd is None:
        raise ValidationError(
            f"Field {token!r} is not recognized. Valid fields: {', '.join(field_names())}.",
            code="unknown_field",
            details={"token": token, "allowed": list(field_names())},
        )
    return fd
