"""
Value parsers shared by `add` and `change`.

Each parser takes raw terminal token(s) and returns a typed value or raises
ValidationError with a message naming the offending input and what is accepted.
"""
from __future__ import annotations

from typing import Sequence

from catalog.core.errors import ValidationError

from .models import SEASON_DAYS, Season

BOOL_TOKENS = {"true": True, "false": False}


def season_names() -> str:
    return ", ".join(s.value for s in Season)


def parse_season(token: str) -> Season:
    raw = (token or "").strip().lower()
    for season in Season:
        if season.value.lower() == raw:
            return season
    raise ValidationError(
        f"Unrecognized season {token!r}. Use one of: {season_names()}.",
        code="unrecognized_season",
        details={"token": token, "allowed": [s.value for s in Season]},
    )


def parse_day(token: str) -> int:
    raw = (token or "").strip()
    # ascii digits only: no sign, no unicode numerals
    if not raw or not raw.isascii() or not raw.isdigit():
        raise ValidationError(
            f"{token!r} is not a number. The birthday day must be a whole number from 1 to {SEASON_DAYS}.",
            code="not_a_number",
            details={"token": token},
        )
    v = int(raw)
    if v < 1 or v > SEASON_DAYS:
        raise ValidationError(
            f"Day {v} is out of range. A season has {SEASON_DAYS} days, use 1 to {SEASON_DAYS}.",
            code="day_out_of_range",
            details={"token": token, "min": 1, "max": SEASON_DAYS},
        )
    return v


def parse_bool(token: str) -> bool:
    raw = (token or "").strip().lower()
    if raw in BOOL_TOKENS:
        return BOOL_TOKENS[raw]
    raise ValidationError(
        f"Unrecognized boolean {token!r}. Use true or false.",
        code="unrecognized_boolean",
        details={"token": token, "allowed": sorted(BOOL_TOKENS)},
    )


def parse_text(tokens: Sequence[str]) -> str:
    parts = [t for t in tokens if t]
    if not parts:
        raise ValidationError("A text value needs at least one word.", code="empty_text")
    return " ".join(parts)
