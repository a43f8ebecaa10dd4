from __future__ import annotations

import os
from typing import List

from catalog.core.errors import StoreError
from catalog.core.observability import emit

from .models import Season
from .repository import CharacterGateway
from .schemas import CharacterRecord

INITIAL_CHARACTERS: List[CharacterRecord] = [
    CharacterRecord(name="Abigail", birthday_season=Season.FALL, birthday_day=13, is_bachelor=True, best_gift="Amethyst"),
    CharacterRecord(name="Caroline", birthday_season=Season.WINTER, birthday_day=7, is_bachelor=False, best_gift="Fish Taco"),
    CharacterRecord(name="Haley", birthday_season=Season.SPRING, birthday_day=14, is_bachelor=True, best_gift="Coconut"),
    CharacterRecord(name="Lewis", birthday_season=Season.SPRING, birthday_day=7, is_bachelor=False, best_gift="Autumn's Beauty"),
    CharacterRecord(name="Leah", birthday_season=Season.WINTER, birthday_day=23, is_bachelor=True, best_gift="Goat Cheese"),
]


def is_seed_enabled(*, default: bool = True) -> bool:
    """
    CATALOG_SEED=0|false|no -> off, anything else -> on.
    """
    v = os.environ.get("CATALOG_SEED")
    if v is None:
        return default
    v = v.strip().lower()
    return v not in ("0", "false", "no", "")


def seed_initial_characters(repo: CharacterGateway) -> int:
    """Insert the starting cast once; existing names are left untouched. Returns rows added."""
    added = 0
    for c in INITIAL_CHARACTERS:
        if repo.select_by_name(c.name) is not None:
            emit("debug", "catalog.seed.skip", f"{c.name} already present", __name__)
            continue
        try:
            repo.insert(c)
            added += 1
        except StoreError as e:
            emit("warning", "catalog.seed.error", e.message, __name__, name=c.name, code=e.code)
    return added
