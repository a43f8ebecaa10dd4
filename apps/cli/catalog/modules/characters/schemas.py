from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field

from .fields import FieldDescriptor
from .models import SEASON_DAYS, Season

FieldValue = Union[str, Season, int, bool]


class CharacterRecord(BaseModel):
    name: str = Field(min_length=1)
    birthday_season: Season
    birthday_day: int = Field(ge=1, le=SEASON_DAYS)
    is_bachelor: bool
    best_gift: str = Field(min_length=1)

    def to_row(self) -> Dict[str, Any]:
        row = self.model_dump()
        row["birthday_season"] = self.birthday_season.value
        return row


@dataclass(frozen=True)
class InsertOperation:
    record: CharacterRecord


@dataclass(frozen=True)
class SelectOperation:
    """name=None selects every record."""

    name: Optional[str] = None


@dataclass(frozen=True)
class UpdateOperation:
    target_name: str
    field: FieldDescriptor
    new_value: FieldValue

    def display_value(self) -> str:
        if isinstance(self.new_value, Season):
            return self.new_value.value
        if isinstance(self.new_value, bool):
            return "true" if self.new_value else "false"
        return str(self.new_value)
