from __future__ import annotations

from enum import Enum
from typing import Optional

from sqlalchemy import CheckConstraint, Column, String
from sqlalchemy.dialects import mysql
from sqlmodel import SQLModel, Field


class Season(str, Enum):
    SPRING = "Spring"
    SUMMER = "Summer"
    FALL = "Fall"
    WINTER = "Winter"


SEASON_DAYS = 28

# binary collation on MySQL so name equality and uniqueness are case-sensitive
NAME_TYPE = String(255).with_variant(mysql.VARCHAR(255, collation="utf8mb4_bin"), "mysql")


# name is the lookup key (unique, case-sensitive as stored)
class Character(SQLModel, table=True):
    __tablename__ = "characters"
    __table_args__ = (
        CheckConstraint(f"birthday_day BETWEEN 1 AND {SEASON_DAYS}", name="ck_characters_birthday_day"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(sa_column=Column("name", NAME_TYPE, nullable=False, unique=True, index=True))
    birthday_season: str  # Spring|Summer|Fall|Winter
    birthday_day: int
    is_bachelor: bool
    best_gift: str
