"""characters: the five-column catalog record

- name is unique and case-sensitive (lookup key for read/change)
- birthday_day limited to 1..28 (one season)
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql

revision = "0001_characters"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "characters",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        # binary collation on MySQL: names compare case-sensitively, as on sqlite
        sa.Column(
            "name",
            sa.String(length=255).with_variant(mysql.VARCHAR(255, collation="utf8mb4_bin"), "mysql"),
            nullable=False,
        ),
        sa.Column("birthday_season", sa.String(length=16), nullable=False),  # Spring|Summer|Fall|Winter
        sa.Column("birthday_day", sa.Integer(), nullable=False),
        sa.Column("is_bachelor", sa.Boolean(), nullable=False),
        sa.Column("best_gift", sa.String(length=255), nullable=False),
        sa.CheckConstraint("birthday_day BETWEEN 1 AND 28", name="ck_characters_birthday_day"),
    )
    op.create_index("ix_characters_name", "characters", ["name"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_characters_name", table_name="characters")
    op.drop_table("characters")
