"""Create words table

Revision ID: 001
Revises: None
Create Date: 2026-10-16 00:00:00.000000+00:00

What:  Creates the `words` table (id, word, palindrome).
Rollback: downgrade() drops the table and every stored word.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "words",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "word",
            sa.Text(),
            nullable=False,
            comment="Original input text as submitted",
        ),
        sa.Column(
            "palindrome",
            sa.Boolean(),
            nullable=False,
            comment="Palindrome check result computed at creation time",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("words")
