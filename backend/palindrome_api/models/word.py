"""
Palindrome API — Word SQLAlchemy Model
=======================================

What:  ORM model representing the `words` table.
How:   Inherits from the shared DeclarativeBase; create_schema() and Alembic
       both read it from Base.metadata.
Who:   Used by WordStore for create/list/delete.

Table Design:
    - id: integer primary key assigned by the database on insert
    - word: the text exactly as submitted (not normalized)
    - palindrome: computed once from `word` at creation, never recomputed
"""

from sqlalchemy import Boolean, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from palindrome_api.database import Base


class Word(Base):
    """
    A checked word and its palindrome flag.

    Lifecycle:
        1. Created by POST /savepalindrome
        2. Read by GET /words
        3. Removed by DELETE /words/{id}
        Never updated; there is no update endpoint.
    """

    __tablename__ = "words"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    word: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Original input text as submitted",
    )

    palindrome: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        comment="Palindrome check result computed at creation time",
    )

    def __repr__(self) -> str:
        return f"<Word(id={self.id}, word='{self.word}', palindrome={self.palindrome})>"
