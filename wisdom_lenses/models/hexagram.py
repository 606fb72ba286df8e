"""
Wisdom Lenses — Hexagram model (the 64-entry catalog).
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from wisdom_lenses.database import Base
from wisdom_lenses.models.column_types import JSONDocument


class Hexagram(Base):
    __tablename__ = "hexagrams"
    __table_args__ = (
        CheckConstraint("number BETWEEN 1 AND 64", name="ck_hexagram_number_range"),
    )

    number: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False, comment="1-64"
    )
    symbol: Mapped[str] = mapped_column(
        String, nullable=False, comment="Trigram pair glyph, e.g. ☰/☰"
    )
    name: Mapped[str] = mapped_column(String, index=True, nullable=False)
    korean_name: Mapped[str | None] = mapped_column(
        String, nullable=True, comment="Alternate (hanja) name"
    )
    core_viewpoint: Mapped[str] = mapped_column(Text, nullable=False)
    mental_models: Mapped[str | None] = mapped_column(Text, nullable=True)
    summary: Mapped[str] = mapped_column(Text, nullable=False)
    keywords: Mapped[list] = mapped_column(
        JSONDocument, nullable=False, default=list, comment="Array of search keywords"
    )
    perspectives: Mapped[dict | None] = mapped_column(
        JSONDocument, nullable=True, comment="Perspective cards keyed by category"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), onupdate=func.now(), nullable=True
    )

    def __repr__(self) -> str:
        return f"<Hexagram #{self.number} {self.name!r}>"
