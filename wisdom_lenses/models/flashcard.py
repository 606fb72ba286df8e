"""
Wisdom Lenses — Flash-card review progress (one row per user and hexagram).
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Integer, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from wisdom_lenses.database import Base


class FlashCardProgress(Base):
    __tablename__ = "flash_card_progress"
    __table_args__ = (
        UniqueConstraint("username", "hexagram_number", name="uq_user_hexagram"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    username: Mapped[str] = mapped_column(String, index=True, nullable=False)
    hexagram_number: Mapped[int] = mapped_column(Integer, nullable=False)
    difficulty: Mapped[str] = mapped_column(
        String, nullable=False, comment="again | soon | later | mastered"
    )
    review_count: Mapped[int] = mapped_column(
        Integer, default=1, server_default="1", nullable=False
    )
    last_reviewed: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), onupdate=func.now(), nullable=True
    )

    def __repr__(self) -> str:
        return (
            f"<FlashCardProgress {self.username!r} "
            f"hexagram={self.hexagram_number} difficulty={self.difficulty}>"
        )
