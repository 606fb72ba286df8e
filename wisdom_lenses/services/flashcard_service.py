"""
Wisdom Lenses — Flash-card review progress

One row per (username, hexagram).  Recording a rating overwrites the
difficulty, bumps ``review_count`` and stamps ``last_reviewed``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wisdom_lenses.exceptions import ValidationError
from wisdom_lenses.models.flashcard import FlashCardProgress
from wisdom_lenses.services.hexagram_store import validate_number

logger = structlog.get_logger("wisdom_lenses.flashcard_service")


class Difficulty(str, Enum):
    AGAIN = "again"
    SOON = "soon"
    LATER = "later"
    MASTERED = "mastered"


def resolve_difficulty(value: str | Difficulty) -> Difficulty:
    try:
        return Difficulty(value)
    except ValueError:
        raise ValidationError(
            "Invalid difficulty. Must be one of: "
            + ", ".join(d.value for d in Difficulty)
        ) from None


class FlashCardService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def record(
        self,
        username: str,
        hexagram_number: int,
        difficulty: str | Difficulty,
    ) -> tuple[FlashCardProgress, bool]:
        """Upsert a rating; returns ``(row, created)``."""
        if not username or not username.strip():
            raise ValidationError("username, hexagram_number, difficulty are required")
        number = validate_number(hexagram_number)
        level = resolve_difficulty(difficulty)
        now = datetime.now(timezone.utc)

        stmt = select(FlashCardProgress).where(
            FlashCardProgress.username == username,
            FlashCardProgress.hexagram_number == number,
        )
        row = (await self.session.execute(stmt)).scalar_one_or_none()

        created = row is None
        if created:
            row = FlashCardProgress(
                username=username,
                hexagram_number=number,
                difficulty=level.value,
                review_count=1,
                last_reviewed=now,
            )
            self.session.add(row)
        else:
            row.difficulty = level.value
            row.review_count = row.review_count + 1
            row.last_reviewed = now

        await self.session.flush()
        await self.session.refresh(row)

        logger.info(
            "flashcard_difficulty_recorded",
            username=username,
            hexagram=number,
            difficulty=level.value,
            review_count=row.review_count,
            created=created,
        )
        return row, created

    async def progress(
        self,
        username: str,
        hexagram_number: int | None = None,
    ) -> tuple[list[FlashCardProgress], dict[str, int]]:
        """Rows newest-reviewed first, plus counts per difficulty."""
        if not username or not username.strip():
            raise ValidationError("username is required")

        filters = [FlashCardProgress.username == username]
        if hexagram_number is not None:
            filters.append(
                FlashCardProgress.hexagram_number == validate_number(hexagram_number)
            )

        stmt = (
            select(FlashCardProgress)
            .where(*filters)
            .order_by(FlashCardProgress.last_reviewed.desc())
        )
        rows = list((await self.session.execute(stmt)).scalars().all())

        stats = {"total": len(rows)}
        for level in Difficulty:
            stats[level.value] = sum(1 for r in rows if r.difficulty == level.value)
        return rows, stats
