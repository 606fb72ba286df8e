"""
Wisdom Lenses — Flash-card difficulty API
"""

from __future__ import annotations

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wisdom_lenses.database import get_db
from wisdom_lenses.exceptions import ValidationError
from wisdom_lenses.schemas.flashcard import (
    DifficultyRecord,
    DifficultyRecordResponse,
    FlashCardProgressResponse,
    ProgressResponse,
    ProgressStats,
)
from wisdom_lenses.services.flashcard_service import FlashCardService

logger = structlog.get_logger("wisdom_lenses.api.flashcards")

router = APIRouter()


@router.post(
    "/difficulty",
    response_model=DifficultyRecordResponse,
    summary="Record a review rating for one hexagram card",
)
async def record_difficulty(
    payload: DifficultyRecord,
    db: AsyncSession = Depends(get_db),
) -> DifficultyRecordResponse:
    if not payload.username or payload.hexagram_number is None or not payload.difficulty:
        raise ValidationError("username, hexagram_number, difficulty are required")

    row, created = await FlashCardService(db).record(
        payload.username, payload.hexagram_number, payload.difficulty
    )
    return DifficultyRecordResponse(
        message="Difficulty recorded" if created else "Difficulty updated",
        created=created,
        progress=FlashCardProgressResponse.model_validate(row),
    )


@router.get(
    "/difficulty",
    response_model=ProgressResponse,
    summary="Review progress for a user",
)
async def get_progress(
    username: Optional[str] = Query(default=None),
    hexagram_number: Optional[int] = Query(default=None),
    db: AsyncSession = Depends(get_db),
) -> ProgressResponse:
    rows, stats = await FlashCardService(db).progress(username or "", hexagram_number)
    return ProgressResponse(
        progress=[FlashCardProgressResponse.model_validate(r) for r in rows],
        stats=ProgressStats(**stats),
    )
