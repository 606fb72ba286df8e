"""
Wisdom Lenses — Memorize subjects and cards API
"""

from __future__ import annotations

import uuid

import structlog
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from wisdom_lenses.database import get_db
from wisdom_lenses.schemas.memo import SuccessResponse
from wisdom_lenses.schemas.memorize import (
    CardCreate,
    CardResponse,
    CardUpdate,
    SubjectCreate,
    SubjectResponse,
)
from wisdom_lenses.services.memorize_service import MemorizeService

logger = structlog.get_logger("wisdom_lenses.api.memorize")

router = APIRouter()


# ── Subjects ──────────────────────────────────────────────────────────────────

@router.get("/subjects", response_model=list[SubjectResponse])
async def list_subjects(db: AsyncSession = Depends(get_db)) -> list[SubjectResponse]:
    rows = await MemorizeService(db).list_subjects()
    return [
        SubjectResponse.model_validate(subject).model_copy(update={"card_count": count})
        for subject, count in rows
    ]


@router.post(
    "/subjects",
    response_model=SubjectResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_subject(
    payload: SubjectCreate,
    db: AsyncSession = Depends(get_db),
) -> SubjectResponse:
    subject = await MemorizeService(db).create_subject(payload.name, payload.description)
    return SubjectResponse.model_validate(subject)


@router.get("/subjects/{subject_id}", response_model=SubjectResponse)
async def get_subject(
    subject_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> SubjectResponse:
    subject = await MemorizeService(db).get_subject(subject_id)
    return SubjectResponse.model_validate(subject)


# ── Cards ─────────────────────────────────────────────────────────────────────

@router.get("/subjects/{subject_id}/cards", response_model=list[CardResponse])
async def list_cards(
    subject_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> list[CardResponse]:
    cards = await MemorizeService(db).list_cards(subject_id)
    return [CardResponse.model_validate(c) for c in cards]


@router.post(
    "/subjects/{subject_id}/cards",
    response_model=CardResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_card(
    subject_id: uuid.UUID,
    payload: CardCreate,
    db: AsyncSession = Depends(get_db),
) -> CardResponse:
    card = await MemorizeService(db).add_card(subject_id, payload.question, payload.answer)
    return CardResponse.model_validate(card)


@router.put("/cards/{card_id}", response_model=CardResponse)
async def update_card(
    card_id: uuid.UUID,
    payload: CardUpdate,
    db: AsyncSession = Depends(get_db),
) -> CardResponse:
    card = await MemorizeService(db).update_card(card_id, payload.question, payload.answer)
    return CardResponse.model_validate(card)


@router.delete("/cards/{card_id}", response_model=SuccessResponse)
async def delete_card(
    card_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    await MemorizeService(db).delete_card(card_id)
    logger.info("card_removed", card_id=str(card_id))
    return SuccessResponse(message="Card deleted")
