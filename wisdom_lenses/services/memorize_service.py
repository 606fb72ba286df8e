"""
Wisdom Lenses — Memorize subjects and question/answer cards.
"""

from __future__ import annotations

import uuid

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wisdom_lenses.exceptions import ConflictError, NotFoundError, ValidationError
from wisdom_lenses.models.memorize import MemorizeCard, MemorizeSubject

logger = structlog.get_logger("wisdom_lenses.memorize_service")


def _required(value: str | None, message: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(message)
    return value.strip()


class MemorizeService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    # ── Subjects ──────────────────────────────────────────────────────

    async def list_subjects(self) -> list[tuple[MemorizeSubject, int]]:
        """Every subject, newest first, with its card count."""
        stmt = (
            select(MemorizeSubject, func.count(MemorizeCard.id))
            .outerjoin(MemorizeCard, MemorizeCard.subject_id == MemorizeSubject.id)
            .group_by(MemorizeSubject.id)
            .order_by(MemorizeSubject.created_at.desc(), MemorizeSubject.name)
        )
        result = await self.session.execute(stmt)
        return [(subject, int(count)) for subject, count in result.all()]

    async def create_subject(self, name: str, description: str | None = None) -> MemorizeSubject:
        name = _required(name, "Subject name is required")

        existing = await self.session.execute(
            select(MemorizeSubject.id).where(MemorizeSubject.name == name)
        )
        if existing.first() is not None:
            raise ConflictError(f"Subject {name!r} already exists")

        subject = MemorizeSubject(name=name, description=(description or "").strip())
        self.session.add(subject)
        await self.session.flush()
        await self.session.refresh(subject)
        logger.info("memorize_subject_created", subject_id=str(subject.id), name=name)
        return subject

    async def get_subject(self, subject_id: uuid.UUID) -> MemorizeSubject:
        subject = await self.session.get(MemorizeSubject, subject_id)
        if subject is None:
            raise NotFoundError(f"Subject {subject_id} not found")
        return subject

    # ── Cards ─────────────────────────────────────────────────────────

    async def list_cards(self, subject_id: uuid.UUID) -> list[MemorizeCard]:
        await self.get_subject(subject_id)
        stmt = (
            select(MemorizeCard)
            .where(MemorizeCard.subject_id == subject_id)
            .order_by(MemorizeCard.created_at.desc())
        )
        return list((await self.session.execute(stmt)).scalars().all())

    async def add_card(
        self,
        subject_id: uuid.UUID,
        question: str,
        answer: str,
    ) -> MemorizeCard:
        question = _required(question, "Question is required")
        answer = _required(answer, "Answer is required")
        await self.get_subject(subject_id)

        card = MemorizeCard(subject_id=subject_id, question=question, answer=answer)
        self.session.add(card)
        await self.session.flush()
        await self.session.refresh(card)
        logger.info("memorize_card_created", card_id=str(card.id), subject_id=str(subject_id))
        return card

    async def update_card(
        self,
        card_id: uuid.UUID,
        question: str,
        answer: str,
    ) -> MemorizeCard:
        question = _required(question, "Question is required")
        answer = _required(answer, "Answer is required")

        card = await self._get_card(card_id)
        card.question = question
        card.answer = answer
        await self.session.flush()
        await self.session.refresh(card)
        logger.info("memorize_card_updated", card_id=str(card_id))
        return card

    async def delete_card(self, card_id: uuid.UUID) -> None:
        card = await self._get_card(card_id)
        await self.session.delete(card)
        await self.session.flush()
        logger.info("memorize_card_deleted", card_id=str(card_id))

    async def _get_card(self, card_id: uuid.UUID) -> MemorizeCard:
        card = await self.session.get(MemorizeCard, card_id)
        if card is None:
            raise NotFoundError(f"Card {card_id} not found")
        return card
