"""
Wisdom Lenses — Perspective generation

Builds the prompt for one lens, calls Gemini and parses the answer into a
card.  ``generate_all`` walks the six lenses one after another with a short
pause between calls; a lens that fails is reported as an error card so the
other five still reach the user.  Cards are returned, never stored.
"""

from __future__ import annotations

import asyncio

import structlog

from wisdom_lenses.config import get_settings
from wisdom_lenses.exceptions import GenerationError, ValidationError
from wisdom_lenses.services.gemini_service import GeminiService
from wisdom_lenses.services.hexagram_store import HexagramStore
from wisdom_lenses.services.perspective_parser import (
    ParsedPerspective,
    parse_perspective_response,
)
from wisdom_lenses.services.perspective_prompts import (
    PERSPECTIVE_ORDER,
    Perspective,
    build_perspective_prompt,
    default_title,
    resolve_perspective,
)

logger = structlog.get_logger("wisdom_lenses.perspective_service")

ERROR_KEY_MESSAGE = "분석을 다시 요청해주세요."
ERROR_QUESTIONS = ["이 관점에서 다시 분석을 요청하시겠습니까?"]


def error_card(perspective: Perspective, error: str) -> dict:
    return {
        "title": default_title(perspective),
        "content": f"{perspective.value} 관점 분석 중 오류가 발생했습니다. 다시 시도해주세요.",
        "key_message": ERROR_KEY_MESSAGE,
        "questions": list(ERROR_QUESTIONS),
        "remainder": "",
        "error": error,
    }


class PerspectiveService:
    """Generate perspective cards for a catalog hexagram."""

    def __init__(
        self,
        store: HexagramStore,
        client: GeminiService,
        delay_seconds: float | None = None,
        min_situation_length: int | None = None,
    ) -> None:
        settings = get_settings()
        self.store = store
        self.client = client
        self.delay_seconds = (
            settings.PERSPECTIVE_DELAY_SECONDS if delay_seconds is None else delay_seconds
        )
        self.min_situation_length = (
            settings.MIN_SITUATION_LENGTH
            if min_situation_length is None
            else min_situation_length
        )

    def validate_situation(self, situation: str | None) -> str:
        """Reject a blank or too-short situation before any generation call."""
        text = (situation or "").strip()
        if not text:
            raise ValidationError("hexagram_number and user_situation are required")
        if len(text) < self.min_situation_length:
            raise ValidationError(
                f"Situation must be at least {self.min_situation_length} characters"
            )
        return situation

    async def generate(
        self,
        number: int,
        situation: str,
        perspective: str | Perspective,
    ) -> ParsedPerspective:
        """One lens.  Generation errors propagate to the caller."""
        lens = resolve_perspective(perspective)
        situation = self.validate_situation(situation)
        hexagram = await self.store.get_by_number(number)

        prompt = build_perspective_prompt(lens, hexagram, situation)
        result = await self.client.generate(prompt)
        card = parse_perspective_response(result.text, lens)

        logger.info(
            "perspective_generated",
            hexagram=hexagram.number,
            perspective=lens.value,
            questions=len(card.questions),
        )
        return card

    async def generate_all(self, number: int, situation: str) -> dict[str, dict]:
        """All six lenses, in display order, keyed by category."""
        situation = self.validate_situation(situation)
        hexagram = await self.store.get_by_number(number)

        cards: dict[str, dict] = {}
        for index, lens in enumerate(PERSPECTIVE_ORDER):
            if index and self.delay_seconds > 0:
                await asyncio.sleep(self.delay_seconds)

            prompt = build_perspective_prompt(lens, hexagram, situation)
            try:
                result = await self.client.generate(prompt)
            except GenerationError as exc:
                logger.error(
                    "perspective_generation_failed",
                    hexagram=hexagram.number,
                    perspective=lens.value,
                    error=exc.message,
                )
                cards[lens.value] = error_card(lens, exc.message)
                continue

            cards[lens.value] = parse_perspective_response(result.text, lens).to_dict()

        logger.info(
            "perspectives_generated",
            hexagram=hexagram.number,
            failed=sum(1 for c in cards.values() if "error" in c),
        )
        return cards
