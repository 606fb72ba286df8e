"""
Wisdom Lenses — AI hexagram recommendation

Two modes, chosen by whether the caller already holds a hexagram number
(from a dice roll):

- **advice**: the number is fixed; Gemini writes short advice for it.
- **selection**: Gemini is shown the catalog and answers with

      SELECTED_HEXAGRAM: <n>
      REASONING: <why>
      CONFIDENCE: <1-10>

  The number falls back to the first 1..64 integer in the answer, the
  reasoning to the first 300 characters and the confidence to 0.7.
"""

from __future__ import annotations

import re
import secrets
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import structlog

from wisdom_lenses.config import get_settings
from wisdom_lenses.exceptions import GenerationError, NotFoundError, ValidationError
from wisdom_lenses.services.gemini_service import GeminiService
from wisdom_lenses.services.hexagram_store import HexagramStore

logger = structlog.get_logger("wisdom_lenses.analysis_service")

DEFAULT_CONFIDENCE = 0.7
REASONING_FALLBACK_CHARS = 300

_SELECTED_RE = re.compile(r"SELECTED_HEXAGRAM:\s*\[?\s*(\d+)", re.IGNORECASE)
_ANY_NUMBER_RE = re.compile(r"\b([1-9]|[1-5][0-9]|6[0-4])\b")
_REASONING_RE = re.compile(
    r"REASONING:\s*(.*?)(?=INSIGHT:|CONFIDENCE:|$)", re.IGNORECASE | re.DOTALL
)
_CONFIDENCE_RE = re.compile(r"CONFIDENCE:\s*(\d+)", re.IGNORECASE)


# ── Response parsing ─────────────────────────────────────────────────


def parse_selected_number(text: str) -> int | None:
    match = _SELECTED_RE.search(text)
    if match and 1 <= int(match.group(1)) <= 64:
        return int(match.group(1))
    match = _ANY_NUMBER_RE.search(text)
    return int(match.group(1)) if match else None


def parse_reasoning(text: str) -> str:
    match = _REASONING_RE.search(text)
    if match and match.group(1).strip():
        return match.group(1).strip()
    return text[:REASONING_FALLBACK_CHARS] + "..."


def parse_confidence(text: str) -> float:
    match = _CONFIDENCE_RE.search(text)
    if not match:
        return DEFAULT_CONFIDENCE
    return min(max(int(match.group(1)), 1), 10) / 10


def new_session_id() -> str:
    return f"session_{int(time.time() * 1000)}_{secrets.token_hex(4)}"


# ── Prompts ──────────────────────────────────────────────────────────


def build_advice_prompt(hexagram: Any, situation: str) -> str:
    return (
        f"{hexagram.number}번 괘 {hexagram.name}에 대해 사용자 상황에 맞는 조언을 "
        f"제공해주세요. 사용자 상황: {situation}. 200자 이내로 작성해주세요."
    )


def build_selection_prompt(situation: str, catalog: list[Any]) -> str:
    hexagram_list = "\n".join(
        f"{h.number}. {h.name} - {h.core_viewpoint}" for h in catalog
    )
    return (
        f"상황: {situation}\n\n"
        f"괘 목록:\n{hexagram_list}\n\n"
        "가장 적합한 괘 번호를 선택하고 다음 형식으로 답하세요.\n"
        "SELECTED_HEXAGRAM: [번호]\n"
        "REASONING: [선택 이유]\n"
        "CONFIDENCE: [1-10]"
    )


# ── Service ──────────────────────────────────────────────────────────


@dataclass
class AnalysisResult:
    hexagram: Any
    ai_response: str
    reasoning: str
    confidence: float | None = None
    session_id: str | None = None
    user_situation: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class AnalysisService:
    """Recommend a hexagram for a situation, or advise on a rolled one."""

    def __init__(self, store: HexagramStore, client: GeminiService) -> None:
        settings = get_settings()
        self.store = store
        self.client = client
        self.min_situation_length = settings.MIN_SITUATION_LENGTH
        self.temperature = settings.ANALYSIS_TEMPERATURE
        self.max_output_tokens = settings.ANALYSIS_MAX_OUTPUT_TOKENS

    async def analyze(
        self,
        situation: str,
        hexagram_number: int | None = None,
    ) -> AnalysisResult:
        if not situation or len(situation.strip()) < self.min_situation_length:
            raise ValidationError(
                f"Situation must be at least {self.min_situation_length} characters"
            )

        if hexagram_number is not None:
            return await self._advise(situation, hexagram_number)
        return await self._select(situation)

    async def _advise(self, situation: str, number: int) -> AnalysisResult:
        hexagram = await self.store.get_by_number(number)
        result = await self.client.generate(
            build_advice_prompt(hexagram, situation),
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
        )
        logger.info("hexagram_advice_generated", hexagram=hexagram.number)
        return AnalysisResult(
            hexagram=hexagram,
            ai_response=result.text,
            reasoning=result.text,
            user_situation=situation,
        )

    async def _select(self, situation: str) -> AnalysisResult:
        catalog = await self.store.find_all()
        if not catalog:
            raise NotFoundError(
                "No hexagram data found. Seed the catalog first."
            )

        result = await self.client.generate(
            build_selection_prompt(situation, catalog),
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
        )
        text = result.text

        number = parse_selected_number(text)
        if number is None:
            logger.warning("hexagram_selection_unparsed", response=text[:200])
            raise GenerationError(
                "The model could not select a hexagram. Please try again.",
                model=result.model,
            )

        hexagram = await self.store.find_by_number(number)
        if hexagram is None:
            raise NotFoundError(f"Selected hexagram number {number} not found")

        analysis = AnalysisResult(
            hexagram=hexagram,
            ai_response=text,
            reasoning=parse_reasoning(text),
            confidence=parse_confidence(text),
            session_id=new_session_id(),
            user_situation=situation,
        )
        logger.info(
            "hexagram_selected",
            hexagram=number,
            confidence=analysis.confidence,
            session_id=analysis.session_id,
        )
        return analysis
