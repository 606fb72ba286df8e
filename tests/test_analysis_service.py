"""
Tests for AI hexagram recommendation and advice.
"""

import re
from unittest.mock import AsyncMock

import pytest

from wisdom_lenses.exceptions import GenerationError, NotFoundError, ValidationError
from wisdom_lenses.services.analysis_service import (
    AnalysisService,
    build_selection_prompt,
    new_session_id,
    parse_confidence,
    parse_reasoning,
    parse_selected_number,
)
from wisdom_lenses.services.gemini_service import GenerationResult
from wisdom_lenses.services.hexagram_store import HexagramStore

SITUATION = "회사에서 승진을 기다리고 있어 초조합니다"


def _answer(text):
    return AsyncMock(return_value=GenerationResult(text=text, model="gemini-test"))


class TestParsing:

    def test_structured_answer(self):
        text = "SELECTED_HEXAGRAM: 5\nREASONING: 기다림이 필요합니다.\nCONFIDENCE: 8"

        assert parse_selected_number(text) == 5
        assert parse_reasoning(text) == "기다림이 필요합니다."
        assert parse_confidence(text) == pytest.approx(0.8)

    def test_bracketed_number(self):
        assert parse_selected_number("selected_hexagram: [12]") == 12

    def test_number_fallback(self):
        """Without the label the first 1..64 integer is used."""
        assert parse_selected_number("I would pick 99 or maybe 3 here") == 3
        assert parse_selected_number("no idea") is None

    def test_reasoning_fallback_truncates(self):
        text = "x" * 400
        assert parse_reasoning(text) == "x" * 300 + "..."

    def test_confidence_default_and_clamp(self):
        assert parse_confidence("nothing") == pytest.approx(0.7)
        assert parse_confidence("CONFIDENCE: 15") == pytest.approx(1.0)
        assert parse_confidence("CONFIDENCE: 0") == pytest.approx(0.1)

    def test_session_id_shape(self):
        assert re.fullmatch(r"session_\d+_[0-9a-f]{8}", new_session_id())

    def test_selection_prompt_lists_catalog(self, sample_hexagram):
        prompt = build_selection_prompt("상황", [sample_hexagram])
        assert "5. 수천수 - 전략적 기다림" in prompt
        assert "SELECTED_HEXAGRAM:" in prompt


class TestAnalyze:

    @pytest.mark.asyncio
    async def test_selection_mode(self, seeded_store, fake_gemini):
        """The model's pick is loaded from the catalog with reasoning and confidence."""
        fake_gemini.generate = _answer(
            "SELECTED_HEXAGRAM: 5\nREASONING: 때를 기다리세요.\nCONFIDENCE: 9"
        )

        result = await AnalysisService(seeded_store, fake_gemini).analyze(SITUATION)

        assert result.hexagram.number == 5
        assert result.reasoning == "때를 기다리세요."
        assert result.confidence == pytest.approx(0.9)
        assert result.session_id.startswith("session_")
        assert result.user_situation == SITUATION
        prompt = fake_gemini.generate.await_args.args[0]
        assert "1. 중천건" in prompt and "5. 수천수" in prompt

    @pytest.mark.asyncio
    async def test_advice_mode(self, seeded_store, fake_gemini):
        """A fixed number asks for advice on that hexagram only."""
        fake_gemini.generate = _answer("서두르지 마세요.")

        result = await AnalysisService(seeded_store, fake_gemini).analyze(
            SITUATION, hexagram_number=2
        )

        assert result.hexagram.number == 2
        assert result.ai_response == "서두르지 마세요."
        assert result.confidence is None
        assert result.session_id is None
        kwargs = fake_gemini.generate.await_args.kwargs
        assert kwargs["temperature"] == pytest.approx(0.7)
        assert kwargs["max_output_tokens"] == 500

    @pytest.mark.asyncio
    async def test_advice_for_missing_hexagram_skips_generation(self, seeded_store, fake_gemini):
        with pytest.raises(NotFoundError):
            await AnalysisService(seeded_store, fake_gemini).analyze(
                SITUATION, hexagram_number=40
            )
        fake_gemini.generate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_short_situation(self, seeded_store, fake_gemini):
        with pytest.raises(ValidationError):
            await AnalysisService(seeded_store, fake_gemini).analyze("짧아요")
        fake_gemini.generate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unparseable_selection(self, seeded_store, fake_gemini):
        fake_gemini.generate = _answer("잘 모르겠습니다.")

        with pytest.raises(GenerationError):
            await AnalysisService(seeded_store, fake_gemini).analyze(SITUATION)

    @pytest.mark.asyncio
    async def test_selection_outside_catalog(self, seeded_store, fake_gemini):
        fake_gemini.generate = _answer("SELECTED_HEXAGRAM: 40")

        with pytest.raises(NotFoundError):
            await AnalysisService(seeded_store, fake_gemini).analyze(SITUATION)

    @pytest.mark.asyncio
    async def test_empty_catalog(self, db_session, fake_gemini):
        with pytest.raises(NotFoundError):
            await AnalysisService(HexagramStore(db_session), fake_gemini).analyze(SITUATION)
        fake_gemini.generate.assert_not_awaited()
