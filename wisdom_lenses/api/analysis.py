"""
Wisdom Lenses — Hexagram recommendation API
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from wisdom_lenses.api.deps import get_gemini, get_store
from wisdom_lenses.schemas.analysis import (
    AnalysisDetail,
    AnalyzeRequest,
    AnalyzeResponse,
    SelectedHexagram,
)
from wisdom_lenses.services.analysis_service import AnalysisService
from wisdom_lenses.services.gemini_service import GeminiService
from wisdom_lenses.services.hexagram_store import HexagramStore

logger = structlog.get_logger("wisdom_lenses.api.analysis")

router = APIRouter()


@router.post(
    "",
    response_model=AnalyzeResponse,
    summary="Recommend a hexagram for a situation, or advise on a rolled one",
)
async def analyze(
    payload: AnalyzeRequest,
    store: HexagramStore = Depends(get_store),
    gemini: GeminiService = Depends(get_gemini),
) -> AnalyzeResponse:
    logger.info(
        "analysis_requested",
        dice=payload.hexagram_number is not None,
        situation_length=len(payload.user_situation or ""),
    )

    result = await AnalysisService(store, gemini).analyze(
        payload.user_situation or "",
        hexagram_number=payload.hexagram_number,
    )

    return AnalyzeResponse(
        selected_hexagram=SelectedHexagram.model_validate(result.hexagram),
        analysis=AnalysisDetail(
            reasoning=result.reasoning,
            confidence=result.confidence,
            ai_response=result.ai_response,
        ),
        session_id=result.session_id,
        user_situation=result.user_situation,
        timestamp=result.timestamp,
    )
