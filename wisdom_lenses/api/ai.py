"""
Wisdom Lenses — AI API

Perspective cards for a hexagram and the function-calling endpoint.
"""

from __future__ import annotations

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends

from wisdom_lenses.api.deps import get_gemini, get_store
from wisdom_lenses.exceptions import ValidationError
from wisdom_lenses.schemas.function_calling import (
    FunctionCallingRequest,
    FunctionCallingResponse,
    FunctionCallingStatus,
    FunctionResultOut,
)
from wisdom_lenses.schemas.perspective import (
    PerspectiveCard,
    PerspectiveRequest,
    PerspectiveResponse,
)
from wisdom_lenses.services.function_calling_service import FunctionCallingOrchestrator
from wisdom_lenses.services.function_tools import FUNCTION_DECLARATIONS, HexagramToolbox
from wisdom_lenses.services.gemini_service import GeminiService
from wisdom_lenses.services.hexagram_store import HexagramStore
from wisdom_lenses.services.perspective_prompts import resolve_perspective
from wisdom_lenses.services.perspective_service import PerspectiveService

logger = structlog.get_logger("wisdom_lenses.api.ai")

router = APIRouter()


# ──────────────────────────────────────────────────────────────────────────────
# POST /perspectives
# ──────────────────────────────────────────────────────────────────────────────

@router.post(
    "/perspectives",
    response_model=PerspectiveResponse,
    summary="Generate perspective cards for a hexagram and situation",
)
async def generate_perspectives(
    payload: PerspectiveRequest,
    store: HexagramStore = Depends(get_store),
    gemini: GeminiService = Depends(get_gemini),
) -> PerspectiveResponse:
    """One lens when ``perspective`` is set, otherwise all six in order."""
    if payload.hexagram_number is None or not payload.user_situation:
        raise ValidationError("hexagram_number and user_situation are required")

    log = logger.bind(
        hexagram=payload.hexagram_number,
        perspective=payload.perspective or "all",
    )
    log.info("perspectives_requested")

    service = PerspectiveService(store, gemini)
    if payload.perspective:
        lens = resolve_perspective(payload.perspective)
        card = await service.generate(
            payload.hexagram_number, payload.user_situation, lens
        )
        cards = {lens.value: card.to_dict()}
    else:
        cards = await service.generate_all(
            payload.hexagram_number, payload.user_situation
        )

    return PerspectiveResponse(
        hexagram_number=payload.hexagram_number,
        perspectives={k: PerspectiveCard(**v) for k, v in cards.items()},
    )


# ──────────────────────────────────────────────────────────────────────────────
# /function-calling
# ──────────────────────────────────────────────────────────────────────────────

@router.post(
    "/function-calling",
    response_model=FunctionCallingResponse,
    summary="Answer a prompt with the hexagram toolbox available to the model",
)
async def function_calling(
    payload: FunctionCallingRequest,
    store: HexagramStore = Depends(get_store),
    gemini: GeminiService = Depends(get_gemini),
) -> FunctionCallingResponse:
    """Runs both rounds server-side.  When the caller already executed the
    functions and posts ``function_results``, only the final round runs.
    """
    orchestrator = FunctionCallingOrchestrator(gemini, HexagramToolbox(store))

    if payload.function_results:
        outcome = await orchestrator.finalize(
            payload.prompt or "",
            [r.model_dump() for r in payload.function_results],
        )
    else:
        outcome = await orchestrator.run(payload.prompt or "")

    return FunctionCallingResponse(
        response=outcome.answer,
        function_results=[
            FunctionResultOut(**r.to_dict()) for r in outcome.function_results
        ],
        rounds=outcome.rounds,
    )


@router.get(
    "/function-calling",
    response_model=FunctionCallingStatus,
    summary="Function-calling readiness and declared functions",
)
async def function_calling_status(
    gemini: GeminiService = Depends(get_gemini),
) -> FunctionCallingStatus:
    return FunctionCallingStatus(
        status="ready",
        model=gemini.model_name,
        functions=[d["name"] for d in FUNCTION_DECLARATIONS],
        timestamp=datetime.now(timezone.utc),
    )
