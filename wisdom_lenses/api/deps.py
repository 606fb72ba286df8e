"""
Wisdom Lenses — Shared route dependencies

Long-lived clients live on ``app.state`` (set up by the lifespan); services
are cheap and built per request around the request's session.
"""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from wisdom_lenses.database import get_db
from wisdom_lenses.services.gemini_service import GeminiService
from wisdom_lenses.services.hexagram_store import HexagramStore


def get_gemini(request: Request) -> GeminiService:
    return request.app.state.gemini


def get_store(db: AsyncSession = Depends(get_db)) -> HexagramStore:
    return HexagramStore(db)
