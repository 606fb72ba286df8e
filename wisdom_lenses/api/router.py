"""
Wisdom Lenses — Main API Router

Aggregates all sub-routers so that ``wisdom_lenses.main`` can mount the
entire API surface with one ``include_router`` call.
"""

from fastapi import APIRouter

from wisdom_lenses.api import ai, analysis, flashcards, hexagrams, memorize, memos

router = APIRouter()

router.include_router(hexagrams.router, prefix="/hexagrams", tags=["Hexagrams"])
router.include_router(ai.router, prefix="/ai", tags=["AI"])
router.include_router(analysis.router, prefix="/analyze", tags=["Analysis"])
router.include_router(memos.router, prefix="/memos", tags=["Memos"])
router.include_router(flashcards.router, prefix="/flash-card", tags=["Flash Cards"])
router.include_router(memorize.router, prefix="/memorize", tags=["Memorize"])
