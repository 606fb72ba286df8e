"""
Wisdom Lenses — Hexagram catalog API

Lookup (by number, keyword, at random or paged), seeding, single-entry
administration, markdown import and dice rolls.
"""

from __future__ import annotations

import math
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query, status

from wisdom_lenses.api.deps import get_store
from wisdom_lenses.data.hexagrams import HEXAGRAMS
from wisdom_lenses.exceptions import NotFoundError
from wisdom_lenses.schemas.hexagram import (
    DeleteResponse,
    DiceRollRequest,
    DiceRollResponse,
    HexagramBrief,
    HexagramCreate,
    HexagramEnvelope,
    HexagramListResponse,
    HexagramResponse,
    HexagramUpdate,
    MarkdownImportRequest,
    MarkdownImportResponse,
    Pagination,
    SeedResponse,
)
from wisdom_lenses.services.catalog_import import (
    hexagram_from_dice,
    parse_markdown_table,
    roll_dice,
)
from wisdom_lenses.services.hexagram_store import MAX_NUMBER, HexagramStore

logger = structlog.get_logger("wisdom_lenses.api.hexagrams")

router = APIRouter()


# ──────────────────────────────────────────────────────────────────────────────
# GET /: number | random | keyword | paged catalog
# ──────────────────────────────────────────────────────────────────────────────

@router.get(
    "",
    response_model=HexagramEnvelope | HexagramListResponse,
    summary="Look up hexagrams",
)
async def get_hexagrams(
    number: Optional[int] = Query(default=None),
    keyword: Optional[str] = Query(default=None),
    random: bool = Query(default=False),
    page: int = Query(default=1),
    limit: int = Query(default=MAX_NUMBER),
    store: HexagramStore = Depends(get_store),
) -> HexagramEnvelope | HexagramListResponse:
    """One entry for ``random=true`` or ``number``; otherwise a page of the
    catalog, filtered by ``keyword`` when given.  ``limit`` is capped at 64.
    """
    if random:
        hexagram = await store.find_random()
        if hexagram is None:
            raise NotFoundError("No hexagrams found in the database.")
        return HexagramEnvelope(data=HexagramResponse.model_validate(hexagram))

    if number is not None:
        hexagram = await store.get_by_number(number)
        return HexagramEnvelope(data=HexagramResponse.model_validate(hexagram))

    limit = min(max(limit, 1), MAX_NUMBER)
    page = max(page, 1)
    offset = (page - 1) * limit

    if keyword:
        hexagrams = await store.search_by_keyword(keyword, limit=limit, offset=offset)
        total = await store.count_by_keyword(keyword)
    else:
        hexagrams = await store.find_all(limit=limit, offset=offset)
        total = await store.count()

    logger.info("hexagrams_listed", keyword=keyword, page=page, returned=len(hexagrams))
    return HexagramListResponse(
        data=[HexagramResponse.model_validate(h) for h in hexagrams],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit) if total else 0,
        ),
    )


@router.get(
    "/all",
    response_model=HexagramListResponse,
    summary="Full catalog, ordered by number",
)
async def get_all_hexagrams(
    store: HexagramStore = Depends(get_store),
) -> HexagramListResponse:
    hexagrams = await store.find_all()
    return HexagramListResponse(
        data=[HexagramResponse.model_validate(h) for h in hexagrams],
        count=len(hexagrams),
    )


# ──────────────────────────────────────────────────────────────────────────────
# Administration
# ──────────────────────────────────────────────────────────────────────────────

@router.post(
    "/seed",
    response_model=SeedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Replace the catalog with the bundled 64 hexagrams",
)
async def seed_hexagrams(
    store: HexagramStore = Depends(get_store),
) -> SeedResponse:
    inserted = await store.seed(HEXAGRAMS)
    return SeedResponse(
        message=f"Successfully inserted {inserted} hexagrams",
        inserted_count=inserted,
        hexagrams=[HexagramBrief(**{k: h[k] for k in ("number", "name", "symbol")}) for h in HEXAGRAMS],
    )


@router.post(
    "",
    response_model=HexagramEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create one hexagram",
)
async def create_hexagram(
    payload: HexagramCreate,
    store: HexagramStore = Depends(get_store),
) -> HexagramEnvelope:
    hexagram = await store.create(payload.model_dump())
    return HexagramEnvelope(
        message="Hexagram created successfully",
        data=HexagramResponse.model_validate(hexagram),
    )


@router.put(
    "/{number}",
    response_model=HexagramEnvelope,
    summary="Edit the allow-listed fields of one hexagram",
)
async def update_hexagram(
    number: int,
    payload: HexagramUpdate,
    store: HexagramStore = Depends(get_store),
) -> HexagramEnvelope:
    hexagram = await store.update(number, payload.model_dump(exclude_unset=True))
    return HexagramEnvelope(
        message=f"Hexagram number {number} updated successfully",
        data=HexagramResponse.model_validate(hexagram),
    )


@router.delete(
    "/{number}",
    response_model=DeleteResponse,
    summary="Delete one hexagram",
)
async def delete_hexagram(
    number: int,
    store: HexagramStore = Depends(get_store),
) -> DeleteResponse:
    await store.delete(number)
    return DeleteResponse(message=f"Hexagram number {number} deleted", deleted_count=1)


@router.delete(
    "",
    response_model=DeleteResponse,
    summary="Delete the whole catalog",
)
async def delete_all_hexagrams(
    store: HexagramStore = Depends(get_store),
) -> DeleteResponse:
    deleted = await store.delete_all()
    return DeleteResponse(message=f"Deleted {deleted} hexagrams", deleted_count=deleted)


@router.post(
    "/import-markdown",
    response_model=MarkdownImportResponse,
    summary="Insert or update entries from a markdown table",
)
async def import_markdown(
    payload: MarkdownImportRequest,
    store: HexagramStore = Depends(get_store),
) -> MarkdownImportResponse:
    rows = parse_markdown_table(payload.markdown)
    counts = await store.upsert_many(rows)
    return MarkdownImportResponse(
        message=(
            f"Processed {len(rows)} hexagrams: "
            f"{counts['updated']} updated, {counts['inserted']} created."
        ),
        parsed=len(rows),
        inserted=counts["inserted"],
        updated=counts["updated"],
    )


# ──────────────────────────────────────────────────────────────────────────────
# POST /roll: dice
# ──────────────────────────────────────────────────────────────────────────────

@router.post(
    "/roll",
    response_model=DiceRollResponse,
    summary="Roll (or submit) two eight-sided dice and look up the hexagram",
)
async def roll_hexagram(
    payload: Optional[DiceRollRequest] = None,
    store: HexagramStore = Depends(get_store),
) -> DiceRollResponse:
    if payload is not None and payload.upper is not None and payload.lower is not None:
        upper, lower = payload.upper, payload.lower
        number = hexagram_from_dice(upper, lower)
    else:
        upper, lower, number = roll_dice()

    hexagram = await store.find_by_number(number)
    logger.info("dice_rolled", upper=upper, lower=lower, number=number)
    return DiceRollResponse(
        upper=upper,
        lower=lower,
        number=number,
        hexagram=HexagramResponse.model_validate(hexagram) if hexagram else None,
    )
