"""
Wisdom Lenses — User memo API

Update and delete take the memo id, username and password in the body.
"""

from __future__ import annotations

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from wisdom_lenses.database import get_db
from wisdom_lenses.schemas.memo import (
    MemoCreate,
    MemoDelete,
    MemoEnvelope,
    MemoListResponse,
    MemoResponse,
    MemoUpdate,
    SuccessResponse,
)
from wisdom_lenses.services.memo_service import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, MemoService

logger = structlog.get_logger("wisdom_lenses.api.memos")

router = APIRouter()


@router.post(
    "",
    response_model=MemoEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a memo",
)
async def create_memo(
    payload: MemoCreate,
    db: AsyncSession = Depends(get_db),
) -> MemoEnvelope:
    memo = await MemoService(db).create(
        username=payload.username,
        token=payload.password,
        hexagram_number=payload.hexagram_number,
        memo=payload.memo,
    )
    return MemoEnvelope(data=MemoResponse.model_validate(memo))


@router.get(
    "",
    response_model=MemoListResponse,
    summary="List memos, newest first",
)
async def list_memos(
    hexagram_number: Optional[int] = Query(default=None),
    username: Optional[str] = Query(default=None),
    page: int = Query(default=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE),
    db: AsyncSession = Depends(get_db),
) -> MemoListResponse:
    page = max(page, 1)
    page_size = min(max(page_size, 1), MAX_PAGE_SIZE)
    memos, total = await MemoService(db).list(
        hexagram_number=hexagram_number,
        username=username,
        page=page,
        page_size=page_size,
    )
    return MemoListResponse(
        memos=[MemoResponse.model_validate(m) for m in memos],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.put(
    "",
    response_model=MemoEnvelope,
    summary="Edit a memo (username and password must match)",
)
async def update_memo(
    payload: MemoUpdate,
    db: AsyncSession = Depends(get_db),
) -> MemoEnvelope:
    memo = await MemoService(db).update(
        payload.id, payload.username, payload.password, payload.memo
    )
    return MemoEnvelope(data=MemoResponse.model_validate(memo))


@router.delete(
    "",
    response_model=SuccessResponse,
    summary="Delete a memo (username and password must match)",
)
async def delete_memo(
    payload: MemoDelete,
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    await MemoService(db).delete(payload.id, payload.username, payload.password)
    return SuccessResponse(message="Memo deleted")
