from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class MemoCreate(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    hexagram_number: Optional[int] = None
    memo: Optional[str] = None


class MemoUpdate(BaseModel):
    id: UUID
    username: Optional[str] = None
    password: Optional[str] = None
    memo: Optional[str] = None


class MemoDelete(BaseModel):
    id: UUID
    username: Optional[str] = None
    password: Optional[str] = None


class MemoResponse(BaseModel):
    id: UUID
    username: str
    hexagram_number: int
    memo: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class MemoEnvelope(BaseModel):
    success: bool = True
    data: MemoResponse


class MemoListResponse(BaseModel):
    success: bool = True
    memos: list[MemoResponse]
    total: int
    page: int
    page_size: int


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
