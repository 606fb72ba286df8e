from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class HexagramCreate(BaseModel):
    number: Optional[int] = None
    symbol: Optional[str] = None
    name: Optional[str] = None
    korean_name: Optional[str] = None
    core_viewpoint: Optional[str] = None
    mental_models: Optional[str] = None
    summary: Optional[str] = None
    keywords: Optional[list[str]] = None


class HexagramUpdate(BaseModel):
    name: Optional[str] = None
    korean_name: Optional[str] = None
    core_viewpoint: Optional[str] = None
    mental_models: Optional[str] = None
    summary: Optional[str] = None
    keywords: Optional[list[str]] = None


class HexagramResponse(BaseModel):
    number: int
    symbol: str
    name: str
    korean_name: Optional[str] = None
    core_viewpoint: str
    mental_models: Optional[str] = None
    summary: str
    keywords: list[str] = []
    perspectives: Optional[dict] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class HexagramBrief(BaseModel):
    number: int
    name: str
    symbol: str

    model_config = {"from_attributes": True}


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class HexagramEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: HexagramResponse


class HexagramListResponse(BaseModel):
    success: bool = True
    data: list[HexagramResponse]
    pagination: Optional[Pagination] = None
    count: Optional[int] = None


class SeedResponse(BaseModel):
    success: bool = True
    message: str
    inserted_count: int
    hexagrams: list[HexagramBrief]


class DeleteResponse(BaseModel):
    success: bool = True
    message: str
    deleted_count: int


class MarkdownImportRequest(BaseModel):
    markdown: str


class MarkdownImportResponse(BaseModel):
    success: bool = True
    message: str
    parsed: int
    inserted: int
    updated: int


class DiceRollRequest(BaseModel):
    upper: Optional[int] = Field(default=None, description="Upper trigram die, 1-8")
    lower: Optional[int] = Field(default=None, description="Lower trigram die, 1-8")


class DiceRollResponse(BaseModel):
    success: bool = True
    upper: int
    lower: int
    number: int
    hexagram: Optional[HexagramResponse] = None
