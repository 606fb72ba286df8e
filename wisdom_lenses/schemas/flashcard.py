from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class DifficultyRecord(BaseModel):
    username: Optional[str] = None
    hexagram_number: Optional[int] = None
    difficulty: Optional[str] = None  # again | soon | later | mastered


class FlashCardProgressResponse(BaseModel):
    id: UUID
    username: str
    hexagram_number: int
    difficulty: str
    review_count: int
    last_reviewed: datetime
    created_at: datetime

    model_config = {"from_attributes": True}


class DifficultyRecordResponse(BaseModel):
    success: bool = True
    message: str
    created: bool
    progress: FlashCardProgressResponse


class ProgressStats(BaseModel):
    total: int
    again: int
    soon: int
    later: int
    mastered: int


class ProgressResponse(BaseModel):
    success: bool = True
    progress: list[FlashCardProgressResponse]
    stats: ProgressStats
