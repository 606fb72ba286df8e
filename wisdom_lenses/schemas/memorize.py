from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class SubjectCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


class SubjectResponse(BaseModel):
    id: UUID
    name: str
    description: str = ""
    card_count: int = 0
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CardCreate(BaseModel):
    question: Optional[str] = None
    answer: Optional[str] = None


class CardUpdate(BaseModel):
    question: Optional[str] = None
    answer: Optional[str] = None


class CardResponse(BaseModel):
    id: UUID
    subject_id: UUID
    question: str
    answer: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
