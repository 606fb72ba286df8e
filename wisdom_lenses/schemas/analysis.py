from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class AnalyzeRequest(BaseModel):
    user_situation: Optional[str] = None
    hexagram_number: Optional[int] = None  # set when the number came from a dice roll


class SelectedHexagram(BaseModel):
    number: int
    name: str
    symbol: str
    core_viewpoint: str
    summary: str
    keywords: list[str] = []

    model_config = {"from_attributes": True}


class AnalysisDetail(BaseModel):
    reasoning: str
    confidence: Optional[float] = None
    ai_response: str


class AnalyzeResponse(BaseModel):
    success: bool = True
    selected_hexagram: SelectedHexagram
    analysis: AnalysisDetail
    session_id: Optional[str] = None
    user_situation: str
    timestamp: datetime
