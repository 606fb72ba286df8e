from typing import Optional

from pydantic import BaseModel


class PerspectiveRequest(BaseModel):
    hexagram_number: Optional[int] = None
    user_situation: Optional[str] = None
    perspective: Optional[str] = None  # one lens; all six when omitted


class PerspectiveCard(BaseModel):
    title: str
    content: str
    key_message: str
    questions: list[str]
    remainder: str = ""
    error: Optional[str] = None


class PerspectiveResponse(BaseModel):
    success: bool = True
    hexagram_number: int
    perspectives: dict[str, PerspectiveCard]
