from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel


class SuppliedFunctionResult(BaseModel):
    name: str
    result: Any = None


class FunctionCallingRequest(BaseModel):
    prompt: Optional[str] = None
    function_results: Optional[list[SuppliedFunctionResult]] = None


class FunctionResultOut(BaseModel):
    name: str
    args: dict = {}
    success: bool
    result: Any = None
    error: Optional[str] = None
    error_type: Optional[str] = None


class FunctionCallingResponse(BaseModel):
    success: bool = True
    response: str
    function_results: list[FunctionResultOut] = []
    rounds: int


class FunctionCallingStatus(BaseModel):
    status: str
    model: str
    functions: list[str]
    timestamp: datetime
