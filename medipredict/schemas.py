from typing import Literal, Optional

from pydantic import BaseModel, Field


class HistoryResponse(BaseModel):
    avg_cases: dict[str, float] = Field(default_factory=dict)


class PredictRequest(BaseModel):
    month: int = Field(ge=1, le=12)
    category: str
    humidity: float
    rainfall: float
    temperature: float
    festive: Literal[0, 1]
    awareness: float


class PredictResponse(BaseModel):
    predictions: dict[str, int]
    total_expected_patients: int
    recommendation: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: Optional[str] = None
