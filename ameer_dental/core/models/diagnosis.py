"""
AI consultant result model.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field

from ..enums import RiskLevel


class DiagnosisResult(BaseModel):
    """Structured answer of the symptom consultant."""

    model_config = ConfigDict(populate_by_name=True)

    risk_level: RiskLevel = Field(alias="riskLevel")
    analysis: str
    suggestions: List[str]
