"""
AI consultant endpoint.
"""

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict

from ...core.models.diagnosis import DiagnosisResult
from ...services.external import SymptomAnalysisService


class ConsultationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    query: str


class ConsultantHandler:
    """Handler for symptom analysis requests."""

    def __init__(self, analysis_service: SymptomAnalysisService):
        self.analysis_service = analysis_service
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):

        @self.router.post("/analyze", response_model=DiagnosisResult)
        async def analyze(body: ConsultationRequest):
            return await self.analysis_service.analyze_symptoms(body.query)
