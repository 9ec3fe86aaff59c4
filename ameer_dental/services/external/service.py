"""
AI consultant service for structured symptom analysis.
"""

from typing import Optional
from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from ...core.exceptions import ExternalAPIError, SymptomAnalysisError
from ...core.models.diagnosis import DiagnosisResult
from ...config import ExternalAPIConfig, get_settings
from ...utils.logging import get_logger
from ...utils.text import TextProcessor

logger = get_logger("ameer.consultant")

SYSTEM_INSTRUCTIONS = """
You are 'Ameer AI', an advanced dental consultant. Provide professional clinical
analysis, risk assessment, and recommended steps.

Reply with a single JSON object and nothing else:
{"riskLevel": "High" | "Medium" | "Low",
 "analysis": "<detailed dental clinical analysis of the symptoms>",
 "suggestions": ["<recommended diagnostic or treatment step>", ...]}
"""


class SymptomAnalysisService:
    """Service for sending free-text dental cases to the AI consultant."""

    def __init__(
        self,
        client: Optional[AsyncOpenAI] = None,
        config: Optional[ExternalAPIConfig] = None,
    ):
        self.config = config or ExternalAPIConfig.from_settings(get_settings())
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.config.is_openai_configured():
                raise ExternalAPIError("OpenAI API key is not configured")
            self._client = AsyncOpenAI(
                api_key=self.config.openai_api_key,
                timeout=self.config.openai_timeout,
                max_retries=0,
            )
        return self._client

    async def analyze_symptoms(self, query: str) -> DiagnosisResult:
        """
        Ask the consultant for a risk level, analysis and suggestions.

        Args:
            query: Free-text description of the case

        Returns:
            Parsed DiagnosisResult

        Raises:
            SymptomAnalysisError: If the reply is empty or not the expected JSON
            ExternalAPIError: If the API call itself fails
        """
        query = TextProcessor.sanitize_text(query)
        if not query:
            raise SymptomAnalysisError("Symptom description is empty")

        try:
            response = await self.client.chat.completions.create(
                model=self.config.openai_model,
                messages=[
                    {"role": "system", "content": SYSTEM_INSTRUCTIONS.strip()},
                    {
                        "role": "user",
                        "content": f"Perform a clinical analysis on the following dental case: {query}",
                    },
                ],
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            logger.error(f"consultant request failed: {e}")
            raise ExternalAPIError(f"Request failed: {e}") from e

        text = response.choices[0].message.content if response.choices else None
        if not text:
            raise SymptomAnalysisError("The AI model returned an empty response.")

        try:
            return DiagnosisResult.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"consultant returned malformed result: {text[:200]!r}")
            raise SymptomAnalysisError("Failed to parse diagnostic result from AI.") from e
