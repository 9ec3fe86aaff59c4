"""
External API configuration.
"""

from typing import Optional
from pydantic import BaseModel

from .settings import Settings


class ExternalAPIConfig(BaseModel):
    """External API configuration settings."""

    # OpenAI API
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_timeout: float = 30.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExternalAPIConfig":
        """Build the external API config from application settings."""
        return cls(
            openai_api_key=settings.openai_api_key,
            openai_model=settings.openai_model,
            openai_timeout=settings.openai_timeout,
        )

    def is_openai_configured(self) -> bool:
        """Check if OpenAI API is properly configured."""
        return bool(self.openai_api_key)
