"""
Application settings and configuration.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    app_name: str = "Ameer Dental Clinic"
    app_version: str = "1.0.0"
    debug: bool = Field(default=False)

    # Database
    database_path: str = Field(default="ameer_clinic.db")

    # Scheduling
    default_appointment_duration: int = Field(default=30)
    reject_unknown_patient: bool = Field(default=False)
    detect_booking_conflicts: bool = Field(default=False)

    # OpenAI
    openai_api_key: Optional[str] = Field(default=None)
    openai_model: str = Field(default="gpt-4o-mini")
    openai_timeout: float = Field(default=30.0)

    # Timezone used for "today" and tooth event dates
    timezone: str = Field(default="Africa/Cairo")

    # Logging
    log_level: str = Field(default="INFO")


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
