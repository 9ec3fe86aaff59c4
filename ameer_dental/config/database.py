"""
Database configuration.
"""

from pydantic import BaseModel


class DatabaseConfig(BaseModel):
    """Database configuration settings."""

    database_path: str = "ameer_clinic.db"
    connection_timeout: float = 30.0

    def get_database_url(self) -> str:
        """Get SQLite URL for the clinic database."""
        return f"sqlite:///{self.database_path}"
