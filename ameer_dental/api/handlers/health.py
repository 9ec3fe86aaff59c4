"""
Health check handler.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from datetime import datetime

from ...config import Settings
from ...core.exceptions import RepositoryError
from ...services.repository import ClinicRepository
from ...utils.logging import get_logger

logger = get_logger("ameer.health")


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str
    version: str
    uptime: float


class ReadinessResponse(BaseModel):
    """Clinic store reachability."""
    status: str
    patients: int
    appointments: int


class HealthHandler:
    """Handler for health check endpoints."""

    def __init__(self, settings: Settings, repository: ClinicRepository):
        self.settings = settings
        self.repository = repository
        self.start_time = datetime.now()
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup health check routes."""

        @self.router.get("/", response_model=HealthResponse)
        async def health_check():
            """Basic health check endpoint."""
            uptime = (datetime.now() - self.start_time).total_seconds()
            return HealthResponse(
                status="healthy",
                timestamp=datetime.now().isoformat(),
                version=self.settings.app_version,
                uptime=uptime
            )

        @self.router.get("/ready", response_model=ReadinessResponse)
        async def readiness_check():
            """Ready once the clinic store answers a read."""
            try:
                patients = await self.repository.get_patients()
                appointments = await self.repository.get_appointments()
            except RepositoryError as e:
                logger.error(f"readiness check failed: {e}")
                return JSONResponse(status_code=503, content={"status": "unavailable", "detail": str(e)})
            return ReadinessResponse(status="ready", patients=len(patients), appointments=len(appointments))

        @self.router.get("/live")
        async def liveness_check():
            """Liveness check for container orchestration."""
            return {"status": "alive"}
