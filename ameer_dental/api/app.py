"""
FastAPI application factory and configuration.

``create_app`` is the composition root: it owns the repository and hands it
to every service, so nothing in the service layer holds a global store.
"""

from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import DatabaseConfig, ExternalAPIConfig, Settings, get_settings
from ..core.exceptions import (
    AppointmentNotFoundError,
    BookingValidationError,
    ExternalAPIError,
    InvalidToothError,
    PatientNotFoundError,
    PatientValidationError,
    RepositoryError,
    SlotUnavailableError,
    UnknownPatientError,
)
from ..services import (
    BookingService,
    ClinicRepository,
    PatientService,
    SQLiteClinicRepository,
    SymptomAnalysisService,
)
from ..utils.date import ClinicClock
from ..utils.logging import configure_logging
from .middleware import LoggingMiddleware
from .handlers import (
    AppointmentHandler,
    CalendarHandler,
    ConsultantHandler,
    HealthHandler,
    PatientHandler,
)

# Domain errors and the HTTP status they map to
_ERROR_STATUS = (
    (PatientValidationError, 422),
    (BookingValidationError, 422),
    (InvalidToothError, 422),
    (UnknownPatientError, 422),
    (PatientNotFoundError, 404),
    (AppointmentNotFoundError, 404),
    (SlotUnavailableError, 409),
    (ExternalAPIError, 502),
    (RepositoryError, 503),
)


def _register_error_handlers(app: FastAPI) -> None:
    for exc_type, status_code in _ERROR_STATUS:

        async def handler(request: Request, exc: Exception, status_code: int = status_code):
            return JSONResponse(status_code=status_code, content={"detail": str(exc)})

        app.add_exception_handler(exc_type, handler)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[ClinicRepository] = None,
    analysis_service: Optional[SymptomAnalysisService] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    repository = repository or SQLiteClinicRepository(DatabaseConfig(database_path=settings.database_path))
    clock = ClinicClock(settings.timezone)
    patient_service = PatientService(repository, clock=clock)
    booking_service = BookingService(
        repository,
        reject_unknown_patient=settings.reject_unknown_patient,
        detect_conflicts=settings.detect_booking_conflicts,
        duration_minutes=settings.default_appointment_duration,
        clock=clock,
    )
    analysis_service = analysis_service or SymptomAnalysisService(config=ExternalAPIConfig.from_settings(settings))

    app = FastAPI(
        title=settings.app_name,
        description="Patient records, dental charts and appointments for a single clinic",
        version=settings.app_version,
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    _register_error_handlers(app)

    app.state.repository = repository
    app.state.patient_service = patient_service
    app.state.booking_service = booking_service

    app.include_router(HealthHandler(settings, repository).router, prefix="/health", tags=["health"])
    app.include_router(PatientHandler(patient_service).router, prefix="/patients", tags=["patients"])
    app.include_router(AppointmentHandler(booking_service).router, prefix="/appointments", tags=["appointments"])
    app.include_router(CalendarHandler(booking_service).router, prefix="/calendar", tags=["calendar"])
    app.include_router(ConsultantHandler(analysis_service).router, prefix="/consultant", tags=["consultant"])

    return app
