"""
Custom exceptions for the Ameer Dental clinic system.
"""

from .booking import (
    BookingFlowError,
    BookingValidationError,
    UnknownPatientError,
    SlotUnavailableError,
    AppointmentNotFoundError,
)
from .patient import PatientRecordError, PatientValidationError, PatientNotFoundError, InvalidToothError
from .external import ExternalAPIError, SymptomAnalysisError, RepositoryError

__all__ = [
    "BookingFlowError",
    "BookingValidationError",
    "UnknownPatientError",
    "SlotUnavailableError",
    "AppointmentNotFoundError",
    "PatientRecordError",
    "PatientValidationError",
    "PatientNotFoundError",
    "InvalidToothError",
    "ExternalAPIError",
    "SymptomAnalysisError",
    "RepositoryError",
]
