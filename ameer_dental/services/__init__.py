"""
Service layer for the Ameer Dental clinic system.
"""

from .booking import BookingService
from .patient import PatientService
from .external import SymptomAnalysisService
from .repository import ClinicRepository, InMemoryClinicRepository, SQLiteClinicRepository

__all__ = [
    "BookingService",
    "PatientService",
    "SymptomAnalysisService",
    "ClinicRepository",
    "InMemoryClinicRepository",
    "SQLiteClinicRepository",
]
