"""
Core data models for the Ameer Dental clinic system.
"""

from .chart import (
    DentalChart,
    ToothEvent,
    FDI_TOOTH_CODES,
    UPPER_ARCH,
    LOWER_ARCH,
    append_event,
    current_status,
    is_valid_tooth,
)
from .patient import Patient, PatientDetails, PatientForm
from .appointment import Appointment, AppointmentForm
from .diagnosis import DiagnosisResult

__all__ = [
    "DentalChart",
    "ToothEvent",
    "FDI_TOOTH_CODES",
    "UPPER_ARCH",
    "LOWER_ARCH",
    "append_event",
    "current_status",
    "is_valid_tooth",
    "Patient",
    "PatientDetails",
    "PatientForm",
    "Appointment",
    "AppointmentForm",
    "DiagnosisResult",
]
