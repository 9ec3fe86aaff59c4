"""
Patient-related exceptions.
"""

from typing import List


class PatientRecordError(Exception):
    """Base exception for patient record errors."""
    pass


class PatientValidationError(PatientRecordError):
    """Exception raised when a patient form is missing required fields."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class PatientNotFoundError(PatientRecordError):
    """Exception raised when a patient is not found in the system."""
    pass


class InvalidToothError(PatientRecordError):
    """Exception raised for a tooth code outside FDI notation."""

    def __init__(self, tooth_id):
        super().__init__(f"Invalid FDI tooth code: {tooth_id}")
        self.tooth_id = tooth_id
