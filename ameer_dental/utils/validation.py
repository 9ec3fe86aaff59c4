"""
Validation utilities for clinic forms.
"""

from typing import List, Optional, Tuple

from ..core.models.patient import PatientForm
from ..core.models.appointment import AppointmentForm
from .date import is_valid_iso_date, is_valid_time_format


class ValidationUtils:
    """Validation utilities for patient and booking forms."""

    @staticmethod
    def validate_name(name: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate that a patient name is present.

        Args:
            name: Name to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not name or not isinstance(name, str) or not name.strip():
            return False, "Patient name is required"

        return True, None

    @staticmethod
    def validate_phone(phone: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate that a phone number is present.

        No format is enforced; the clinic records local and international
        numbers alike.
        """
        if not phone or not isinstance(phone, str) or not phone.strip():
            return False, "Phone number is required"

        return True, None

    @staticmethod
    def validate_patient_form(form: PatientForm) -> List[str]:
        """
        Validate a patient form before anything is written.

        Args:
            form: Patient form to validate

        Returns:
            List of validation error messages
        """
        errors = []

        for check, value in (
            (ValidationUtils.validate_name, form.name),
            (ValidationUtils.validate_phone, form.phone),
        ):
            is_valid, error_msg = check(value)
            if not is_valid:
                errors.append(error_msg)

        return errors

    @staticmethod
    def validate_appointment_form(form: AppointmentForm) -> List[str]:
        """Validate the date and time parts of a booking form."""
        errors = []

        if not is_valid_iso_date(form.date):
            errors.append("Appointment date must be in YYYY-MM-DD format")

        if not is_valid_time_format(form.time):
            errors.append("Appointment time must be in HH:MM format")

        return errors
