"""
Booking-related exceptions.
"""


class BookingFlowError(Exception):
    """Base exception for booking flow errors."""
    pass


class BookingValidationError(BookingFlowError):
    """Exception raised when booking validation fails."""
    pass


class UnknownPatientError(BookingFlowError):
    """Exception raised when a booking references a patient that does not exist."""

    def __init__(self, patient_id: str):
        super().__init__(f"Unknown patient: {patient_id}")
        self.patient_id = patient_id


class SlotUnavailableError(BookingFlowError):
    """Exception raised when a booking slot is already taken."""

    def __init__(self, date_time: str, conflicting_ids):
        super().__init__(f"Slot {date_time} is already booked")
        self.date_time = date_time
        self.conflicting_ids = list(conflicting_ids)


class AppointmentNotFoundError(BookingFlowError):
    """Exception raised when an appointment id does not resolve."""
    pass
