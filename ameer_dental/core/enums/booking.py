"""
Booking-related enums.
"""

from enum import Enum


class AppointmentStatus(str, Enum):
    """Appointment status. Any status may be changed to any other."""

    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    IN_PROGRESS = "In Progress"
