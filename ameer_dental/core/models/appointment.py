"""
Appointment-related data models.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from ..enums import AppointmentStatus
from ...utils.date import split_date_time

DEFAULT_DURATION_MINUTES = 30


class Appointment(BaseModel):
    """A booked appointment.

    ``patient_name`` is a snapshot taken at booking time and is not updated
    when the patient record is renamed. ``date_time`` is ``YYYY-MM-DDThh:mm``.
    """

    model_config = ConfigDict(extra="forbid")

    id: str
    patient_id: str
    patient_name: str
    date_time: str
    duration: int = DEFAULT_DURATION_MINUTES
    reason: str = ""
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: Optional[str] = None

    @property
    def date_key(self) -> str:
        """Calendar date part of ``date_time``."""
        return split_date_time(self.date_time)[0]

    @property
    def time_of_day(self) -> str:
        return split_date_time(self.date_time)[1]


class AppointmentForm(BaseModel):
    """Raw booking form input."""

    model_config = ConfigDict(extra="forbid")

    patient_id: str = ""
    date: str
    time: str
    reason: str = ""
    status: Optional[AppointmentStatus] = None
    notes: Optional[str] = None
