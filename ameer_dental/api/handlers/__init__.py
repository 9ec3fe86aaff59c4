"""
API route handlers.
"""

from .health import HealthHandler
from .patients import PatientHandler
from .appointments import AppointmentHandler
from .calendar import CalendarHandler
from .consultant import ConsultantHandler

__all__ = [
    "HealthHandler",
    "PatientHandler",
    "AppointmentHandler",
    "CalendarHandler",
    "ConsultantHandler",
]
