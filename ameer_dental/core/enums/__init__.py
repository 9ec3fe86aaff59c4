"""
Enums for the Ameer Dental clinic system.
"""

from .booking import AppointmentStatus
from .clinical import Gender, ToothStatus, RiskLevel

__all__ = [
    "AppointmentStatus",
    "Gender",
    "ToothStatus",
    "RiskLevel",
]
