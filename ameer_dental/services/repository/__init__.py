"""
Clinic storage backends.
"""

from .base import ClinicRepository
from .memory import InMemoryClinicRepository
from .sqlite import SQLiteClinicRepository

__all__ = [
    "ClinicRepository",
    "InMemoryClinicRepository",
    "SQLiteClinicRepository",
]
