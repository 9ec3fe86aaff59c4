"""
Patient service module.
"""

from .service import PatientService

__all__ = [
    "PatientService",
]
