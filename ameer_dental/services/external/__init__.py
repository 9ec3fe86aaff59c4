"""
External collaborator services.
"""

from .service import SymptomAnalysisService

__all__ = [
    "SymptomAnalysisService",
]
