"""
API layer for the Ameer Dental clinic system.
"""

from .app import create_app
from .middleware import LoggingMiddleware

__all__ = [
    "create_app",
    "LoggingMiddleware",
]
