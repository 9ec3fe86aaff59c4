"""
Booking service module.
"""

from .service import BookingService, find_conflicts

__all__ = [
    "BookingService",
    "find_conflicts",
]
