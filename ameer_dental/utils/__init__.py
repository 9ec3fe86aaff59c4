"""
Utility modules for the Ameer Dental clinic system.

``validation`` depends on the core models and is imported from its module
directly so that the models can use the helpers below.
"""

from .text import TextProcessor
from .date import ClinicClock, combine_date_time, split_date_time
from .ids import new_id
from .logging import get_logger, configure_logging

__all__ = [
    "TextProcessor",
    "ClinicClock",
    "combine_date_time",
    "split_date_time",
    "new_id",
    "get_logger",
    "configure_logging",
]
