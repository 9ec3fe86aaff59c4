"""
Date and time utilities.

Appointments store their moment as a single ``YYYY-MM-DDThh:mm`` string.
Both the list view ordering and the day buckets rely on that value being
zero-padded, so every write goes through :func:`combine_date_time`.
"""

from datetime import date, datetime
from typing import Optional, Tuple
import pytz

from ..config import get_settings

DATE_KEY_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
DATE_TIME_SEPARATOR = "T"


class ClinicClock:
    """Current date and time in the clinic's local timezone."""

    def __init__(self, timezone: Optional[str] = None):
        self.tz = pytz.timezone(timezone or get_settings().timezone)

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def today(self) -> date:
        return self.now().date()

    def today_key(self) -> str:
        """Today's date as a ``YYYY-MM-DD`` bucket key."""
        return to_date_key(self.today())

    def now_iso(self) -> str:
        return self.now().isoformat()


def to_date_key(value: date) -> str:
    return value.isoformat()


def parse_date(date_str: str) -> date:
    """Parse ``YYYY-MM-DD`` into a date, raising ValueError otherwise."""
    return datetime.strptime(date_str.strip(), DATE_KEY_FORMAT).date()


def is_valid_iso_date(date_str: str) -> bool:
    """Check if string is a valid ISO date (YYYY-MM-DD)."""
    try:
        parse_date(date_str)
        return True
    except (ValueError, AttributeError):
        return False


def is_valid_time_format(time_str: str) -> bool:
    """Check if string is a valid time format (HH:MM)."""
    try:
        datetime.strptime(time_str.strip(), TIME_FORMAT)
        return True
    except (ValueError, AttributeError):
        return False


def combine_date_time(date_str: str, time_str: str) -> str:
    """
    Join a date and a time-of-day into the stored appointment value.

    Args:
        date_str: Date in YYYY-MM-DD format (single-digit parts are padded)
        time_str: Time in HH:MM format

    Returns:
        Zero-padded ``YYYY-MM-DDThh:mm`` string

    Raises:
        ValueError: If either part does not parse
    """
    day = parse_date(date_str)
    moment = datetime.strptime(time_str.strip(), TIME_FORMAT)
    return f"{to_date_key(day)}{DATE_TIME_SEPARATOR}{moment.hour:02d}:{moment.minute:02d}"


def split_date_time(value: str) -> Tuple[str, str]:
    """Split a stored ``YYYY-MM-DDThh:mm`` value back into its date and time."""
    day, _, time_of_day = value.partition(DATE_TIME_SEPARATOR)
    return day, time_of_day
