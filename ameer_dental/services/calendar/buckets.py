"""
Grouping of appointments by calendar day.

Matching is a literal prefix test on the stored ``YYYY-MM-DDThh:mm`` value,
so it depends on that value always being zero-padded. Buckets keep the
order of the input collection.
"""

from typing import Dict, Iterable, List, Optional

from ...core.models.appointment import Appointment
from ...utils.date import ClinicClock
from .grid import build_month_grid


def day_bucket(appointments: Iterable[Appointment], date_key: str) -> List[Appointment]:
    """Appointments whose date-time starts with ``date_key``."""
    return [appointment for appointment in appointments if appointment.date_time.startswith(date_key)]


def today_bucket(
    appointments: Iterable[Appointment],
    today_key: Optional[str] = None,
) -> List[Appointment]:
    """Appointments for today in the clinic timezone."""
    return day_bucket(appointments, today_key or ClinicClock().today_key())


def sort_for_list(appointments: Iterable[Appointment]) -> List[Appointment]:
    """Newest first, by plain string comparison of the date-time value."""
    return sorted(appointments, key=lambda appointment: appointment.date_time, reverse=True)


def month_buckets(appointments: Iterable[Appointment], year: int, month: int) -> Dict[int, List[Appointment]]:
    """Map each day of a zero-based month to its non-empty bucket."""
    appointments = list(appointments)
    buckets = {}
    for slot in build_month_grid(year, month):
        if slot is None:
            continue
        bucket = day_bucket(appointments, slot.date_key)
        if bucket:
            buckets[slot.day] = bucket
    return buckets
