"""
Month grid construction for the appointment calendar.

Months are zero-based (0 = January) to match the calendar view's
navigation state. Weeks start on Saturday.
"""

import calendar
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

DAYS_PER_WEEK = 7

# Column headers, Saturday first
WEEKDAY_LABELS = ("Sat", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri")


@dataclass(frozen=True)
class DaySlot:
    """A single day cell in the month grid."""

    year: int
    month: int
    day: int

    @property
    def date_key(self) -> str:
        """The day as a ``YYYY-MM-DD`` appointment bucket key."""
        return f"{self.year:04d}-{self.month + 1:02d}-{self.day:02d}"


def _check_month(month: int) -> None:
    if not 0 <= month <= 11:
        raise ValueError(f"month must be between 0 and 11, got {month}")


def days_in_month(year: int, month: int) -> int:
    """Number of days in a zero-based month."""
    _check_month(month)
    return calendar.monthrange(year, month + 1)[1]


def first_weekday_offset(year: int, month: int) -> int:
    """
    Number of blank cells before day 1 in a Saturday-first week.

    The weekday of day 1 is taken with Sunday = 0 numbering and then
    shifted by one so that Saturday lands in the first column.
    """
    _check_month(month)
    sunday_based = (calendar.weekday(year, month + 1, 1) + 1) % 7
    return (sunday_based + 1) % DAYS_PER_WEEK


def build_month_grid(year: int, month: int) -> List[Optional[DaySlot]]:
    """
    Lay out a month as leading blanks followed by one slot per day.

    Args:
        year: Four-digit year
        month: Zero-based month (0-11)

    Returns:
        ``first_weekday_offset`` None entries, then DaySlot 1..days_in_month.
        Trailing blanks are not added; see :func:`pad_to_weeks`.
    """
    grid: List[Optional[DaySlot]] = [None] * first_weekday_offset(year, month)
    grid.extend(DaySlot(year, month, day) for day in range(1, days_in_month(year, month) + 1))
    return grid


def pad_to_weeks(grid: Sequence[Optional[DaySlot]]) -> List[Optional[DaySlot]]:
    """Append trailing blanks so the grid fills whole weeks."""
    remainder = len(grid) % DAYS_PER_WEEK
    padding = (DAYS_PER_WEEK - remainder) % DAYS_PER_WEEK
    return list(grid) + [None] * padding


def split_weeks(grid: Sequence[Optional[DaySlot]]) -> List[List[Optional[DaySlot]]]:
    """Pad a grid and cut it into rows of seven cells."""
    padded = pad_to_weeks(grid)
    return [padded[i : i + DAYS_PER_WEEK] for i in range(0, len(padded), DAYS_PER_WEEK)]


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move ``delta`` months forward (or back), rolling the year over."""
    _check_month(month)
    return divmod(year * 12 + month + delta, 12)
