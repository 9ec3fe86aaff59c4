"""
Calendar grid and appointment bucketing.
"""

from .grid import (
    DaySlot,
    WEEKDAY_LABELS,
    build_month_grid,
    days_in_month,
    first_weekday_offset,
    pad_to_weeks,
    split_weeks,
    shift_month,
)
from .buckets import day_bucket, today_bucket, sort_for_list, month_buckets

__all__ = [
    "DaySlot",
    "WEEKDAY_LABELS",
    "build_month_grid",
    "days_in_month",
    "first_weekday_offset",
    "pad_to_weeks",
    "split_weeks",
    "shift_month",
    "day_bucket",
    "today_bucket",
    "sort_for_list",
    "month_buckets",
]
