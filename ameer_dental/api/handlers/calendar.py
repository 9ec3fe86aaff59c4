"""
Month calendar endpoint.
"""

from typing import List, Optional
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ...services.booking import BookingService
from ...services.calendar import (
    WEEKDAY_LABELS,
    build_month_grid,
    month_buckets,
    shift_month,
    split_weeks,
)


class DayCell(BaseModel):
    day: int
    date: str
    appointments: int


class MonthRef(BaseModel):
    year: int
    month: int


class MonthView(BaseModel):
    year: int
    month: int
    weekday_labels: List[str]
    weeks: List[List[Optional[DayCell]]]
    previous: MonthRef
    next: MonthRef


class CalendarHandler:
    """Handler for the appointment month view."""

    def __init__(self, booking_service: BookingService):
        self.booking_service = booking_service
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):

        @self.router.get("/{year}/{month}", response_model=MonthView)
        async def month_view(year: int, month: int):
            """Saturday-first weeks for a zero-based month, with per-day appointment counts."""
            if not 0 <= month <= 11 or not 1 <= year <= 9999:
                raise HTTPException(status_code=422, detail="month must be 0-11 and year 1-9999")

            appointments = await self.booking_service.repository.get_appointments()
            buckets = month_buckets(appointments, year, month)
            weeks = [
                [
                    DayCell(day=slot.day, date=slot.date_key, appointments=len(buckets.get(slot.day, [])))
                    if slot is not None
                    else None
                    for slot in week
                ]
                for week in split_weeks(build_month_grid(year, month))
            ]
            previous_year, previous_month = shift_month(year, month, -1)
            next_year, next_month = shift_month(year, month, 1)
            return MonthView(
                year=year,
                month=month,
                weekday_labels=list(WEEKDAY_LABELS),
                weeks=weeks,
                previous=MonthRef(year=previous_year, month=previous_month),
                next=MonthRef(year=next_year, month=next_month),
            )
