"""
Appointment booking endpoints.
"""

from typing import List, Optional
from fastapi import APIRouter, Response, status
from pydantic import BaseModel, ConfigDict

from ...core.enums import AppointmentStatus
from ...core.models.appointment import Appointment, AppointmentForm
from ...services.booking import BookingService


class StatusUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: AppointmentStatus


class AppointmentHandler:
    """Handler for appointment bookings."""

    def __init__(self, booking_service: BookingService):
        self.booking_service = booking_service
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        service = self.booking_service

        @self.router.get("/", response_model=List[Appointment])
        async def list_appointments(date: Optional[str] = None):
            """All appointments newest first, or one day's bucket with ``?date=YYYY-MM-DD``."""
            if date:
                return await service.day_schedule(date)
            return await service.list_appointments()

        @self.router.get("/today", response_model=List[Appointment])
        async def today_appointments():
            return await service.today_schedule()

        @self.router.post("/", response_model=Optional[Appointment], status_code=status.HTTP_201_CREATED)
        async def book_appointment(form: AppointmentForm, response: Response):
            """Book an appointment. Returns null when the patient is unknown."""
            appointment = await service.save_appointment(form)
            if appointment is None:
                response.status_code = status.HTTP_200_OK
            return appointment

        @self.router.get("/{appointment_id}", response_model=Appointment)
        async def get_appointment(appointment_id: str):
            return await service.get_appointment(appointment_id)

        @self.router.put("/{appointment_id}", response_model=Optional[Appointment])
        async def update_appointment(appointment_id: str, form: AppointmentForm):
            return await service.save_appointment(form, appointment_id=appointment_id)

        @self.router.patch("/{appointment_id}/status", response_model=Appointment)
        async def update_status(appointment_id: str, body: StatusUpdate):
            return await service.set_status(appointment_id, body.status)

        @self.router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
        async def delete_appointment(appointment_id: str):
            await service.delete_appointment(appointment_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)
