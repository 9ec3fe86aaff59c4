"""
Booking service for handling appointment bookings.
"""

from typing import Iterable, List, Optional

from ...core.enums import AppointmentStatus
from ...core.exceptions import (
    BookingValidationError,
    UnknownPatientError,
    SlotUnavailableError,
    AppointmentNotFoundError,
)
from ...core.models.appointment import Appointment, AppointmentForm, DEFAULT_DURATION_MINUTES
from ...core.models.patient import Patient
from ...utils.date import ClinicClock, combine_date_time
from ...utils.ids import new_id
from ...utils.logging import get_logger
from ...utils.validation import ValidationUtils
from ..calendar.buckets import day_bucket, today_bucket, sort_for_list
from ..repository import ClinicRepository

logger = get_logger("ameer.booking")


def find_conflicts(
    appointments: Iterable[Appointment],
    date_time: str,
    exclude_id: Optional[str] = None,
) -> List[Appointment]:
    """Active appointments booked at exactly ``date_time``."""
    return [
        appointment
        for appointment in appointments
        if appointment.date_time == date_time
        and appointment.id != exclude_id
        and appointment.status != AppointmentStatus.CANCELLED
    ]


class BookingService:
    """Service for handling appointment bookings.

    Two behaviours are opt-in:

    * ``reject_unknown_patient``: raise UnknownPatientError instead of
      silently skipping a booking whose patient does not exist.
    * ``detect_conflicts``: raise SlotUnavailableError when another active
      appointment already holds the same date-time. Off by default, so
      double bookings are accepted.
    """

    def __init__(
        self,
        repository: ClinicRepository,
        *,
        reject_unknown_patient: bool = False,
        detect_conflicts: bool = False,
        duration_minutes: int = DEFAULT_DURATION_MINUTES,
        clock: Optional[ClinicClock] = None,
    ):
        self.repository = repository
        self.reject_unknown_patient = reject_unknown_patient
        self.detect_conflicts = detect_conflicts
        self.duration_minutes = duration_minutes
        self.clock = clock or ClinicClock()

    def build_appointment(
        self,
        form: AppointmentForm,
        patients: Iterable[Patient],
        existing: Optional[Appointment] = None,
    ) -> Optional[Appointment]:
        """
        Build the appointment to store from a booking form.

        Args:
            form: Submitted booking form
            patients: Patient roster used to resolve the patient id
            existing: Stored appointment when editing, None when booking

        Returns:
            The appointment, or None when the patient does not resolve and
            unknown patients are not rejected

        Raises:
            BookingValidationError: If date or time are malformed
            UnknownPatientError: If the patient does not resolve and
                ``reject_unknown_patient`` is set
        """
        patient_id = existing.patient_id if existing else form.patient_id
        patient = next((p for p in patients if p.id == patient_id), None)
        if patient is None:
            if self.reject_unknown_patient:
                raise UnknownPatientError(patient_id)
            logger.warning(f"booking skipped: unknown patient {patient_id!r}")
            return None

        errors = ValidationUtils.validate_appointment_form(form)
        if errors:
            raise BookingValidationError("; ".join(errors))
        date_time = combine_date_time(form.date, form.time)

        if existing is None:
            return Appointment(
                id=new_id(),
                patient_id=patient.id,
                patient_name=patient.name,
                date_time=date_time,
                duration=self.duration_minutes,
                reason=form.reason,
                status=form.status or AppointmentStatus.SCHEDULED,
                notes=form.notes,
            )

        # id, patient and the name snapshot stay; the rest follows the form
        return existing.model_copy(
            update={
                "date_time": date_time,
                "reason": form.reason,
                "status": form.status or existing.status,
                "notes": form.notes,
            }
        )

    async def save_appointment(
        self,
        form: AppointmentForm,
        appointment_id: Optional[str] = None,
    ) -> Optional[Appointment]:
        """Validate a booking form and upsert the appointment.

        Returns None, without writing, when the patient does not resolve.
        """
        existing = await self.get_appointment(appointment_id) if appointment_id else None
        patients = await self.repository.get_patients()
        appointment = self.build_appointment(form, patients, existing)
        if appointment is None:
            return None

        if self.detect_conflicts:
            conflicts = find_conflicts(
                await self.repository.get_appointments(), appointment.date_time, appointment.id
            )
            if conflicts:
                raise SlotUnavailableError(appointment.date_time, [c.id for c in conflicts])

        await self.repository.save_appointment(appointment)
        logger.info(
            f"appointment {'updated' if existing else 'booked'}: {appointment.id} "
            f"{appointment.date_time} for {appointment.patient_id}"
        )
        return appointment

    async def set_status(self, appointment_id: str, status: AppointmentStatus) -> Appointment:
        """Move an appointment to any status."""
        appointment = await self.get_appointment(appointment_id)
        updated = appointment.model_copy(update={"status": AppointmentStatus(status)})
        await self.repository.save_appointment(updated)
        logger.info(f"appointment {appointment_id}: {appointment.status.value} -> {updated.status.value}")
        return updated

    async def get_appointment(self, appointment_id: str) -> Appointment:
        appointment = await self.repository.get_appointment(appointment_id)
        if appointment is None:
            raise AppointmentNotFoundError(f"Appointment not found: {appointment_id}")
        return appointment

    async def delete_appointment(self, appointment_id: str) -> None:
        await self.repository.delete_appointment(appointment_id)
        logger.info(f"appointment deleted: {appointment_id}")

    async def list_appointments(self) -> List[Appointment]:
        """All appointments for the list view, newest first."""
        return sort_for_list(await self.repository.get_appointments())

    async def day_schedule(self, date_key: str) -> List[Appointment]:
        return day_bucket(await self.repository.get_appointments(), date_key)

    async def today_schedule(self) -> List[Appointment]:
        return today_bucket(await self.repository.get_appointments(), self.clock.today_key())
