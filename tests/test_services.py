"""
Tests for service layer.
"""

import pytest

from ameer_dental.core.enums import AppointmentStatus, Gender, ToothStatus
from ameer_dental.core.exceptions import (
    AppointmentNotFoundError,
    BookingValidationError,
    InvalidToothError,
    PatientNotFoundError,
    PatientValidationError,
    SlotUnavailableError,
    UnknownPatientError,
)
from ameer_dental.core.models import DentalChart, PatientForm
from ameer_dental.services.booking import BookingService, find_conflicts
from ameer_dental.services.patient import PatientService


class TestPatientService:
    """Test patient record workflow."""

    @pytest.mark.asyncio
    async def test_missing_name_is_rejected_before_write(self, mock_repository, clock):
        service = PatientService(mock_repository, clock=clock)

        with pytest.raises(PatientValidationError) as exc_info:
            await service.save_patient(PatientForm(name="", phone="0100000000"))

        assert exc_info.value.errors == ["Patient name is required"]
        mock_repository.save_patient.assert_not_called()

    def test_blank_name_and_phone(self, patient_service):
        with pytest.raises(PatientValidationError) as exc_info:
            patient_service.build_patient(PatientForm(name="   ", phone=""))
        assert len(exc_info.value.errors) == 2

    @pytest.mark.asyncio
    async def test_create_patient(self, patient_service, repository, patient_form):
        patient = await patient_service.save_patient(patient_form)

        assert patient.id
        assert patient.chart.teeth == {}
        assert patient.created_at == "2024-03-10T09:30:00+00:00"
        assert patient.med_condition_diabetes is True
        assert await repository.get_patient(patient.id) == patient

    @pytest.mark.asyncio
    async def test_update_keeps_id_chart_and_created_at(self, patient_service, repository, patient_form):
        created = await patient_service.save_patient(patient_form)
        charted = await patient_service.record_tooth_event(created.id, 11, ToothStatus.DECAY, "caries")

        edit = patient_form.model_copy(update={"name": "Mona A. Adel", "address": "Cairo"})
        updated = await patient_service.save_patient(edit, existing_id=created.id)

        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.chart == charted.chart
        assert updated.name == "Mona A. Adel"
        assert len(await repository.get_patients()) == 1

    def test_explicit_chart_replaces_stored_chart(self, patient_service, make_patient):
        existing = make_patient("p1", "Ali")
        existing = existing.model_copy(
            update={"chart": DentalChart().append(11, ToothStatus.DECAY, on="2024-01-01")}
        )
        new_chart = DentalChart().append(21, ToothStatus.IMPLANT, on="2024-02-01")

        updated = patient_service.build_patient(
            PatientForm(name="Ali", phone="0100", chart=new_chart), existing
        )

        assert updated.chart == new_chart

    def test_pregnancy_flag_not_cleared_on_gender_change(self, patient_service, make_patient):
        existing = make_patient("p1", "Sara")
        form = PatientForm(
            name="Sara", phone="0100", gender=Gender.MALE, med_condition_pregnancy_lactation=True
        )
        updated = patient_service.build_patient(form, existing)
        assert updated.med_condition_pregnancy_lactation is True

    @pytest.mark.asyncio
    async def test_update_unknown_patient(self, patient_service, patient_form):
        with pytest.raises(PatientNotFoundError):
            await patient_service.save_patient(patient_form, existing_id="missing")

    @pytest.mark.asyncio
    async def test_record_tooth_event(self, patient_service, patient_form):
        patient = await patient_service.save_patient(patient_form)

        await patient_service.record_tooth_event(patient.id, 11, ToothStatus.DECAY, "caries")
        updated = await patient_service.record_tooth_event(patient.id, 11, ToothStatus.FILLED, "composite")

        assert updated.chart.current_status(11) == ToothStatus.FILLED
        assert len(updated.chart.history(11)) == 2
        assert updated.chart.history(11)[0].date == "2024-03-10"
        assert updated.chart.current_status(12) == ToothStatus.HEALTHY

        stored = await patient_service.get_patient(patient.id)
        assert stored.chart == updated.chart

    @pytest.mark.asyncio
    async def test_record_tooth_event_invalid_tooth(self, patient_service, patient_form, repository):
        patient = await patient_service.save_patient(patient_form)

        with pytest.raises(InvalidToothError):
            await patient_service.record_tooth_event(patient.id, 19, ToothStatus.DECAY)

        assert (await repository.get_patient(patient.id)).chart.teeth == {}

    @pytest.mark.asyncio
    async def test_record_tooth_event_rejects_fractional_tooth(self, patient_service, patient_form, repository):
        patient = await patient_service.save_patient(patient_form)

        with pytest.raises(InvalidToothError):
            await patient_service.record_tooth_event(patient.id, 11.7, ToothStatus.DECAY)

        assert list((await repository.get_patient(patient.id)).chart.teeth) == []

    @pytest.mark.asyncio
    async def test_search_patients(self, patient_service):
        await patient_service.save_patient(PatientForm(name="أحمد علي", phone="0101234567"))
        await patient_service.save_patient(PatientForm(name="Mona Adel", phone="0119999999"))

        assert [p.name for p in await patient_service.search_patients("احمد")] == ["أحمد علي"]
        assert [p.name for p in await patient_service.search_patients("mona")] == ["Mona Adel"]
        assert [p.name for p in await patient_service.search_patients("01199")] == ["Mona Adel"]
        assert len(await patient_service.search_patients("")) == 2

    @pytest.mark.asyncio
    async def test_delete_patient_removes_appointments(
        self, patient_service, booking_service, repository, patient_form, booking_form
    ):
        patient = await patient_service.save_patient(patient_form)
        await booking_service.save_appointment(booking_form(patient.id))

        await patient_service.delete_patient(patient.id)

        assert await repository.get_patients() == []
        assert await repository.get_appointments() == []


class TestBookingService:
    """Test booking workflow."""

    @pytest.mark.asyncio
    async def test_create_appointment(self, booking_service, repository, make_patient, booking_form):
        await repository.save_patient(make_patient("p1", "Ali"))

        appointment = await booking_service.save_appointment(booking_form("p1", notes="first visit"))

        assert appointment.patient_id == "p1"
        assert appointment.patient_name == "Ali"
        assert appointment.date_time == "2024-03-10T09:00"
        assert appointment.duration == 30
        assert appointment.status == AppointmentStatus.SCHEDULED
        assert appointment.notes == "first visit"
        assert await repository.get_appointments() == [appointment]

    @pytest.mark.asyncio
    async def test_create_with_explicit_status(self, booking_service, repository, make_patient, booking_form):
        await repository.save_patient(make_patient("p1", "Ali"))
        appointment = await booking_service.save_appointment(
            booking_form("p1", status=AppointmentStatus.IN_PROGRESS)
        )
        assert appointment.status == AppointmentStatus.IN_PROGRESS

    @pytest.mark.asyncio
    async def test_double_booking_is_allowed(self, booking_service, repository, make_patient, booking_form):
        """Two patients at the same date-time are both booked."""
        await repository.save_patient(make_patient("p1", "Ali"))
        await repository.save_patient(make_patient("p2", "Mona"))

        first = await booking_service.save_appointment(booking_form("p1"))
        second = await booking_service.save_appointment(booking_form("p2"))

        assert first is not None and second is not None
        assert first.date_time == second.date_time == "2024-03-10T09:00"
        assert len(await repository.get_appointments()) == 2

    @pytest.mark.asyncio
    async def test_unknown_patient_is_a_silent_no_op(self, booking_service, repository, booking_form):
        result = await booking_service.save_appointment(booking_form("ghost"))

        assert result is None
        assert await repository.get_appointments() == []

    @pytest.mark.asyncio
    async def test_unknown_patient_rejected_when_configured(self, repository, clock, booking_form):
        service = BookingService(repository, reject_unknown_patient=True, clock=clock)

        with pytest.raises(UnknownPatientError) as exc_info:
            await service.save_appointment(booking_form("ghost"))

        assert exc_info.value.patient_id == "ghost"
        assert await repository.get_appointments() == []

    @pytest.mark.asyncio
    async def test_update_keeps_identity_and_name_snapshot(
        self, booking_service, repository, make_patient, booking_form
    ):
        await repository.save_patient(make_patient("p1", "Ali"))
        await repository.save_patient(make_patient("p2", "Mona"))
        booked = await booking_service.save_appointment(booking_form("p1", notes="x"))

        # Patient renamed after booking
        await repository.save_patient(make_patient("p1", "Ali Hassan"))

        updated = await booking_service.save_appointment(
            booking_form("p2", date="2024-03-12", time="14:30", reason="Filling"),
            appointment_id=booked.id,
        )

        assert updated.id == booked.id
        assert updated.patient_id == "p1"
        assert updated.patient_name == "Ali"
        assert updated.date_time == "2024-03-12T14:30"
        assert updated.reason == "Filling"
        assert updated.notes is None
        assert updated.status == AppointmentStatus.SCHEDULED
        assert len(await repository.get_appointments()) == 1

    @pytest.mark.asyncio
    async def test_update_missing_appointment(self, booking_service, booking_form):
        with pytest.raises(AppointmentNotFoundError):
            await booking_service.save_appointment(booking_form("p1"), appointment_id="missing")

    @pytest.mark.asyncio
    async def test_date_and_time_are_zero_padded(self, booking_service, repository, make_patient, booking_form):
        await repository.save_patient(make_patient("p1", "Ali"))
        appointment = await booking_service.save_appointment(booking_form("p1", date="2024-3-5", time="9:05"))
        assert appointment.date_time == "2024-03-05T09:05"

    @pytest.mark.asyncio
    async def test_malformed_time_rejected(self, booking_service, repository, make_patient, booking_form):
        await repository.save_patient(make_patient("p1", "Ali"))

        with pytest.raises(BookingValidationError):
            await booking_service.save_appointment(booking_form("p1", time="nine"))

        assert await repository.get_appointments() == []

    @pytest.mark.asyncio
    async def test_conflict_detection_opt_in(self, repository, clock, make_patient, booking_form):
        service = BookingService(repository, detect_conflicts=True, clock=clock)
        await repository.save_patient(make_patient("p1", "Ali"))
        await repository.save_patient(make_patient("p2", "Mona"))
        first = await service.save_appointment(booking_form("p1"))

        with pytest.raises(SlotUnavailableError) as exc_info:
            await service.save_appointment(booking_form("p2"))
        assert exc_info.value.conflicting_ids == [first.id]

        # Re-saving the same appointment is not a conflict with itself
        await service.save_appointment(booking_form("p1", reason="Moved"), appointment_id=first.id)

        await service.set_status(first.id, AppointmentStatus.CANCELLED)
        assert await service.save_appointment(booking_form("p2")) is not None

    def test_find_conflicts(self, booking_service, make_patient, booking_form):
        patients = [make_patient("p1", "Ali")]
        a = booking_service.build_appointment(booking_form("p1"), patients)
        b = booking_service.build_appointment(booking_form("p1", time="10:00"), patients)
        assert find_conflicts([a, b], "2024-03-10T09:00") == [a]
        assert find_conflicts([a, b], "2024-03-10T09:00", exclude_id=a.id) == []

    @pytest.mark.asyncio
    async def test_any_status_transition(self, booking_service, repository, make_patient, booking_form):
        await repository.save_patient(make_patient("p1", "Ali"))
        appointment = await booking_service.save_appointment(booking_form("p1"))

        for status in (
            AppointmentStatus.COMPLETED,
            AppointmentStatus.SCHEDULED,
            AppointmentStatus.CANCELLED,
            AppointmentStatus.IN_PROGRESS,
        ):
            updated = await booking_service.set_status(appointment.id, status)
            assert updated.status == status

    @pytest.mark.asyncio
    async def test_schedules(self, booking_service, repository, make_patient, booking_form):
        await repository.save_patient(make_patient("p1", "Ali"))
        await booking_service.save_appointment(booking_form("p1", date="2024-03-10", time="11:00"))
        await booking_service.save_appointment(booking_form("p1", date="2024-03-11", time="09:00"))
        await booking_service.save_appointment(booking_form("p1", date="2024-03-10", time="08:00"))

        today = await booking_service.today_schedule()
        assert [a.date_time for a in today] == ["2024-03-10T08:00", "2024-03-10T11:00"]

        listed = await booking_service.list_appointments()
        assert [a.date_time for a in listed] == [
            "2024-03-11T09:00",
            "2024-03-10T11:00",
            "2024-03-10T08:00",
        ]

        assert len(await booking_service.day_schedule("2024-03-11")) == 1

    @pytest.mark.asyncio
    async def test_delete_appointment(self, booking_service, repository, make_patient, booking_form):
        await repository.save_patient(make_patient("p1", "Ali"))
        appointment = await booking_service.save_appointment(booking_form("p1"))

        await booking_service.delete_appointment(appointment.id)

        assert await repository.get_appointments() == []
