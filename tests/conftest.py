"""
Pytest configuration and fixtures.
"""

from datetime import datetime
from unittest.mock import Mock, AsyncMock

import pytest
import pytz

from ameer_dental.core.enums import Gender
from ameer_dental.core.models import Patient, PatientForm, AppointmentForm
from ameer_dental.services.booking import BookingService
from ameer_dental.services.patient import PatientService
from ameer_dental.services.repository import ClinicRepository, InMemoryClinicRepository
from ameer_dental.utils.date import ClinicClock


class FixedClock(ClinicClock):
    """Clock frozen at a given moment."""

    def __init__(self, moment: datetime):
        super().__init__("UTC")
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 3, 10, 9, 30, tzinfo=pytz.UTC))


@pytest.fixture
def repository():
    return InMemoryClinicRepository()


@pytest.fixture
def mock_repository():
    """Mock repository recording every call."""
    repo = Mock(spec=ClinicRepository)
    repo.get_patients = AsyncMock(return_value=[])
    repo.get_patient = AsyncMock(return_value=None)
    repo.save_patient = AsyncMock(return_value=None)
    repo.delete_patient = AsyncMock(return_value=None)
    repo.get_appointments = AsyncMock(return_value=[])
    repo.get_appointment = AsyncMock(return_value=None)
    repo.save_appointment = AsyncMock(return_value=None)
    repo.delete_appointment = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def patient_service(repository, clock):
    return PatientService(repository, clock=clock)


@pytest.fixture
def booking_service(repository, clock):
    return BookingService(repository, clock=clock)


@pytest.fixture
def patient_form():
    return PatientForm(
        name="Mona Adel",
        phone="0100000000",
        gender=Gender.FEMALE,
        med_condition_diabetes=True,
        has_antibiotic_allergy=True,
    )


@pytest.fixture
def make_patient():
    def _make(patient_id: str, name: str, created_at: str = "2024-01-01T10:00:00+00:00") -> Patient:
        return Patient(id=patient_id, name=name, phone="0100000000", created_at=created_at)

    return _make


@pytest.fixture
def booking_form():
    def _make(patient_id: str, date: str = "2024-03-10", time: str = "09:00", **extra) -> AppointmentForm:
        extra.setdefault("reason", "Checkup")
        return AppointmentForm(patient_id=patient_id, date=date, time=time, **extra)

    return _make
