"""
In-process repository, used for tests and local demos.
"""

from typing import Dict, List, Optional

from ...core.models.patient import Patient
from ...core.models.appointment import Appointment
from .base import ClinicRepository


class InMemoryClinicRepository(ClinicRepository):
    """Keeps copies of saved records in dictionaries."""

    def __init__(self):
        self._patients: Dict[str, Patient] = {}
        self._appointments: Dict[str, Appointment] = {}

    async def get_patients(self) -> List[Patient]:
        patients = [patient.model_copy(deep=True) for patient in self._patients.values()]
        return sorted(patients, key=lambda patient: patient.created_at, reverse=True)

    async def get_patient(self, patient_id: str) -> Optional[Patient]:
        patient = self._patients.get(patient_id)
        return patient.model_copy(deep=True) if patient else None

    async def save_patient(self, patient: Patient) -> None:
        stored = self._patients.get(patient.id)
        if stored is not None:
            patient = patient.model_copy(update={"created_at": stored.created_at})
        self._patients[patient.id] = patient.model_copy(deep=True)

    async def delete_patient(self, patient_id: str) -> None:
        self._patients.pop(patient_id, None)
        self._appointments = {
            key: appointment
            for key, appointment in self._appointments.items()
            if appointment.patient_id != patient_id
        }

    async def get_appointments(self) -> List[Appointment]:
        appointments = [appointment.model_copy() for appointment in self._appointments.values()]
        return sorted(appointments, key=lambda appointment: appointment.date_time)

    async def get_appointment(self, appointment_id: str) -> Optional[Appointment]:
        appointment = self._appointments.get(appointment_id)
        return appointment.model_copy() if appointment else None

    async def save_appointment(self, appointment: Appointment) -> None:
        self._appointments[appointment.id] = appointment.model_copy()

    async def delete_appointment(self, appointment_id: str) -> None:
        self._appointments.pop(appointment_id, None)
