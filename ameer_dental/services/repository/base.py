"""
Storage contract used by the clinic workflows.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ...core.models.patient import Patient
from ...core.models.appointment import Appointment


class ClinicRepository(ABC):
    """Persistent store for patients and appointments.

    Saves are whole-record upserts keyed by id; the last write wins.
    Errors are raised to the caller and never retried here.
    """

    @abstractmethod
    async def get_patients(self) -> List[Patient]:
        """All patients, newest first."""

    async def get_patient(self, patient_id: str) -> Optional[Patient]:
        for patient in await self.get_patients():
            if patient.id == patient_id:
                return patient
        return None

    @abstractmethod
    async def save_patient(self, patient: Patient) -> None:
        """Insert or replace a patient. ``created_at`` is kept from the first insert."""

    @abstractmethod
    async def delete_patient(self, patient_id: str) -> None:
        """Delete a patient together with their appointments."""

    @abstractmethod
    async def get_appointments(self) -> List[Appointment]:
        """All appointments in ascending date-time order."""

    async def get_appointment(self, appointment_id: str) -> Optional[Appointment]:
        for appointment in await self.get_appointments():
            if appointment.id == appointment_id:
                return appointment
        return None

    @abstractmethod
    async def save_appointment(self, appointment: Appointment) -> None:
        """Insert or replace an appointment."""

    @abstractmethod
    async def delete_appointment(self, appointment_id: str) -> None:
        """Delete an appointment."""
