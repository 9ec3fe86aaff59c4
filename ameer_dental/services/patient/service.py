"""
Patient service for creating, editing and charting patient records.
"""

from typing import List, Optional

from ...core.enums import ToothStatus
from ...core.exceptions import PatientValidationError, PatientNotFoundError, InvalidToothError
from ...core.models.chart import DentalChart, is_valid_tooth
from ...core.models.patient import Patient, PatientForm
from ...utils.date import ClinicClock
from ...utils.ids import new_id
from ...utils.logging import get_logger
from ...utils.text import TextProcessor
from ...utils.validation import ValidationUtils
from ..repository import ClinicRepository

logger = get_logger("ameer.patients")


class PatientService:
    """Service for handling patient records and their dental charts."""

    def __init__(self, repository: ClinicRepository, clock: Optional[ClinicClock] = None):
        self.repository = repository
        self.clock = clock or ClinicClock()

    def build_patient(self, form: PatientForm, existing: Optional[Patient] = None) -> Patient:
        """
        Build the record to store from a patient form.

        Args:
            form: Submitted patient form
            existing: Stored record when editing, None when creating

        Returns:
            New or updated Patient

        Raises:
            PatientValidationError: If name or phone is missing
        """
        errors = ValidationUtils.validate_patient_form(form)
        if errors:
            raise PatientValidationError(errors)

        details = form.model_dump(exclude={"chart"})
        details["name"] = form.name.strip()
        details["phone"] = form.phone.strip()

        if existing is None:
            return Patient(
                id=new_id(),
                chart=form.chart or DentalChart(),
                created_at=self.clock.now_iso(),
                **details,
            )

        # The pregnancy flag is left as submitted even if gender is no longer Female
        return Patient(
            id=existing.id,
            chart=form.chart if form.chart is not None else existing.chart,
            created_at=existing.created_at,
            **details,
        )

    async def save_patient(self, form: PatientForm, existing_id: Optional[str] = None) -> Patient:
        """Validate a form and upsert the resulting patient."""
        existing = await self.get_patient(existing_id) if existing_id else None
        patient = self.build_patient(form, existing)
        await self.repository.save_patient(patient)
        logger.info(f"patient {'updated' if existing else 'created'}: {patient.id}")
        return patient

    async def get_patient(self, patient_id: str) -> Patient:
        patient = await self.repository.get_patient(patient_id)
        if patient is None:
            raise PatientNotFoundError(f"Patient not found: {patient_id}")
        return patient

    async def list_patients(self) -> List[Patient]:
        return await self.repository.get_patients()

    async def search_patients(self, term: str) -> List[Patient]:
        """Patients whose name or phone contains ``term``."""
        patients = await self.repository.get_patients()
        term = (term or "").strip()
        if not term:
            return patients
        return [
            patient
            for patient in patients
            if TextProcessor.contains(patient.name, term) or term in patient.phone
        ]

    async def delete_patient(self, patient_id: str) -> None:
        """Delete a patient; the repository removes their appointments too."""
        await self.repository.delete_patient(patient_id)
        logger.info(f"patient deleted: {patient_id}")

    async def record_tooth_event(
        self,
        patient_id: str,
        tooth_id: int,
        status: ToothStatus,
        note: str = "",
    ) -> Patient:
        """
        Append a treatment event to a patient's chart and save the patient.

        Raises:
            InvalidToothError: If ``tooth_id`` is not an FDI code
            PatientNotFoundError: If the patient does not exist
        """
        if not is_valid_tooth(tooth_id):
            raise InvalidToothError(tooth_id)

        patient = await self.get_patient(patient_id)
        chart = patient.chart.append(
            int(tooth_id), status, note, on=self.clock.today_key()
        )
        updated = patient.model_copy(update={"chart": chart})
        await self.repository.save_patient(updated)
        logger.info(f"tooth {tooth_id} -> {ToothStatus(status).value} for patient {patient_id}")
        return updated
