"""
Patient directory and dental chart endpoints.
"""

from typing import List, Optional
from fastapi import APIRouter, Response, status
from pydantic import BaseModel, ConfigDict

from ...core.enums import ToothStatus
from ...core.exceptions import InvalidToothError
from ...core.models.chart import ToothEvent, UPPER_ARCH, LOWER_ARCH, is_valid_tooth
from ...core.models.patient import Patient, PatientForm
from ...services.patient import PatientService


class ToothEventRequest(BaseModel):
    """New entry for a tooth's treatment history."""

    model_config = ConfigDict(extra="forbid")

    status: ToothStatus
    note: str = ""


class ToothHistoryResponse(BaseModel):
    tooth: int
    status: ToothStatus
    history: List[ToothEvent]


class ChartResponse(BaseModel):
    upper_arch: List[int]
    lower_arch: List[int]
    statuses: dict
    recorded_teeth: List[int]
    event_count: int


class PatientHandler:
    """Handler for patient records."""

    def __init__(self, patient_service: PatientService):
        self.patient_service = patient_service
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        service = self.patient_service

        @self.router.get("/", response_model=List[Patient])
        async def list_patients(q: Optional[str] = None):
            """List patients, optionally filtered by name or phone."""
            if q:
                return await service.search_patients(q)
            return await service.list_patients()

        @self.router.post("/", response_model=Patient, status_code=status.HTTP_201_CREATED)
        async def create_patient(form: PatientForm):
            return await service.save_patient(form)

        @self.router.get("/{patient_id}", response_model=Patient)
        async def get_patient(patient_id: str):
            return await service.get_patient(patient_id)

        @self.router.put("/{patient_id}", response_model=Patient)
        async def update_patient(patient_id: str, form: PatientForm):
            return await service.save_patient(form, existing_id=patient_id)

        @self.router.delete("/{patient_id}", status_code=status.HTTP_204_NO_CONTENT)
        async def delete_patient(patient_id: str):
            await service.delete_patient(patient_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        @self.router.get("/{patient_id}/chart", response_model=ChartResponse)
        async def get_chart(patient_id: str):
            """Current status of every tooth, in display order."""
            patient = await service.get_patient(patient_id)
            return ChartResponse(
                upper_arch=list(UPPER_ARCH),
                lower_arch=list(LOWER_ARCH),
                statuses={str(tooth): value.value for tooth, value in patient.chart.status_summary().items()},
                recorded_teeth=patient.chart.recorded_teeth(),
                event_count=patient.chart.event_count(),
            )

        @self.router.get("/{patient_id}/chart/{tooth_id}", response_model=ToothHistoryResponse)
        async def get_tooth_history(patient_id: str, tooth_id: int):
            if not is_valid_tooth(tooth_id):
                raise InvalidToothError(tooth_id)
            patient = await service.get_patient(patient_id)
            return ToothHistoryResponse(
                tooth=tooth_id,
                status=patient.chart.current_status(tooth_id),
                history=list(patient.chart.history(tooth_id)),
            )

        @self.router.post(
            "/{patient_id}/chart/{tooth_id}",
            response_model=ToothHistoryResponse,
            status_code=status.HTTP_201_CREATED,
        )
        async def add_tooth_event(patient_id: str, tooth_id: int, body: ToothEventRequest):
            patient = await service.record_tooth_event(patient_id, tooth_id, body.status, body.note)
            return ToothHistoryResponse(
                tooth=tooth_id,
                status=patient.chart.current_status(tooth_id),
                history=list(patient.chart.history(tooth_id)),
            )
