"""
Patient-related data models.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..enums import Gender
from .chart import DentalChart

# Intake form checkboxes, with the label shown in alerts
MEDICAL_CONDITION_LABELS: Dict[str, str] = {
    "med_condition_hypertension": "Hypertension",
    "med_condition_diabetes": "Diabetes",
    "med_condition_stomach_ulcer": "Stomach ulcer",
    "med_condition_rheumatic_fever": "Rheumatic fever",
    "med_condition_hepatitis": "Hepatitis",
    "med_condition_pregnancy_lactation": "Pregnancy / lactation",
}

RISK_FLAG_LABELS: Dict[str, str] = {
    "has_antibiotic_allergy": "Antibiotic allergy",
    "has_local_anesthesia_allergy": "Local anesthesia allergy",
    "has_heart_problems": "Heart problems",
    "has_kidney_problems": "Kidney problems",
    "has_liver_problems": "Liver problems",
}

MEDICATION_LABELS: Dict[str, str] = {
    "medication_pressure": "Blood pressure medication",
    "medication_diabetes": "Diabetes medication",
    "medication_blood_thinner": "Blood thinner",
}

# Everything stored in the medical_history column
MEDICAL_HISTORY_FIELDS = (
    *MEDICAL_CONDITION_LABELS,
    *RISK_FLAG_LABELS,
    "takes_regular_medication",
    *MEDICATION_LABELS,
    "medication_other",
)


class PatientDetails(BaseModel):
    """Demographics and medical history shared by the form and the record."""

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    phone: str = ""
    dob: str = ""
    email: str = ""
    occupation: str = ""
    address: str = ""
    gender: Gender = Gender.MALE

    # Medical history
    med_condition_hypertension: bool = False
    med_condition_diabetes: bool = False
    med_condition_stomach_ulcer: bool = False
    med_condition_rheumatic_fever: bool = False
    med_condition_hepatitis: bool = False
    med_condition_pregnancy_lactation: bool = False

    # General questions
    has_antibiotic_allergy: bool = False
    has_local_anesthesia_allergy: bool = False
    has_heart_problems: bool = False
    has_kidney_problems: bool = False
    has_liver_problems: bool = False

    # Current medications, only asked when takes_regular_medication is set
    takes_regular_medication: bool = False
    medication_pressure: bool = False
    medication_diabetes: bool = False
    medication_blood_thinner: bool = False
    medication_other: str = ""

    @field_validator("gender", mode="before")
    @classmethod
    def parse_gender(cls, value):
        """Accept Arabic or lower-case labels from the intake form."""
        if isinstance(value, str) and not isinstance(value, Gender):
            return Gender.from_string(value)
        return value

    @property
    def shows_pregnancy_flag(self) -> bool:
        """The pregnancy/lactation question is only asked for female patients."""
        return self.gender == Gender.FEMALE

    def active_medications(self) -> List[str]:
        """Medications the patient reports taking regularly."""
        if not self.takes_regular_medication:
            return []
        medications = [label for field, label in MEDICATION_LABELS.items() if getattr(self, field)]
        if self.medication_other.strip():
            medications.append(self.medication_other.strip())
        return medications

    def medical_alerts(self) -> List[str]:
        """Labels of every raised history or risk flag."""
        alerts = [label for field, label in MEDICAL_CONDITION_LABELS.items() if getattr(self, field)]
        alerts.extend(label for field, label in RISK_FLAG_LABELS.items() if getattr(self, field))
        return alerts

    def medical_history(self) -> Dict[str, object]:
        """The medical-history part of the record, as stored."""
        return {field: getattr(self, field) for field in MEDICAL_HISTORY_FIELDS}


class PatientForm(PatientDetails):
    """Raw patient form input.

    ``chart`` is only set by callers that mean to replace the stored chart;
    demographic edits leave it as None.
    """

    chart: Optional[DentalChart] = None


class Patient(PatientDetails):
    """Complete patient record."""

    id: str
    chart: DentalChart = Field(default_factory=DentalChart)
    created_at: str
