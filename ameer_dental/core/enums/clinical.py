"""
Clinical enums: patient gender, tooth status and AI risk level.
"""

from enum import Enum


class Gender(str, Enum):
    """Patient gender as recorded on the intake form."""

    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

    @classmethod
    def from_string(cls, value: str) -> "Gender":
        """Convert string to Gender enum with Arabic/English support.

        Raises:
            ValueError: If the label is not a known gender
        """
        if not value or not value.strip():
            return cls.MALE

        value = value.strip().lower()

        # Arabic support
        if value in ["ذكر", "m"]:
            return cls.MALE
        if value in ["أنثى", "انثى", "f"]:
            return cls.FEMALE

        # English support
        if value == "male":
            return cls.MALE
        if value == "female":
            return cls.FEMALE
        if value in ["other", "آخر", "اخر", "o"]:
            return cls.OTHER

        raise ValueError(f"Unknown gender: {value!r}")


class ToothStatus(str, Enum):
    """Clinical status recorded for a single tooth."""

    HEALTHY = "Healthy"
    DECAY = "Decay"
    FILLED = "Filled"
    MISSING = "Missing"
    CROWNED = "Crowned"
    BRIDGE = "Bridge"
    IMPLANT = "Implant"


class RiskLevel(str, Enum):
    """Urgency estimated by the symptom consultant."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
