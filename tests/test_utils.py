"""
Tests for utility functions.
"""

import pytest
from ameer_dental.core.models import AppointmentForm, PatientForm
from ameer_dental.utils.date import (
    ClinicClock,
    combine_date_time,
    is_valid_iso_date,
    is_valid_time_format,
    split_date_time,
)
from ameer_dental.utils.ids import new_id
from ameer_dental.utils.text import TextProcessor
from ameer_dental.utils.validation import ValidationUtils


class TestDateUtils:
    """Test date and time helpers."""

    def test_is_valid_iso_date(self):
        assert is_valid_iso_date("2024-02-29") is True
        assert is_valid_iso_date("2023-02-29") is False
        assert is_valid_iso_date("10/03/2024") is False
        assert is_valid_iso_date(None) is False

    def test_is_valid_time_format(self):
        assert is_valid_time_format("09:30") is True
        assert is_valid_time_format("23:59") is True
        assert is_valid_time_format("24:00") is False
        assert is_valid_time_format("9am") is False

    @pytest.mark.parametrize(
        "date_str,time_str,expected",
        [
            ("2024-03-10", "09:00", "2024-03-10T09:00"),
            ("2024-3-5", "9:05", "2024-03-05T09:05"),
            (" 2024-12-31 ", " 18:45 ", "2024-12-31T18:45"),
        ],
    )
    def test_combine_date_time(self, date_str, time_str, expected):
        assert combine_date_time(date_str, time_str) == expected

    def test_combine_date_time_rejects_garbage(self):
        with pytest.raises(ValueError):
            combine_date_time("2024-03-10", "noon")

    def test_split_date_time(self):
        assert split_date_time("2024-03-10T09:00") == ("2024-03-10", "09:00")

    def test_clinic_clock_timezone(self):
        clock = ClinicClock("Africa/Cairo")
        assert clock.now().tzinfo is not None
        assert len(clock.today_key()) == 10


class TestTextProcessor:
    """Test text processing utilities."""

    def test_normalize_arabic_text(self):
        assert TextProcessor.normalize_arabic_text("أحمد") == "احمد"
        assert TextProcessor.normalize_arabic_text("فاطمة") == "فاطمه"
        assert TextProcessor.normalize_arabic_text("  Mona   Adel ") == "mona adel"

    def test_contains(self):
        assert TextProcessor.contains("إبراهيم علي", "ابراهيم") is True
        assert TextProcessor.contains("Mona Adel", "ADEL") is True
        assert TextProcessor.contains("Mona Adel", "Sara") is False

    def test_sanitize_text(self):
        assert TextProcessor.sanitize_text("  pain\x00 in\n\nmolar ") == "pain in molar"
        assert TextProcessor.sanitize_text("") == ""


class TestValidationUtils:
    """Test form validation."""

    def test_validate_name(self):
        assert ValidationUtils.validate_name("Ali") == (True, None)
        is_valid, error = ValidationUtils.validate_name("  ")
        assert is_valid is False
        assert error == "Patient name is required"

    def test_validate_phone(self):
        assert ValidationUtils.validate_phone("+20 100 000 0000")[0] is True
        assert ValidationUtils.validate_phone(None)[0] is False

    def test_validate_patient_form(self):
        assert ValidationUtils.validate_patient_form(PatientForm(name="Ali", phone="0100")) == []
        assert ValidationUtils.validate_patient_form(PatientForm()) == [
            "Patient name is required",
            "Phone number is required",
        ]

    def test_validate_appointment_form(self):
        valid = AppointmentForm(patient_id="p1", date="2024-03-10", time="09:00")
        assert ValidationUtils.validate_appointment_form(valid) == []

        invalid = AppointmentForm(patient_id="p1", date="tomorrow", time="9")
        assert len(ValidationUtils.validate_appointment_form(invalid)) == 2


def test_new_id_is_unique_hex():
    ids = {new_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(len(value) == 32 and int(value, 16) >= 0 for value in ids)
