"""
SQLite-backed clinic repository.
"""

import asyncio
import json
import sqlite3
from typing import Callable, List, Optional, TypeVar

from ...core.exceptions import RepositoryError
from ...core.models.chart import DentalChart
from ...core.models.patient import Patient, MEDICAL_HISTORY_FIELDS
from ...core.models.appointment import Appointment
from ...config import DatabaseConfig, get_settings
from ...utils.logging import get_logger
from .base import ClinicRepository

logger = get_logger("ameer.repository")

T = TypeVar("T")

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS patients (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        phone TEXT NOT NULL,
        dob TEXT,
        email TEXT,
        occupation TEXT,
        address TEXT,
        gender TEXT,
        medical_history TEXT NOT NULL DEFAULT '{}',
        chart TEXT NOT NULL DEFAULT '{}',
        created_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS appointments (
        id TEXT PRIMARY KEY,
        patient_id TEXT NOT NULL REFERENCES patients(id) ON DELETE CASCADE,
        patient_name TEXT,
        date_time TEXT NOT NULL,
        duration INTEGER,
        reason TEXT,
        status TEXT NOT NULL DEFAULT 'Scheduled',
        notes TEXT
    )
    """,
)


def _row_to_patient(row: sqlite3.Row) -> Patient:
    history = json.loads(row["medical_history"] or "{}")
    return Patient(
        id=row["id"],
        name=row["name"],
        phone=row["phone"],
        dob=row["dob"] or "",
        email=row["email"] or "",
        occupation=row["occupation"] or "",
        address=row["address"] or "",
        gender=row["gender"],
        chart=DentalChart.from_storage(json.loads(row["chart"] or "{}")),
        created_at=row["created_at"],
        **{field: history[field] for field in MEDICAL_HISTORY_FIELDS if field in history},
    )


def _row_to_appointment(row: sqlite3.Row) -> Appointment:
    return Appointment(
        id=row["id"],
        patient_id=row["patient_id"],
        patient_name=row["patient_name"] or "",
        date_time=row["date_time"],
        duration=row["duration"],
        reason=row["reason"] or "",
        status=row["status"],
        notes=row["notes"],
    )


class SQLiteClinicRepository(ClinicRepository):
    """Stores patients and appointments in a SQLite file.

    Each operation opens its own connection on a worker thread; an asyncio
    lock keeps writes from this process one at a time.
    """

    def __init__(self, config: Optional[DatabaseConfig] = None):
        self.config = config or DatabaseConfig(database_path=get_settings().database_path)
        self.db_path = self.config.database_path
        self._lock = asyncio.Lock()
        self._initialized = False

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path, timeout=self.config.connection_timeout)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    async def _ensure_tables(self) -> None:
        """Ensure the patients and appointments tables exist."""
        if self._initialized:
            return

        def _create_tables() -> None:
            conn = self._connect()
            try:
                for statement in _SCHEMA:
                    conn.execute(statement)
                conn.commit()
            finally:
                conn.close()

        await self._run("ensure_tables", _create_tables, ensure=False)
        self._initialized = True
        logger.info(f"clinic tables ready at {self.config.get_database_url()}")

    async def _run(self, operation: str, fn: Callable[[], T], ensure: bool = True) -> T:
        if ensure:
            await self._ensure_tables()
        async with self._lock:
            try:
                return await asyncio.to_thread(fn)
            except sqlite3.Error as e:
                logger.error(f"{operation} failed: {e}")
                raise RepositoryError(f"{operation} failed: {e}") from e

    def _execute(self, sql: str, params: tuple = ()) -> None:
        conn = self._connect()
        try:
            conn.execute(sql, params)
            conn.commit()
        finally:
            conn.close()

    def _fetch(self, sql: str, params: tuple = ()) -> List[sqlite3.Row]:
        conn = self._connect()
        try:
            return conn.execute(sql, params).fetchall()
        finally:
            conn.close()

    async def get_patients(self) -> List[Patient]:
        rows = await self._run(
            "get_patients",
            lambda: self._fetch("SELECT * FROM patients ORDER BY created_at DESC"),
        )
        return [_row_to_patient(row) for row in rows]

    async def get_patient(self, patient_id: str) -> Optional[Patient]:
        rows = await self._run(
            "get_patient",
            lambda: self._fetch("SELECT * FROM patients WHERE id = ?", (patient_id,)),
        )
        return _row_to_patient(rows[0]) if rows else None

    async def save_patient(self, patient: Patient) -> None:
        params = (
            patient.id,
            patient.name,
            patient.phone,
            patient.dob,
            patient.email,
            patient.occupation,
            patient.address,
            patient.gender.value,
            json.dumps(patient.medical_history(), ensure_ascii=False),
            json.dumps(patient.chart.to_storage(), ensure_ascii=False),
            patient.created_at,
        )
        # ON CONFLICT keeps the row (and its appointments); REPLACE would cascade
        await self._run(
            "save_patient",
            lambda: self._execute(
                """
                INSERT INTO patients
                    (id, name, phone, dob, email, occupation, address, gender, medical_history, chart, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT (id) DO UPDATE SET
                    name = excluded.name,
                    phone = excluded.phone,
                    dob = excluded.dob,
                    email = excluded.email,
                    occupation = excluded.occupation,
                    address = excluded.address,
                    gender = excluded.gender,
                    medical_history = excluded.medical_history,
                    chart = excluded.chart
                """,
                params,
            ),
        )

    async def delete_patient(self, patient_id: str) -> None:
        await self._run(
            "delete_patient",
            lambda: self._execute("DELETE FROM patients WHERE id = ?", (patient_id,)),
        )

    async def get_appointments(self) -> List[Appointment]:
        rows = await self._run(
            "get_appointments",
            lambda: self._fetch("SELECT * FROM appointments ORDER BY date_time ASC, rowid ASC"),
        )
        return [_row_to_appointment(row) for row in rows]

    async def get_appointment(self, appointment_id: str) -> Optional[Appointment]:
        rows = await self._run(
            "get_appointment",
            lambda: self._fetch("SELECT * FROM appointments WHERE id = ?", (appointment_id,)),
        )
        return _row_to_appointment(rows[0]) if rows else None

    async def save_appointment(self, appointment: Appointment) -> None:
        params = (
            appointment.id,
            appointment.patient_id,
            appointment.patient_name,
            appointment.date_time,
            appointment.duration,
            appointment.reason,
            appointment.status.value,
            appointment.notes,
        )
        await self._run(
            "save_appointment",
            lambda: self._execute(
                """
                INSERT INTO appointments
                    (id, patient_id, patient_name, date_time, duration, reason, status, notes)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT (id) DO UPDATE SET
                    patient_id = excluded.patient_id,
                    patient_name = excluded.patient_name,
                    date_time = excluded.date_time,
                    duration = excluded.duration,
                    reason = excluded.reason,
                    status = excluded.status,
                    notes = excluded.notes
                """,
                params,
            ),
        )

    async def delete_appointment(self, appointment_id: str) -> None:
        await self._run(
            "delete_appointment",
            lambda: self._execute("DELETE FROM appointments WHERE id = ?", (appointment_id,)),
        )
