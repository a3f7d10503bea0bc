"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

from datetime import datetime
from pathlib import Path

import pytest

from hospital_records.models import (
    Application,
    Appointment,
    Equipment,
    EquipmentStatus,
    Invoice,
    InvoiceStatus,
    LineItem,
    MedicalFile,
    MedicalNote,
    Medication,
    Patient,
    Pharmacy,
    Role,
    Service,
    Staff,
    Treatment,
    UrgencyLevel,
    UserAccount,
)
from hospital_records.records import HospitalRecords
from hospital_records.store import JsonStore

# Clock used by record fixtures: 10/05/2024 08:30
FIXED_NOW = datetime(2024, 5, 10, 8, 30)


def fake_hasher(password: str) -> str:
    """Deterministic stand-in for the password transform."""
    return f"hashed:{password[::-1]}"


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """
    Return a data file path inside pytest's temporary directory.
    
    The file does not exist until something saves to it.
    """
    return tmp_path / "data.json"


@pytest.fixture
def store(data_file: Path) -> JsonStore:
    """Return a JsonStore backed by the temporary data file."""
    return JsonStore(data_file)


@pytest.fixture
def records(store: JsonStore) -> HospitalRecords:
    """
    Return HospitalRecords over an empty dataset.
    
    Uses a fixed clock (10/05/2024) and a deterministic password hasher.
    """
    return HospitalRecords(
        Application(), store, password_hasher=fake_hasher, clock=lambda: FIXED_NOW
    )


@pytest.fixture
def populated_application() -> Application:
    """
    Return an Application with every collection and optional field populated.
    
    Includes a dangling reference (appointment to patient 99).
    """
    return Application(
        patients=[
            Patient(
                id=1,
                name="Dupont",
                surname="Jean",
                birth_date="01/02/1980",
                health_number="180027512345678",
                medical_file=MedicalFile(
                    history=["Appendectomy 2001"],
                    allergies=["Penicillin"],
                    blood_type="A+",
                    treatments=[
                        Treatment(
                            medication="Amoxicillin",
                            dosage="500mg x3/day",
                            start_date="01/05/2024",
                            end_date="08/05/2024",
                            prescribed_by=1,
                        ),
                        Treatment(
                            medication="Paracetamol",
                            dosage="1g",
                            start_date="09/05/2024",
                            prescribed_by=7,
                        ),
                    ],
                    notes=[MedicalNote(date="10/05/2024", content="Stable", author=1)],
                ),
                urgency=UrgencyLevel.HIGH,
            ),
            Patient(
                id=2,
                name="Bernard",
                surname="Léa",
                birth_date="15/09/1992",
                health_number="292097512345612",
            ),
        ],
        staff=[
            Staff(
                id=1,
                name="Martin",
                surname="Claude",
                specialty="Cardiology",
                qualifications=["MD", "PhD"],
            ),
        ],
        appointments=[
            Appointment(id=1, date="10/05/2024", time="09:00", patient_id=1, staff_id=1),
            Appointment(id=2, date="11/05/2024", time="14:30", patient_id=99, staff_id=1),
        ],
        services=[
            Service(
                id=1,
                name="Cardiology",
                chief_staff_id=1,
                capacity=20,
                assigned_staff=[1],
                equipment=[
                    Equipment(
                        id=1,
                        name="ECG",
                        status=EquipmentStatus.UNDER_MAINTENANCE,
                        last_maintenance="01/01/2024",
                        next_maintenance="01/07/2024",
                    )
                ],
            )
        ],
        pharmacy=Pharmacy(
            medications=[
                Medication(
                    id=1,
                    name="Paracetamol",
                    description="Analgesic",
                    stock=5,
                    alert_threshold=10,
                    expiry_date="31/12/2025",
                )
            ]
        ),
        invoices=[
            Invoice(
                id=1,
                patient_id=1,
                line_items=[
                    LineItem(description="Consultation", amount=25.0, procedure_code="CS"),
                    LineItem(description="ECG", amount=14.26, procedure_code="DEQP003"),
                ],
                total=39.26,
                issue_date="10/05/2024",
                status=InvoiceStatus.PAID,
            )
        ],
        users=[
            UserAccount(
                id=1,
                username="admin",
                password_hash="hashed:nimda",
                role=Role.ADMIN,
                last_login="10/05/2024 08:00",
            ),
            UserAccount(id=2, username="reception", password_hash="x", role=Role.RECEPTIONIST),
        ],
    )
