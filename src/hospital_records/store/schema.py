"""Document schema for the persisted JSON data file.

The models below mirror the layout written by ``Application.to_dict`` and are
checked in strict mode before any record is built: ids and counts must be
real integers (booleans and numeric strings are refused), stock, alert
threshold and capacity must be non-negative, and every collection must be a
JSON array. Enum tags are checked when the records are built.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, NonNegativeInt, ValidationError


class _Document(BaseModel):
    model_config = ConfigDict(strict=True)


class TreatmentDocument(_Document):
    medication: str
    dosage: str
    start_date: str
    end_date: Optional[str] = None
    prescribed_by: int


class MedicalNoteDocument(_Document):
    date: str
    content: str
    author: int


class MedicalFileDocument(_Document):
    history: List[str]
    allergies: List[str]
    blood_type: str
    treatments: List[TreatmentDocument]
    notes: List[MedicalNoteDocument]


class PatientDocument(_Document):
    id: int
    name: str
    surname: str
    birth_date: str
    health_number: str
    medical_file: MedicalFileDocument
    urgency: Optional[str] = None


class StaffDocument(_Document):
    id: int
    name: str
    surname: str
    specialty: str
    status: str
    qualifications: List[str]


class AppointmentDocument(_Document):
    id: int
    date: str
    time: str
    patient_id: int
    staff_id: int


class EquipmentDocument(_Document):
    id: int
    name: str
    status: str
    last_maintenance: str
    next_maintenance: str


class ServiceDocument(_Document):
    id: int
    name: str
    chief_staff_id: int
    capacity: NonNegativeInt
    assigned_staff: List[int]
    equipment: List[EquipmentDocument]


class MedicationDocument(_Document):
    id: int
    name: str
    description: str
    stock: NonNegativeInt
    alert_threshold: NonNegativeInt
    expiry_date: str


class PharmacyDocument(_Document):
    medications: List[MedicationDocument]


class LineItemDocument(_Document):
    description: str
    amount: float
    procedure_code: str


class InvoiceDocument(_Document):
    id: int
    patient_id: int
    line_items: List[LineItemDocument]
    total: float
    issue_date: str
    status: str


class UserAccountDocument(_Document):
    id: int
    username: str
    password_hash: str
    role: str
    last_login: Optional[str] = None


class ApplicationDocument(_Document):
    patients: List[PatientDocument]
    staff: List[StaffDocument]
    appointments: List[AppointmentDocument]
    services: List[ServiceDocument]
    pharmacy: PharmacyDocument
    invoices: List[InvoiceDocument]
    users: List[UserAccountDocument]


def check_document(data: Any) -> None:
    """Check a decoded data file against the document schema.

    Raises:
        ValueError: Describing the first offending field, e.g.
            ``missing field 'invoices'`` or ``pharmacy.medications.0.stock:
            Input should be greater than or equal to 0``
    """
    try:
        ApplicationDocument.model_validate(data)
    except ValidationError as e:
        raise ValueError(describe_error(e.errors()[0])) from e


def describe_error(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error["loc"])
    if error["type"] == "missing":
        return f"missing field '{error['loc'][-1]}'"
    if not location:
        return f"document root: {error['msg']}"
    return f"{location}: {error['msg']}"
