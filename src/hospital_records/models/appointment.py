"""Appointment data model."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Appointment:
    """Appointment between one patient and one staff member.
    
    ``patient_id`` and ``staff_id`` are plain identifiers; they are resolved
    when displayed and may point at records that do not exist.
    
    Attributes:
        id: Identifier, unique within appointments
        date: DD/MM/YYYY
        time: HH:MM
        patient_id: Referenced patient id
        staff_id: Referenced staff id
    """
    
    id: int
    date: str
    time: str
    patient_id: int
    staff_id: int
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "time": self.time,
            "patient_id": self.patient_id,
            "staff_id": self.staff_id,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Appointment":
        return cls(
            id=data["id"],
            date=data["date"],
            time=data["time"],
            patient_id=data["patient_id"],
            staff_id=data["staff_id"],
        )
