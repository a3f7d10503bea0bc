"""Patient data model.

This module defines the Patient record and its embedded medical file
(history, allergies, blood type, treatments and notes).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class UrgencyLevel(Enum):
    """Triage urgency of a patient.
    
    Values are the stable tags written to the data file; ``label`` is the
    display text.
    """
    
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"
    
    @property
    def label(self) -> str:
        return _URGENCY_LABELS[self]
    
    @classmethod
    def from_choice(cls, choice: int) -> "UrgencyLevel":
        """Map a 1-based menu choice to an urgency level.
        
        Raises:
            ValueError: If choice is not between 1 and 4
        """
        options = list(cls)
        if not 1 <= choice <= len(options):
            raise ValueError(f"Invalid urgency choice: {choice}. Must be 1-{len(options)}")
        return options[choice - 1]


_URGENCY_LABELS = {
    UrgencyLevel.LOW: "Low",
    UrgencyLevel.MEDIUM: "Medium",
    UrgencyLevel.HIGH: "High",
    UrgencyLevel.CRITICAL: "Critical",
}


@dataclass
class Treatment:
    """A prescribed treatment.
    
    Attributes:
        medication: Medication name
        dosage: Free-text dosage ("500mg twice a day")
        start_date: DD/MM/YYYY
        end_date: DD/MM/YYYY, None while ongoing
        prescribed_by: Staff id of the prescriber (not checked)
    """
    
    medication: str
    dosage: str
    start_date: str
    prescribed_by: int
    end_date: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "medication": self.medication,
            "dosage": self.dosage,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "prescribed_by": self.prescribed_by,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Treatment":
        return cls(
            medication=data["medication"],
            dosage=data["dosage"],
            start_date=data["start_date"],
            end_date=data.get("end_date"),
            prescribed_by=data["prescribed_by"],
        )


@dataclass
class MedicalNote:
    """A dated note written by a staff member (``author`` is a staff id)."""
    
    date: str
    content: str
    author: int
    
    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "content": self.content, "author": self.author}
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MedicalNote":
        return cls(date=data["date"], content=data["content"], author=data["author"])


@dataclass
class MedicalFile:
    """Medical file embedded in exactly one patient.
    
    Attributes:
        history: Past conditions and surgeries
        allergies: Known allergies
        blood_type: Blood type ("A+", "O-", ...), empty when unknown
        treatments: Treatments in prescription order
        notes: Medical notes in writing order
    """
    
    history: List[str] = field(default_factory=list)
    allergies: List[str] = field(default_factory=list)
    blood_type: str = ""
    treatments: List[Treatment] = field(default_factory=list)
    notes: List[MedicalNote] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "history": list(self.history),
            "allergies": list(self.allergies),
            "blood_type": self.blood_type,
            "treatments": [t.to_dict() for t in self.treatments],
            "notes": [n.to_dict() for n in self.notes],
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MedicalFile":
        return cls(
            history=list(data["history"]),
            allergies=list(data["allergies"]),
            blood_type=data["blood_type"],
            treatments=[Treatment.from_dict(t) for t in data["treatments"]],
            notes=[MedicalNote.from_dict(n) for n in data["notes"]],
        )


@dataclass
class Patient:
    """Patient record.
    
    Attributes:
        id: Identifier, unique within patients
        name: Family name
        surname: Given name
        birth_date: DD/MM/YYYY, stored as entered
        health_number: National health insurance number
        medical_file: Embedded medical file
        urgency: Triage urgency, None until assessed
    """
    
    id: int
    name: str
    surname: str
    birth_date: str
    health_number: str
    medical_file: MedicalFile = field(default_factory=MedicalFile)
    urgency: Optional[UrgencyLevel] = None
    
    @property
    def display_name(self) -> str:
        return f"{self.name} {self.surname}"
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "surname": self.surname,
            "birth_date": self.birth_date,
            "health_number": self.health_number,
            "medical_file": self.medical_file.to_dict(),
            "urgency": self.urgency.value if self.urgency else None,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Patient":
        urgency = data.get("urgency")
        return cls(
            id=data["id"],
            name=data["name"],
            surname=data["surname"],
            birth_date=data["birth_date"],
            health_number=data["health_number"],
            medical_file=MedicalFile.from_dict(data["medical_file"]),
            urgency=UrgencyLevel(urgency) if urgency is not None else None,
        )
