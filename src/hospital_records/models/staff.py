"""Staff data model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

DEFAULT_STAFF_STATUS = "On duty"


@dataclass
class Staff:
    """Hospital staff member.
    
    Referenced by appointments, services (chief and assigned staff),
    treatments and medical notes through ``id``.
    
    Attributes:
        id: Identifier, unique within staff
        name: Family name
        surname: Given name
        specialty: Medical specialty or job title
        status: Free-text duty status
        qualifications: Diplomas and certifications
    """
    
    id: int
    name: str
    surname: str
    specialty: str
    status: str = DEFAULT_STAFF_STATUS
    qualifications: List[str] = field(default_factory=list)
    
    @property
    def display_name(self) -> str:
        return f"{self.name} {self.surname}"
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "surname": self.surname,
            "specialty": self.specialty,
            "status": self.status,
            "qualifications": list(self.qualifications),
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Staff":
        return cls(
            id=data["id"],
            name=data["name"],
            surname=data["surname"],
            specialty=data["specialty"],
            status=data["status"],
            qualifications=list(data["qualifications"]),
        )
