"""Hospital service (department) and equipment data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class EquipmentStatus(Enum):
    """Operational status of a piece of equipment."""
    
    FUNCTIONAL = "FUNCTIONAL"
    UNDER_MAINTENANCE = "UNDER_MAINTENANCE"
    OUT_OF_SERVICE = "OUT_OF_SERVICE"
    
    @property
    def label(self) -> str:
        return _EQUIPMENT_LABELS[self]
    
    @classmethod
    def from_choice(cls, choice: int) -> "EquipmentStatus":
        """Map a 1-based menu choice to an equipment status.
        
        Raises:
            ValueError: If choice is not between 1 and 3
        """
        options = list(cls)
        if not 1 <= choice <= len(options):
            raise ValueError(f"Invalid equipment status choice: {choice}. Must be 1-{len(options)}")
        return options[choice - 1]


_EQUIPMENT_LABELS = {
    EquipmentStatus.FUNCTIONAL: "Functional",
    EquipmentStatus.UNDER_MAINTENANCE: "Under maintenance",
    EquipmentStatus.OUT_OF_SERVICE: "Out of service",
}


@dataclass
class Equipment:
    """Equipment owned by exactly one service.
    
    Attributes:
        id: Identifier, unique within its service
        name: Equipment name
        status: Operational status
        last_maintenance: DD/MM/YYYY
        next_maintenance: DD/MM/YYYY
    """
    
    id: int
    name: str
    status: EquipmentStatus
    last_maintenance: str
    next_maintenance: str
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "last_maintenance": self.last_maintenance,
            "next_maintenance": self.next_maintenance,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Equipment":
        return cls(
            id=data["id"],
            name=data["name"],
            status=EquipmentStatus(data["status"]),
            last_maintenance=data["last_maintenance"],
            next_maintenance=data["next_maintenance"],
        )


@dataclass
class Service:
    """Hospital service.
    
    Attributes:
        id: Identifier, unique within services
        name: Service name ("Cardiology")
        chief_staff_id: Staff id of the head of service (not checked)
        capacity: Number of beds
        assigned_staff: Staff ids working in the service
        equipment: Equipment owned by the service
    """
    
    id: int
    name: str
    chief_staff_id: int
    capacity: int
    assigned_staff: List[int] = field(default_factory=list)
    equipment: List[Equipment] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "chief_staff_id": self.chief_staff_id,
            "capacity": self.capacity,
            "assigned_staff": list(self.assigned_staff),
            "equipment": [e.to_dict() for e in self.equipment],
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Service":
        return cls(
            id=data["id"],
            name=data["name"],
            chief_staff_id=data["chief_staff_id"],
            capacity=data["capacity"],
            assigned_staff=list(data["assigned_staff"]),
            equipment=[Equipment.from_dict(e) for e in data["equipment"]],
        )
