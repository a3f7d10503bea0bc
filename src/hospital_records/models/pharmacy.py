"""Pharmacy inventory data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Medication:
    """Medication held in the pharmacy.
    
    Attributes:
        id: Identifier, unique within the pharmacy
        name: Medication name
        description: Free-text description
        stock: Units in stock (non-negative)
        alert_threshold: Stock level at or below which the medication is low
        expiry_date: DD/MM/YYYY
    """
    
    id: int
    name: str
    description: str
    stock: int
    alert_threshold: int
    expiry_date: str
    
    @property
    def is_low_stock(self) -> bool:
        """True when stock is at or below the alert threshold."""
        return self.stock <= self.alert_threshold
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "stock": self.stock,
            "alert_threshold": self.alert_threshold,
            "expiry_date": self.expiry_date,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Medication":
        return cls(
            id=data["id"],
            name=data["name"],
            description=data["description"],
            stock=data["stock"],
            alert_threshold=data["alert_threshold"],
            expiry_date=data["expiry_date"],
        )


@dataclass
class Pharmacy:
    """The hospital pharmacy (one per application)."""
    
    medications: List[Medication] = field(default_factory=list)
    
    def low_stock(self) -> List[Medication]:
        return [m for m in self.medications if m.is_low_stock]
    
    def to_dict(self) -> Dict[str, Any]:
        return {"medications": [m.to_dict() for m in self.medications]}
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pharmacy":
        return cls(medications=[Medication.from_dict(m) for m in data["medications"]])
