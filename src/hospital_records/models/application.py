"""Application aggregate: every collection of the hospital dataset.

The aggregate is the root object of the persisted document. One instance is
built per process (loaded or empty) and passed explicitly to the record
operations.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from hospital_records.models.account import UserAccount
from hospital_records.models.appointment import Appointment
from hospital_records.models.billing import Invoice
from hospital_records.models.patient import Patient
from hospital_records.models.pharmacy import Pharmacy
from hospital_records.models.service import Service
from hospital_records.models.staff import Staff


@dataclass
class Application:
    """Whole hospital dataset.
    
    Attributes:
        patients: Patients in insertion order
        staff: Staff members in insertion order
        appointments: Appointments in insertion order
        services: Services in insertion order
        pharmacy: The pharmacy singleton
        invoices: Invoices in insertion order
        users: User accounts in insertion order
    """
    
    patients: List[Patient] = field(default_factory=list)
    staff: List[Staff] = field(default_factory=list)
    appointments: List[Appointment] = field(default_factory=list)
    services: List[Service] = field(default_factory=list)
    pharmacy: Pharmacy = field(default_factory=Pharmacy)
    invoices: List[Invoice] = field(default_factory=list)
    users: List[UserAccount] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted document layout."""
        return {
            "patients": [p.to_dict() for p in self.patients],
            "staff": [s.to_dict() for s in self.staff],
            "appointments": [a.to_dict() for a in self.appointments],
            "services": [s.to_dict() for s in self.services],
            "pharmacy": self.pharmacy.to_dict(),
            "invoices": [i.to_dict() for i in self.invoices],
            "users": [u.to_dict() for u in self.users],
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Application":
        """Build the aggregate from the persisted document layout.
        
        Raises:
            KeyError: If a collection or record field is missing
            ValueError: If an enum tag is unknown
            TypeError: If a value has the wrong shape
        """
        return cls(
            patients=[Patient.from_dict(p) for p in data["patients"]],
            staff=[Staff.from_dict(s) for s in data["staff"]],
            appointments=[Appointment.from_dict(a) for a in data["appointments"]],
            services=[Service.from_dict(s) for s in data["services"]],
            pharmacy=Pharmacy.from_dict(data["pharmacy"]),
            invoices=[Invoice.from_dict(i) for i in data["invoices"]],
            users=[UserAccount.from_dict(u) for u in data["users"]],
        )
