"""Display-ready views returned by the record operations.

Views carry resolved cross-references for the console layer. A reference
that points at a missing record resolves to None.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from hospital_records.models.appointment import Appointment
from hospital_records.models.billing import Invoice
from hospital_records.models.pharmacy import Medication
from hospital_records.models.service import Service


@dataclass
class AppointmentView:
    """Appointment with patient and staff names resolved."""
    
    appointment: Appointment
    patient_name: Optional[str]
    staff_name: Optional[str]


@dataclass
class ServiceView:
    """Service with the head of service resolved."""
    
    service: Service
    chief_name: Optional[str]


@dataclass
class InvoiceView:
    """Invoice with the billed patient resolved."""
    
    invoice: Invoice
    patient_name: Optional[str]


@dataclass
class StockLine:
    """Stock level of one medication."""
    
    medication: Medication
    low_stock: bool


@dataclass
class HospitalStatistics:
    """Aggregate figures computed on demand from the collections.
    
    Attributes:
        patient_count: Number of patients
        staff_count: Number of staff members
        service_count: Number of services
        appointments_today: Appointments whose date string equals today's
        paid_total: Sum of totals of PAID invoices
        low_stock_count: Medications with stock at or below threshold
    """
    
    patient_count: int
    staff_count: int
    service_count: int
    appointments_today: int
    paid_total: float
    low_stock_count: int
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "patient_count": self.patient_count,
            "staff_count": self.staff_count,
            "service_count": self.service_count,
            "appointments_today": self.appointments_today,
            "paid_total": round(self.paid_total, 2),
            "low_stock_count": self.low_stock_count,
        }
