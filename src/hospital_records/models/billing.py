"""Invoice data models.

An invoice total is computed once, from its line items, when the invoice is
created. Only the status changes afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List


class InvoiceStatus(Enum):
    """Payment status of an invoice."""
    
    PENDING = "PENDING"
    PAID = "PAID"
    CANCELLED = "CANCELLED"
    
    @property
    def label(self) -> str:
        return _INVOICE_LABELS[self]
    
    @classmethod
    def from_choice(cls, choice: int) -> "InvoiceStatus":
        """Map a 1-based menu choice (1 pending, 2 paid, 3 cancelled).
        
        Raises:
            ValueError: If choice is not between 1 and 3
        """
        options = list(cls)
        if not 1 <= choice <= len(options):
            raise ValueError(f"Invalid invoice status choice: {choice}. Must be 1-{len(options)}")
        return options[choice - 1]


_INVOICE_LABELS = {
    InvoiceStatus.PENDING: "Pending",
    InvoiceStatus.PAID: "Paid",
    InvoiceStatus.CANCELLED: "Cancelled",
}


@dataclass
class LineItem:
    """One billed procedure.
    
    Attributes:
        description: What was done
        amount: Amount in currency units
        procedure_code: Billing code of the procedure
    """
    
    description: str
    amount: float
    procedure_code: str
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "amount": self.amount,
            "procedure_code": self.procedure_code,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineItem":
        return cls(
            description=data["description"],
            amount=float(data["amount"]),
            procedure_code=data["procedure_code"],
        )


def sum_line_items(line_items: Iterable[LineItem]) -> float:
    """Sum amounts left to right, in line item order."""
    total = 0.0
    for item in line_items:
        total += item.amount
    return total


@dataclass
class Invoice:
    """Invoice issued to one patient.
    
    Attributes:
        id: Identifier, unique within invoices
        patient_id: Referenced patient id (not checked)
        line_items: Billed procedures
        total: Sum of line item amounts at creation time
        issue_date: DD/MM/YYYY
        status: Payment status
    """
    
    id: int
    patient_id: int
    line_items: List[LineItem]
    total: float
    issue_date: str
    status: InvoiceStatus = InvoiceStatus.PENDING
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "patient_id": self.patient_id,
            "line_items": [item.to_dict() for item in self.line_items],
            "total": self.total,
            "issue_date": self.issue_date,
            "status": self.status.value,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Invoice":
        return cls(
            id=data["id"],
            patient_id=data["patient_id"],
            line_items=[LineItem.from_dict(item) for item in data["line_items"]],
            total=float(data["total"]),
            issue_date=data["issue_date"],
            status=InvoiceStatus(data["status"]),
        )
