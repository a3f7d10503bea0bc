"""Models module.

This module provides the record dataclasses and enumerations of the hospital
dataset and their persisted document encoding.
"""

from hospital_records.models.account import Role, UserAccount
from hospital_records.models.application import Application
from hospital_records.models.appointment import Appointment
from hospital_records.models.billing import Invoice, InvoiceStatus, LineItem
from hospital_records.models.patient import (
    MedicalFile,
    MedicalNote,
    Patient,
    Treatment,
    UrgencyLevel,
)
from hospital_records.models.pharmacy import Medication, Pharmacy
from hospital_records.models.service import Equipment, EquipmentStatus, Service
from hospital_records.models.staff import Staff

__all__ = [
    "Application",
    "Appointment",
    "Equipment",
    "EquipmentStatus",
    "Invoice",
    "InvoiceStatus",
    "LineItem",
    "MedicalFile",
    "MedicalNote",
    "Medication",
    "Patient",
    "Pharmacy",
    "Role",
    "Service",
    "Staff",
    "Treatment",
    "UrgencyLevel",
    "UserAccount",
]
