"""Record operations module.

HospitalRecords is the explicitly passed context through which the console
layer creates, lists and updates records.
"""

from hospital_records.records.operations import DATE_FORMAT, HospitalRecords
from hospital_records.records.views import (
    AppointmentView,
    HospitalStatistics,
    InvoiceView,
    ServiceView,
    StockLine,
)

__all__ = [
    "DATE_FORMAT",
    "AppointmentView",
    "HospitalRecords",
    "HospitalStatistics",
    "InvoiceView",
    "ServiceView",
    "StockLine",
]
