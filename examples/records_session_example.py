"""Programmatic use of the hospital records library.

This module walks through a short desk session without the CLI: open a data
file, register a patient and a physician, book an appointment, bill the
visit and print the day's statistics.
"""

import logging
from pathlib import Path

from hospital_records.logging_audit import configure_logging
from hospital_records.models import InvoiceStatus, LineItem
from hospital_records.records import HospitalRecords
from hospital_records.store import JsonStore
from hospital_records.utils.exceptions import CorruptStoreError, RecordNotFoundError

logger = logging.getLogger(__name__)


def open_records(path: Path) -> HospitalRecords:
    """Open the data file, refusing to continue if it is unreadable."""
    store = JsonStore(path)
    try:
        application = store.load(on_corrupt="fail")
    except CorruptStoreError as e:
        print(f"Cannot open {path}: {e.reason}")
        raise
    return HospitalRecords(application, store)


def main() -> None:
    configure_logging(level="INFO", log_file=Path("logs/example.log"), redact_pii=True)
    records = open_records(Path("example-data.json"))

    print("=" * 60)
    print("Registering patient and physician")
    print("=" * 60)
    patient = records.add_patient("Dupont", "Jean", "01/02/1980", "180027512345678")
    doctor = records.add_staff("Martin", "Claude", "Cardiology", qualifications=["MD"])
    records.add_appointment(records.today(), "09:00", patient.id, doctor.id)

    for view in records.list_appointments():
        print(f"{view.appointment.date} {view.appointment.time}: "
              f"{view.patient_name} with Dr. {view.staff_name}")

    invoice = records.create_invoice(
        patient.id,
        [
            LineItem("Consultation", 25.0, "CS"),
            LineItem("Electrocardiogram", 14.26, "DEQP003"),
        ],
    )
    records.update_invoice_status(invoice.id, InvoiceStatus.PAID)
    print(f"Invoice {invoice.id}: {invoice.total:.2f} ({invoice.status.label})")

    try:
        records.update_invoice_status(999, InvoiceStatus.CANCELLED)
    except RecordNotFoundError as e:
        print(f"Expected failure: {e}")

    figures = records.statistics()
    print()
    print("Today's figures:")
    for key, value in figures.to_dict().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
