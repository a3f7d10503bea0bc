"""Record lifecycle operations on the hospital dataset.

Every mutating operation follows the same order:
1. Look up referenced records that are being updated (RecordNotFoundError
   before anything changes)
2. Allocate the identifier as ``len(collection) + 1``
3. Append or mutate in memory
4. Save the whole dataset

A failed save raises PersistenceWriteError after step 3; the in-memory change
is kept and the caller must tell the operator it may not be on disk.

Cross-references (appointment patient/staff, invoice patient, service chief,
treatment prescriber, note author) are never validated on write.
"""

import logging
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Sequence

from hospital_records.logging_audit import log_audit_event
from hospital_records.models.account import Role, UserAccount
from hospital_records.models.application import Application
from hospital_records.models.appointment import Appointment
from hospital_records.models.billing import Invoice, InvoiceStatus, LineItem, sum_line_items
from hospital_records.models.patient import MedicalNote, Patient, Treatment, UrgencyLevel
from hospital_records.models.pharmacy import Medication
from hospital_records.models.service import Equipment, EquipmentStatus, Service
from hospital_records.models.staff import DEFAULT_STAFF_STATUS, Staff
from hospital_records.records.views import (
    AppointmentView,
    HospitalStatistics,
    InvoiceView,
    ServiceView,
    StockLine,
)
from hospital_records.security import hash_password
from hospital_records.store.identifiers import next_id
from hospital_records.store.json_store import JsonStore
from hospital_records.store.resolver import find_by_id, resolve_display_name
from hospital_records.utils.exceptions import RecordNotFoundError, ValidationError

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d/%m/%Y"


class HospitalRecords:
    """Operations on one Application, persisted through one JsonStore.

    Attributes:
        application: The dataset being edited
        store: Gateway that persists the dataset after every change

    Example:
        >>> store = JsonStore(Path("data.json"))
        >>> records = HospitalRecords(store.load(), store)
        >>> patient = records.add_patient("Dupont", "Jean", "01/02/1980", "180027512345678")
        >>> patient.id
        1
    """

    def __init__(
        self,
        application: Application,
        store: JsonStore,
        password_hasher: Callable[[str], str] = hash_password,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.application = application
        self.store = store
        self._password_hasher = password_hasher
        self._clock = clock or datetime.now

    def today(self) -> str:
        """Today's date as DD/MM/YYYY."""
        return self._clock().strftime(DATE_FORMAT)

    def save(self) -> None:
        """Write the whole dataset.

        Raises:
            PersistenceWriteError: If the document cannot be written
        """
        self.store.save(self.application)

    def _commit(self, event_type: str, entity: str, record_id: int) -> None:
        self.save()
        log_audit_event(event_type, {
            "status": "success",
            "entity": entity,
            "record_id": record_id,
            "data_file": self.store.path,
        })

    # Patients

    def add_patient(
        self, name: str, surname: str, birth_date: str, health_number: str
    ) -> Patient:
        """Register a patient with an empty medical file."""
        patient = Patient(
            id=next_id(self.application.patients),
            name=name,
            surname=surname,
            birth_date=birth_date,
            health_number=health_number,
        )
        self.application.patients.append(patient)
        self._commit("PATIENT_ADDED", "patient", patient.id)
        return patient

    def list_patients(self) -> List[Patient]:
        return list(self.application.patients)

    def find_patient(self, patient_id: int) -> Optional[Patient]:
        return find_by_id(self.application.patients, patient_id)

    def get_patient(self, patient_id: int) -> Patient:
        """Return the patient or raise RecordNotFoundError."""
        patient = self.find_patient(patient_id)
        if patient is None:
            raise RecordNotFoundError("patient", patient_id)
        return patient

    def set_patient_urgency(self, patient_id: int, urgency: Optional[UrgencyLevel]) -> Patient:
        patient = self.get_patient(patient_id)
        patient.urgency = urgency
        self._commit("PATIENT_URGENCY_UPDATED", "patient", patient.id)
        return patient

    def update_medical_file(
        self,
        patient_id: int,
        blood_type: Optional[str] = None,
        history: Iterable[str] = (),
        allergies: Iterable[str] = (),
    ) -> Patient:
        """Append history and allergy entries; replace blood type when given."""
        patient = self.get_patient(patient_id)
        medical_file = patient.medical_file
        if blood_type is not None:
            medical_file.blood_type = blood_type
        medical_file.history.extend(history)
        medical_file.allergies.extend(allergies)
        self._commit("MEDICAL_FILE_UPDATED", "patient", patient.id)
        return patient

    def add_medical_note(
        self, patient_id: int, content: str, author: int, date: Optional[str] = None
    ) -> MedicalNote:
        """Append a note to the patient's medical file, dated today by default."""
        patient = self.get_patient(patient_id)
        if date is None:
            date = self.today()
        note = MedicalNote(date=date, content=content, author=author)
        patient.medical_file.notes.append(note)
        self._commit("MEDICAL_NOTE_ADDED", "patient", patient.id)
        return note

    def add_treatment(
        self,
        patient_id: int,
        medication: str,
        dosage: str,
        start_date: str,
        prescribed_by: int,
        end_date: Optional[str] = None,
    ) -> Treatment:
        patient = self.get_patient(patient_id)
        treatment = Treatment(
            medication=medication,
            dosage=dosage,
            start_date=start_date,
            end_date=end_date,
            prescribed_by=prescribed_by,
        )
        patient.medical_file.treatments.append(treatment)
        self._commit("TREATMENT_ADDED", "patient", patient.id)
        return treatment

    # Staff

    def add_staff(
        self,
        name: str,
        surname: str,
        specialty: str,
        status: str = DEFAULT_STAFF_STATUS,
        qualifications: Iterable[str] = (),
    ) -> Staff:
        staff = Staff(
            id=next_id(self.application.staff),
            name=name,
            surname=surname,
            specialty=specialty,
            status=status,
            qualifications=list(qualifications),
        )
        self.application.staff.append(staff)
        self._commit("STAFF_ADDED", "staff", staff.id)
        return staff

    def list_staff(self) -> List[Staff]:
        return list(self.application.staff)

    def staff_name(self, staff_id: int) -> Optional[str]:
        """Display name of a staff member, None when the id dangles."""
        return resolve_display_name(self.application.staff, staff_id)

    # Appointments

    def add_appointment(self, date: str, time: str, patient_id: int, staff_id: int) -> Appointment:
        """Book an appointment. Patient and staff ids are stored unchecked."""
        appointment = Appointment(
            id=next_id(self.application.appointments),
            date=date,
            time=time,
            patient_id=patient_id,
            staff_id=staff_id,
        )
        self.application.appointments.append(appointment)
        self._commit("APPOINTMENT_ADDED", "appointment", appointment.id)
        return appointment

    def list_appointments(self) -> List[AppointmentView]:
        return [
            AppointmentView(
                appointment=appointment,
                patient_name=resolve_display_name(self.application.patients, appointment.patient_id),
                staff_name=resolve_display_name(self.application.staff, appointment.staff_id),
            )
            for appointment in self.application.appointments
        ]

    # Services

    def add_service(self, name: str, chief_staff_id: int, capacity: int) -> Service:
        if capacity < 0:
            raise ValidationError(f"Capacity must be non-negative, got {capacity}")
        service = Service(
            id=next_id(self.application.services),
            name=name,
            chief_staff_id=chief_staff_id,
            capacity=capacity,
        )
        self.application.services.append(service)
        self._commit("SERVICE_ADDED", "service", service.id)
        return service

    def list_services(self) -> List[ServiceView]:
        return [
            ServiceView(
                service=service,
                chief_name=resolve_display_name(self.application.staff, service.chief_staff_id),
            )
            for service in self.application.services
        ]

    def get_service(self, service_id: int) -> Service:
        service = find_by_id(self.application.services, service_id)
        if service is None:
            raise RecordNotFoundError("service", service_id)
        return service

    def assign_staff_to_service(self, service_id: int, staff_id: int) -> Service:
        """Add a staff id to the service; assigning twice is a no-op."""
        service = self.get_service(service_id)
        if staff_id in service.assigned_staff:
            logger.info(f"Staff {staff_id} already assigned to service {service_id}")
            return service
        service.assigned_staff.append(staff_id)
        self._commit("SERVICE_STAFF_ASSIGNED", "service", service.id)
        return service

    def add_equipment(
        self,
        service_id: int,
        name: str,
        status: EquipmentStatus,
        last_maintenance: str,
        next_maintenance: str,
    ) -> Equipment:
        service = self.get_service(service_id)
        equipment = Equipment(
            id=next_id(service.equipment),
            name=name,
            status=status,
            last_maintenance=last_maintenance,
            next_maintenance=next_maintenance,
        )
        service.equipment.append(equipment)
        self._commit("EQUIPMENT_ADDED", "service", service.id)
        return equipment

    # Pharmacy

    def add_medication(
        self,
        name: str,
        description: str,
        stock: int,
        alert_threshold: int,
        expiry_date: str,
    ) -> Medication:
        """Add a medication to the pharmacy.

        Raises:
            ValidationError: If stock or alert_threshold is negative
        """
        if stock < 0 or alert_threshold < 0:
            raise ValidationError(
                f"Stock and alert threshold must be non-negative, "
                f"got stock={stock}, alert_threshold={alert_threshold}"
            )
        medications = self.application.pharmacy.medications
        medication = Medication(
            id=next_id(medications),
            name=name,
            description=description,
            stock=stock,
            alert_threshold=alert_threshold,
            expiry_date=expiry_date,
        )
        medications.append(medication)
        self._commit("MEDICATION_ADDED", "medication", medication.id)
        return medication

    def check_stock(self) -> List[StockLine]:
        return [
            StockLine(medication=m, low_stock=m.is_low_stock)
            for m in self.application.pharmacy.medications
        ]

    # Invoices

    def create_invoice(
        self,
        patient_id: int,
        line_items: Sequence[LineItem],
        issue_date: Optional[str] = None,
    ) -> Invoice:
        """Issue a PENDING invoice whose total is the in-order sum of its items."""
        items = list(line_items)
        invoice = Invoice(
            id=next_id(self.application.invoices),
            patient_id=patient_id,
            line_items=items,
            total=sum_line_items(items),
            issue_date=self.today() if issue_date is None else issue_date,
            status=InvoiceStatus.PENDING,
        )
        self.application.invoices.append(invoice)
        self._commit("INVOICE_CREATED", "invoice", invoice.id)
        return invoice

    def list_invoices(self) -> List[InvoiceView]:
        return [
            InvoiceView(
                invoice=invoice,
                patient_name=resolve_display_name(self.application.patients, invoice.patient_id),
            )
            for invoice in self.application.invoices
        ]

    def update_invoice_status(self, invoice_id: int, status: InvoiceStatus) -> Invoice:
        """Change the status only; the total is left as computed at creation."""
        invoice = find_by_id(self.application.invoices, invoice_id)
        if invoice is None:
            raise RecordNotFoundError("invoice", invoice_id)
        invoice.status = status
        self._commit("INVOICE_STATUS_UPDATED", "invoice", invoice.id)
        return invoice

    # User accounts

    def create_user(self, username: str, password: str, role: Role) -> UserAccount:
        """Create an account storing only the hashed password."""
        user = UserAccount(
            id=next_id(self.application.users),
            username=username,
            password_hash=self._password_hasher(password),
            role=role,
        )
        self.application.users.append(user)
        self._commit("USER_CREATED", "user", user.id)
        return user

    def list_users(self) -> List[UserAccount]:
        return list(self.application.users)

    # Statistics

    def statistics(self, today: Optional[str] = None) -> HospitalStatistics:
        """Compute aggregate figures by scanning the collections.

        Args:
            today: Date string counted as today (defaults to the clock's date)
        """
        if today is None:
            today = self.today()
        paid_total = 0.0
        for invoice in self.application.invoices:
            if invoice.status is InvoiceStatus.PAID:
                paid_total += invoice.total
        return HospitalStatistics(
            patient_count=len(self.application.patients),
            staff_count=len(self.application.staff),
            service_count=len(self.application.services),
            appointments_today=sum(
                1 for a in self.application.appointments if a.date == today
            ),
            paid_total=paid_total,
            low_stock_count=len(self.application.pharmacy.low_stock()),
        )
