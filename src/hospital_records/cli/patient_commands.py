"""Patient CLI commands: registration, listing and medical file updates."""

import logging
from typing import Optional, Tuple

import click

from hospital_records.cli.context import (
    SEPARATOR,
    fail,
    get_records,
    heading,
    or_unknown,
    success,
)
from hospital_records.models.patient import UrgencyLevel
from hospital_records.utils.exceptions import HospitalRecordsError

logger = logging.getLogger(__name__)


@click.group()
def patient() -> None:
    """Patient records and medical files."""
    pass


@patient.command("add")
@click.option("--name", prompt="Name", help="Family name")
@click.option("--surname", prompt="Surname", help="Given name")
@click.option("--birth-date", prompt="Birth date (DD/MM/YYYY)", help="DD/MM/YYYY")
@click.option("--health-number", prompt="Health number", help="National health number")
@click.pass_context
def add_patient_command(
    ctx: click.Context, name: str, surname: str, birth_date: str, health_number: str
) -> None:
    """Register a new patient.

    Examples:

        hospital-records patient add --name Dupont --surname Jean \\
            --birth-date 01/02/1980 --health-number 180027512345678
    """
    records = get_records(ctx)
    try:
        new_patient = records.add_patient(name, surname, birth_date, health_number)
    except HospitalRecordsError as e:
        fail(e)
    success(f"Patient added with ID {new_patient.id}")


@patient.command("list")
@click.pass_context
def list_patients_command(ctx: click.Context) -> None:
    """List patients in registration order."""
    records = get_records(ctx)
    heading("PATIENTS")
    for p in records.list_patients():
        click.echo(SEPARATOR)
        click.echo(f"ID: {p.id}")
        click.echo(f"Name: {p.display_name}")
        click.echo(f"Birth date: {p.birth_date}")
        click.echo(f"Health number: {p.health_number}")
        if p.urgency is not None:
            click.echo(f"Urgency: {p.urgency.label}")


@patient.command("show")
@click.argument("patient_id", type=int)
@click.pass_context
def show_patient_command(ctx: click.Context, patient_id: int) -> None:
    """Show a patient's medical file."""
    records = get_records(ctx)
    try:
        p = records.get_patient(patient_id)
    except HospitalRecordsError as e:
        fail(e)
    medical_file = p.medical_file
    heading(f"MEDICAL FILE - {p.display_name}")
    click.echo(f"Blood type: {medical_file.blood_type or 'Unknown'}")
    click.echo(f"History: {', '.join(medical_file.history) or 'None'}")
    click.echo(f"Allergies: {', '.join(medical_file.allergies) or 'None'}")
    click.echo("Treatments:")
    for t in medical_file.treatments:
        until = f" until {t.end_date}" if t.end_date else ""
        click.echo(
            f"  {t.medication} {t.dosage} from {t.start_date}{until} "
            f"(prescribed by {or_unknown(records.staff_name(t.prescribed_by))})"
        )
    click.echo("Notes:")
    for note in medical_file.notes:
        click.echo(f"  [{note.date}] {or_unknown(records.staff_name(note.author))}: {note.content}")


@patient.command("note")
@click.argument("patient_id", type=int)
@click.option("--content", prompt="Note content", help="Text of the note")
@click.option("--author", prompt="Physician ID", type=int, help="Staff ID of the author")
@click.pass_context
def add_note_command(ctx: click.Context, patient_id: int, content: str, author: int) -> None:
    """Add a medical note, dated today, to a patient's file."""
    records = get_records(ctx)
    try:
        records.add_medical_note(patient_id, content, author)
    except HospitalRecordsError as e:
        fail(e)
    success("Medical note added")


@patient.command("treatment")
@click.argument("patient_id", type=int)
@click.option("--medication", prompt="Medication")
@click.option("--dosage", prompt="Dosage")
@click.option("--start-date", prompt="Start date (DD/MM/YYYY)")
@click.option("--end-date", default=None, help="End date (DD/MM/YYYY), omit if ongoing")
@click.option("--prescribed-by", prompt="Prescriber ID", type=int, help="Staff ID")
@click.pass_context
def add_treatment_command(
    ctx: click.Context,
    patient_id: int,
    medication: str,
    dosage: str,
    start_date: str,
    end_date: Optional[str],
    prescribed_by: int,
) -> None:
    """Add a treatment to a patient's file."""
    records = get_records(ctx)
    try:
        records.add_treatment(
            patient_id, medication, dosage, start_date, prescribed_by, end_date=end_date
        )
    except HospitalRecordsError as e:
        fail(e)
    success("Treatment added")


@patient.command("urgency")
@click.argument("patient_id", type=int)
@click.option(
    "--level",
    prompt="Urgency (1 Low, 2 Medium, 3 High, 4 Critical)",
    type=click.IntRange(1, 4),
    help="1 Low, 2 Medium, 3 High, 4 Critical",
)
@click.pass_context
def set_urgency_command(ctx: click.Context, patient_id: int, level: int) -> None:
    """Set a patient's urgency level."""
    records = get_records(ctx)
    urgency = UrgencyLevel.from_choice(level)
    try:
        records.set_patient_urgency(patient_id, urgency)
    except HospitalRecordsError as e:
        fail(e)
    success(f"Urgency set to {urgency.label}")


@patient.command("file")
@click.argument("patient_id", type=int)
@click.option("--blood-type", default=None, help="Blood type, e.g. A+")
@click.option("--history", multiple=True, help="History entry (repeatable)")
@click.option("--allergy", multiple=True, help="Allergy (repeatable)")
@click.pass_context
def update_file_command(
    ctx: click.Context,
    patient_id: int,
    blood_type: Optional[str],
    history: Tuple[str, ...],
    allergy: Tuple[str, ...],
) -> None:
    """Update blood type, history and allergies of a patient's file."""
    records = get_records(ctx)
    try:
        records.update_medical_file(
            patient_id, blood_type=blood_type, history=history, allergies=allergy
        )
    except HospitalRecordsError as e:
        fail(e)
    success("Medical file updated")
