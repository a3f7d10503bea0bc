"""Appointment CLI commands."""

import click

from hospital_records.cli.context import (
    SEPARATOR,
    fail,
    get_records,
    heading,
    or_unknown,
    success,
)
from hospital_records.utils.exceptions import HospitalRecordsError


@click.group()
def appointment() -> None:
    """Appointments between patients and staff."""
    pass


@appointment.command("add")
@click.option("--date", prompt="Date (DD/MM/YYYY)")
@click.option("--time", prompt="Time (HH:MM)")
@click.option("--patient-id", prompt="Patient ID", type=int)
@click.option("--staff-id", prompt="Physician ID", type=int)
@click.pass_context
def add_appointment_command(
    ctx: click.Context, date: str, time: str, patient_id: int, staff_id: int
) -> None:
    """Book an appointment.

    Patient and physician IDs are not checked; unknown IDs show as Unknown
    when appointments are listed.
    """
    records = get_records(ctx)
    try:
        booked = records.add_appointment(date, time, patient_id, staff_id)
    except HospitalRecordsError as e:
        fail(e)
    success(f"Appointment added with ID {booked.id}")


@appointment.command("list")
@click.pass_context
def list_appointments_command(ctx: click.Context) -> None:
    """List appointments with patient and physician names."""
    records = get_records(ctx)
    heading("APPOINTMENTS")
    for view in records.list_appointments():
        click.echo(SEPARATOR)
        click.echo(f"ID: {view.appointment.id}")
        click.echo(f"Date: {view.appointment.date} at {view.appointment.time}")
        click.echo(f"Patient: {or_unknown(view.patient_name)}")
        click.echo(f"Physician: Dr. {or_unknown(view.staff_name)}")
