"""Staff CLI commands."""

from typing import Tuple

import click

from hospital_records.cli.context import SEPARATOR, fail, get_records, heading, success
from hospital_records.models.staff import DEFAULT_STAFF_STATUS
from hospital_records.utils.exceptions import HospitalRecordsError


@click.group()
def staff() -> None:
    """Staff members."""
    pass


@staff.command("add")
@click.option("--name", prompt="Name", help="Family name")
@click.option("--surname", prompt="Surname", help="Given name")
@click.option("--specialty", prompt="Specialty")
@click.option("--status", default=DEFAULT_STAFF_STATUS, show_default=True)
@click.option("--qualification", multiple=True, help="Qualification (repeatable)")
@click.pass_context
def add_staff_command(
    ctx: click.Context,
    name: str,
    surname: str,
    specialty: str,
    status: str,
    qualification: Tuple[str, ...],
) -> None:
    """Add a staff member."""
    records = get_records(ctx)
    try:
        member = records.add_staff(name, surname, specialty, status, qualification)
    except HospitalRecordsError as e:
        fail(e)
    success(f"Staff member added with ID {member.id}")


@staff.command("list")
@click.pass_context
def list_staff_command(ctx: click.Context) -> None:
    """List staff members."""
    records = get_records(ctx)
    heading("STAFF")
    for member in records.list_staff():
        click.echo(SEPARATOR)
        click.echo(f"ID: {member.id}")
        click.echo(f"Dr. {member.display_name}")
        click.echo(f"Specialty: {member.specialty}")
        click.echo(f"Status: {member.status}")
        if member.qualifications:
            click.echo(f"Qualifications: {', '.join(member.qualifications)}")
