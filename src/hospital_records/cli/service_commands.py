"""Hospital service CLI commands."""

import click

from hospital_records.cli.context import (
    SEPARATOR,
    fail,
    get_records,
    heading,
    or_unknown,
    success,
)
from hospital_records.models.service import EquipmentStatus
from hospital_records.utils.exceptions import HospitalRecordsError


@click.group()
def service() -> None:
    """Hospital services and their equipment."""
    pass


@service.command("add")
@click.option("--name", prompt="Service name")
@click.option("--chief-id", prompt="Head of service ID", type=int)
@click.option("--capacity", prompt="Capacity", type=click.IntRange(min=0))
@click.pass_context
def add_service_command(ctx: click.Context, name: str, chief_id: int, capacity: int) -> None:
    """Add a service."""
    records = get_records(ctx)
    try:
        created = records.add_service(name, chief_id, capacity)
    except HospitalRecordsError as e:
        fail(e)
    success(f"Service added with ID {created.id}")


@service.command("list")
@click.pass_context
def list_services_command(ctx: click.Context) -> None:
    """List services."""
    records = get_records(ctx)
    heading("SERVICES")
    for view in records.list_services():
        svc = view.service
        click.echo(SEPARATOR)
        click.echo(f"ID: {svc.id}")
        click.echo(f"Name: {svc.name}")
        click.echo(f"Head of service: Dr. {or_unknown(view.chief_name)}")
        click.echo(f"Capacity: {svc.capacity}")
        click.echo(f"Assigned staff: {len(svc.assigned_staff)}")
        click.echo(f"Equipment: {len(svc.equipment)}")
        for item in svc.equipment:
            click.echo(
                f"  {item.id}. {item.name} - {item.status.label} "
                f"(next maintenance {item.next_maintenance})"
            )


@service.command("assign")
@click.argument("service_id", type=int)
@click.argument("staff_id", type=int)
@click.pass_context
def assign_staff_command(ctx: click.Context, service_id: int, staff_id: int) -> None:
    """Assign a staff member to a service."""
    records = get_records(ctx)
    try:
        records.assign_staff_to_service(service_id, staff_id)
    except HospitalRecordsError as e:
        fail(e)
    success(f"Staff {staff_id} assigned to service {service_id}")


@service.command("equipment")
@click.argument("service_id", type=int)
@click.option("--name", prompt="Equipment name")
@click.option(
    "--status",
    prompt="Status (1 Functional, 2 Under maintenance, 3 Out of service)",
    type=click.IntRange(1, 3),
    help="1 Functional, 2 Under maintenance, 3 Out of service",
)
@click.option("--last-maintenance", prompt="Last maintenance (DD/MM/YYYY)")
@click.option("--next-maintenance", prompt="Next maintenance (DD/MM/YYYY)")
@click.pass_context
def add_equipment_command(
    ctx: click.Context,
    service_id: int,
    name: str,
    status: int,
    last_maintenance: str,
    next_maintenance: str,
) -> None:
    """Add equipment to a service."""
    records = get_records(ctx)
    try:
        item = records.add_equipment(
            service_id,
            name,
            EquipmentStatus.from_choice(status),
            last_maintenance,
            next_maintenance,
        )
    except HospitalRecordsError as e:
        fail(e)
    success(f"Equipment added with ID {item.id}")
