"""Pharmacy CLI commands."""

import click

from hospital_records.cli.context import SEPARATOR, fail, get_records, heading, success
from hospital_records.utils.exceptions import HospitalRecordsError


@click.group()
def pharmacy() -> None:
    """Pharmacy inventory."""
    pass


@pharmacy.command("add")
@click.option("--name", prompt="Medication name")
@click.option("--description", prompt="Description")
@click.option("--stock", prompt="Quantity in stock", type=click.IntRange(min=0))
@click.option("--alert-threshold", prompt="Alert threshold", type=click.IntRange(min=0))
@click.option("--expiry-date", prompt="Expiry date (DD/MM/YYYY)")
@click.pass_context
def add_medication_command(
    ctx: click.Context,
    name: str,
    description: str,
    stock: int,
    alert_threshold: int,
    expiry_date: str,
) -> None:
    """Add a medication to the pharmacy."""
    records = get_records(ctx)
    try:
        medication = records.add_medication(
            name, description, stock, alert_threshold, expiry_date
        )
    except HospitalRecordsError as e:
        fail(e)
    success(f"Medication added with ID {medication.id}")


@pharmacy.command("stock")
@click.pass_context
def check_stock_command(ctx: click.Context) -> None:
    """Show stock levels and flag low stock."""
    records = get_records(ctx)
    heading("STOCK LEVELS")
    for line in records.check_stock():
        click.echo(SEPARATOR)
        click.echo(f"Medication: {line.medication.name}")
        click.echo(f"Stock: {line.medication.stock}")
        if line.low_stock:
            click.echo(click.style("⚠ Low stock!", fg="red"))
        click.echo(f"Expiry: {line.medication.expiry_date}")
