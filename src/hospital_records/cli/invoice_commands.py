"""Invoice CLI commands."""

from typing import List, Tuple

import click

from hospital_records.cli.context import (
    SEPARATOR,
    fail,
    get_records,
    heading,
    or_unknown,
    success,
)
from hospital_records.models.billing import InvoiceStatus, LineItem
from hospital_records.utils.exceptions import HospitalRecordsError


@click.group()
def invoice() -> None:
    """Patient invoices."""
    pass


@invoice.command("create")
@click.option("--patient-id", prompt="Patient ID", type=int)
@click.option(
    "--item",
    "items",
    type=(str, float, str),
    multiple=True,
    metavar="DESCRIPTION AMOUNT CODE",
    help="Line item (repeatable). Prompted interactively when omitted.",
)
@click.pass_context
def create_invoice_command(
    ctx: click.Context, patient_id: int, items: Tuple[Tuple[str, float, str], ...]
) -> None:
    """Create a pending invoice for a patient.

    Examples:

        hospital-records invoice create --patient-id 1 \\
            --item Consultation 25.0 CS --item "Blood test" 12.5 B120
    """
    records = get_records(ctx)
    line_items: List[LineItem] = [
        LineItem(description=d, amount=a, procedure_code=c) for d, a, c in items
    ]
    if not items:
        while click.confirm("Add a line item?", default=True):
            line_items.append(
                LineItem(
                    description=click.prompt("Description"),
                    amount=click.prompt("Amount", type=float),
                    procedure_code=click.prompt("Procedure code"),
                )
            )
    try:
        created = records.create_invoice(patient_id, line_items)
    except HospitalRecordsError as e:
        fail(e)
    success(f"Invoice {created.id} created, total {created.total:.2f}")


@invoice.command("list")
@click.pass_context
def list_invoices_command(ctx: click.Context) -> None:
    """List invoices."""
    records = get_records(ctx)
    heading("INVOICES")
    for view in records.list_invoices():
        inv = view.invoice
        click.echo(SEPARATOR)
        click.echo(f"Invoice #{inv.id}")
        click.echo(f"Patient: {or_unknown(view.patient_name)}")
        click.echo(f"Date: {inv.issue_date}")
        click.echo(f"Total: {inv.total:.2f}")
        click.echo(f"Status: {inv.status.label}")


@invoice.command("status")
@click.argument("invoice_id", type=int)
@click.option(
    "--status",
    prompt="New status (1 Pending, 2 Paid, 3 Cancelled)",
    type=click.IntRange(1, 3),
    help="1 Pending, 2 Paid, 3 Cancelled",
)
@click.pass_context
def update_status_command(ctx: click.Context, invoice_id: int, status: int) -> None:
    """Change the status of an invoice."""
    records = get_records(ctx)
    new_status = InvoiceStatus.from_choice(status)
    try:
        records.update_invoice_status(invoice_id, new_status)
    except HospitalRecordsError as e:
        fail(e)
    success(f"Invoice {invoice_id} marked {new_status.label}")
