"""Main CLI entry point for Hospital Records.

This module provides the main Click command group for the hospital-records CLI.
"""

from pathlib import Path
from typing import Optional

import click

from hospital_records import __version__
from hospital_records.cli.appointment_commands import appointment
from hospital_records.cli.context import SEPARATOR, fail, get_records, heading, success
from hospital_records.cli.invoice_commands import invoice
from hospital_records.cli.patient_commands import patient
from hospital_records.cli.pharmacy_commands import pharmacy
from hospital_records.cli.service_commands import service
from hospital_records.cli.staff_commands import staff
from hospital_records.cli.user_commands import user
from hospital_records.config import load_config
from hospital_records.logging_audit import configure_logging
from hospital_records.utils.exceptions import ConfigurationError, HospitalRecordsError


@click.group()
@click.version_option(version=__version__, prog_name="hospital-records")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: ./config/config.json)",
)
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to the data file (overrides config file)",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging (DEBUG level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to log file (overrides config file)",
)
@click.option(
    "--redact-pii",
    is_flag=True,
    help="Redact PII (patient names, health numbers) from logs",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    data_file: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
    redact_pii: bool,
) -> None:
    """Hospital Records - administrative records for a hospital desk.

    Manages patients, staff, appointments, services, pharmacy stock,
    invoices and user accounts stored in a single JSON data file.

    Common usage:

        # Register a patient (missing values are prompted)
        hospital-records patient add

        # Book and list appointments
        hospital-records appointment add --date 10/05/2024 --time 09:00 \\
            --patient-id 1 --staff-id 1
        hospital-records appointment list

        # Work on another data file
        hospital-records --data-file archive.json stats

    Use --help with any command for more information.
    """
    ctx.ensure_object(dict)

    try:
        config_obj = load_config(config)
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    ctx.obj["config"] = config_obj
    ctx.obj["data_file"] = data_file
    ctx.obj["verbose"] = verbose

    # Precedence: CLI flags > config file > defaults
    log_level = "DEBUG" if verbose else config_obj.logging.level
    log_file_path = log_file if log_file else config_obj.logging.log_file
    redact_pii_setting = redact_pii if redact_pii else config_obj.logging.redact_pii

    configure_logging(
        level=log_level, log_file=log_file_path, redact_pii=redact_pii_setting
    )


cli.add_command(patient)
cli.add_command(staff)
cli.add_command(appointment)
cli.add_command(service)
cli.add_command(pharmacy)
cli.add_command(invoice)
cli.add_command(user)


@cli.command()
@click.option("--date", "today", default=None, help="Date counted as today (DD/MM/YYYY)")
@click.pass_context
def stats(ctx: click.Context, today: Optional[str]) -> None:
    """Show hospital statistics."""
    records = get_records(ctx)
    figures = records.statistics(today=today)
    heading("HOSPITAL STATISTICS")
    click.echo("\n--- General ---")
    click.echo(f"Patients: {figures.patient_count}")
    click.echo(f"Staff: {figures.staff_count}")
    click.echo(f"Services: {figures.service_count}")
    click.echo("\n--- Appointments ---")
    click.echo(f"Appointments today: {figures.appointments_today}")
    click.echo("\n--- Finance ---")
    click.echo(f"Paid invoices total: {figures.paid_total:.2f}")
    click.echo("\n--- Pharmacy ---")
    click.echo(f"Medications on stock alert: {figures.low_stock_count}")
    click.echo(SEPARATOR)


@cli.command()
@click.pass_context
def save(ctx: click.Context) -> None:
    """Write the data file now."""
    records = get_records(ctx)
    try:
        records.save()
    except HospitalRecordsError as e:
        fail(e)
    success(f"Data saved to {records.store.path}")


@cli.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command()
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate(config_file: Path) -> None:
    """Validate a configuration file.

    Example:
        hospital-records config validate config/config.json
    """
    try:
        config_obj = load_config(config_file)
    except ConfigurationError as e:
        click.echo(click.style("✗", fg="red", bold=True) + " Configuration validation failed")
        click.echo(f"\n{e}", err=True)
        raise click.exceptions.Exit(1)

    click.echo(click.style("✓", fg="green", bold=True) + " Configuration is valid")
    click.echo(f"\nConfiguration file: {config_file}")
    click.echo("\nStore:")
    click.echo(f"  Data file:   {config_obj.store.data_file}")
    click.echo(f"  On corrupt:  {config_obj.store.on_corrupt}")
    click.echo(f"  Backup:      {config_obj.store.backup_corrupt}")
    click.echo("\nLogging:")
    click.echo(f"  Level:       {config_obj.logging.level}")
    click.echo(f"  Log file:    {config_obj.logging.log_file}")
    click.echo(f"  Redact PII:  {config_obj.logging.redact_pii}")


@cli.command()
def version() -> None:
    """Display version information."""
    click.echo(f"hospital-records version {__version__}")


if __name__ == "__main__":
    cli()
