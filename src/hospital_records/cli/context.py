"""Shared helpers for CLI commands.

Opens the dataset once per invocation (applying the corrupt-store policy) and
turns record errors into operator-facing messages.
"""

import logging
from typing import NoReturn

import click

from hospital_records.models.application import Application
from hospital_records.records import HospitalRecords
from hospital_records.store import JsonStore
from hospital_records.store.json_store import ON_CORRUPT_FAIL, ON_CORRUPT_RESET
from hospital_records.store.resolver import NOT_FOUND_LABEL
from hospital_records.utils.exceptions import (
    CorruptStoreError,
    HospitalRecordsError,
    PersistenceWriteError,
)

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 40


def get_records(ctx: click.Context) -> HospitalRecords:
    """Return the HospitalRecords for this invocation, loading the data file once.
    
    When the data file is unreadable the configured policy decides:
    ``fail`` aborts, ``prompt`` asks the operator, ``reset`` starts empty.
    Unless ``backup_corrupt`` is off, the unreadable file is renamed aside
    before anything can overwrite it.
    """
    obj = ctx.find_root().ensure_object(dict)
    if "records" in obj:
        return obj["records"]
    
    config = obj["config"]
    store = JsonStore(obj.get("data_file") or config.store.data_file)
    policy = config.store.on_corrupt
    backup = config.store.backup_corrupt
    
    load_policy = ON_CORRUPT_RESET if policy == "reset" and not backup else ON_CORRUPT_FAIL
    try:
        application = store.load(on_corrupt=load_policy)
    except CorruptStoreError as e:
        click.echo(click.style("✗", fg="red", bold=True) + f" {e}", err=True)
        if policy == "fail":
            click.echo("Fix the data file or set on_corrupt to 'prompt' or 'reset'.", err=True)
            raise click.exceptions.Exit(1)
        if policy == "prompt" and not click.confirm(
            "Discard all records in the data file and start with an empty dataset?",
            default=False,
        ):
            click.echo("Aborted; the data file was left untouched.", err=True)
            raise click.exceptions.Exit(1)
        if backup:
            try:
                kept = store.quarantine()
            except PersistenceWriteError as qe:
                fail(qe)
            click.echo(f"Unreadable data file kept as {kept}")
        application = Application()
    
    records = HospitalRecords(application, store)
    obj["records"] = records
    return records


def fail(error: HospitalRecordsError) -> NoReturn:
    """Report a record error to the operator and exit with status 1."""
    if isinstance(error, PersistenceWriteError):
        logger.error(str(error))
        click.echo(
            click.style("✗", fg="red", bold=True)
            + f" {error}\nThe change was applied in memory but may not have been saved.",
            err=True,
        )
    else:
        click.echo(click.style("✗", fg="red", bold=True) + f" {error}", err=True)
    raise click.exceptions.Exit(1)


def success(message: str) -> None:
    click.echo(click.style("✓", fg="green", bold=True) + f" {message}")


def heading(title: str) -> None:
    click.echo(click.style(f"\n=== {title} ===", fg="green"))


def or_unknown(value: "str | None") -> str:
    """Display text for a resolved reference that may dangle."""
    return value if value is not None else NOT_FOUND_LABEL
