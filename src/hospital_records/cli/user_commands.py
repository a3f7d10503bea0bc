"""User account CLI commands."""

import click

from hospital_records.cli.context import SEPARATOR, fail, get_records, heading, success
from hospital_records.models.account import Role
from hospital_records.utils.exceptions import HospitalRecordsError


@click.group()
def user() -> None:
    """User accounts."""
    pass


@user.command("add")
@click.option("--username", prompt="Username")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option(
    "--role",
    prompt="Role (1 Admin, 2 Physician, 3 Nurse, 4 Receptionist)",
    type=int,
    help="1 Admin, 2 Physician, 3 Nurse, anything else Receptionist",
)
@click.pass_context
def add_user_command(ctx: click.Context, username: str, password: str, role: int) -> None:
    """Create a user account."""
    records = get_records(ctx)
    try:
        account = records.create_user(username, password, Role.from_choice(role))
    except HospitalRecordsError as e:
        fail(e)
    success(f"User {account.username} created with role {account.role.label}")


@user.command("list")
@click.pass_context
def list_users_command(ctx: click.Context) -> None:
    """List user accounts."""
    records = get_records(ctx)
    heading("USERS")
    for account in records.list_users():
        click.echo(SEPARATOR)
        click.echo(f"ID: {account.id}")
        click.echo(f"Username: {account.username}")
        click.echo(f"Role: {account.role.label}")
        if account.last_login:
            click.echo(f"Last login: {account.last_login}")
