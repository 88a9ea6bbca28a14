"""CLI commands for the admin login placeholder."""

from __future__ import annotations

import click

from catalog_admin.domain.exceptions import DomainException
from catalog_admin.infrastructure.bootstrap import auth_handler


@click.command("login")
@click.option("--email", required=True, help="Admin email.")
@click.option("--password", prompt=True, hide_input=True, help="At least 6 characters.")
def auth_login(email: str, password: str) -> None:
    """Log in as an admin."""
    try:
        user = auth_handler().login(email, password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Welcome back, {user.email}!")


@click.command("signup")
@click.option("--email", required=True, help="Admin email.")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="At least 6 characters.",
)
def auth_signup(email: str, password: str) -> None:
    """Create an admin account and log in."""
    try:
        user = auth_handler().signup(email, password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Account created successfully for {user.email}!")


@click.command("logout")
def auth_logout() -> None:
    """Log out."""
    try:
        auth_handler().logout()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Logged out successfully")


@click.command("whoami")
def auth_whoami() -> None:
    """Show the logged-in admin."""
    user = auth_handler().current_user()
    if user is None:
        click.echo("Not logged in.")
        return
    click.echo(user.email)
