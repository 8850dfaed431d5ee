from __future__ import annotations

import asyncio
import sys
from typing import Optional

import typer

from user_dashboard.auth.static import StaticCredentialVerifier
from user_dashboard.config import get_settings
from user_dashboard.exceptions import AlertError, DashboardError
from user_dashboard.infrastructure.remote_source import RemoteUserSource
from user_dashboard.infrastructure.session_store import SessionGate, SessionStore
from user_dashboard.reporter import print_alert, print_error, print_loading, print_users
from user_dashboard.screens import LoginScreen, Route, UsersScreen
from user_dashboard.utils.logging import configure_logging

app = typer.Typer(help="User Dashboard CLI.")

# Short names accepted by --sort in addition to dotted paths.
SORT_ALIASES = {"city": "address.city"}


def _gate() -> SessionGate:
    return SessionGate(SessionStore())


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"API={settings.api_url} (timeout={settings.request_timeout_seconds}s) | "
        f"session={settings.session_file} | "
        f"page sizes={settings.page_size_options} sort={settings.default_sort_field}"
    )


@app.command()
def login(
    email: Optional[str] = typer.Option(
        None, "--email", "-e", help="Account email (prompted when omitted)."
    ),
    password: Optional[str] = typer.Option(
        None, "--password", "-p", help="Account password (prompted when omitted)."
    ),
) -> None:
    """
    Log in with email and password. Skipped when a session already exists.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level)
    screen = LoginScreen(_gate(), StaticCredentialVerifier())

    try:
        if asyncio.run(screen.mount()) == Route.HOME:
            typer.echo("Already logged in.")
            return
        # The form is only shown once the session read says there is none.
        if email is None:
            email = typer.prompt("Enter your email", default="", show_default=False)
        if password is None:
            password = typer.prompt(
                "Enter your password", default="", show_default=False, hide_input=True
            )
        asyncio.run(screen.submit(email, password))
    except AlertError as exc:
        print_alert(exc)
        raise typer.Exit(code=1)
    except DashboardError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Logged in as {email}.")


@app.command()
def users(
    search: str = typer.Option("", "--search", "-q", help="Filter by name (case-insensitive)."),
    sort: Optional[str] = typer.Option(
        None,
        "--sort",
        "-s",
        help="Column to sort by: name, email, city (or a dotted path such as address.city).",
    ),
    descending: bool = typer.Option(False, "--descending", "-d", help="Sort in descending order."),
    page: int = typer.Option(1, "--page", min=1, help="1-based page number."),
    page_size: Optional[int] = typer.Option(
        None, "--page-size", "-n", help="Rows per page (default: first allowed size)."
    ),
) -> None:
    """
    List users with search, sort, and pagination. Requires a session.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level)

    try:
        if asyncio.run(LoginScreen(_gate(), StaticCredentialVerifier()).mount()) != Route.HOME:
            typer.echo("Not logged in. Run the `login` command first.", err=True)
            raise typer.Exit(code=1)
    except DashboardError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    screen = UsersScreen(RemoteUserSource())
    try:
        if page_size is not None:
            screen.handle_page_size_change(page_size)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)

    print_loading()
    asyncio.run(screen.mount())
    if screen.error is not None:
        print_error(screen.error)
        raise typer.Exit(code=1)

    screen.handle_search(search)
    if sort is not None:
        sort_field = SORT_ALIASES.get(sort, sort)
        if sort_field != screen.state.sort_field:
            screen.handle_sort(sort_field)
    if descending:
        # Pressing the active column header again flips it.
        screen.handle_sort(screen.state.sort_field)
    screen.handle_page_change(page - 1)

    print_users(screen.view(), screen.state)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
