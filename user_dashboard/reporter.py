from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from user_dashboard.domain.models import SortDirection, ViewResult, ViewState
from user_dashboard.exceptions import AlertError
from user_dashboard.view.accessor import MISSING, resolve

# (header, dotted path, style) for each sortable column, in display order.
COLUMNS: List[Tuple[str, str, str]] = [
    ("Name", "name", "cyan"),
    ("Email", "email", "magenta"),
    ("City", "address.city", "green"),
]


def _header(title: str, path: str, state: ViewState) -> str:
    if path != state.sort_field:
        return title
    arrow = "▲" if state.sort_direction == SortDirection.ASCENDING else "▼"
    return f"{title} {arrow}"


def _cell(record: Mapping[str, Any], path: str) -> str:
    value = resolve(record, path)
    if value is MISSING or value is None:
        return "[dim]-[/dim]"
    return escape(str(value))


def build_users_table(result: ViewResult, state: ViewState) -> Table:
    """
    Build the listing table for one page.

    The caption carries the pagination control: range label, page position
    and rows per page.
    """
    caption = (
        f"{result.range_label} │ page {result.page_index + 1} of {result.display_pages}"
        f" │ rows per page: {result.page_size}"
    )
    if state.search_term:
        caption = f"search: '{escape(state.search_term)}' │ {caption}"

    table = Table(
        title="User Dashboard\n[dim]Manage and view user data[/dim]",
        box=box.ROUNDED,
        caption=caption,
    )
    for title, path, style in COLUMNS:
        table.add_column(_header(title, path, state), style=style, no_wrap=path == "name")

    for record in result.visible_rows:
        table.add_row(*(_cell(record, path) for _, path, _ in COLUMNS))

    return table


def print_users(
    result: ViewResult, state: ViewState, console: Optional[Console] = None
) -> None:
    """
    Render one page of users as a rich table.
    """
    console = console or Console()
    if not result.visible_rows and result.total_filtered == 0:
        console.print("[yellow]No users match the current search.[/yellow]")
    console.print(build_users_table(result, state))


def print_loading(console: Optional[Console] = None) -> None:
    (console or Console()).print("[dim]Fetching Users...[/dim]")


def print_error(message: str, console: Optional[Console] = None) -> None:
    """The fetch error replaces the table."""
    (console or Console()).print(f"[bold red]Error fetching data: {escape(message)}[/bold red]")


def print_alert(exc: AlertError, console: Optional[Console] = None) -> None:
    (console or Console()).print(f"[bold red]{escape(exc.title)}[/bold red]\n{escape(exc.message)}")


__all__ = [
    "COLUMNS",
    "build_users_table",
    "print_users",
    "print_loading",
    "print_error",
    "print_alert",
]
