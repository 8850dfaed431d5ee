"""
Screen controllers for the User Dashboard.

The screens own every piece of mutable UI state; the view pipeline only ever
sees a snapshot of it. Event handlers replace `state` with a new ViewState
and the next `view()` call recomputes the visible page.

Usage:
    screen = UsersScreen(RemoteUserSource())
    await screen.mount()
    screen.handle_search("le")
    screen.handle_sort("address.city")
    result = screen.view()
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from user_dashboard.auth.abstract import CredentialVerifier
from user_dashboard.auth.login import authenticate
from user_dashboard.config import get_settings
from user_dashboard.domain.models import SortDirection, ViewResult, ViewState
from user_dashboard.exceptions import FetchError
from user_dashboard.infrastructure.remote_source import RemoteUserSource
from user_dashboard.infrastructure.session_store import SessionGate
from user_dashboard.utils.logging import get_logger
from user_dashboard.view.pipeline import compute, toggle_sort

log = get_logger(__name__)


class Route(str, Enum):
    LOGIN = "login"
    HOME = "home"


class LoginScreen:
    """
    Login gate. Skipped entirely when a session already exists.
    """

    def __init__(self, gate: SessionGate, verifier: CredentialVerifier) -> None:
        self.gate = gate
        self.verifier = verifier

    async def mount(self) -> Route:
        """Wait for the session read, then pick the initial route."""
        has_session = await asyncio.to_thread(self.gate.has_session)
        return Route.HOME if has_session else Route.LOGIN

    async def submit(self, email: str, password: str) -> Route:
        """
        Run the login flow. ValidationError and AuthError propagate unchanged.
        """
        await asyncio.to_thread(authenticate, email, password, self.verifier, self.gate)
        return Route.HOME


class UsersScreen:
    """
    User listing: one fetch per mount, then in-memory search/sort/pagination.

    Attributes
    ----------
    users : list[dict]
        Collection from the last completed fetch (read-only afterwards).
    loading : bool
        True while the fetch is in flight.
    error : str | None
        FetchError message, shown instead of the table.
    state : ViewState
        Current search/sort/page parameters.
    """

    def __init__(
        self,
        source: RemoteUserSource,
        page_size_options: Optional[Sequence[int]] = None,
        sort_field: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.source = source
        self.page_size_options: List[int] = list(page_size_options or settings.page_size_options)
        self.users: List[Dict[str, Any]] = []
        self.loading = False
        self.error: Optional[str] = None
        self.state = ViewState(
            sort_field=sort_field if sort_field is not None else settings.default_sort_field,
            sort_direction=SortDirection.ASCENDING,
            page_size=self.page_size_options[0],
        )
        self._mounted = False
        self._fetch_task: Optional[asyncio.Task] = None

    @property
    def mounted(self) -> bool:
        return self._mounted

    async def mount(self) -> None:
        """
        Fetch the collection once. Errors become `self.error`, never raised.
        """
        if self._fetch_task is not None:
            raise RuntimeError("UsersScreen.mount() already called for this screen")

        self._mounted = True
        self.loading = True
        self._fetch_task = asyncio.ensure_future(asyncio.to_thread(self.source.fetch))
        try:
            users = await self._fetch_task
        except asyncio.CancelledError:
            if self._mounted:
                raise
            log.info("User fetch cancelled by unmount")
            return
        except FetchError as exc:
            if not self._mounted:
                return
            self.error = str(exc)
            self.users = []
            self.loading = False
            return

        if not self._mounted:
            return
        self.users = users
        self.error = None
        self.loading = False

    def unmount(self) -> None:
        """Tear down. A pending fetch is cancelled and its result discarded."""
        self._mounted = False
        if self._fetch_task is not None and not self._fetch_task.done():
            self._fetch_task.cancel()

    def view(self) -> ViewResult:
        return compute(self.users, self.state)

    def handle_search(self, query: str) -> None:
        self.state = self.state.with_search(query)

    def handle_sort(self, column: str) -> None:
        self.state = toggle_sort(self.state, column)

    def handle_page_change(self, page: int) -> None:
        self.state = self.state.with_page(page, self.view().total_pages)

    def handle_page_size_change(self, size: int) -> None:
        if size not in self.page_size_options:
            allowed = ", ".join(str(option) for option in self.page_size_options)
            raise ValueError(f"Unsupported page size {size}. Allowed: {allowed}")
        self.state = self.state.with_page_size(size)


__all__ = [
    "Route",
    "LoginScreen",
    "UsersScreen",
]
