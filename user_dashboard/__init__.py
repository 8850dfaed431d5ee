"""
User Dashboard - login gate and client-side user listing.

This package provides a small terminal client that:

- Gates access behind a placeholder credential check with a persisted session
- Fetches a fixed remote collection of users once per screen mount
- Filters, sorts, and paginates that collection in memory via a pure view pipeline

The view pipeline is the core; the session store, remote source, and screens
are thin collaborators around it.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from user_dashboard.auth import (
    AbstractCredentialVerifier,
    CredentialVerifier,
    StaticCredentialVerifier,
    authenticate,
    validate_email,
)
from user_dashboard.config import Settings, get_settings
from user_dashboard.domain import SessionRecord, SortDirection, ViewResult, ViewState
from user_dashboard.exceptions import AuthError, DashboardError, FetchError, ValidationError
from user_dashboard.infrastructure import RemoteUserSource, SessionGate, SessionStore
from user_dashboard.screens import LoginScreen, Route, UsersScreen
from user_dashboard.utils.logging import configure_logging, get_logger
from user_dashboard.view import MISSING, compute, resolve, toggle_sort

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # View pipeline
    "MISSING",
    "compute",
    "resolve",
    "toggle_sort",
    "SortDirection",
    "ViewResult",
    "ViewState",
    # Auth and session
    "AbstractCredentialVerifier",
    "CredentialVerifier",
    "StaticCredentialVerifier",
    "authenticate",
    "validate_email",
    "SessionGate",
    "SessionRecord",
    "SessionStore",
    # Remote source
    "RemoteUserSource",
    # Screens
    "LoginScreen",
    "Route",
    "UsersScreen",
    # Errors
    "DashboardError",
    "ValidationError",
    "AuthError",
    "FetchError",
    # Logging
    "configure_logging",
    "get_logger",
]
