"""
Error types for the User Dashboard.

Every error is locally contained: the CLI catches these at the command
boundary and turns them into printed output plus a non-zero exit code.
"""

from __future__ import annotations


class DashboardError(Exception):
    """Base class for all application errors."""


class AlertError(DashboardError):
    """
    An error reported through the blocking alert channel.

    Attributes
    ----------
    title : str
        Short alert heading.
    message : str
        Human-readable explanation shown under the heading.
    """

    def __init__(self, title: str, message: str) -> None:
        super().__init__(f"{title}: {message}")
        self.title = title
        self.message = message


class ValidationError(AlertError):
    """Empty or malformed login input."""


class AuthError(AlertError):
    """Well-formed credentials that the verifier rejected."""


class FetchError(DashboardError):
    """Transport failure or non-OK response from the remote user source."""


__all__ = [
    "DashboardError",
    "AlertError",
    "ValidationError",
    "AuthError",
    "FetchError",
]
