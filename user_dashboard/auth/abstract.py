"""
Credential verification interfaces for the User Dashboard.

The login gate depends only on the CredentialVerifier protocol, so the
placeholder check can be swapped for a real identity provider without
touching the login flow.
"""

from __future__ import annotations

import abc
from typing import Protocol, runtime_checkable

from user_dashboard.domain.models import Credentials


@runtime_checkable
class CredentialVerifier(Protocol):
    """
    Common interface all credential verifiers must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    """

    name: str

    def verify(self, identity: Credentials) -> bool:
        """
        Decide whether ``identity`` may open a session.

        Parameters
        ----------
        identity : Credentials
            Email and password submitted at the login gate. The email has
            already passed syntax validation.

        Returns
        -------
        bool
            True when the credentials are accepted.
        """
        ...


class AbstractCredentialVerifier(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `name` and implement `verify`.
    """

    name: str

    @abc.abstractmethod
    def verify(self, identity: Credentials) -> bool:  # pragma: no cover - interface only
        """Return True when the credentials are accepted."""
        raise NotImplementedError


__all__ = [
    "CredentialVerifier",
    "AbstractCredentialVerifier",
]
