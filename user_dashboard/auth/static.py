"""
Placeholder credential check.

Accepts exactly one configured email/password pair. This is a stand-in for a
real identity provider and not a security boundary.
"""

from __future__ import annotations

import hmac
from typing import Optional

from user_dashboard.auth.abstract import AbstractCredentialVerifier
from user_dashboard.config import get_settings
from user_dashboard.domain.models import Credentials


class StaticCredentialVerifier(AbstractCredentialVerifier):
    """
    Compare submitted credentials against a single fixed pair.
    """

    name: str = "static"

    def __init__(self, email: Optional[str] = None, password: Optional[str] = None) -> None:
        settings = get_settings()
        self._email = email if email is not None else settings.demo_email
        self._password = password if password is not None else settings.demo_password

    def verify(self, identity: Credentials) -> bool:
        email_ok = identity.email == self._email
        password_ok = hmac.compare_digest(
            identity.password.get_secret_value().encode("utf-8"),
            self._password.encode("utf-8"),
        )
        return email_ok and password_ok


__all__ = ["StaticCredentialVerifier"]
