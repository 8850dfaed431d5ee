"""
Login flow: input validation, credential check, session creation.
"""

from __future__ import annotations

import re

from pydantic import SecretStr

from user_dashboard.auth.abstract import CredentialVerifier
from user_dashboard.domain.models import Credentials, SessionRecord
from user_dashboard.exceptions import AuthError, ValidationError
from user_dashboard.infrastructure.session_store import SessionGate
from user_dashboard.utils.logging import get_logger

log = get_logger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_email(email: str) -> bool:
    """Loose syntax check: something@something.something, no whitespace."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def authenticate(
    email: str,
    password: str,
    verifier: CredentialVerifier,
    gate: SessionGate,
) -> SessionRecord:
    """
    Validate input, verify credentials, and open a session.

    Raises
    ------
    ValidationError
        Either field is empty, or the email is malformed.
    AuthError
        The verifier rejected well-formed credentials. No session is created.
    """
    if not email or not password:
        raise ValidationError("Validation Error", "Please enter both email and password")

    if not validate_email(email):
        raise ValidationError("Invalid Email", "Please enter a valid email address")

    identity = Credentials(email=email, password=SecretStr(password))
    if not verifier.verify(identity):
        log.warning("Login rejected", extra={"email": email, "verifier": verifier.name})
        raise AuthError("Login Failed", "Invalid email or password")

    return gate.create_session(email)


__all__ = ["EMAIL_PATTERN", "validate_email", "authenticate"]
