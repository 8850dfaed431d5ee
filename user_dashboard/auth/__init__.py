"""
Auth package for the User Dashboard.

Re-exports the verifier interfaces, the placeholder verifier, and the login
flow so callers can import from `user_dashboard.auth` directly.
"""

from user_dashboard.auth.abstract import AbstractCredentialVerifier, CredentialVerifier
from user_dashboard.auth.login import authenticate, validate_email
from user_dashboard.auth.static import StaticCredentialVerifier

__all__ = [
    # Abstracts
    "AbstractCredentialVerifier",
    "CredentialVerifier",
    # Concrete verifiers
    "StaticCredentialVerifier",
    # Flow
    "authenticate",
    "validate_email",
]
