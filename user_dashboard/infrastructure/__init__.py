"""
Infrastructure package for the User Dashboard.

Centralizes I/O concerns: the remote user source and the persisted session
store. Keep this layer focused on I/O, decoupled from the view pipeline and
screen logic.
"""

from user_dashboard.infrastructure.remote_source import RemoteUserSource
from user_dashboard.infrastructure.session_store import (
    SESSION_KEY,
    SessionGate,
    SessionStore,
)

__all__ = [
    "RemoteUserSource",
    "SESSION_KEY",
    "SessionGate",
    "SessionStore",
]
