"""
Persisted session storage for the User Dashboard.

SessionStore is a tiny string key/value store kept in one JSON file so the
session survives process restarts. SessionGate layers the login semantics on
top: the presence of the ``"user"`` key is the only session signal, and the
payload is ``{"email": ...}``.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from user_dashboard.config import get_settings
from user_dashboard.domain.models import SessionRecord
from user_dashboard.exceptions import DashboardError
from user_dashboard.utils.logging import get_logger

log = get_logger(__name__)

SESSION_KEY = "user"


class SessionStore:
    """
    String key/value pairs persisted to a JSON file.

    A missing file reads as an empty store.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else get_settings().session_file

    def _load(self) -> Dict[str, str]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            raise DashboardError(f"Session file {self.path} is corrupt: {exc}") from exc

        if not isinstance(data, dict):
            raise DashboardError(f"Session file {self.path} does not hold an object")
        return data

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Write one key. The file is replaced atomically."""
        data = self._load()
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".session-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class SessionGate:
    """
    Decide initial navigation from the persisted session flag.
    """

    def __init__(self, store: Optional[SessionStore] = None) -> None:
        self.store = store or SessionStore()

    def has_session(self) -> bool:
        return self.store.get_item(SESSION_KEY) is not None

    def get_session(self) -> Optional[SessionRecord]:
        raw = self.store.get_item(SESSION_KEY)
        if raw is None:
            return None
        try:
            return SessionRecord.model_validate_json(raw)
        except PydanticValidationError as exc:
            raise DashboardError(f"Stored session is malformed: {exc}") from exc

    def create_session(self, identity: str) -> SessionRecord:
        """
        Persist a session for ``identity`` (an email address).

        Idempotent: an existing session is returned unchanged and nothing is
        written.
        """
        existing = self.get_session()
        if existing is not None:
            log.info("Session already present", extra={"email": existing.email})
            return existing

        record = SessionRecord(email=identity)
        self.store.set_item(SESSION_KEY, record.model_dump_json())
        log.info("Session created", extra={"email": record.email, "path": str(self.store.path)})
        return record


__all__ = ["SESSION_KEY", "SessionStore", "SessionGate"]
