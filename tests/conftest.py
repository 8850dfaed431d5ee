"""
Pytest configuration for the User Dashboard.

Provides fixtures for:
- Settings isolation (session file under tmp_path, cache cleared per test)
- Sample user collections shaped like the remote endpoint's payload
- Session gate and fake remote source wiring
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest

from user_dashboard.config import Settings, get_settings
from user_dashboard.exceptions import FetchError
from user_dashboard.infrastructure.session_store import SessionGate, SessionStore


def make_user(user_id: int, name: str, email: str = "", city: str = "Gwenborough") -> Dict[str, Any]:
    return {
        "id": user_id,
        "name": name,
        "email": email or f"user{user_id}@example.com",
        "address": {"city": city, "street": "Kulas Light"},
    }


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Point every component at a throwaway session file.

    `get_settings()` is cached, so the cache is cleared before and after each test.
    """
    monkeypatch.setenv("SESSION_FILE", str(tmp_path / "session.json"))
    monkeypatch.setenv("API_URL", "https://users.test/users")
    monkeypatch.delenv("PAGE_SIZE_OPTIONS", raising=False)
    monkeypatch.delenv("DEMO_EMAIL", raising=False)
    monkeypatch.delenv("DEMO_PASSWORD", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    return get_settings()


@pytest.fixture
def session_path(tmp_path: Path) -> Path:
    return tmp_path / "session.json"


@pytest.fixture
def gate(session_path: Path) -> SessionGate:
    return SessionGate(SessionStore(session_path))


@pytest.fixture
def twelve_users() -> List[Dict[str, Any]]:
    names = [
        "Leanne Graham",
        "Ervin Howell",
        "Clementine Bauch",
        "Patricia Lebsack",
        "Chelsey Dietrich",
        "Mrs. Dennis Schulist",
        "Kurtis Weissnat",
        "Nicholas Runolfsdottir V",
        "Glenna Reichert",
        "Clementina DuBuque",
        "Oscar Wilde",
        "Ada Lovelace",
    ]
    return [make_user(index + 1, name) for index, name in enumerate(names)]


class FakeUserSource:
    """Stands in for RemoteUserSource; returns canned users or raises."""

    def __init__(self, users: List[Dict[str, Any]] | None = None, error: str | None = None) -> None:
        self.users = users or []
        self.error = error
        self.calls = 0

    def fetch(self) -> List[Dict[str, Any]]:
        self.calls += 1
        if self.error is not None:
            raise FetchError(self.error)
        return list(self.users)


@pytest.fixture
def fake_source(twelve_users: List[Dict[str, Any]]) -> FakeUserSource:
    return FakeUserSource(twelve_users)
