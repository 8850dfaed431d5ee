"""End-to-end CLI flows: login gate, then the user listing."""

from __future__ import annotations

from typing import Any, Dict, List

import pytest
from typer.testing import CliRunner

from tests.conftest import FakeUserSource
from user_dashboard import main as main_module
from user_dashboard.infrastructure.session_store import SessionGate, SessionStore

pytestmark = pytest.mark.integration

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch) -> None:
    # Handlers bound to the runner's captured stderr would outlive each invoke.
    monkeypatch.setattr(main_module, "configure_logging", lambda **kwargs: None)


@pytest.fixture
def patched_source(monkeypatch, twelve_users: List[Dict[str, Any]]) -> FakeUserSource:
    source = FakeUserSource(twelve_users)
    monkeypatch.setattr(main_module, "RemoteUserSource", lambda: source)
    return source


def _login() -> None:
    result = runner.invoke(
        main_module.app, ["login", "--email", "test@gmail.com", "--password", "pass123"]
    )
    assert result.exit_code == 0, result.output


def test_login_creates_session(session_path) -> None:
    result = runner.invoke(
        main_module.app, ["login", "--email", "test@gmail.com", "--password", "pass123"]
    )

    assert result.exit_code == 0
    assert "Logged in as test@gmail.com" in result.output
    assert SessionGate(SessionStore(session_path)).has_session() is True


def test_login_with_wrong_password_fails(session_path) -> None:
    result = runner.invoke(
        main_module.app, ["login", "--email", "test@gmail.com", "--password", "wrong"]
    )

    assert result.exit_code == 1
    assert "Login Failed" in result.output
    assert SessionGate(SessionStore(session_path)).has_session() is False


def test_login_with_malformed_email_fails() -> None:
    result = runner.invoke(main_module.app, ["login", "--email", "nope", "--password", "x"])

    assert result.exit_code == 1
    assert "Invalid Email" in result.output


def test_login_is_skipped_when_session_exists() -> None:
    _login()

    result = runner.invoke(main_module.app, ["login", "--email", "x@y.z", "--password", "bad"])

    assert result.exit_code == 0
    assert "Already logged in" in result.output


def test_login_prompts_for_missing_options() -> None:
    result = runner.invoke(main_module.app, ["login"], input="test@gmail.com\npass123\n")

    assert result.exit_code == 0
    assert "Logged in as test@gmail.com" in result.output


def test_login_with_session_shows_no_form() -> None:
    _login()

    result = runner.invoke(main_module.app, ["login"], input="")

    assert result.exit_code == 0, result.output
    assert "Already logged in" in result.output
    assert "Enter your email" not in result.output
    assert "Enter your password" not in result.output


def test_login_prompts_only_for_missing_password() -> None:
    result = runner.invoke(
        main_module.app, ["login", "--email", "test@gmail.com"], input="pass123\n"
    )

    assert result.exit_code == 0, result.output
    assert "Enter your email" not in result.output
    assert "Enter your password" in result.output
    assert "Logged in as test@gmail.com" in result.output


def test_login_with_empty_form_fails_validation() -> None:
    result = runner.invoke(main_module.app, ["login"], input="\n\n")

    assert result.exit_code == 1
    assert "Validation Error" in result.output


def test_users_requires_session(patched_source: FakeUserSource) -> None:
    result = runner.invoke(main_module.app, ["users"])

    assert result.exit_code == 1
    assert "Not logged in" in result.output
    assert patched_source.calls == 0


def test_users_lists_first_page(patched_source: FakeUserSource) -> None:
    _login()

    result = runner.invoke(main_module.app, ["users"])

    assert result.exit_code == 0, result.output
    assert patched_source.calls == 1
    assert "Ada Lovelace" in result.output
    assert "1-5 of 12" in result.output
    assert "page 1 of 3" in result.output


def test_users_search_sort_and_page(patched_source: FakeUserSource) -> None:
    _login()

    result = runner.invoke(
        main_module.app,
        ["users", "--search", "CLE", "--sort", "name", "--descending", "--page", "1"],
    )

    assert result.exit_code == 0, result.output
    assert "1-2 of 2" in result.output
    assert result.output.index("Clementine") < result.output.index("Clementina")
    assert "Ada Lovelace" not in result.output


def test_users_last_page_with_custom_size(patched_source: FakeUserSource) -> None:
    _login()

    result = runner.invoke(main_module.app, ["users", "--page-size", "10", "--page", "2"])

    assert result.exit_code == 0, result.output
    assert "11-12 of 12" in result.output
    assert "page 2 of 2" in result.output


def test_users_rejects_unsupported_page_size(patched_source: FakeUserSource) -> None:
    _login()

    result = runner.invoke(main_module.app, ["users", "--page-size", "7"])

    assert result.exit_code == 2
    assert "Unsupported page size 7" in result.output
    assert patched_source.calls == 0


def test_users_fetch_error_replaces_table(monkeypatch) -> None:
    _login()
    source = FakeUserSource(error="Network response was not ok")
    monkeypatch.setattr(main_module, "RemoteUserSource", lambda: source)

    result = runner.invoke(main_module.app, ["users"])

    assert result.exit_code == 1
    assert "Error fetching data: Network response was not ok" in result.output
    assert "User Dashboard" not in result.output


def test_info_shows_configuration() -> None:
    result = runner.invoke(main_module.app, ["info"])

    assert result.exit_code == 0
    assert "https://users.test/users" in result.output
