from pathlib import Path

import pytest
from pydantic import ValidationError
from rich.console import Console

from user_dashboard import config
from user_dashboard.domain.models import ViewResult, ViewState
from user_dashboard.exceptions import AuthError
from user_dashboard.reporter import build_users_table, print_alert


def test_get_settings_defaults(session_path: Path):
    settings = config.get_settings()
    assert settings.api_url == "https://users.test/users"
    assert settings.request_timeout_seconds > 0
    assert settings.session_file == session_path
    assert settings.page_size_options == [5, 10, 15]
    assert settings.default_page_size == 5
    assert settings.default_sort_field == "name"


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_page_size_options_from_env(monkeypatch):
    monkeypatch.setenv("PAGE_SIZE_OPTIONS", "[10, 20]")
    config.get_settings.cache_clear()

    assert config.get_settings().page_size_options == [10, 20]


def test_page_size_options_must_be_positive():
    with pytest.raises(ValidationError):
        config.Settings(page_size_options=[5, 0])
    with pytest.raises(ValidationError):
        config.Settings(page_size_options=[])


def test_users_table_marks_active_sort_column():
    state = ViewState(sort_field="address.city").with_sort("address.city")
    result = ViewResult(
        visible_rows=[{"name": "[Bob]", "email": "bob@example.com", "address": {}}],
        total_filtered=1,
        total_pages=1,
        page_size=5,
    )

    table = build_users_table(result, state)

    headers = [str(column.header) for column in table.columns]
    assert headers == ["Name", "Email", "City ▼"]
    assert table.row_count == 1
    assert "1-1 of 1" in str(table.caption)
    assert "page 1 of 1" in str(table.caption)


def test_print_alert_shows_title_and_message():
    console = Console(record=True, width=80)

    print_alert(AuthError("Login Failed", "Invalid email or password"), console=console)

    output = console.export_text()
    assert "Login Failed" in output
    assert "Invalid email or password" in output
