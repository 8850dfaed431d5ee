from __future__ import annotations

import json
import logging

from user_dashboard.utils.logging import _json_formatter, configure_logging, get_logger

EXPECTED_COUNT = 10
EXPECTED_PAGE_SIZE = 15


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.count = EXPECTED_COUNT
    record.url = "https://users.test/users"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["count"] == EXPECTED_COUNT
    assert payload["url"] == "https://users.test/users"
    assert "lineno" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"page_size": EXPECTED_PAGE_SIZE}

    payload = json.loads(_json_formatter(record))

    assert payload["page_size"] == EXPECTED_PAGE_SIZE
    assert "extra" not in payload


def test_json_formatter_stringifies_unserializable_values() -> None:
    record = _record()
    record.path = object()

    payload = json.loads(_json_formatter(record))

    assert payload["path"].startswith("<object object")


def test_configure_logging_sets_root_level() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(level="debug", json_logs=True)

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert get_logger("user_dashboard.view").getEffectiveLevel() == logging.DEBUG

        configure_logging(level="WARNING", force=False)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
