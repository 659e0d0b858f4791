"""Unit tests for logging setup."""

import logging

from tmf_api.application.request_context import request_id_var
from tmf_api.config import Settings
from tmf_api.infrastructure.logging.log_config import (
    RequestIdFilter,
    _parse_level,
    setup_logging,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)


def test_request_id_filter_outside_request():
    record = _record()
    assert RequestIdFilter().filter(record) is True
    assert record.request_id == "-"


def test_request_id_filter_inside_request():
    token = request_id_var.set("abc")
    try:
        record = _record()
        RequestIdFilter().filter(record)
    finally:
        request_id_var.reset(token)
    assert record.request_id == "abc"


def test_parse_level():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level(" WARNING ") == logging.WARNING
    assert _parse_level("loud") == logging.INFO


def test_setup_logging_applies_category_levels():
    setup_logging(Settings(log_level_sql="ERROR", log_level_hub="DEBUG"))

    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("tmf_api.application.services.hub_service").level == logging.DEBUG
    assert all(
        any(isinstance(f, RequestIdFilter) for f in handler.filters)
        for handler in logging.getLogger().handlers
    )
