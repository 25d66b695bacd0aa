"""
Tests for the JSON log formatter and request id propagation.
"""
import json
import logging

import pytest

from core.logging_config import (
    NO_REQUEST_ID,
    TEXT_FORMAT,
    JSONFormatter,
    RequestContextFilter,
    clear_request_id,
    get_request_id,
    set_request_id,
)


def _record(message, **extra):
    record = logging.LogRecord(
        name="services.records_service", level=logging.INFO, pathname=__file__,
        lineno=1, msg=message, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_single_line():
    line = JSONFormatter().format(_record("Bill created", bill_id=4))

    assert "\n" not in line
    entry = json.loads(line)
    assert entry["level"] == "INFO"
    assert entry["logger"] == "services.records_service"
    assert entry["message"] == "Bill created"
    assert entry["extra"] == {"bill_id": 4}
    assert entry["timestamp"].endswith("Z")


def test_json_formatter_includes_request_id():
    set_request_id("abc12345")
    try:
        entry = json.loads(JSONFormatter().format(_record("Request completed")))
    finally:
        clear_request_id()

    assert entry["request_id"] == "abc12345"
    assert get_request_id() is None


def test_json_formatter_serializes_decimals():
    from decimal import Decimal

    entry = json.loads(JSONFormatter().format(_record("Bill created", amount=Decimal("5000.00"))))
    assert entry["extra"]["amount"] == "5000.00"


def test_store_failure_context_grouped():
    line = JSONFormatter().format(_record(
        "Integrity constraint violated",
        operation="insert into Patient",
        constraint="UNIQUE constraint failed: Patient.phone",
    ))

    entry = json.loads(line)
    assert entry["store"] == {
        "operation": "insert into Patient",
        "constraint": "UNIQUE constraint failed: Patient.phone",
    }
    assert "extra" not in entry


def test_validation_rejection_context_grouped():
    entry = json.loads(JSONFormatter().format(_record(
        "Rejected field value", field="stock", value="1.5", reason="must be an integer", table="Medicine"
    )))

    assert entry["validation"] == {"field": "stock", "value": "1.5", "reason": "must be an integer"}
    assert entry["extra"] == {"table": "Medicine"}


def test_request_context_filter_stamps_text_records():
    record = _record("Seed data loaded")
    assert RequestContextFilter().filter(record)
    assert record.request_id == NO_REQUEST_ID

    set_request_id("abc12345")
    try:
        record = _record("Patient created")
        RequestContextFilter().filter(record)
    finally:
        clear_request_id()

    line = logging.Formatter(TEXT_FORMAT).format(record)
    assert "| abc12345 |" in line
    assert "request_id" not in json.loads(JSONFormatter().format(_record("outside a request")))


def test_database_integrity_failure_logs_store_block(repositories, caplog):
    from core.exceptions import IntegrityViolationError

    repo = repositories["patient_repository"]
    repo.add({"name": "Rahul Sharma", "phone": "9876543210"})

    with caplog.at_level(logging.WARNING, logger="repositories.base"):
        with pytest.raises(IntegrityViolationError):
            repo.add({"name": "Someone Else", "phone": "9876543210"})

    record = next(r for r in caplog.records if r.getMessage() == "Integrity constraint violated")
    entry = json.loads(JSONFormatter().format(record))
    assert entry["store"]["operation"] == "insert into Patient"
    assert "Patient.phone" in entry["store"]["constraint"]
