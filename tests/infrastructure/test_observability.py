"""JSON log formatter — base fields plus known extras."""

import json
import logging

from invoicing.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "invoicing.test", logging.ERROR, __file__, 1, "Failed %s", ("write",), None,
    )
    record.__dict__.update(extra)
    return record


def test_formats_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "ERROR"
    assert payload["logger"] == "invoicing.test"
    assert payload["message"] == "Failed write"
    assert "timestamp" in payload


def test_includes_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(operation="create invoice", invoice_id="I1", secret="x"),
    ))
    assert payload["operation"] == "create invoice"
    assert payload["invoice_id"] == "I1"
    assert "secret" not in payload
