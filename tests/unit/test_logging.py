from __future__ import annotations

import json
import logging
import sys
from decimal import Decimal

from phone_bill.utils.logging import JsonFormatter, _json_formatter, configure_logging, get_logger

EXPECTED_LINE_NUMBER = 3


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.line_number = EXPECTED_LINE_NUMBER
    record.phone_number = "420774567453"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["line_number"] == EXPECTED_LINE_NUMBER
    assert payload["phone_number"] == "420774567453"
    assert "pathname" not in payload


def test_json_formatter_includes_exception_text() -> None:
    try:
        raise ValueError("bad timestamp")
    except ValueError:
        record = logging.getLogger("test.logger").makeRecord(
            "test.logger",
            logging.ERROR,
            __file__,
            1,
            "failed",
            (),
            sys.exc_info(),
            extra={"line_number": EXPECTED_LINE_NUMBER},
        )

    payload = json.loads(_json_formatter(record))

    assert "ValueError: bad timestamp" in payload["exc_info"]
    assert payload["line_number"] == EXPECTED_LINE_NUMBER


def test_json_formatter_stringifies_decimals() -> None:
    record = _record()
    record.total = Decimal("75.00")

    payload = json.loads(JsonFormatter().format(record))

    assert payload["total"] == "75.00"


def test_configure_logging_keeps_module_loggers_enabled() -> None:
    module_log = get_logger("phone_bill.billing.parser")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        configure_logging(level="debug", json_logs=True)

        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[-1].formatter, JsonFormatter)
        assert module_log.disabled is False
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
