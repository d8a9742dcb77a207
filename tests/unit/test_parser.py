from __future__ import annotations

import logging
from datetime import datetime

import pytest

from phone_bill.billing.parser import parse_call_records, parse_timestamp
from phone_bill.domain.errors import MalformedTimestampError
from phone_bill.domain.models import DiagnosticKind, TimestampErrorPolicy

EXPECTED_SAMPLE_RECORDS = 6


def test_parse_timestamp_uses_day_month_year_format():
    assert parse_timestamp("01-09-2023 07:30:00") == datetime(2023, 9, 1, 7, 30, 0)
    assert parse_timestamp("31-12-2023 23:59:59") == datetime(2023, 12, 31, 23, 59, 59)


@pytest.mark.parametrize(
    "value",
    ["2023-09-01 07:30:00", "01-09-2023 25:00:00", "01-09-2023", "garbage", ""],
)
def test_parse_timestamp_rejects_other_formats(value: str):
    with pytest.raises(ValueError):
        parse_timestamp(value)


def test_parse_sample_log_preserves_input_order(sample_log: str):
    result = parse_call_records(sample_log)

    assert len(result.records) == EXPECTED_SAMPLE_RECORDS
    assert result.diagnostics == []
    assert [r.phone_number for r in result.records] == [
        "420774567453",
        "420776562353",
        "420774567453",
        "420776562353",
        "420774567453",
        "420777777777",
    ]
    first = result.records[0]
    assert first.start_time == datetime(2023, 9, 1, 7, 30)
    assert first.end_time == datetime(2023, 9, 1, 7, 40)


def test_empty_input_yields_no_records():
    result = parse_call_records("")
    assert result.records == []
    assert result.diagnostics == []


def test_trailing_blank_lines_are_ignored(call_line):
    log = call_line("1", "10:00:00", "10:01:00") + "\n\n  \n"

    result = parse_call_records(log)

    assert len(result.records) == 1
    assert result.diagnostics == []


def test_interior_blank_lines_are_malformed(call_line):
    log = "\n".join(["", call_line("1", "10:00:00", "10:01:00"), "   ", call_line("2", "11:00:00", "11:01:00")])

    result = parse_call_records(log)

    assert len(result.records) == 2
    assert [d.line_number for d in result.diagnostics] == [1, 3]
    assert all(d.kind is DiagnosticKind.MALFORMED_LINE for d in result.diagnostics)


@pytest.mark.parametrize(
    "bad_line, field_count",
    [
        ("420774567453,01-09-2023 07:30:00", 2),
        ("420774567453,01-09-2023 07:30:00,01-09-2023 07:40:00,extra", 4),
        ("just-one-field", 1),
    ],
)
def test_wrong_field_count_is_skipped_with_diagnostic(
    call_line, caplog: pytest.LogCaptureFixture, bad_line: str, field_count: int
):
    caplog.set_level(logging.WARNING, logger="phone_bill")
    log = "\n".join([call_line("1", "10:00:00", "10:01:00"), bad_line])

    result = parse_call_records(log)

    assert len(result.records) == 1
    assert len(result.diagnostics) == 1
    diagnostic = result.diagnostics[0]
    assert diagnostic.kind is DiagnosticKind.MALFORMED_LINE
    assert diagnostic.line_number == 2
    assert diagnostic.line == bad_line
    assert f"got {field_count})" in diagnostic.message
    assert [r.field_count for r in caplog.records] == [field_count]


def test_no_validation_beyond_format(call_line):
    log = "\n".join(
        [
            call_line("", "10:00:00", "10:01:00"),
            call_line("7", "10:05:00", "10:00:00"),
            call_line("7", "10:05:00", "10:00:00"),
        ]
    )

    result = parse_call_records(log)

    assert [r.phone_number for r in result.records] == ["", "7", "7"]
    assert result.records[1].end_time < result.records[1].start_time


def test_crlf_line_endings_are_tolerated(call_line):
    log = call_line("1", "10:00:00", "10:02:00") + "\r\n" + call_line("2", "11:00:00", "11:03:00")

    result = parse_call_records(log)

    assert len(result.records) == 2
    assert result.records[0].end_time == datetime(2023, 9, 1, 10, 2)


def test_bad_timestamp_raises_by_default(call_line):
    log = "\n".join([call_line("1", "10:00:00", "10:01:00"), "2,01-09-2023 7.30,01-09-2023 07:40:00"])

    with pytest.raises(MalformedTimestampError) as exc_info:
        parse_call_records(log)

    assert exc_info.value.line_number == 2
    assert exc_info.value.value == "01-09-2023 7.30"


def test_bad_timestamp_skipped_under_skip_line_policy(call_line):
    log = "\n".join(
        [
            call_line("1", "10:00:00", "10:01:00"),
            "2,01-09-2023 10:00:00,not-a-date",
            call_line("3", "12:00:00", "12:01:00"),
        ]
    )

    result = parse_call_records(log, policy=TimestampErrorPolicy.SKIP_LINE)

    assert [r.phone_number for r in result.records] == ["1", "3"]
    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].kind is DiagnosticKind.MALFORMED_TIMESTAMP
    assert result.diagnostics[0].line_number == 2


def test_bad_timestamp_error_carries_earlier_diagnostics(call_line):
    log = "\n".join(["only,two", call_line("1", "10:00:00", "10:01:00"), "2,01-09-2023 10:00:00,bad"])

    with pytest.raises(MalformedTimestampError) as exc_info:
        parse_call_records(log)

    assert [d.line_number for d in exc_info.value.diagnostics] == [1]
    assert exc_info.value.diagnostics[0].kind is DiagnosticKind.MALFORMED_LINE
