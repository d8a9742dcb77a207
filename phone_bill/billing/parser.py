"""
Record parser: turns raw call log text into an ordered list of call records.

Each line has the shape:

    <phone number>,<dd-MM-yyyy HH:mm:ss>,<dd-MM-yyyy HH:mm:ss>

Lines with the wrong number of fields are skipped and reported as
diagnostics. A timestamp that does not match the format is handled according
to the `TimestampErrorPolicy` in effect; by default it aborts the parse.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from phone_bill.domain.errors import MalformedLineError, MalformedTimestampError
from phone_bill.domain.models import CallRecord, Diagnostic, DiagnosticKind, TimestampErrorPolicy
from phone_bill.utils.logging import get_logger

log = get_logger(__name__)

DATE_FORMAT = "%d-%m-%Y %H:%M:%S"
PHONE_LOG_FIELDS = 3
LINE_SEPARATOR = "\n"
FIELD_SEPARATOR = ","


@dataclass
class ParseResult:
    """Records in input order plus whatever was skipped along the way."""

    records: List[CallRecord] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)


def parse_timestamp(value: str) -> datetime:
    """
    Parse a `dd-MM-yyyy HH:mm:ss` timestamp.

    Raises ValueError when the value does not match the format.
    """
    return datetime.strptime(value.strip(), DATE_FORMAT)


def _parse_line(line: str, line_number: int, parts: List[str]) -> CallRecord:
    phone_number, start_field, end_field = parts
    timestamps = []
    for value in (start_field, end_field):
        try:
            timestamps.append(parse_timestamp(value))
        except ValueError as exc:
            raise MalformedTimestampError(
                f"Invalid timestamp {value!r} on line {line_number}",
                value=value,
                line_number=line_number,
                line=line,
            ) from exc
    start_time, end_time = timestamps
    return CallRecord(phone_number=phone_number, start_time=start_time, end_time=end_time)


def parse_call_records(
    phone_log: str,
    policy: TimestampErrorPolicy = TimestampErrorPolicy.FAIL_BATCH,
) -> ParseResult:
    """
    Parse the whole log.

    Parameters
    ----------
    phone_log : str
        The call log, one call per line.
    policy : TimestampErrorPolicy
        SKIP_LINE turns a bad timestamp into a diagnostic and moves on;
        FAIL_BATCH and RAISE both raise MalformedTimestampError here and
        leave the batch decision to the caller; the error carries the
        diagnostics collected up to that line.

    Returns
    -------
    ParseResult
        Records in input order and diagnostics for skipped lines.
    """
    result = ParseResult()
    lines = phone_log.split(LINE_SEPARATOR)
    # Only trailing blank lines are dropped; interior ones are malformed.
    while lines and not lines[-1].strip():
        lines.pop()

    for line_number, line in enumerate(lines, start=1):
        parts = line.split(FIELD_SEPARATOR)
        if len(parts) != PHONE_LOG_FIELDS:
            error = MalformedLineError(
                f"Invalid line format (expected {PHONE_LOG_FIELDS} fields, got {len(parts)}): {line}",
                field_count=len(parts),
                line_number=line_number,
                line=line,
            )
            log.warning(str(error), extra={"line_number": line_number, "field_count": len(parts)})
            result.diagnostics.append(Diagnostic.from_error(DiagnosticKind.MALFORMED_LINE, error))
            continue

        try:
            record = _parse_line(line, line_number, parts)
        except MalformedTimestampError as exc:
            if policy is not TimestampErrorPolicy.SKIP_LINE:
                exc.diagnostics = list(result.diagnostics)
                raise
            log.warning(str(exc), extra={"line_number": line_number})
            result.diagnostics.append(Diagnostic.from_error(DiagnosticKind.MALFORMED_TIMESTAMP, exc))
            continue

        result.records.append(record)

    log.debug(
        "Parsed call log",
        extra={"records": len(result.records), "skipped": len(result.diagnostics)},
    )
    return result


__all__ = ["DATE_FORMAT", "ParseResult", "parse_call_records", "parse_timestamp"]
