from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from phone_bill.billing.calculator import TelephoneBillCalculator
from phone_bill.config import get_settings
from phone_bill.domain.models import TimestampErrorPolicy
from phone_bill.reporter import print_bill
from phone_bill.utils.logging import configure_logging

app = typer.Typer(help="Telephone bill calculator CLI.")

SAMPLE_LOG = (
    "420774567453,01-09-2023 07:30:00,01-09-2023 07:40:00\n"
    "420776562353,01-09-2023 08:00:00,01-09-2023 08:20:00\n"
    "420774567453,01-09-2023 09:30:00,01-09-2023 10:00:00\n"
    "420776562353,01-09-2023 14:00:00,01-09-2023 14:30:00\n"
    "420774567453,01-09-2023 15:00:00,01-09-2023 15:30:00\n"
    "420777777777,01-09-2023 12:00:00,01-09-2023 12:15:00"
)

EXIT_BATCH_FAILED = 2


def _read_log(path: str, encoding: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding=encoding)


def _bill(phone_log: str, policy: TimestampErrorPolicy, itemized: bool) -> None:
    result = TelephoneBillCalculator(policy).calculate_bill(phone_log)
    if itemized:
        print_bill(result)
    typer.echo(f"{result.total:.2f}")
    if result.failed:
        raise typer.Exit(code=EXIT_BATCH_FAILED)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json={settings.log_json} | "
        f"timestamp_policy={settings.timestamp_policy.value} encoding={settings.log_encoding}"
    )


@app.command()
def calculate(
    path: str = typer.Argument("-", help="Call log file, or '-' to read from stdin."),
    itemized: bool = typer.Option(
        False, "--itemized", "-i", help="Print the per-call breakdown and diagnostics."
    ),
    policy: Optional[TimestampErrorPolicy] = typer.Option(
        None,
        "--policy",
        "-p",
        help="What to do with malformed timestamps (default from settings).",
    ),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON."),
) -> None:
    """
    Calculate the total bill for a call log.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=json_logs or settings.log_json)
    try:
        phone_log = _read_log(path, settings.log_encoding)
    except OSError as exc:
        typer.echo(f"Cannot read call log: {exc}", err=True)
        raise typer.Exit(code=1)
    _bill(phone_log, policy or settings.timestamp_policy, itemized)


@app.command()
def demo(
    itemized: bool = typer.Option(True, "--itemized/--total-only", help="Show the breakdown."),
) -> None:
    """
    Bill the built-in sample log.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    _bill(SAMPLE_LOG, settings.timestamp_policy, itemized)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
