"""
Synthetic call log generator for the phone bill calculator.

Writes deterministic pseudo-random call records in the log format the
calculator reads, optionally sprinkling in malformed lines to exercise the
diagnostics path.
"""

from __future__ import annotations

import csv
import random
import sys
import tempfile
import time
from datetime import datetime, timedelta
from pathlib import Path

import typer

from phone_bill.billing.parser import DATE_FORMAT

app = typer.Typer(help="Generate a synthetic call log.")

PHONE_PREFIX = "420"
BASE_DATE = datetime(2023, 9, 1)


def _phone_numbers(rng: random.Random, count: int) -> list[str]:
    return [f"{PHONE_PREFIX}{rng.randint(770_000_000, 779_999_999)}" for _ in range(count)]


def _generate_calls(
    log_path: Path,
    calls: int,
    numbers: int,
    batch_size: int,
    seed: int,
    malformed_every: int = 0,
) -> None:
    """
    Write `calls` lines to `log_path`.

    Every `malformed_every`-th line (when > 0) is written with a missing
    end timestamp, which the parser skips as a malformed line.
    """
    rng = random.Random(seed)
    pool = _phone_numbers(rng, numbers)

    with log_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")

        buffer: list[list[str]] = []
        for i in range(calls):
            start = BASE_DATE + timedelta(
                days=rng.randint(0, 29),
                seconds=rng.randint(0, 24 * 3600 - 1),
            )
            end = start + timedelta(seconds=rng.randint(0, 45 * 60))
            row = [rng.choice(pool), start.strftime(DATE_FORMAT), end.strftime(DATE_FORMAT)]
            if malformed_every and (i + 1) % malformed_every == 0:
                row = row[:2]
            buffer.append(row)
            if len(buffer) >= batch_size:
                writer.writerows(buffer)
                buffer.clear()
        if buffer:
            writer.writerows(buffer)


@app.command()
def main(
    calls: int = typer.Option(
        1_000,
        "--calls",
        "-c",
        help="Number of call lines to generate.",
    ),
    numbers: int = typer.Option(
        20,
        "--numbers",
        "-n",
        help="Number of distinct phone numbers to draw from.",
    ),
    batch_size: int = typer.Option(
        500,
        "--batch-size",
        "-b",
        help="Lines buffered before each write.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    malformed_every: int = typer.Option(
        0,
        "--malformed-every",
        help="Write every Nth line with a missing field (0 disables).",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional output path (if omitted, a temp file will be used).",
    ),
) -> None:
    """
    Generate a synthetic call log.
    """
    start = time.perf_counter()
    if output:
        log_path = output
        log_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        tmpdir = Path(tempfile.mkdtemp(prefix="phone_bill_"))
        log_path = tmpdir / "calls.log"

    typer.echo(f"Generating {calls:,} calls over {numbers} numbers -> {log_path} (seed={seed})")
    _generate_calls(
        log_path,
        calls=calls,
        numbers=numbers,
        batch_size=batch_size,
        seed=seed,
        malformed_every=malformed_every,
    )
    duration = time.perf_counter() - start
    typer.echo(f"Generation completed in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
