from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from phone_bill.billing.parser import DATE_FORMAT
from phone_bill.domain.models import BillResult


def _money(value) -> str:
    return f"{value:.2f}"


def build_charges_table(result: BillResult) -> Table:
    """
    Per-call breakdown, in log order.

    Exempt calls are shown dimmed with a rate of "free".
    """
    caption = f"Free number: {result.exempt_number}" if result.exempt_number else None
    table = Table(title="Phone Bill", box=box.ROUNDED, caption=caption)

    table.add_column("#", justify="right", style="dim")
    table.add_column("Phone Number", style="cyan", no_wrap=True)
    table.add_column("Start", style="magenta")
    table.add_column("Minutes", justify="right")
    table.add_column("Rate", justify="right", style="blue")
    table.add_column("Base", justify="right", style="green")
    table.add_column("Surcharge", justify="right", style="yellow")
    table.add_column("Cost", justify="right", style="bold green")

    for index, charge in enumerate(result.charges, start=1):
        record = charge.record
        rate = "free" if charge.exempt else _money(charge.base_rate.rate)
        table.add_row(
            str(index),
            record.phone_number,
            record.start_time.strftime(DATE_FORMAT),
            str(charge.duration_minutes),
            rate,
            _money(charge.base_cost),
            _money(charge.surcharge),
            _money(charge.cost),
            style="dim" if charge.exempt else None,
        )

    table.add_section()
    table.add_row("", "Total", "", "", "", "", "", _money(result.total), style="bold")
    return table


def build_diagnostics_table(result: BillResult) -> Table:
    table = Table(title="Diagnostics", box=box.ROUNDED)
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Kind", style="red")
    table.add_column("Message")
    for diagnostic in result.diagnostics:
        table.add_row(str(diagnostic.line_number), diagnostic.kind.value, diagnostic.message)
    return table


def print_bill(result: BillResult, console: Optional[Console] = None) -> None:
    """
    Render an itemized bill as rich tables.

    Diagnostics are printed after the charges when the log had any.
    """
    console = console or Console()

    if result.failed:
        console.print("[red]Bill could not be calculated; total reported as 0.[/red]")
    elif not result.charges:
        console.print("[yellow]No calls to bill.[/yellow]")
    else:
        console.print(build_charges_table(result))

    if result.diagnostics:
        console.print(build_diagnostics_table(result))
