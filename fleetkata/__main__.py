"""CLI for fleetkata.

Usage:
    python -m fleetkata list                                   # Show available katas
    python -m fleetkata rating -l 6                            # Rate a driver
    python -m fleetkata rating -l 6 --json                     # Same, as JSON on stdout
    python -m fleetkata report-lines --name Kaio --location Lisbon
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fleetkata.catalog import list_katas
from fleetkata.models import Customer, Driver
from fleetkata.rating import LATE_DELIVERY_THRESHOLD, rating
from fleetkata.report_lines import report_lines

app = typer.Typer(
    name="fleetkata",
    help="Driver ratings and customer report lines",
    no_args_is_help=True,
)
console = Console(stderr=True)


@app.command("list")
def cmd_list() -> None:
    """Show available katas."""
    katas = list_katas()
    if not katas:
        console.print("[yellow]No katas found.[/yellow]")
        raise typer.Exit(1)

    table = Table(title="Available Katas", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=12)
    table.add_column("Description", min_width=30)
    table.add_column("Module", style="dim")

    for k in katas:
        table.add_row(k.name, k.description, k.module)

    console.print()
    console.print(table)
    console.print()


@app.command("rating")
def cmd_rating(
    late_deliveries: int = typer.Option(..., "--late-deliveries", "-l", help="Number of late deliveries"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON to stdout instead of a table"),
) -> None:
    """Rate a driver from their number of late deliveries."""
    driver = Driver(number_of_late_deliveries=late_deliveries)
    result = rating(driver)

    if as_json:
        typer.echo(json.dumps({"driver": driver.to_dict(), "rating": result}))
        return

    color = "red" if result == 2 else "green"
    table = Table(title="Driver Rating", show_header=True, header_style="bold")
    table.add_column("Late deliveries", justify="right")
    table.add_column("Threshold", justify="right", style="dim")
    table.add_column("Rating", justify="right")
    table.add_row(str(late_deliveries), f"> {LATE_DELIVERY_THRESHOLD}", f"[{color}]{result}[/{color}]")
    console.print(table)


@app.command("report-lines")
def cmd_report_lines(
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Customer name"),
    location: Optional[str] = typer.Option(None, "--location", help="Customer location"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON to stdout instead of a table"),
) -> None:
    """Build the report lines for a customer."""
    customer = Customer(name=name, location=location)
    lines = report_lines(customer)

    if as_json:
        typer.echo(json.dumps({
            "customer": customer.to_dict(),
            "lines": [list(line) for line in lines],
        }))
        return

    table = Table(title="Customer Report", show_header=True, header_style="bold")
    table.add_column("Field", style="dim", min_width=10)
    table.add_column("Value", min_width=16)
    for line in lines:
        table.add_row(line.label, escape(line.value) if line.value is not None else "[dim]--[/dim]")
    console.print(table)


if __name__ == "__main__":
    app()
