"""Customer report-line kata — name and location as label/value pairs."""

from __future__ import annotations

from fleetkata.models import ReportLine

NAME = "report-lines"
DESCRIPTION = "Build the name and location report lines for a customer"


def report_lines(customer) -> list[ReportLine]:
    """Return a fresh list of ``[("name", ...), ("location", ...)]``."""
    lines: list[ReportLine] = []
    gather_customer_data(lines, customer)
    return lines


def gather_customer_data(lines: list[ReportLine], customer) -> None:
    """Append the customer's name line, then location line, to ``lines``.

    Missing attributes give a line with value None rather than an error.
    """
    lines.append(ReportLine("name", getattr(customer, "name", None)))
    lines.append(ReportLine("location", getattr(customer, "location", None)))
