"""Data models for fleetkata.

Driver, Customer, ReportLine — the records that flow into and out of the
rating and report-line functions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional


@dataclass
class Driver:
    """A delivery driver, tracked by count of late deliveries."""

    number_of_late_deliveries: int = 0

    def to_dict(self) -> dict:
        return {"numberOfLateDeliveries": self.number_of_late_deliveries}

    @classmethod
    def from_dict(cls, d: dict) -> Driver:
        """Build from a JSON-style dict (camelCase or snake_case key)."""
        if "numberOfLateDeliveries" in d:
            return cls(number_of_late_deliveries=d["numberOfLateDeliveries"])
        return cls(number_of_late_deliveries=d.get("number_of_late_deliveries", 0))


@dataclass
class Customer:
    """A billing customer, identified by name and location."""

    name: Optional[str] = None
    location: Optional[str] = None

    def to_dict(self) -> dict:
        return {"name": self.name, "location": self.location}

    @classmethod
    def from_dict(cls, d: dict) -> Customer:
        return cls(name=d.get("name"), location=d.get("location"))


class ReportLine(NamedTuple):
    """A label/value pair in a customer report.

    Compares equal to a plain ``(label, value)`` tuple.
    """

    label: str
    value: Optional[str]
