"""Statistics of repaired cars and revenue, grouped by year, month and day."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from repairshop.records import Bill, Service

_HEX_FLOAT = re.compile(
    r"\s*([+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)"
)
_DEC_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_SPECIAL_FLOAT = re.compile(r"\s*([+-]?(?:infinity|inf|nan))", re.IGNORECASE)
_DATE = re.compile(r"\s*([+-]?\d+)(?:-\s*([+-]?\d+)(?:-\s*([+-]?\d+))?)?")


def _leading_float(text: str) -> float:
    """Read the number at the start of ``text``; 0.0 if there is none."""
    match = _HEX_FLOAT.match(text)
    if match:
        return float.fromhex(match.group(1))
    match = _DEC_FLOAT.match(text)
    if match:
        return float(match.group(1))
    match = _SPECIAL_FLOAT.match(text)
    if match:
        return float(match.group(1))
    return 0.0


def _parse_date(text: str) -> tuple[int, int, int]:
    """Read ``day-month-year``; parts that cannot be read count as 0."""
    match = _DATE.match(text)
    if not match:
        return 0, 0, 0
    day, month, year = (int(part) if part is not None else 0 for part in match.groups())
    return day, month, year


def service_price(services: Iterable[Service], service_id: str) -> float:
    """Return the price of the first service with the given identifier, or 0.0."""
    for service in services:
        if service.id == service_id:
            return _leading_float(service.cost)
    return 0.0


@dataclass
class StatNode:
    """One row of the statistics: a period, its car count and its revenue."""

    label: str
    cars: int = 0
    revenue: float = 0.0
    children: list["StatNode"] = field(default_factory=list)

    def add(self, price: float) -> None:
        """Count one more car repaired for ``price``."""
        self.cars += 1
        self.revenue += price

    def child(self, label: str) -> "StatNode":
        """Return the direct child with the given label; KeyError if none."""
        for node in self.children:
            if node.label == label:
                return node
        raise KeyError(label)


def build_statistics(bills: Iterable[Bill], services: Sequence[Service]) -> list[StatNode]:
    """Group the bills by year, month and day, counting cars and summing prices.

    Bill times are read as ``day-month-year``. Years appear in the order
    they are first met, as do the months of a year and the days of a month.
    """
    years: dict[int, StatNode] = {}
    months: dict[tuple[int, int], StatNode] = {}
    days: dict[tuple[int, int, int], StatNode] = {}
    roots: list[StatNode] = []

    for bill in bills:
        day, month, year = _parse_date(bill.time)
        price = service_price(services, bill.service_id.strip())

        year_node = years.get(year)
        if year_node is None:
            year_node = StatNode(str(year))
            years[year] = year_node
            roots.append(year_node)
        year_node.add(price)

        month_node = months.get((year, month))
        if month_node is None:
            month_node = StatNode(f"Tháng {month}")
            months[(year, month)] = month_node
            year_node.children.append(month_node)
        month_node.add(price)

        day_node = days.get((year, month, day))
        if day_node is None:
            day_node = StatNode(f"Ngày {day}")
            days[(year, month, day)] = day_node
            month_node.children.append(day_node)
        day_node.add(price)

    return roots