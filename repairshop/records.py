"""Record types for the shop's customers, services and bills, and their text files.

Each file holds one record per line, with fields separated by ``|``.
A line is accepted only if every field is non-empty and no field but the
last exceeds its width; the last field is cut to its width.
"""

from __future__ import annotations

import logging
import re
from dataclasses import astuple, dataclass
from pathlib import Path
from typing import Callable, Iterable, Sequence, TypeVar

log = logging.getLogger(__name__)

# Widths of the fields of each record, as accepted on load.
CUSTOMER_WIDTHS = (9, 99, 19, 19, 49)
SERVICE_WIDTHS = (9, 99, 19)
BILL_WIDTHS = (9, 19, 9, 9)

# Longest identifier that next_id produces.
MAX_ID_LENGTH = 9

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Customer:
    """A customer and the car they bring in."""

    id: str
    name: str
    phone: str
    plate: str
    car_type: str


@dataclass
class Service:
    """A service the shop offers; the cost is kept as it was entered."""

    id: str
    name: str
    cost: str


@dataclass
class Bill:
    """A bill linking a customer to a service at a given time."""

    id: str
    time: str
    customer_id: str
    service_id: str


R = TypeVar("R", Customer, Service, Bill)


def _scan(line: str, widths: Sequence[int]) -> list[str]:
    """Split a line into ``len(widths)`` fields, or raise ValueError."""
    rest = line.split("\n", 1)[0]
    *heads, last_width = widths
    fields = []
    for position, width in enumerate(heads):
        head, sep, tail = rest.partition("|")
        if not head:
            raise ValueError(f"field {position} is empty in {line!r}")
        if len(head) > width:
            raise ValueError(f"field {position} is longer than {width} in {line!r}")
        if not sep:
            raise ValueError(f"expected {len(widths)} fields in {line!r}")
        fields.append(head)
        rest = tail
    if not rest:
        raise ValueError(f"last field is empty in {line!r}")
    fields.append(rest[:last_width])
    return fields


def parse_customer(line: str) -> Customer:
    """Parse one line of the customers file."""
    return Customer(*_scan(line, CUSTOMER_WIDTHS))


def parse_service(line: str) -> Service:
    """Parse one line of the services file."""
    return Service(*_scan(line, SERVICE_WIDTHS))


def parse_bill(line: str) -> Bill:
    """Parse one line of the bills file."""
    return Bill(*_scan(line, BILL_WIDTHS))


def _format(record: Customer | Service | Bill) -> str:
    return "|".join(astuple(record))


def format_customer(customer: Customer) -> str:
    """Render a customer as a line of the customers file, without newline."""
    return _format(customer)


def format_service(service: Service) -> str:
    """Render a service as a line of the services file, without newline."""
    return _format(service)


def format_bill(bill: Bill) -> str:
    """Render a bill as a line of the bills file, without newline."""
    return _format(bill)


def _load(path: str | Path, parse: Callable[[str], R]) -> list[R]:
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.readlines()
    except FileNotFoundError:
        log.warning("cannot open file: %s", path)
        return []
    records = []
    for line in lines:
        try:
            records.append(parse(line))
        except ValueError:
            continue
    return records


def _save(records: Iterable[R], path: str | Path, render: Callable[[R], str]) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(render(record) + "\n" for record in records)


def load_customers(path: str | Path) -> list[Customer]:
    """Read customers from a file; malformed lines are skipped, a missing file is empty."""
    return _load(path, parse_customer)


def load_services(path: str | Path) -> list[Service]:
    """Read services from a file; malformed lines are skipped, a missing file is empty."""
    return _load(path, parse_service)


def load_bills(path: str | Path) -> list[Bill]:
    """Read bills from a file; malformed lines are skipped, a missing file is empty."""
    return _load(path, parse_bill)


def save_customers(customers: Iterable[Customer], path: str | Path) -> None:
    """Write all customers to a file, replacing its contents."""
    _save(customers, path, format_customer)


def save_services(services: Iterable[Service], path: str | Path) -> None:
    """Write all services to a file, replacing its contents."""
    _save(services, path, format_service)


def save_bills(bills: Iterable[Bill], path: str | Path) -> None:
    """Write all bills to a file, replacing its contents."""
    _save(bills, path, format_bill)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def next_id(records: Sequence[Customer | Service | Bill], prefix: str) -> str:
    """Make the identifier following that of the last record.

    The number after the prefix's length in the last identifier is
    incremented and written with at least three digits; an empty
    sequence starts at one.
    """
    number = _leading_int(records[-1].id[len(prefix):]) if records else 0
    return f"{prefix}{number + 1:03d}"[:MAX_ID_LENGTH]