"""Filtering the record lists by a text typed into a page's search bar.

A record is kept when the searched field contains the text; an empty
text keeps every record. The order of the records is preserved.
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from repairshop.records import Bill, Customer, Service

R = TypeVar("R", Customer, Service, Bill)


def _filter(records: Iterable[R], text: str, field: Callable[[R], str]) -> list[R]:
    if not text:
        return list(records)
    return [record for record in records if text in field(record)]


def filter_customers_by_plate(customers: Iterable[Customer], text: str) -> list[Customer]:
    """Return the customers whose number plate contains ``text``."""
    return _filter(customers, text, lambda customer: customer.plate)


def filter_services_by_name(services: Iterable[Service], text: str) -> list[Service]:
    """Return the services whose name contains ``text``."""
    return _filter(services, text, lambda service: service.name)


def filter_bills_by_time(bills: Iterable[Bill], text: str) -> list[Bill]:
    """Return the bills whose time contains ``text``."""
    return _filter(bills, text, lambda bill: bill.time)