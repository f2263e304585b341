"""Finding records by identifier and assembling a bill's invoice."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, TypeVar

from repairshop.records import Bill, Customer, Service
from repairshop.store import Shop

R = TypeVar("R", Customer, Service, Bill)

CUSTOMER_TITLE = "Thông tin khách hàng:"
PAYMENT_TITLE = "Thông tin thanh toán:"

_CUSTOMER_LABELS = ("Mã KH:", "Tên KH:", "SĐT:", "Biển số:", "Loại xe:")
_PAYMENT_LABELS = ("Mã DV:", "Tên DV:", "Giá:", "Thời gian:")


def _first_with_id(records: Iterable[R], record_id: str) -> Optional[R]:
    return next((record for record in records if record.id == record_id), None)


def find_customer(customers: Iterable[Customer], customer_id: str) -> Optional[Customer]:
    """Return the first customer whose identifier equals ``customer_id``, or None."""
    return _first_with_id(customers, customer_id)


def find_service(services: Iterable[Service], service_id: str) -> Optional[Service]:
    """Return the first service whose identifier equals ``service_id``, or None."""
    return _first_with_id(services, service_id)


def find_bill(bills: Iterable[Bill], bill_id: str) -> Optional[Bill]:
    """Return the first bill whose identifier equals ``bill_id``, or None."""
    return _first_with_id(bills, bill_id)


@dataclass(frozen=True)
class Invoice:
    """A bill with the customer and service it refers to, where they exist."""

    bill: Bill
    customer: Optional[Customer]
    service: Optional[Service]

    @property
    def bill_id(self) -> str:
        return self.bill.id

    @property
    def time(self) -> str:
        return self.bill.time


def invoice_for(shop: Shop, bill_id: str) -> Optional[Invoice]:
    """Assemble the invoice of a bill, or return None if no bill has that identifier.

    The customer and the service are looked up independently; either is
    None when its identifier matches no record.
    """
    bill = find_bill(shop.bills, bill_id)
    if bill is None:
        return None
    return Invoice(
        bill=bill,
        customer=find_customer(shop.customers, bill.customer_id),
        service=find_service(shop.services, bill.service_id),
    )


def _section(title: str, labels: tuple[str, ...], values: Optional[tuple[str, ...]]) -> list[str]:
    if values is None:
        values = ("",) * len(labels)
    return [title, *(f"{label} {value}".rstrip() for label, value in zip(labels, values))]


def export_bill(shop: Shop, bill_id: str) -> str:
    """Render the invoice of a bill as text: customer details, then payment details.

    Fields of a customer or service that cannot be found are left blank.
    Raises KeyError if no bill has the given identifier.
    """
    invoice = invoice_for(shop, bill_id)
    if invoice is None:
        raise KeyError(bill_id)
    customer = invoice.customer
    service = invoice.service
    customer_values = (
        None
        if customer is None
        else (customer.id, customer.name, customer.phone, customer.plate, customer.car_type)
    )
    payment_values = (
        None if service is None else (service.id, service.name, service.cost, invoice.time)
    )
    lines = _section(CUSTOMER_TITLE, _CUSTOMER_LABELS, customer_values)
    lines += _section(PAYMENT_TITLE, _PAYMENT_LABELS, payment_values)
    return "\n".join(lines) + "\n"