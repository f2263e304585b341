"""Creating bills for the shop."""

from __future__ import annotations

from repairshop.records import Bill, next_id
from repairshop.store import Shop

BILL_PREFIX = "B"


def create_bill(shop: Shop, time: str, customer_id: str, service_id: str) -> Bill:
    """Add a bill with the next free identifier and save the bills file."""
    bill = Bill(
        id=next_id(shop.bills, BILL_PREFIX),
        time=time,
        customer_id=customer_id,
        service_id=service_id,
    )
    shop.bills.append(bill)
    shop.save_bills()
    return bill