"""A customer's history: the services they were billed for, in bill order."""

from __future__ import annotations

from dataclasses import dataclass

from repairshop.lookup import find_service
from repairshop.store import Shop

UNKNOWN_SERVICE = "Không rõ"
UNKNOWN_COST = "N/A"


@dataclass(frozen=True)
class HistoryEntry:
    """One visit of a customer: when it was, which service, at what cost."""

    bill_id: str
    time: str
    service_name: str
    cost: str


def customer_history(shop: Shop, customer_id: str) -> list[HistoryEntry]:
    """List the bills of a customer with the name and cost of each service.

    An empty identifier gives no entries. A service that cannot be found
    is shown as unknown, with no cost.
    """
    if not customer_id:
        return []
    entries = []
    for bill in shop.bills:
        if bill.customer_id != customer_id:
            continue
        service = find_service(shop.services, bill.service_id)
        entries.append(
            HistoryEntry(
                bill_id=bill.id,
                time=bill.time,
                service_name=service.name if service is not None else UNKNOWN_SERVICE,
                cost=service.cost if service is not None else UNKNOWN_COST,
            )
        )
    return entries