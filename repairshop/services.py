"""Adding, deleting and editing the services the shop offers.

Every change is written back to the services file at once.
"""

from __future__ import annotations

from repairshop.lookup import find_service
from repairshop.records import Service
from repairshop.store import Shop


def _require(shop: Shop, service_id: str) -> Service:
    service = find_service(shop.services, service_id)
    if service is None:
        raise KeyError(service_id)
    return service


def add_service(shop: Shop, service_id: str, name: str, cost: str) -> Service:
    """Add a service with the given identifier and save the services file."""
    service = Service(id=service_id, name=name, cost=cost)
    shop.services.append(service)
    shop.save_services()
    return service


def delete_service(shop: Shop, service_id: str) -> Service:
    """Remove the first service with the given identifier and save the file.

    Raises KeyError if no service has that identifier.
    """
    service = _require(shop, service_id)
    shop.services.remove(service)
    shop.save_services()
    return service


def edit_service(shop: Shop, service_id: str, new_id: str, name: str, cost: str) -> Service:
    """Replace the identifier, name and cost of a service and save the file.

    Raises KeyError if no service has the identifier ``service_id``.
    """
    service = _require(shop, service_id)
    service.id = new_id
    service.name = name
    service.cost = cost
    shop.save_services()
    return service