"""Adding, deleting and editing the shop's customers.

Every change is written back to the customers file at once.
"""

from __future__ import annotations

from repairshop.lookup import find_customer
from repairshop.records import Customer, next_id
from repairshop.store import Shop

CUSTOMER_PREFIX = "KH"


def _require(shop: Shop, customer_id: str) -> Customer:
    customer = find_customer(shop.customers, customer_id)
    if customer is None:
        raise KeyError(customer_id)
    return customer


def add_customer(shop: Shop, name: str, phone: str, plate: str, car_type: str) -> Customer:
    """Add a customer with the next free identifier and save the customers file."""
    customer = Customer(
        id=next_id(shop.customers, CUSTOMER_PREFIX),
        name=name,
        phone=phone,
        plate=plate,
        car_type=car_type,
    )
    shop.customers.append(customer)
    shop.save_customers()
    return customer


def delete_customer(shop: Shop, customer_id: str) -> Customer:
    """Remove the first customer with the given identifier and save the file.

    Raises KeyError if no customer has that identifier.
    """
    customer = _require(shop, customer_id)
    shop.customers.remove(customer)
    shop.save_customers()
    return customer


def edit_customer(
    shop: Shop, customer_id: str, name: str, phone: str, plate: str, car_type: str
) -> Customer:
    """Replace the details of a customer, keeping its identifier, and save the file.

    Raises KeyError if no customer has that identifier.
    """
    customer = _require(shop, customer_id)
    customer.name = name
    customer.phone = phone
    customer.plate = plate
    customer.car_type = car_type
    shop.save_customers()
    return customer