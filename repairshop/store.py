"""The shop's data: customers, services and bills, kept in one directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from repairshop import records
from repairshop.records import Bill, Customer, Service

CUSTOMERS_FILE = "customers.txt"
SERVICES_FILE = "services.txt"
BILLS_FILE = "bills.txt"


@dataclass
class Shop:
    """All records of the shop and the directory their files live in."""

    directory: Path
    customers: list[Customer] = field(default_factory=list)
    services: list[Service] = field(default_factory=list)
    bills: list[Bill] = field(default_factory=list)

    @property
    def customers_path(self) -> Path:
        return Path(self.directory) / CUSTOMERS_FILE

    @property
    def services_path(self) -> Path:
        return Path(self.directory) / SERVICES_FILE

    @property
    def bills_path(self) -> Path:
        return Path(self.directory) / BILLS_FILE

    @classmethod
    def load(cls, directory: str | Path) -> "Shop":
        """Load the three record files from a directory; missing files are empty."""
        shop = cls(Path(directory))
        shop.customers = records.load_customers(shop.customers_path)
        shop.services = records.load_services(shop.services_path)
        shop.bills = records.load_bills(shop.bills_path)
        return shop

    def save_customers(self) -> None:
        """Rewrite the customers file from the current list."""
        records.save_customers(self.customers, self.customers_path)

    def save_services(self) -> None:
        """Rewrite the services file from the current list."""
        records.save_services(self.services, self.services_path)

    def save_bills(self) -> None:
        """Rewrite the bills file from the current list."""
        records.save_bills(self.bills, self.bills_path)