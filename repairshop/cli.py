"""Command line for managing the repair shop's customers, services and bills."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from repairshop import billing, customers, services
from repairshop.history import customer_history
from repairshop.lookup import export_bill
from repairshop.reports import StatNode, build_statistics
from repairshop.search import (
    filter_bills_by_time,
    filter_customers_by_plate,
    filter_services_by_name,
)
from repairshop.store import Shop

WINDOW_TITLE = "Quản lí tiệm sửa xe"
DEFAULT_DATA_DIR = Path("../database")

CUSTOMER_COLUMNS = ("Mã KH", "Tên KH", "SĐT", "Biển số", "Loại xe")
SERVICE_COLUMNS = ("Mã DV", "Tên dịch vụ", "Giá")
BILL_COLUMNS = ("Mã hóa đơn", "Thời gian", "Mã KH", "Mã DV")
HISTORY_COLUMNS = ("Thời gian", "Dịch vụ", "Giá")
STATS_COLUMNS = ("Thời gian", "Số xe sửa chữa", "Doanh thu (VND)")

Handler = Callable[[Shop, argparse.Namespace], Iterable[str]]


def _row(values: Iterable[str]) -> str:
    return "\t".join(values)


def _table(columns: Sequence[str], rows: Iterable[Sequence[str]]) -> list[str]:
    return [_row(columns), *(_row(row) for row in rows)]


def _customers_list(shop: Shop, args: argparse.Namespace) -> list[str]:
    found = filter_customers_by_plate(shop.customers, args.plate)
    return _table(
        CUSTOMER_COLUMNS, ((c.id, c.name, c.phone, c.plate, c.car_type) for c in found)
    )


def _customers_add(shop: Shop, args: argparse.Namespace) -> list[str]:
    customer = customers.add_customer(shop, args.name, args.phone, args.plate, args.car_type)
    return [customer.id]


def _customers_delete(shop: Shop, args: argparse.Namespace) -> list[str]:
    customer = customers.delete_customer(shop, args.id)
    return [customer.id]


def _customers_edit(shop: Shop, args: argparse.Namespace) -> list[str]:
    customer = customers.edit_customer(
        shop, args.id, args.name, args.phone, args.plate, args.car_type
    )
    return [customer.id]


def _customers_history(shop: Shop, args: argparse.Namespace) -> list[str]:
    entries = customer_history(shop, args.id)
    return _table(HISTORY_COLUMNS, ((e.time, e.service_name, e.cost) for e in entries))


def _services_list(shop: Shop, args: argparse.Namespace) -> list[str]:
    found = filter_services_by_name(shop.services, args.name)
    return _table(SERVICE_COLUMNS, ((s.id, s.name, s.cost) for s in found))


def _services_add(shop: Shop, args: argparse.Namespace) -> list[str]:
    service = services.add_service(shop, args.id, args.name, args.cost)
    return [service.id]


def _services_delete(shop: Shop, args: argparse.Namespace) -> list[str]:
    service = services.delete_service(shop, args.id)
    return [service.id]


def _services_edit(shop: Shop, args: argparse.Namespace) -> list[str]:
    service = services.edit_service(shop, args.id, args.new_id, args.name, args.cost)
    return [service.id]


def _bills_list(shop: Shop, args: argparse.Namespace) -> list[str]:
    found = filter_bills_by_time(shop.bills, args.time)
    return _table(
        BILL_COLUMNS, ((b.id, b.time, b.customer_id, b.service_id) for b in found)
    )


def _bills_create(shop: Shop, args: argparse.Namespace) -> list[str]:
    bill = billing.create_bill(shop, args.time, args.customer_id, args.service_id)
    return [bill.id]


def _bills_export(shop: Shop, args: argparse.Namespace) -> list[str]:
    return export_bill(shop, args.id).splitlines()


def _stat_lines(nodes: Iterable[StatNode], depth: int = 0) -> Iterable[str]:
    for node in nodes:
        yield "  " * depth + _row((node.label, str(node.cars), f"{node.revenue:f}"))
        yield from _stat_lines(node.children, depth + 1)


def _stats(shop: Shop, args: argparse.Namespace) -> list[str]:
    return [_row(STATS_COLUMNS), *_stat_lines(build_statistics(shop.bills, shop.services))]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="repairshop", description=WINDOW_TITLE)
    parser.add_argument(
        "--data",
        type=Path,
        default=DEFAULT_DATA_DIR,
        help="directory holding customers.txt, services.txt and bills.txt",
    )
    pages = parser.add_subparsers(dest="page", required=True)

    cust = pages.add_parser("customers", help="customers page")
    cust_cmds = cust.add_subparsers(dest="command", required=True)
    p = cust_cmds.add_parser("list", help="list customers")
    p.add_argument("--plate", default="", help="keep plates containing this text")
    p.set_defaults(handler=_customers_list)
    p = cust_cmds.add_parser("add", help="add a customer")
    for name in ("name", "phone", "plate", "car_type"):
        p.add_argument(name)
    p.set_defaults(handler=_customers_add)
    p = cust_cmds.add_parser("delete", help="delete a customer")
    p.add_argument("id")
    p.set_defaults(handler=_customers_delete)
    p = cust_cmds.add_parser("edit", help="edit a customer")
    for name in ("id", "name", "phone", "plate", "car_type"):
        p.add_argument(name)
    p.set_defaults(handler=_customers_edit)
    p = cust_cmds.add_parser("history", help="show a customer's history")
    p.add_argument("id")
    p.set_defaults(handler=_customers_history)

    serv = pages.add_parser("services", help="services page")
    serv_cmds = serv.add_subparsers(dest="command", required=True)
    p = serv_cmds.add_parser("list", help="list services")
    p.add_argument("--name", default="", help="keep names containing this text")
    p.set_defaults(handler=_services_list)
    p = serv_cmds.add_parser("add", help="add a service")
    for name in ("id", "name", "cost"):
        p.add_argument(name)
    p.set_defaults(handler=_services_add)
    p = serv_cmds.add_parser("delete", help="delete a service")
    p.add_argument("id")
    p.set_defaults(handler=_services_delete)
    p = serv_cmds.add_parser("edit", help="edit a service")
    for name in ("id", "new_id", "name", "cost"):
        p.add_argument(name)
    p.set_defaults(handler=_services_edit)

    bills = pages.add_parser("bills", help="bills page")
    bill_cmds = bills.add_subparsers(dest="command", required=True)
    p = bill_cmds.add_parser("list", help="list bills")
    p.add_argument("--time", default="", help="keep times containing this text")
    p.set_defaults(handler=_bills_list)
    p = bill_cmds.add_parser("create", help="create a bill")
    for name in ("time", "customer_id", "service_id"):
        p.add_argument(name)
    p.set_defaults(handler=_bills_create)
    p = bill_cmds.add_parser("export", help="export a bill")
    p.add_argument("id")
    p.set_defaults(handler=_bills_export)

    stats = pages.add_parser("stats", help="statistics by year, month and day")
    stats.set_defaults(handler=_stats)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one command against the shop's data; return the exit status."""
    args = _build_parser().parse_args(argv)
    shop = Shop.load(args.data)
    handler: Handler = args.handler
    try:
        lines = list(handler(shop, args))
    except KeyError as exc:
        print(f"not found: {exc.args[0]}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())