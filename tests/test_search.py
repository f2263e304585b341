import pytest

from repairshop.records import Bill, Customer, Service
from repairshop.search import (
    filter_bills_by_time,
    filter_customers_by_plate,
    filter_services_by_name,
)


@pytest.fixture
def customers():
    return [
        Customer("KH001", "An", "0100", "TEST-111", "Sedan"),
        Customer("KH002", "Binh", "0200", "DEMO-222", "Truck"),
        Customer("KH003", "Chi", "0300", "TEST-333", "Van"),
    ]


@pytest.fixture
def services():
    return [
        Service("DV001", "Thay dau", "100000"),
        Service("DV002", "Rua xe", "50000"),
        Service("DV003", "Thay lop", "400000"),
    ]


@pytest.fixture
def bills():
    return [
        Bill("B001", "01-05-2024", "KH001", "DV001"),
        Bill("B002", "02-06-2024", "KH002", "DV002"),
        Bill("B003", "03-05-2025", "KH003", "DV003"),
    ]


def test_empty_text_keeps_all_customers(customers):
    assert filter_customers_by_plate(customers, "") == customers


def test_customers_filtered_by_plate_substring(customers):
    result = filter_customers_by_plate(customers, "TEST")
    assert [c.id for c in result] == ["KH001", "KH003"]


def test_customer_filter_ignores_other_fields(customers):
    assert filter_customers_by_plate(customers, "An") == []


def test_customer_filter_is_case_sensitive(customers):
    assert filter_customers_by_plate(customers, "test") == []


def test_services_filtered_by_name(services):
    result = filter_services_by_name(services, "Thay")
    assert [s.id for s in result] == ["DV001", "DV003"]


def test_empty_text_keeps_all_services(services):
    assert filter_services_by_name(services, "") == services


def test_bills_filtered_by_time(bills):
    result = filter_bills_by_time(bills, "-05-")
    assert [b.id for b in result] == ["B001", "B003"]


def test_bill_filter_no_match(bills):
    assert filter_bills_by_time(bills, "1999") == []


def test_filter_result_is_subset_in_order(bills):
    result = filter_bills_by_time(bills, "2024")
    assert all("2024" in b.time for b in result)
    assert result == [b for b in bills if b in result]


def test_filter_accepts_iterables(customers):
    result = filter_customers_by_plate(iter(customers), "DEMO")
    assert result == [customers[1]]