import pytest

from repairshop.records import (
    Bill,
    Customer,
    Service,
    format_bill,
    format_customer,
    format_service,
    load_bills,
    load_customers,
    load_services,
    next_id,
    parse_bill,
    parse_customer,
    parse_service,
    save_bills,
    save_customers,
    save_services,
)


def make_customer(cid="KH001"):
    return Customer(cid, "Alice", "0123", "TEST-001", "Sedan")


def test_parse_customer_fields():
    customer = parse_customer("KH001|Alice|0123|TEST-001|Sedan\n")
    assert customer == Customer("KH001", "Alice", "0123", "TEST-001", "Sedan")


def test_parse_service_fields():
    assert parse_service("DV01|Oil change|150000\n") == Service("DV01", "Oil change", "150000")


def test_parse_bill_fields():
    bill = parse_bill("B001|01-02-2024|KH001|DV01\n")
    assert bill == Bill("B001", "01-02-2024", "KH001", "DV01")


def test_last_field_may_contain_separator():
    service = parse_service("DV01|Wash|10|extra\n")
    assert service.cost == "10|extra"


def test_last_field_is_truncated():
    service = parse_service("DV01|Wash|" + "9" * 30 + "\n")
    assert service.cost == "9" * 19


@pytest.mark.parametrize(
    "line",
    [
        "",
        "\n",
        "KH001|Alice|0123|TEST-001\n",
        "KH001||0123|TEST-001|Sedan\n",
        "KH001|Alice|0123|TEST-001|\n",
        "KH0000000001|Alice|0123|TEST-001|Sedan\n",
    ],
)
def test_parse_customer_rejects_malformed(line):
    with pytest.raises(ValueError):
        parse_customer(line)


def test_parse_bill_rejects_long_time():
    with pytest.raises(ValueError):
        parse_bill("B001|" + "1" * 20 + "|KH001|DV01\n")


def test_format_bill_pinned():
    assert format_bill(Bill("B001", "01-02-2024", "KH001", "DV01")) == "B001|01-02-2024|KH001|DV01"


def test_format_parse_round_trip():
    customer = make_customer()
    service = Service("DV02", "Brakes", "300000")
    bill = Bill("B002", "03-04-2024", "KH001", "DV02")
    assert parse_customer(format_customer(customer)) == customer
    assert parse_service(format_service(service)) == service
    assert parse_bill(format_bill(bill)) == bill


def test_save_load_round_trip(tmp_path):
    customers = [make_customer("KH001"), make_customer("KH002")]
    services = [Service("DV01", "Wash", "50000")]
    bills = [Bill("B001", "01-01-2024", "KH001", "DV01")]
    save_customers(customers, tmp_path / "c.txt")
    save_services(services, tmp_path / "s.txt")
    save_bills(bills, tmp_path / "b.txt")
    assert load_customers(tmp_path / "c.txt") == customers
    assert load_services(tmp_path / "s.txt") == services
    assert load_bills(tmp_path / "b.txt") == bills


def test_save_writes_one_line_per_record(tmp_path):
    customers = [make_customer("KH001"), make_customer("KH002")]
    path = tmp_path / "c.txt"
    save_customers(customers, path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == [format_customer(c) for c in customers]


def test_load_skips_malformed_lines(tmp_path):
    path = tmp_path / "s.txt"
    path.write_text("DV01|Wash|50000\nbroken line\n\nDV02|Paint|90000\n", encoding="utf-8")
    assert [s.id for s in load_services(path)] == ["DV01", "DV02"]


def test_load_missing_file_is_empty(tmp_path):
    assert load_customers(tmp_path / "missing.txt") == []
    assert load_bills(tmp_path / "missing.txt") == []


def test_next_id_increments_last():
    customers = [make_customer("KH003"), make_customer("KH007")]
    assert next_id(customers, "KH") == "KH008"


def test_next_id_empty_starts_at_one():
    assert next_id([], "B") == "B001"


def test_next_id_keeps_prefix_and_grows():
    bills = [Bill("B999", "t", "KH001", "DV01")]
    result = next_id(bills, "B")
    assert result.startswith("B")
    assert int(result[1:]) == 1000


def test_next_id_non_numeric_suffix_counts_as_zero():
    bills = [Bill("Bxyz", "t", "KH001", "DV01")]
    assert next_id(bills, "B") == next_id([], "B")