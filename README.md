# repairshop

Bookkeeping for a small vehicle repair shop: customers and their vehicles,
the services the shop offers, the bills it issues, a customer's service
history and revenue statistics by year, month and day.

## Data files

All data lives in three plain text files in one directory, one record per
line with fields separated by `|`:

| File            | Fields                                      |
|-----------------|---------------------------------------------|
| `customers.txt` | id, name, phone, number plate, vehicle type |
| `services.txt`  | id, name, cost                              |
| `bills.txt`     | id, time, customer id, service id           |

When a file is read, a line is kept only if it has every field and no field
is empty; every field but the last has a maximum width (customers: 9, 99,
19, 19; services: 9, 99; bills: 9, 19, 9), and the last field is cut to its
width (customers 49, services 19, bills 9). Other lines are skipped. A
missing file reads as empty, with a warning logged. Every change rewrites
the whole file.

Customer ids look like `KH001` and bill ids like `B001`: a new id takes the
number after the prefix in the last record's id, adds one and writes it
with at least three digits. Service ids are chosen by the user. Bill times
are written as `day-month-year`, for example `05-03-2024`, which is what
the statistics group by.

## Installing

```
pip install .
```

## Command line

```
repairshop [--data DIR] PAGE COMMAND [ARGS]
```

`--data` names the directory holding the three files; it defaults to
`../database`. Lists are printed as tab-separated rows under a header row.

| Command | What it does |
|---------|--------------|
| `repairshop customers list [--plate TEXT]` | customers whose plate contains TEXT |
| `repairshop customers add NAME PHONE PLATE CAR_TYPE` | add a customer, print its new id |
| `repairshop customers edit ID NAME PHONE PLATE CAR_TYPE` | replace a customer's details, keeping the id |
| `repairshop customers delete ID` | remove a customer |
| `repairshop customers history ID` | time, service name and cost of each of the customer's bills |
| `repairshop services list [--name TEXT]` | services whose name contains TEXT |
| `repairshop services add ID NAME COST` | add a service |
| `repairshop services edit ID NEW_ID NAME COST` | replace a service's id, name and cost |
| `repairshop services delete ID` | remove a service |
| `repairshop bills list [--time TEXT]` | bills whose time contains TEXT |
| `repairshop bills create TIME CUSTOMER_ID SERVICE_ID` | add a bill, print its new id |
| `repairshop bills export ID` | print the bill's customer and payment details |
| `repairshop stats` | vehicle count and revenue per year, month and day, indented by level |

When an id given to `edit`, `delete` or `bills export` matches no record,
the command prints `not found: ID` to standard error and exits with
status 1.

## Using it from Python

```python
from repairshop.store import Shop
from repairshop.customers import add_customer, edit_customer, delete_customer
from repairshop.services import add_service, edit_service, delete_service
from repairshop.billing import create_bill
from repairshop.lookup import invoice_for, export_bill
from repairshop.history import customer_history
from repairshop.search import filter_customers_by_plate
from repairshop.reports import build_statistics

shop = Shop.load("database")

add_service(shop, "DV01", "Oil change", "150000")
add_customer(shop, "Jane Doe", "0000", "TEST-0001", "Scooter")   # id KH001 in an empty shop
create_bill(shop, "05-03-2024", "KH001", "DV01")                 # id B001 in an empty shop

invoice = invoice_for(shop, "B001")         # Invoice with bill, customer and service, or None
text = export_bill(shop, "B001")            # the invoice as text; KeyError if no such bill
visits = customer_history(shop, "KH001")    # list of HistoryEntry: bill_id, time, service_name, cost
matches = filter_customers_by_plate(shop.customers, "TEST")
stats = build_statistics(shop.bills, shop.services)  # StatNode trees: year > month > day
```

- `repairshop.records` holds the `Customer`, `Service` and `Bill`
  dataclasses, the line parsers and formatters, `load_*`/`save_*` for each
  file and `next_id`.
- `Shop` keeps the three lists and the directory; `save_customers`,
  `save_services` and `save_bills` rewrite the matching file.
- `add_*`, `edit_*`, `delete_*` and `create_bill` save at once.
  `edit_*` and `delete_*` act on the first record with the given id and
  raise `KeyError` when there is none.
- `find_customer`, `find_service` and `find_bill` need the exact id and
  return `None` when nothing matches.
- Searching by plate, service name or bill time keeps records whose field
  contains the text, in their original order; an empty text keeps all.
- In a customer's history, a service that cannot be found appears as
  `Không rõ` with cost `N/A`.
- `service_price` reads the number at the start of a service's cost
  (0.0 if there is none or the service is unknown); `build_statistics`
  sums these prices per period and counts one vehicle per bill.

## What it does not do

There is no graphical window: everything is done through the command line
or from Python, one command at a time. Bills are not checked against the
customers and services that exist, and deleting a customer or service
leaves their bills in place.

## Tests

```
pip install .[test]
pytest
```