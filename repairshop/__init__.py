"""Customer, service and billing records for a vehicle repair shop, with a command line."""

__version__ = "0.1.0"