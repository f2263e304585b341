[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "repairshop"
version = "0.1.0"
description = "Customer, service and billing records for a vehicle repair shop, kept in plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["repair shop", "garage", "billing", "invoices", "customers", "records"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Vietnamese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
repairshop = "repairshop.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["repairshop"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
