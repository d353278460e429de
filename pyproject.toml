[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "homefinancials"
version = "0.1.0"
description = "Household finances: families, members, bank statement import and net worth tracking backed by SQLite."
requires-python = ">=3.10"
dependencies = []
keywords = ["finance", "household", "net worth", "bank statement", "sqlite", "accounting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["homefinancials*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
