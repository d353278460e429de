"""Household finances library: families, members, bank statement import and net worth in SQLite."""

__version__ = "0.1.0"

__all__ = [
    "bank_account",
    "commons",
    "home_manager",
    "models",
    "net_worth",
    "reader_factory",
    "readers",
    "storage",
]