"""Shared error types and money parsing helpers."""

from __future__ import annotations

_INT64_MAX = 2**63 - 1


class HomeFinancialsError(Exception):
    """Base class for all errors raised by the package."""


class InvalidInputError(HomeFinancialsError, ValueError):
    """Raised when supplied data is malformed or incomplete."""


class MaxMembersExceededError(HomeFinancialsError):
    """Raised when a family already holds the maximum number of members."""


class NotFoundError(HomeFinancialsError, LookupError):
    """Raised when a requested record or file does not exist."""


class DatabaseError(HomeFinancialsError):
    """Raised when the underlying database reports a failure."""


def parse_money_to_paise(text: str) -> int | None:
    """Parse a currency string such as ``"Rs.7,43,483.09"`` into paise.

    Every character other than digits and dots is ignored; a ``-`` anywhere
    marks the value negative. The last dot is taken as the decimal separator
    and the fraction is truncated or padded to two digits. Returns ``None``
    when no number can be read.
    """
    negative = "-" in text
    filtered = "".join(ch for ch in text if ch == "." or ("0" <= ch <= "9"))
    if not filtered:
        return None

    whole, dot, fraction = filtered.rpartition(".")
    if not dot:
        whole, fraction = filtered, ""
    whole = whole.replace(".", "") or "0"
    fraction = fraction.replace(".", "")[:2].ljust(2, "0")

    value = int(whole + fraction)
    if value > _INT64_MAX:
        return None
    return -value if negative else value