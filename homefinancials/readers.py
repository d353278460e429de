"""Statement readers: a generic reader interface and bank-specific parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from os import PathLike
from typing import Iterable

from .commons import InvalidInputError, NotFoundError, parse_money_to_paise

_C_WHITESPACE = " \t\n\v\f\r"


@dataclass(frozen=True)
class BankAccountInfo:
    """Account-level data extracted from a parsed statement."""

    account_number: str
    opening_balance_paise: int = 0
    closing_balance_paise: int = 0


class Reader(ABC):
    """A parser for one kind of statement document."""

    @abstractmethod
    def parse(self, stream: Iterable[str]) -> None:
        """Parse the document from an iterable of text lines.

        Raises :class:`InvalidInputError` when the document cannot be used.
        The stream is read but not closed.
        """

    def parse_file(self, path: str | PathLike[str]) -> None:
        """Open ``path`` and parse it.

        Raises :class:`NotFoundError` when the file cannot be opened.
        """
        try:
            handle = open(path, encoding="utf-8", errors="replace", newline="")
        except OSError as exc:
            raise NotFoundError(f"cannot open statement file: {path}") from exc
        with handle:
            self.parse(handle)


class BankReader(Reader):
    """A reader for one bank's statements."""

    #: Short identifier of the bank this reader handles.
    bank_id: str = ""

    @abstractmethod
    def extract_account_info(self) -> BankAccountInfo | None:
        """Return the parsed account data, or ``None`` if not available."""


def _trim(text: str) -> str:
    return text.strip(_C_WHITESPACE)


def _parse_csv_line(line: str) -> list[str]:
    """Split a CSV line on commas outside double quotes; trim each field."""
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    skip_next = False
    for position, ch in enumerate(line):
        if skip_next:
            skip_next = False
            continue
        if ch == '"':
            if in_quotes and line[position + 1 : position + 2] == '"':
                current.append('"')
                skip_next = True
            else:
                in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            fields.append(_trim("".join(current)))
            current = []
        else:
            current.append(ch)
    fields.append(_trim("".join(current)))
    return fields


def _normalize_account_field(text: str) -> str:
    """Remove ``=`` and ``"`` artefacts from an account field and trim it."""
    return _trim("".join(ch for ch in text if ch not in '"='))


class CanaraBankReader(BankReader):
    """Reader for Canara Bank CSV statements."""

    bank_id = "canara"

    def __init__(self) -> None:
        self.account_number: str | None = None
        self.opening_balance_paise: int | None = None
        self.closing_balance_paise: int | None = None

    def parse(self, stream: Iterable[str]) -> None:
        """Read account number and opening/closing balances from the CSV.

        Raises :class:`InvalidInputError` if any of the three is missing.
        """
        self.account_number = None
        self.opening_balance_paise = None
        self.closing_balance_paise = None

        for raw_line in stream:
            fields = _parse_csv_line(raw_line.rstrip("\n"))
            if len(fields) < 2:
                continue
            key, value = fields[0], fields[1]
            if key == "Account Number":
                self.account_number = _normalize_account_field(value)
            elif key == "Opening Balance":
                paise = parse_money_to_paise(value)
                if paise is not None:
                    self.opening_balance_paise = paise
            elif key == "Closing Balance":
                paise = parse_money_to_paise(value)
                if paise is not None:
                    self.closing_balance_paise = paise

        if self.extract_account_info() is None:
            raise InvalidInputError(
                "statement lacks account number, opening or closing balance"
            )

    def extract_account_info(self) -> BankAccountInfo | None:
        """Return the parsed account data once all fields are known."""
        if (
            self.account_number is None
            or self.opening_balance_paise is None
            or self.closing_balance_paise is None
        ):
            return None
        return BankAccountInfo(
            account_number=self.account_number,
            opening_balance_paise=self.opening_balance_paise,
            closing_balance_paise=self.closing_balance_paise,
        )