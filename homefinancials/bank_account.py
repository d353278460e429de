"""Persisted bank-account rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


def paise_to_rupees(paise: int) -> float:
    """Convert an amount in paise to rupees."""
    return paise / 100.0


def normalize_account_number(raw: str) -> str:
    """Drop spaces, tabs and hyphens and upper-case ASCII letters."""
    return "".join(
        ch.upper() if ch.isascii() else ch for ch in raw if ch not in " -\t"
    )


def _as_int(value: Any) -> int:
    return 0 if value is None else int(value)


@dataclass(eq=False)
class BankAccount:
    """One bank-account row with balances held in paise."""

    id: int = 0
    bank_id: int = 0
    member_id: int = 0
    account_number: str = ""
    opening_balance_paise: int = 0
    closing_balance_paise: int = 0

    @classmethod
    def from_row(cls, row: Sequence[Any], base_col: int = 0) -> BankAccount:
        """Build an account from a row holding id, bank id, member id,
        account number, opening and closing balance from ``base_col`` on."""
        id_, bank_id, member_id, account, opening, closing = row[base_col : base_col + 6]
        return cls(
            id=_as_int(id_),
            bank_id=_as_int(bank_id),
            member_id=_as_int(member_id),
            account_number="" if account is None else str(account),
            opening_balance_paise=_as_int(opening),
            closing_balance_paise=_as_int(closing),
        )

    @property
    def opening_balance_rupees(self) -> float:
        return paise_to_rupees(self.opening_balance_paise)

    @property
    def closing_balance_rupees(self) -> float:
        return paise_to_rupees(self.closing_balance_paise)

    def _key(self) -> tuple:
        return (
            self.id,
            self.bank_id,
            self.member_id,
            normalize_account_number(self.account_number),
            self.opening_balance_paise,
            self.closing_balance_paise,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BankAccount):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return (
            f"BankAccount{{id={self.id}, bank_id={self.bank_id}, "
            f"member_id={self.member_id}, account='{self.account_number}', "
            f"opening_paise={self.opening_balance_paise}, "
            f"closing_paise={self.closing_balance_paise}}}"
        )