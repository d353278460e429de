import sqlite3

import pytest

from homefinancials.bank_account import (
    BankAccount,
    normalize_account_number,
    paise_to_rupees,
)


def test_default_account_is_empty():
    account = BankAccount()
    assert (account.id, account.account_number, account.closing_balance_paise) == (0, "", 0)


def test_normalize_strips_separators_and_uppercases():
    assert normalize_account_number("ab-12 3\tc") == "AB123C"


def test_normalize_is_idempotent():
    once = normalize_account_number(" 5000-1245 6x ")
    assert normalize_account_number(once) == once


def test_paise_to_rupees_round_trips():
    assert round(paise_to_rupees(74348309) * 100) == 74348309


def test_rupee_properties_match_conversion():
    account = BankAccount(1, 2, 3, "ACC1", 27436909, 74348309)
    assert account.opening_balance_rupees == paise_to_rupees(27436909)
    assert account.closing_balance_rupees == paise_to_rupees(74348309)


def test_equality_ignores_account_formatting():
    a = BankAccount(1, 2, 3, "ab-12 34", 100, 200)
    b = BankAccount(1, 2, 3, "AB1234", 100, 200)
    assert a == b
    assert hash(a) == hash(b)


@pytest.mark.parametrize(
    "changes",
    [
        {"id": 9},
        {"bank_id": 9},
        {"member_id": 9},
        {"account_number": "OTHER"},
        {"opening_balance_paise": 9},
        {"closing_balance_paise": 9},
    ],
)
def test_any_field_difference_breaks_equality(changes):
    base = dict(id=1, bank_id=2, member_id=3, account_number="ACC",
                opening_balance_paise=100, closing_balance_paise=200)
    assert BankAccount(**base) != BankAccount(**{**base, **changes})


def test_str_lists_all_fields():
    account = BankAccount(1, 2, 3, "ACC1", 10000, 15000)
    assert str(account) == (
        "BankAccount{id=1, bank_id=2, member_id=3, account='ACC1', "
        "opening_paise=10000, closing_paise=15000}"
    )


def test_from_row_reads_sqlite_row():
    conn = sqlite3.connect(":memory:")
    try:
        conn.execute(
            "CREATE TABLE t (extra TEXT, id INTEGER, bank INTEGER, member INTEGER,"
            " acct TEXT, opening INTEGER, closing INTEGER)"
        )
        conn.execute("INSERT INTO t VALUES ('x', 4, 5, 6, '500012456', 27436909, 74348309)")
        row = conn.execute("SELECT * FROM t").fetchone()
    finally:
        conn.close()
    assert BankAccount.from_row(row, 1) == BankAccount(4, 5, 6, "500012456", 27436909, 74348309)


def test_from_row_treats_nulls_as_empty():
    account = BankAccount.from_row((7, 1, 2, None, None, None))
    assert account == BankAccount(7, 1, 2, "", 0, 0)