# homefinancials

A library for tracking a household's money. It stores families and their
members in SQLite. It imports bank statements and adds up net worth for one
member or for a whole family.

All amounts are whole numbers of paise (1 INR = 100 paise), so no
floating-point rounding is involved.

## Quick start

```python
from homefinancials.home_manager import HomeManager
from homefinancials.models import Family, Member

with HomeManager("household.db") as home:   # ":memory:" is the default
    family_id = home.add_family(Family("Sharma"))
    member_id = home.add_member_to_family(Member("Asha", "A"), family_id)

    account_id = home.import_bank_statement("statement.csv", member_id, "Canara")

    home.compute_member_net_worth(member_id)   # sum of closing balances, paise
    home.compute_family_net_worth(family_id)
```

## Modules

- `homefinancials.commons` holds the error classes and `parse_money_to_paise`.
- `homefinancials.models` holds the `Member` and `Family` dataclasses. Their
  `id` is 0 until they are stored. `Family` has `add_member`, `remove_member`
  and `get_member`.
- `homefinancials.bank_account` holds `BankAccount`, `paise_to_rupees` and
  `normalize_account_number`. `normalize_account_number` drops spaces, tabs
  and hyphens and upper-cases the rest.
  - Two `BankAccount` objects are equal when all their fields match. Account
    numbers are compared in normalized form.
  - `opening_balance_rupees` and `closing_balance_rupees` give the balances
    as floats.
- `homefinancials.readers` holds the statement readers: `Reader`,
  `BankReader`, `CanaraBankReader` and `BankAccountInfo`.
- `homefinancials.reader_factory` is a case-insensitive registry of bank
  readers.
- `homefinancials.storage` holds `Storage`, the SQLite store.
- `homefinancials.net_worth` holds `NetWorth`, which sums closing balances.
- `homefinancials.home_manager` holds `HomeManager`, the high-level entry
  point.

## Parsing amounts

```python
from homefinancials.commons import parse_money_to_paise

parse_money_to_paise("Rs.7,43,483.09")   # 74348309
parse_money_to_paise("3,23,527.09")      # 32352709
parse_money_to_paise("abc")              # None
```

- Characters other than digits and dots are ignored.
- When there are several dots, the last one is the decimal point.
- The fraction is cut or padded to two digits.
- A `-` anywhere in the text makes the value negative.
- The result is `None` when there are no digits, or when the value does not
  fit in a signed 64-bit integer.

## Reading a Canara Bank statement

```python
import io
from homefinancials.readers import CanaraBankReader

statement = io.StringIO(
    'Account Number,="000000001234   "\n'
    'Opening Balance,"Rs.2,74,369.09"\n'
    'Closing Balance,"Rs.7,43,483.09"\n'
)

reader = CanaraBankReader()
reader.parse(statement)
info = reader.extract_account_info()
info.account_number          # "000000001234"
info.opening_balance_paise   # 27436909
info.closing_balance_paise   # 74348309
```

- `parse` takes any iterable of text lines.
- `Reader.parse_file(path)` opens a file and parses it. It raises
  `NotFoundError` if the file cannot be opened.
- A statement that lacks the account number, the opening balance or the
  closing balance raises `InvalidInputError`.
- `extract_account_info()` returns `None` until a parse has succeeded.

## Reader registry

`homefinancials.reader_factory` provides these functions:

- `register_reader(bank_name, factory)` stores a factory under the name.
  Empty names and `None` factories are ignored. A name that is already
  registered is replaced.
- `unregister_reader(bank_name)` returns whether a reader was removed.
- `create_by_bank_name(bank_name)` returns a new reader, or `None`.
- `create_by_bank_id(storage, bank_id)` resolves the id to a bank name through
  `storage`. It returns `None` if the id cannot be resolved or no reader is
  registered for that bank.
- `list_registered()` returns the registered names, lower-cased and sorted.

`CanaraBankReader` is registered as `"canara"` when the module is imported.

## Storage

`Storage(db_path=":memory:")` opens or creates a SQLite database. It creates
the tables and adds the banks Canara, SBI, HDFC, ICICI and Axis. It can be
used as a context manager.

- A family holds at most 255 members (`MAX_MEMBERS_PER_FAMILY`).
- Deleting a family deletes its members. Deleting a member deletes that
  member's bank accounts.
- `update_member` keeps the stored value for any empty argument. It raises
  `InvalidInputError` when both arguments are empty.
- Bank names are matched without regard to case.
- Getters for families and members return `None` when the record is absent.
  Bank and bank-account lookups raise `NotFoundError` instead.

## HomeManager

`HomeManager(db_path=":memory:")` wraps a `Storage`, which is available as
`.storage`. Its methods are:

- `add_family`, `get_family`, `update_family_name`, `delete_family`
- `add_member_to_family`, which raises `MaxMembersExceededError` when the
  family is full
- `get_member`, `update_member`, `delete_member`
- `list_families`, `list_members_of_family`
- `compute_member_net_worth`, `compute_family_net_worth`, which raise
  `NotFoundError` for unknown ids
- `import_bank_statement(file_path, member_id, bank, reader=None)`. Here
  `bank` is a bank id or a bank name. Without `reader`, one is taken from the
  registry, and `NotFoundError` is raised if there is none. The method
  returns the id of the new bank-account row.

## Errors

All errors derive from `homefinancials.commons.HomeFinancialsError`:

- `InvalidInputError`, which is also a `ValueError`
- `MaxMembersExceededError`
- `NotFoundError`, which is also a `LookupError`
- `DatabaseError`

## What it does not do

This is a library only. It has no command-line program and no interactive
menu. A user interface has to be built on top of `HomeManager`. The only
statement format it reads is Canara Bank CSV, and other banks need a
`BankReader` registered for them.