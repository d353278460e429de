"""SQLite persistence for families, members, banks and bank accounts."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from os import PathLike
from typing import Iterator

from .bank_account import BankAccount
from .commons import (
    DatabaseError,
    InvalidInputError,
    MaxMembersExceededError,
    NotFoundError,
)
from .models import Family, Member

MAX_MEMBERS_PER_FAMILY = 255

DEFAULT_BANKS = ("Canara", "SBI", "HDFC", "ICICI", "Axis")

_SCHEMA = """
CREATE TABLE IF NOT EXISTS Families (
    Family_ID INTEGER PRIMARY KEY AUTOINCREMENT,
    Family_Name TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS Members (
    Member_ID INTEGER PRIMARY KEY AUTOINCREMENT,
    Family_ID INTEGER NOT NULL REFERENCES Families(Family_ID) ON DELETE CASCADE,
    Member_Name TEXT NOT NULL,
    Member_Nickname TEXT NOT NULL DEFAULT ''
);
CREATE TABLE IF NOT EXISTS Banks (
    Bank_ID INTEGER PRIMARY KEY AUTOINCREMENT,
    Bank_Name TEXT NOT NULL UNIQUE COLLATE NOCASE
);
CREATE TABLE IF NOT EXISTS BankAccounts (
    BankAccount_ID INTEGER PRIMARY KEY AUTOINCREMENT,
    Bank_ID INTEGER NOT NULL REFERENCES Banks(Bank_ID),
    Member_ID INTEGER NOT NULL REFERENCES Members(Member_ID) ON DELETE CASCADE,
    Account_Number TEXT NOT NULL,
    Opening_Balance INTEGER NOT NULL,
    Closing_Balance INTEGER NOT NULL
);
"""


class Storage:
    """A SQLite-backed store; the schema and bank list are created on open."""

    def __init__(self, db_path: str | PathLike[str] = ":memory:") -> None:
        try:
            self._conn = sqlite3.connect(str(db_path) if db_path != ":memory:" else db_path)
            self._conn.execute("PRAGMA foreign_keys = ON")
            self._conn.executescript(_SCHEMA)
            with self._conn:
                self._conn.executemany(
                    "INSERT OR IGNORE INTO Banks (Bank_Name) VALUES (?)",
                    [(name,) for name in DEFAULT_BANKS],
                )
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot open database {db_path}: {exc}") from exc

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __enter__(self) -> Storage:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        try:
            with self._conn:
                yield self._conn
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def _family_exists(self, conn: sqlite3.Connection, family_id: int) -> bool:
        row = conn.execute(
            "SELECT 1 FROM Families WHERE Family_ID = ?", (family_id,)
        ).fetchone()
        return row is not None

    def _member_exists(self, conn: sqlite3.Connection, member_id: int) -> bool:
        row = conn.execute(
            "SELECT 1 FROM Members WHERE Member_ID = ?", (member_id,)
        ).fetchone()
        return row is not None

    # Families -----------------------------------------------------------

    def save_family(self, family: Family) -> int:
        """Insert a family and return its new id."""
        if not family.name:
            raise InvalidInputError("family name cannot be empty")
        with self._transaction() as conn:
            cursor = conn.execute(
                "INSERT INTO Families (Family_Name) VALUES (?)", (family.name,)
            )
            return int(cursor.lastrowid)

    def get_family(self, family_id: int) -> Family | None:
        """Return the family with its members, or ``None`` if absent."""
        with self._transaction() as conn:
            row = conn.execute(
                "SELECT Family_ID, Family_Name FROM Families WHERE Family_ID = ?",
                (family_id,),
            ).fetchone()
        if row is None:
            return None
        family = Family(id=int(row[0]), name=row[1])
        for member in self.list_members_of_family(family.id):
            family.add_member(member)
        return family

    def update_family(self, family_id: int, new_name: str) -> None:
        """Rename a family."""
        if not new_name:
            raise InvalidInputError("family name cannot be empty")
        with self._transaction() as conn:
            cursor = conn.execute(
                "UPDATE Families SET Family_Name = ? WHERE Family_ID = ?",
                (new_name, family_id),
            )
            if cursor.rowcount == 0:
                raise NotFoundError(f"family {family_id} not found")

    def delete_family(self, family_id: int) -> None:
        """Delete a family together with its members and their accounts."""
        with self._transaction() as conn:
            cursor = conn.execute(
                "DELETE FROM Families WHERE Family_ID = ?", (family_id,)
            )
            if cursor.rowcount == 0:
                raise NotFoundError(f"family {family_id} not found")

    def list_families(self) -> list[Family]:
        """Return all families ordered by id (members not loaded)."""
        with self._transaction() as conn:
            rows = conn.execute(
                "SELECT Family_ID, Family_Name FROM Families ORDER BY Family_ID"
            ).fetchall()
        return [Family(id=int(fid), name=name) for fid, name in rows]

    # Members ------------------------------------------------------------

    def save_member(self, member: Member, family_id: int) -> int:
        """Insert a member into a family and return the new member id."""
        if not member.name:
            raise InvalidInputError("member name cannot be empty")
        with self._transaction() as conn:
            if not self._family_exists(conn, family_id):
                raise NotFoundError(f"family {family_id} not found")
            (count,) = conn.execute(
                "SELECT COUNT(*) FROM Members WHERE Family_ID = ?", (family_id,)
            ).fetchone()
            if count >= MAX_MEMBERS_PER_FAMILY:
                raise MaxMembersExceededError(
                    f"family {family_id} already has {MAX_MEMBERS_PER_FAMILY} members"
                )
            cursor = conn.execute(
                "INSERT INTO Members (Family_ID, Member_Name, Member_Nickname) "
                "VALUES (?, ?, ?)",
                (family_id, member.name, member.nickname),
            )
            return int(cursor.lastrowid)

    def get_member(self, member_id: int) -> Member | None:
        """Return the member with the given id, or ``None``."""
        with self._transaction() as conn:
            row = conn.execute(
                "SELECT Member_ID, Member_Name, Member_Nickname FROM Members "
                "WHERE Member_ID = ?",
                (member_id,),
            ).fetchone()
        if row is None:
            return None
        return Member(id=int(row[0]), name=row[1], nickname=row[2] or "")

    def update_member(self, member_id: int, new_name: str, new_nickname: str) -> None:
        """Update a member; an empty value keeps the stored one."""
        if not new_name and not new_nickname:
            raise InvalidInputError("nothing to update")
        current = self.get_member(member_id)
        if current is None:
            raise NotFoundError(f"member {member_id} not found")
        with self._transaction() as conn:
            conn.execute(
                "UPDATE Members SET Member_Name = ?, Member_Nickname = ? "
                "WHERE Member_ID = ?",
                (new_name or current.name, new_nickname or current.nickname, member_id),
            )

    def delete_member(self, member_id: int) -> None:
        """Delete a member together with their bank accounts."""
        with self._transaction() as conn:
            cursor = conn.execute(
                "DELETE FROM Members WHERE Member_ID = ?", (member_id,)
            )
            if cursor.rowcount == 0:
                raise NotFoundError(f"member {member_id} not found")

    def list_members_of_family(self, family_id: int) -> list[Member]:
        """Return the members of a family ordered by id."""
        with self._transaction() as conn:
            rows = conn.execute(
                "SELECT Member_ID, Member_Name, Member_Nickname FROM Members "
                "WHERE Family_ID = ? ORDER BY Member_ID",
                (family_id,),
            ).fetchall()
        return [Member(id=int(mid), name=name, nickname=nick or "") for mid, name, nick in rows]

    def get_member_count(self, family_id: int) -> int:
        """Return the number of members in a family."""
        with self._transaction() as conn:
            (count,) = conn.execute(
                "SELECT COUNT(*) FROM Members WHERE Family_ID = ?", (family_id,)
            ).fetchone()
        return int(count)

    # Banks and accounts -------------------------------------------------

    def get_bank_id_by_name(self, bank_name: str) -> int:
        """Resolve a bank name (case-insensitive) to its id."""
        with self._transaction() as conn:
            row = conn.execute(
                "SELECT Bank_ID FROM Banks WHERE Bank_Name = ?", (bank_name,)
            ).fetchone()
        if row is None:
            raise NotFoundError(f"bank {bank_name!r} not found")
        return int(row[0])

    def get_bank_name_by_id(self, bank_id: int) -> str:
        """Resolve a bank id to its name."""
        with self._transaction() as conn:
            row = conn.execute(
                "SELECT Bank_Name FROM Banks WHERE Bank_ID = ?", (bank_id,)
            ).fetchone()
        if row is None:
            raise NotFoundError(f"bank {bank_id} not found")
        return str(row[0])

    def save_bank_account(
        self,
        bank_id: int,
        member_id: int,
        account_number: str,
        opening_paise: int,
        closing_paise: int,
    ) -> int:
        """Insert a bank-account row and return its id."""
        with self._transaction() as conn:
            bank = conn.execute(
                "SELECT 1 FROM Banks WHERE Bank_ID = ?", (bank_id,)
            ).fetchone()
            if bank is None:
                raise NotFoundError(f"bank {bank_id} not found")
            if not self._member_exists(conn, member_id):
                raise NotFoundError(f"member {member_id} not found")
            cursor = conn.execute(
                "INSERT INTO BankAccounts (Bank_ID, Member_ID, Account_Number, "
                "Opening_Balance, Closing_Balance) VALUES (?, ?, ?, ?, ?)",
                (bank_id, member_id, account_number, opening_paise, closing_paise),
            )
            return int(cursor.lastrowid)

    _ACCOUNT_COLUMNS = (
        "BankAccount_ID, Bank_ID, Member_ID, Account_Number, "
        "Opening_Balance, Closing_Balance"
    )

    def get_bank_account(self, bank_account_id: int) -> BankAccount:
        """Return the bank-account row with the given id."""
        with self._transaction() as conn:
            row = conn.execute(
                f"SELECT {self._ACCOUNT_COLUMNS} FROM BankAccounts "
                "WHERE BankAccount_ID = ?",
                (bank_account_id,),
            ).fetchone()
        if row is None:
            raise NotFoundError(f"bank account {bank_account_id} not found")
        return BankAccount.from_row(row)

    def list_bank_accounts_of_member(self, member_id: int) -> list[BankAccount]:
        """Return all bank-account rows of a member ordered by id."""
        with self._transaction() as conn:
            rows = conn.execute(
                f"SELECT {self._ACCOUNT_COLUMNS} FROM BankAccounts "
                "WHERE Member_ID = ? ORDER BY BankAccount_ID",
                (member_id,),
            ).fetchall()
        return [BankAccount.from_row(row) for row in rows]