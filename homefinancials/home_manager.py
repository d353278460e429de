"""High-level operations used by user interfaces."""

from __future__ import annotations

from os import PathLike

from .commons import DatabaseError, InvalidInputError, MaxMembersExceededError, NotFoundError
from .models import Family, Member
from .net_worth import NetWorth
from .reader_factory import create_by_bank_id
from .readers import BankReader
from .storage import MAX_MEMBERS_PER_FAMILY, Storage


class HomeManager:
    """Front end to :class:`Storage` for families, members and statements."""

    def __init__(self, db_path: str | PathLike[str] = ":memory:") -> None:
        self.storage = Storage(db_path)

    def close(self) -> None:
        """Close the underlying storage."""
        self.storage.close()

    def __enter__(self) -> HomeManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # Families -----------------------------------------------------------

    def add_family(self, family: Family) -> int:
        """Store a family and return its id."""
        return self.storage.save_family(family)

    def get_family(self, family_id: int) -> Family | None:
        """Return the family with its members, or ``None``."""
        return self.storage.get_family(family_id)

    def update_family_name(self, family_id: int, new_name: str) -> None:
        """Rename a family."""
        self.storage.update_family(family_id, new_name)

    def delete_family(self, family_id: int) -> None:
        """Delete a family."""
        self.storage.delete_family(family_id)

    # Members ------------------------------------------------------------

    def add_member_to_family(self, member: Member, family_id: int) -> int:
        """Add a member to a family and return the member id.

        Raises :class:`MaxMembersExceededError` once a family holds
        the maximum number of members.
        """
        try:
            count = self.storage.get_member_count(family_id)
        except DatabaseError:
            count = None
        if count is not None and count >= MAX_MEMBERS_PER_FAMILY:
            raise MaxMembersExceededError(
                f"family {family_id} already has {MAX_MEMBERS_PER_FAMILY} members"
            )
        return self.storage.save_member(member, family_id)

    def get_member(self, member_id: int) -> Member | None:
        """Return the member, or ``None``."""
        return self.storage.get_member(member_id)

    def update_member(self, member_id: int, new_name: str, new_nickname: str) -> None:
        """Update a member's name and/or nickname."""
        self.storage.update_member(member_id, new_name, new_nickname)

    def delete_member(self, member_id: int) -> None:
        """Delete a member."""
        self.storage.delete_member(member_id)

    def list_families(self) -> list[Family]:
        """Return all families."""
        return self.storage.list_families()

    def list_members_of_family(self, family_id: int) -> list[Member]:
        """Return the members of a family."""
        return self.storage.list_members_of_family(family_id)

    # Net worth ----------------------------------------------------------

    def compute_member_net_worth(self, member_id: int) -> int:
        """Return a member's net worth in paise."""
        return NetWorth(self.storage).member_net_worth(member_id)

    def compute_family_net_worth(self, family_id: int) -> int:
        """Return a family's net worth in paise."""
        return NetWorth(self.storage).family_net_worth(family_id)

    # Statements ---------------------------------------------------------

    def import_bank_statement(
        self,
        file_path: str | PathLike[str],
        member_id: int,
        bank: int | str,
        reader: BankReader | None = None,
    ) -> int:
        """Parse a statement and store its account row; return the row id.

        ``bank`` is a bank id or a bank name. Without ``reader`` one is
        created from the registered readers for that bank, and
        :class:`NotFoundError` is raised if none exists.
        """
        bank_id = self.storage.get_bank_id_by_name(bank) if isinstance(bank, str) else bank

        if reader is None:
            reader = create_by_bank_id(self.storage, bank_id)
            if reader is None:
                raise NotFoundError(f"no statement reader for bank {bank!r}")

        reader.parse_file(file_path)
        info = reader.extract_account_info()
        if info is None:
            raise InvalidInputError("statement did not yield account information")

        return self.storage.save_bank_account(
            bank_id,
            member_id,
            info.account_number,
            info.opening_balance_paise,
            info.closing_balance_paise,
        )