"""Net-worth calculations over stored bank-account balances."""

from __future__ import annotations

from .commons import DatabaseError, NotFoundError
from .storage import Storage


class NetWorth:
    """Sums closing balances (in paise) for members and families."""

    def __init__(self, storage: Storage | None) -> None:
        self.storage = storage

    def _require_storage(self) -> Storage:
        if self.storage is None:
            raise DatabaseError("no storage available")
        return self.storage

    def _member_total(self, storage: Storage, member_id: int) -> int:
        return sum(
            account.closing_balance_paise
            for account in storage.list_bank_accounts_of_member(member_id)
        )

    def member_net_worth(self, member_id: int) -> int:
        """Return the sum of a member's closing balances in paise."""
        storage = self._require_storage()
        if storage.get_member(member_id) is None:
            raise NotFoundError(f"member {member_id} not found")
        return self._member_total(storage, member_id)

    def family_net_worth(self, family_id: int) -> int:
        """Return the sum of closing balances of every member of a family."""
        storage = self._require_storage()
        if storage.get_family(family_id) is None:
            raise NotFoundError(f"family {family_id} not found")
        return sum(
            self._member_total(storage, member.id)
            for member in storage.list_members_of_family(family_id)
        )