"""Family and member records."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Member:
    """A family member. ``id`` is 0 until the member has been stored."""

    name: str
    nickname: str = ""
    id: int = 0


@dataclass
class Family:
    """A family and the members loaded into it. ``id`` is 0 until stored."""

    name: str
    id: int = 0
    members: list[Member] = field(default_factory=list)

    def add_member(self, member: Member) -> None:
        """Append a member to the family."""
        self.members.append(member)

    def remove_member(self, member_id: int) -> bool:
        """Remove every member with the given id; return whether any was removed."""
        kept = [m for m in self.members if m.id != member_id]
        removed = len(kept) != len(self.members)
        self.members = kept
        return removed

    def get_member(self, member_id: int) -> Member | None:
        """Return the first member with the given id, or ``None``."""
        return next((m for m in self.members if m.id == member_id), None)