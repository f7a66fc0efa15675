"""In-memory member repository for testing."""

from typing import Optional

from shiki.domain.model.member import Member
from shiki.domain.repository.member import MemberRepository
from shiki.domain.value import MemberId


class InMemoryMemberRepository(MemberRepository):
    """In-memory implementation of MemberRepository for testing."""

    def __init__(self) -> None:
        self._members: dict[MemberId, Member] = {}

    async def find_by_id(self, member_id: MemberId) -> Optional[Member]:
        """Find a member by ID."""
        return self._members.get(member_id)

    async def find_all(self) -> list[Member]:
        """Find all members in joining order."""
        return sorted(self._members.values(), key=lambda m: m.created_at)

    async def save(self, member: Member) -> Member:
        """Save a member."""
        self._members[member.id] = member
        return member
