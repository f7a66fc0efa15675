"""Member repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from shiki.domain.model.member import Member
from shiki.domain.value import MemberId


class MemberRepository(ABC):
    """Repository for Member entity."""

    @abstractmethod
    async def find_by_id(self, member_id: MemberId) -> Optional[Member]:
        """Find a member by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Member]:
        """Find all members in the order they joined (created_at ascending)."""
        pass

    @abstractmethod
    async def save(self, member: Member) -> Member:
        """Save a member (create or update)."""
        pass
