"""Member domain service."""

import logfire

from shiki.domain.error import NotFoundError
from shiki.domain.model.member import Member
from shiki.domain.repository import MemberRepository
from shiki.domain.value import MemberId

from .base import Service


class MemberService(Service):
    """Domain service for member profiles."""

    def __init__(self, member_repository: MemberRepository) -> None:
        self.member_repository = member_repository

    async def list_members(self) -> list[Member]:
        """All members in joining order."""
        with logfire.span("member_service.list_members"):
            return await self.member_repository.find_all()

    async def get_member(self, member_id: MemberId) -> Member:
        """Get a member profile.

        Raises:
            NotFoundError: If the member does not exist
        """
        member = await self.member_repository.find_by_id(member_id)
        if member is None:
            logfire.warn("Member not found", member_id=str(member_id))
            raise NotFoundError("Member", str(member_id))
        return member
