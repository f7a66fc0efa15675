"""Member use cases."""

from uuid import UUID

from pydantic import BaseModel

from shiki.domain.service import MemberService
from shiki.domain.value import MemberId

from .item import MemberItem


class ListMembersResponse(BaseModel):
    """Members in joining order."""

    members: list[MemberItem]


class ListMembersUseCase:
    """Use case for the members page."""

    def __init__(self, member_service: MemberService) -> None:
        self.member_service = member_service

    async def execute(self, request: None = None) -> ListMembersResponse:
        members = await self.member_service.list_members()
        return ListMembersResponse(members=[MemberItem.from_domain(m) for m in members])


class GetMemberRequest(BaseModel):
    """Get member request."""

    member_id: str  # UUID string


class GetMemberUseCase:
    """Use case for a single member profile."""

    def __init__(self, member_service: MemberService) -> None:
        self.member_service = member_service

    async def execute(self, request: GetMemberRequest) -> MemberItem:
        """Execute get member flow.

        Raises:
            NotFoundError: If the member does not exist
        """
        member = await self.member_service.get_member(MemberId(UUID(request.member_id)))
        return MemberItem.from_domain(member)
