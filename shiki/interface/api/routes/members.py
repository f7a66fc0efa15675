"""Member routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from shiki.application.usecase.member import (
    GetMemberRequest,
    GetMemberUseCase,
    ListMembersResponse,
    ListMembersUseCase,
    MemberItem,
)

router = APIRouter(prefix="/members", tags=["members"], route_class=DishkaRoute)


@router.get("", response_model=ListMembersResponse)
async def list_members(
    list_members_use_case: FromDishka[ListMembersUseCase],
) -> ListMembersResponse:
    """List all members."""
    return await list_members_use_case.execute()


@router.get("/{member_id}", response_model=MemberItem)
async def get_member(
    member_id: str,
    get_member_use_case: FromDishka[GetMemberUseCase],
) -> MemberItem:
    """Get a member profile."""
    return await get_member_use_case.execute(GetMemberRequest(member_id=member_id))
