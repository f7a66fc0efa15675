"""Member use cases."""

from .item import MemberItem
from .list_members import (
    GetMemberRequest,
    GetMemberUseCase,
    ListMembersResponse,
    ListMembersUseCase,
)

__all__ = [
    "GetMemberRequest",
    "GetMemberUseCase",
    "ListMembersResponse",
    "ListMembersUseCase",
    "MemberItem",
]
