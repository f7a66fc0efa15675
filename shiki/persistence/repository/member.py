"""PostgreSQL implementation of Member repository."""

from typing import List, Optional

from sqlalchemy import asc, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from shiki.domain.model import Member
from shiki.domain.repository import MemberRepository
from shiki.domain.value import MemberId
from shiki.persistence.error import store_errors
from shiki.persistence.mappers import member_to_dict, row_to_member
from shiki.persistence.tables import members_table


class PostgresMemberRepository(MemberRepository):
    """PostgreSQL implementation of MemberRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, member_id: MemberId) -> Optional[Member]:
        """Find a member by ID."""
        with store_errors("member.find_by_id"):
            stmt = select(members_table).where(members_table.c.id == member_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_member(row._asdict()) if row else None

    async def find_all(self) -> List[Member]:
        """Find all members in joining order."""
        with store_errors("member.find_all"):
            stmt = select(members_table).order_by(asc(members_table.c.created_at))
            result = await self.session.execute(stmt)
            return [row_to_member(row._asdict()) for row in result.fetchall()]

    async def save(self, member: Member) -> Member:
        """Save a member (create or update by id)."""
        with store_errors("member.save"):
            values = member_to_dict(member)
            stmt = insert(members_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[members_table.c.id],
                set_={k: v for k, v in values.items() if k != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return member
