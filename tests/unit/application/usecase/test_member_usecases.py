"""Unit tests for member and category use cases."""

from uuid import uuid4

import pytest

from shiki.application.usecase.category import ListCategoriesUseCase
from shiki.application.usecase.member import (
    GetMemberRequest,
    GetMemberUseCase,
    ListMembersUseCase,
)
from shiki.domain.error import NotFoundError
from shiki.domain.model import Category, Member
from shiki.domain.repository import CategoryRepository, MemberRepository
from shiki.domain.value import CategoryId, CategorySlug, MemberId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def _member(name: str, image: str | None = None) -> Member:
    return Member(id=MemberId(uuid4()), name=name, profile_image_url=image)


class TestMemberUseCases:
    """Tests for member use cases."""

    @pytest.mark.asyncio
    async def test_list_members_optimizes_images(self, unit_env):
        # Arrange
        member_repo = await unit_env.get(MemberRepository)
        await member_repo.save(
            _member("Aki", "https://images.pexels.com/photos/1/a.jpeg")
        )
        use_case = await unit_env.get(ListMembersUseCase)

        # Act
        response = await use_case.execute()

        # Assert
        [member] = response.members
        assert member.name == "Aki"
        assert "w=400&h=400" in member.profile_image_url

    @pytest.mark.asyncio
    async def test_get_member(self, unit_env):
        member_repo = await unit_env.get(MemberRepository)
        member = await member_repo.save(_member("Yuki"))
        use_case = await unit_env.get(GetMemberUseCase)

        response = await use_case.execute(GetMemberRequest(member_id=str(member.id)))

        assert response.name == "Yuki"
        assert response.profile_image_url is None

    @pytest.mark.asyncio
    async def test_unknown_member(self, unit_env):
        use_case = await unit_env.get(GetMemberUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetMemberRequest(member_id=str(uuid4())))


class TestListCategoriesUseCase:
    """Tests for ListCategoriesUseCase."""

    @pytest.mark.asyncio
    async def test_lists_categories(self, unit_env):
        # Arrange
        category_repo = await unit_env.get(CategoryRepository)
        await category_repo.save(
            Category(id=CategoryId(uuid4()), name="React", slug=CategorySlug("react"))
        )
        use_case = await unit_env.get(ListCategoriesUseCase)

        # Act
        response = await use_case.execute()

        # Assert
        assert [(c.name, c.slug) for c in response.categories] == [("React", "react")]
