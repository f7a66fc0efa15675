"""Unit tests for comment use cases."""

from uuid import uuid4

import pytest

from shiki.application.usecase.comment import (
    GetCommentTreeRequest,
    GetCommentTreeUseCase,
    ListPendingCommentsRequest,
    ListPendingCommentsUseCase,
    ModerateCommentRequest,
    ModerateCommentUseCase,
    SubmitCommentRequest,
    SubmitCommentUseCase,
)
from shiki.domain.error import NotFoundError, ValidationError
from shiki.domain.repository import ArticleRepository, CommentRepository
from shiki.domain.value import ArticleStatus, CommentStatus
from tests.conftest import make_article, make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestSubmitCommentUseCase:
    """Tests for SubmitCommentUseCase."""

    @pytest.mark.asyncio
    async def test_submit_awaits_moderation(self, unit_env):
        # Arrange
        article_repo = await unit_env.get(ArticleRepository)
        article = await article_repo.save(make_article())
        use_case = await unit_env.get(SubmitCommentUseCase)

        # Act
        response = await use_case.execute(
            SubmitCommentRequest(
                article_id=str(article.id),
                author_name="Aki",
                email="aki@example.com",
                content="Thanks!",
            )
        )

        # Assert
        assert response.awaiting_moderation is True
        assert response.comment.status == CommentStatus.PENDING
        assert "email" not in response.comment.model_dump()

    @pytest.mark.asyncio
    async def test_blank_field_checked_before_article(self, unit_env):
        """Field errors are reported even for an unknown article."""
        use_case = await unit_env.get(SubmitCommentUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                SubmitCommentRequest(article_id=str(uuid4()), author_name="Aki")
            )
        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    async def test_draft_article_not_found(self, unit_env):
        article_repo = await unit_env.get(ArticleRepository)
        draft = await article_repo.save(make_article(status=ArticleStatus.DRAFT))
        use_case = await unit_env.get(SubmitCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                SubmitCommentRequest(
                    article_id=str(draft.id),
                    author_name="Aki",
                    email="aki@example.com",
                    content="Hi",
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_parent_id(self, unit_env):
        use_case = await unit_env.get(SubmitCommentUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                SubmitCommentRequest(article_id=str(uuid4()), parent_id="nope")
            )
        assert exc_info.value.field == "parent_id"


class TestModerationFlow:
    """Submission through approval to the public tree."""

    @pytest.mark.asyncio
    async def test_approved_comment_appears_in_tree(self, unit_env):
        # Arrange
        article_repo = await unit_env.get(ArticleRepository)
        article = await article_repo.save(make_article())
        submit = await unit_env.get(SubmitCommentUseCase)
        pending = await unit_env.get(ListPendingCommentsUseCase)
        moderate = await unit_env.get(ModerateCommentUseCase)
        tree = await unit_env.get(GetCommentTreeUseCase)
        submitted = await submit.execute(
            SubmitCommentRequest(
                article_id=str(article.id),
                author_name="Aki",
                email="aki@example.com",
                content="First!",
            )
        )

        # Act
        queue = await pending.execute(ListPendingCommentsRequest())
        before = await tree.execute(GetCommentTreeRequest(article_id=str(article.id)))
        await moderate.execute(
            ModerateCommentRequest(
                comment_id=submitted.comment.comment_id,
                status=CommentStatus.APPROVED,
            )
        )
        after = await tree.execute(GetCommentTreeRequest(article_id=str(article.id)))

        # Assert
        assert [c.author_name for c in queue.comments] == ["Aki"]
        assert all("email" not in c.model_dump() for c in queue.comments)
        assert before.total == 0
        assert after.total == 1
        assert after.threads[0].content == "First!"

    @pytest.mark.asyncio
    async def test_tree_response_nests_replies(self, unit_env):
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        article = make_article()
        root = await comment_repo.save(make_comment(article.id))
        await comment_repo.save(make_comment(article.id, parent_id=root.id))
        tree = await unit_env.get(GetCommentTreeUseCase)

        # Act
        response = await tree.execute(GetCommentTreeRequest(article_id=str(article.id)))

        # Assert
        assert response.total == 2
        assert len(response.threads) == 1
        assert response.threads[0].replies[0].parent_id == str(root.id)
