"""Unit tests for CreateCommentUseCase."""

import pytest

from commenttree.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from commenttree.domain.error import EmptyContentError, InvalidParentError
from commenttree.domain.repository import CommentRepository
from commenttree.domain.service import CommentService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_root_comment(self, unit_env):
        """Creating a root comment returns its stored fields."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        create_comment_use_case = CreateCommentUseCase(comment_service=comment_service)

        # Act
        response = await create_comment_use_case.execute(
            CreateCommentRequest(content="First!")
        )

        # Assert
        assert response.id == 1
        assert response.parent_id is None
        assert response.content == "First!"
        assert response.created_at == response.updated_at

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """A reply is stored with its parent reference."""
        # Arrange
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await create_comment_use_case.execute(
            CreateCommentRequest(content="parent")
        )

        # Act
        reply = await create_comment_use_case.execute(
            CreateCommentRequest(content="child", parent_id=parent.id)
        )

        # Assert
        stored = await comment_repo.find_by_id(reply.id)
        assert stored is not None
        assert stored.parent_id == parent.id

    @pytest.mark.asyncio
    async def test_empty_content(self, unit_env):
        """Whitespace-only content is rejected."""
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(EmptyContentError):
            await create_comment_use_case.execute(CreateCommentRequest(content="  "))

    @pytest.mark.asyncio
    async def test_invalid_parent(self, unit_env):
        """A reply to a missing comment is rejected."""
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(InvalidParentError):
            await create_comment_use_case.execute(
                CreateCommentRequest(content="reply", parent_id=999)
            )
