"""Unit tests for DeleteCommentUseCase."""

import pytest

from commenttree.application.usecase.comment.delete_comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from commenttree.domain.error import NotFoundError
from commenttree.domain.repository import CommentRepository
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_cascades(self, unit_env):
        """Deleting a root removes its replies."""
        # Arrange
        delete_comment_use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1))
        await comment_repo.save(make_comment(2, parent_id=1))
        await comment_repo.save(make_comment(3))

        # Act
        await delete_comment_use_case.execute(DeleteCommentRequest(comment_id=1))

        # Assert
        assert [c.id for c in await comment_repo.find_all()] == [3]

    @pytest.mark.asyncio
    async def test_delete_missing(self, unit_env):
        """Deleting an unknown comment raises a not-found error."""
        delete_comment_use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await delete_comment_use_case.execute(DeleteCommentRequest(comment_id=7))
