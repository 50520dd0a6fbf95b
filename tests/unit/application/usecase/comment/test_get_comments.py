"""Unit tests for GetCommentsUseCase."""

import json

import pytest

from commenttree.application.usecase.comment.get_comments import (
    GetCommentsRequest,
    GetCommentsUseCase,
    dump_forest_json,
)
from commenttree.domain.repository import CommentRepository
from commenttree.domain.value import SortOrder
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_defaults_in_response(self, unit_env):
        """Unset paging is reported back as page 1 of size 50."""
        # Arrange
        get_comments_use_case = await unit_env.get(GetCommentsUseCase)

        # Act
        response = await get_comments_use_case.execute(GetCommentsRequest())

        # Assert
        assert response.comments == []
        assert response.total == 0
        assert response.page == 1
        assert response.page_size == 50

    @pytest.mark.asyncio
    async def test_nested_response(self, unit_env):
        """Trees are converted recursively and the total counts roots."""
        # Arrange
        get_comments_use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        for comment in [
            make_comment(1, "root", minutes=0),
            make_comment(2, "reply", parent_id=1, minutes=1),
            make_comment(3, "nested", parent_id=2, minutes=2),
            make_comment(4, "other root", minutes=3),
        ]:
            await comment_repo.save(comment)

        # Act
        response = await get_comments_use_case.execute(
            GetCommentsRequest(order=SortOrder.ASC)
        )

        # Assert
        assert response.total == 2
        assert [tree.comment.id for tree in response.comments] == [1, 4]
        first = response.comments[0]
        assert first.children[0].comment.content == "reply"
        assert first.children[0].children[0].comment.content == "nested"
        assert response.comments[1].children == []

    @pytest.mark.asyncio
    async def test_scoped_total(self, unit_env):
        """parent_id scopes both the forest and the total."""
        get_comments_use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        for comment in [
            make_comment(1, minutes=0),
            make_comment(2, parent_id=1, minutes=1),
            make_comment(3, parent_id=1, minutes=2),
            make_comment(4, minutes=3),
        ]:
            await comment_repo.save(comment)

        response = await get_comments_use_case.execute(GetCommentsRequest(parent_id=1))

        assert [tree.comment.id for tree in response.comments] == [1]
        assert response.total == 3

    @pytest.mark.asyncio
    async def test_search_total_counts_matches(self, unit_env):
        """With search, total is the number of matching comments."""
        get_comments_use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        for comment in [
            make_comment(1, "hello", minutes=0),
            make_comment(2, "hello again", parent_id=1, minutes=1),
            make_comment(3, "bye", minutes=2),
        ]:
            await comment_repo.save(comment)

        response = await get_comments_use_case.execute(
            GetCommentsRequest(search="hello")
        )

        assert len(response.comments) == 1
        assert response.total == 2


class TestGetCommentsResponseJson:
    """Tests for GetCommentsResponse.to_json."""

    @pytest.mark.asyncio
    async def test_matches_pydantic_output(self, unit_env):
        """The hand-walked JSON decodes to the same data as model_dump."""
        # Arrange
        get_comments_use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        for comment in [
            make_comment(1, 'quote "me"', minutes=0),
            make_comment(2, "reply", parent_id=1, minutes=1),
            make_comment(3, "second reply", parent_id=1, minutes=2),
            make_comment(4, "nested", parent_id=2, minutes=3),
            make_comment(5, "other root", minutes=4),
        ]:
            await comment_repo.save(comment)
        response = await get_comments_use_case.execute(GetCommentsRequest())

        # Act
        body = response.to_json()

        # Assert
        assert json.loads(body) == response.model_dump(mode="json")

    def test_empty_forest(self):
        """No trees serialize as an empty array."""
        assert dump_forest_json([]) == "[]"

    @pytest.mark.asyncio
    async def test_deep_chain_serializes(self, unit_env):
        """A 1500-deep chain converts and serializes without error."""
        # Arrange
        depth = 1500
        get_comments_use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1))
        for i in range(2, depth + 1):
            await comment_repo.save(make_comment(i, parent_id=i - 1, minutes=i))

        # Act
        response = await get_comments_use_case.execute(GetCommentsRequest())
        body = response.to_json()

        # Assert
        assert response.total == 1
        assert body.count('"children":[') == depth
        assert body.endswith("]}" * depth + '],"total":1,"page":1,"page_size":50}')
