"""Integration tests for PostgresCommentRepository.

Require a migrated PostgreSQL database; set DATABASE__URL to run them.
"""

import os
from uuid import uuid4

import pytest

from commenttree.domain.repository import CommentRepository
from commenttree.domain.value import SortOrder
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ,
    reason="DATABASE__URL not set",
)

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_subtree_search_and_delete(self, integration_env):
        """Recursive queries agree with the in-memory behaviour."""
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        marker = uuid4().hex
        root = await comment_repo.create(f"root {marker}")
        reply = await comment_repo.create("reply", parent_id=root.id)
        nested = await comment_repo.create(f"NESTED {marker}", parent_id=reply.id)

        # Act & Assert - subtree
        subtree = await comment_repo.find_subtree(root.id)
        assert [c.id for c in subtree] == [root.id, reply.id, nested.id]
        assert await comment_repo.count(root_id=reply.id) == 2

        # Search resolves to the thread root
        matches = await comment_repo.search(marker.upper())
        assert {c.id for c in matches} == {root.id, nested.id}
        assert await comment_repo.find_root_ids([nested.id]) == {root.id}

        # Delete removes the whole subtree
        await comment_repo.delete_subtree(root.id)
        assert await comment_repo.find_subtree(root.id) == []
        assert await comment_repo.count(search=marker) == 0

    @pytest.mark.asyncio
    async def test_find_roots_ascending(self, integration_env):
        """Roots created later sort after earlier ones."""
        comment_repo = await integration_env.get(CommentRepository)
        first = await comment_repo.create("first")
        second = await comment_repo.create("second")

        roots = await comment_repo.find_roots(order=SortOrder.ASC, limit=10000)
        ids = [c.id for c in roots]

        assert ids.index(first.id) < ids.index(second.id)

        await comment_repo.delete_subtree(first.id)
        await comment_repo.delete_subtree(second.id)
