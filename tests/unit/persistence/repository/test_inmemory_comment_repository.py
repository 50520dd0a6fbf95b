"""Unit tests for InMemoryCommentRepository."""

import pytest
import pytest_asyncio

from commenttree.domain.error import InvalidParentError
from commenttree.domain.value import CommentId, SortField, SortOrder
from commenttree.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment


@pytest_asyncio.fixture
async def repo():
    """Repository seeded with two threads.

    1
    ├── 2
    │   └── 3
    └── 4
    5
    └── 6
    """
    repository = InMemoryCommentRepository()
    for comment in [
        make_comment(1, "Root one", minutes=0),
        make_comment(2, "first reply", parent_id=1, minutes=1),
        make_comment(3, "deep reply", parent_id=2, minutes=2),
        make_comment(4, "second reply", parent_id=1, minutes=3),
        make_comment(5, "Root two", minutes=4),
        make_comment(6, "reply to two", parent_id=5, minutes=5),
    ]:
        await repository.save(comment)
    return repository


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_ids_are_sequential(self):
        """IDs start at 1 and increase."""
        repository = InMemoryCommentRepository()

        first = await repository.create("a")
        second = await repository.create("b", parent_id=first.id)

        assert (first.id, second.id) == (1, 2)
        assert second.parent_id == first.id

    @pytest.mark.asyncio
    async def test_ids_continue_after_seeded_comments(self, repo):
        """Seeded IDs are never reused."""
        comment = await repo.create("new")

        assert comment.id == 7

    @pytest.mark.asyncio
    async def test_missing_parent(self, repo):
        """The parent must exist at insert time."""
        with pytest.raises(InvalidParentError):
            await repo.create("reply", parent_id=CommentId(100))


class TestLookups:
    """Tests for the read operations."""

    @pytest.mark.asyncio
    async def test_find_subtree(self, repo):
        """Subtree includes the root and every descendant."""
        subtree = await repo.find_subtree(CommentId(1))

        assert [c.id for c in subtree] == [1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_find_subtrees_unknown_ids_ignored(self, repo):
        """Unknown roots contribute nothing."""
        comments = await repo.find_subtrees([CommentId(2), CommentId(5), CommentId(99)])

        assert [c.id for c in comments] == [2, 3, 5, 6]

    @pytest.mark.asyncio
    async def test_find_roots_paged(self, repo):
        """Roots are ordered and sliced."""
        newest = await repo.find_roots(limit=1)
        oldest = await repo.find_roots(order=SortOrder.ASC, limit=1)
        past_end = await repo.find_roots(limit=10, offset=2)

        assert [c.id for c in newest] == [5]
        assert [c.id for c in oldest] == [1]
        assert past_end == []

    @pytest.mark.asyncio
    async def test_find_roots_by_updated_at(self):
        """updated_at ordering is independent of created_at."""
        repository = InMemoryCommentRepository()
        await repository.save(make_comment(1, minutes=0, updated_minutes=9))
        await repository.save(make_comment(2, minutes=1, updated_minutes=1))

        roots = await repository.find_roots(sort_by=SortField.UPDATED_AT)

        assert [c.id for c in roots] == [1, 2]

    @pytest.mark.asyncio
    async def test_find_root_ids(self, repo):
        """Matches resolve to the distinct roots of their threads."""
        root_ids = await repo.find_root_ids(
            [CommentId(3), CommentId(4), CommentId(6), CommentId(5)]
        )

        assert root_ids == {1, 5}

    @pytest.mark.asyncio
    async def test_search_case_insensitive(self, repo):
        """Search ignores case."""
        matches = await repo.search("ROOT")

        assert [c.id for c in matches] == [1, 5]

    @pytest.mark.asyncio
    async def test_count(self, repo):
        """count covers roots, subtrees and search matches."""
        assert await repo.count() == 2
        assert await repo.count(root_id=CommentId(2)) == 2
        assert await repo.count(search="reply") == 4
        assert await repo.count(root_id=CommentId(99)) == 0


class TestDeleteSubtree:
    """Tests for delete_subtree."""

    @pytest.mark.asyncio
    async def test_removes_descendants_only(self, repo):
        """Other threads and ancestors survive."""
        await repo.delete_subtree(CommentId(2))

        assert [c.id for c in await repo.find_all()] == [1, 4, 5, 6]

    @pytest.mark.asyncio
    async def test_unknown_id_is_noop(self, repo):
        """Deleting an unknown ID changes nothing."""
        await repo.delete_subtree(CommentId(99))

        assert len(await repo.find_all()) == 6
