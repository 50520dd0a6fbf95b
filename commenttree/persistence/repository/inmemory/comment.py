"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Iterable, Optional

from commenttree.domain.error import InvalidParentError
from commenttree.domain.model.comment import Comment
from commenttree.domain.repository.comment import CommentRepository
from commenttree.domain.service.pagination import order_roots
from commenttree.domain.value import CommentId, SortField, SortOrder


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Comments are kept in insertion order, which is also ID order.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._next_id = 1

    def _ordered(self) -> list[Comment]:
        return sorted(self._comments.values(), key=lambda c: c.id)

    def _children_of(self, parent_id: CommentId) -> list[Comment]:
        return [c for c in self._comments.values() if c.parent_id == parent_id]

    def _subtree_ids(self, root_ids: Iterable[CommentId]) -> set[CommentId]:
        pending = [root_id for root_id in root_ids if root_id in self._comments]
        seen: set[CommentId] = set()
        while pending:
            comment_id = pending.pop()
            if comment_id in seen:
                continue
            seen.add(comment_id)
            pending.extend(child.id for child in self._children_of(comment_id))
        return seen

    async def save(self, comment: Comment) -> Comment:
        """Store a fully built comment (used to seed fixtures)."""
        self._comments[comment.id] = comment
        self._next_id = max(self._next_id, comment.id + 1)
        return comment

    async def create(
        self, content: str, parent_id: Optional[CommentId] = None
    ) -> Comment:
        """Insert a comment with the next sequential ID."""
        if parent_id is not None and parent_id not in self._comments:
            raise InvalidParentError(parent_id)

        now = datetime.now()
        comment = Comment(
            id=CommentId(self._next_id),
            parent_id=parent_id,
            content=content,
            created_at=now,
            updated_at=now,
        )
        return await self.save(comment)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_ids(self, comment_ids: Iterable[CommentId]) -> list[Comment]:
        """Find comments by ID."""
        wanted = set(comment_ids)
        return [c for c in self._ordered() if c.id in wanted]

    async def find_all(self) -> list[Comment]:
        """Return every comment."""
        return self._ordered()

    async def find_roots(
        self,
        sort_by: SortField = SortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Comment]:
        """Find one page of root comments."""
        roots = [c for c in self._ordered() if c.parent_id is None]
        return order_roots(roots, sort_by, order)[offset : offset + limit]

    async def find_subtree(self, root_id: CommentId) -> list[Comment]:
        """Find a comment and all of its descendants."""
        return await self.find_subtrees([root_id])

    async def find_subtrees(self, root_ids: Iterable[CommentId]) -> list[Comment]:
        """Find the union of several subtrees."""
        ids = self._subtree_ids(root_ids)
        return [c for c in self._ordered() if c.id in ids]

    async def find_root_ids(self, comment_ids: Iterable[CommentId]) -> set[CommentId]:
        """Walk parent links up to each thread's root."""
        roots: set[CommentId] = set()
        for comment_id in comment_ids:
            comment = self._comments.get(comment_id)
            # Bounded by the store size so a corrupted chain cannot loop
            for _ in range(len(self._comments)):
                if comment is None or comment.parent_id is None:
                    break
                comment = self._comments.get(comment.parent_id)
            if comment is not None and comment.parent_id is None:
                roots.add(comment.id)
        return roots

    async def search(self, pattern: str) -> list[Comment]:
        """Case-insensitive substring search on content."""
        needle = pattern.lower()
        return [c for c in self._ordered() if needle in c.content.lower()]

    async def delete_subtree(self, root_id: CommentId) -> None:
        """Delete a comment and its descendants."""
        for comment_id in self._subtree_ids([root_id]):
            del self._comments[comment_id]

    async def count(
        self,
        root_id: Optional[CommentId] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count matches, subtree size, or root comments."""
        if search:
            return len(await self.search(search))
        if root_id is not None:
            return len(self._subtree_ids([root_id]))
        return sum(1 for c in self._comments.values() if c.parent_id is None)
