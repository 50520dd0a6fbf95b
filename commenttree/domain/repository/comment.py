"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Set

from commenttree.domain.model.comment import Comment
from commenttree.domain.value import CommentId, SortField, SortOrder


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.

    Record sets returned by the lookup methods are ordered by ID so that
    callers relying on stable sorting get deterministic tie-breaks.
    """

    @abstractmethod
    async def create(
        self, content: str, parent_id: Optional[CommentId] = None
    ) -> Comment:
        """Insert a new comment with store-assigned ID and timestamps.

        Args:
            content: Comment text (validated by the caller)
            parent_id: Parent comment ID, None for a root comment

        Returns:
            The stored comment

        Raises:
            InvalidParentError: If parent_id does not reference a comment
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Iterable[CommentId]) -> List[Comment]:
        """Find all comments whose ID is in comment_ids."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Comment]:
        """Return every comment in the store."""
        pass

    @abstractmethod
    async def find_roots(
        self,
        sort_by: SortField = SortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one page of root comments.

        Roots are ordered by sort_by in the given direction, with ID
        ascending as the secondary key.

        Args:
            sort_by: Timestamp field to order by
            order: Sort direction
            limit: Maximum number of roots to return
            offset: Number of roots to skip

        Returns:
            List of root comments
        """
        pass

    @abstractmethod
    async def find_subtree(self, root_id: CommentId) -> List[Comment]:
        """Find a comment and all of its transitive descendants.

        Args:
            root_id: ID of the subtree root

        Returns:
            Flat list of the subtree's comments, empty if root_id is unknown
        """
        pass

    @abstractmethod
    async def find_subtrees(self, root_ids: Iterable[CommentId]) -> List[Comment]:
        """Find the union of the subtrees rooted at root_ids."""
        pass

    @abstractmethod
    async def find_root_ids(self, comment_ids: Iterable[CommentId]) -> Set[CommentId]:
        """Resolve comments to the distinct roots of their threads.

        Walks the parent chain of every comment up to the ancestor that
        has no parent. A comment that is itself a root resolves to itself.

        Args:
            comment_ids: Comments to resolve

        Returns:
            Set of root comment IDs
        """
        pass

    @abstractmethod
    async def search(self, pattern: str) -> List[Comment]:
        """Find comments whose content contains pattern, ignoring case.

        Args:
            pattern: Literal substring to look for

        Returns:
            Matching comments
        """
        pass

    @abstractmethod
    async def delete_subtree(self, root_id: CommentId) -> None:
        """Delete a comment and all of its descendants as one unit.

        Deleting an unknown ID is a no-op; existence is checked by callers.

        Args:
            root_id: ID of the subtree root
        """
        pass

    @abstractmethod
    async def count(
        self,
        root_id: Optional[CommentId] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count comments.

        With search: number of comments matching the pattern.
        With root_id only: size of the subtree rooted at root_id.
        Otherwise: number of root comments.

        Args:
            root_id: Optional subtree root
            search: Optional content pattern

        Returns:
            Number of comments
        """
        pass
