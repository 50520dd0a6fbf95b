"""Comment domain service."""

from typing import Optional

import logfire

from commenttree.domain.error import (
    CommentNotFoundError,
    EmptyContentError,
    InvalidParentError,
)
from commenttree.domain.model import Comment, CommentFilter, CommentTree
from commenttree.domain.repository import CommentRepository
from commenttree.domain.value import CommentId

from .base import Service
from .pagination import order_roots, page_bounds, paginate
from .tree_builder import build_forest


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, content: str, parent_id: CommentId | None = None
    ) -> Comment:
        """Create a root comment or a reply to another comment.

        Args:
            content: Comment text
            parent_id: Parent comment ID for replies (None for root comments)

        Returns:
            Created comment with store-assigned ID and timestamps

        Raises:
            EmptyContentError: If content is empty or whitespace only
            InvalidParentError: If parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            parent_id=parent_id,
            content_length=len(content),
        ):
            if not content.strip():
                logfire.warn("Rejected empty comment", parent_id=parent_id)
                raise EmptyContentError()

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn("Parent comment not found", parent_id=parent_id)
                    raise InvalidParentError(parent_id)

            comment = await self.comment_repository.create(
                content=content, parent_id=parent_id
            )
            logfire.info(
                "Comment created", comment_id=comment.id, parent_id=parent_id
            )
            return comment

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=comment_id
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=comment_id)
            else:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def get_forest(self, comment_filter: CommentFilter) -> list[CommentTree]:
        """Get a page of comment threads.

        The filter is normalized first. A search string takes precedence
        over root scoping; without either, the whole forest is paginated.

        Args:
            comment_filter: Scoping, search, ordering and pagination options

        Returns:
            Ordered list of nested comment trees
        """
        comment_filter = comment_filter.normalized()
        with logfire.span(
            "comment_service.get_forest",
            root_id=comment_filter.root_id,
            search=comment_filter.search,
            page=comment_filter.page,
            page_size=comment_filter.page_size,
            sort_by=comment_filter.sort_by.value,
            order=comment_filter.order.value,
        ):
            if comment_filter.search:
                trees = await self.search_forest(comment_filter)
            elif comment_filter.root_id is not None:
                trees = await self._get_subtree_forest(comment_filter)
            else:
                trees = await self._get_root_forest(comment_filter)

            logfire.info("Comment forest retrieved", tree_count=len(trees))
            return trees

    async def search_forest(self, comment_filter: CommentFilter) -> list[CommentTree]:
        """Return whole threads containing at least one matching comment.

        Steps:
        1. Find comments whose content matches the search text
        2. Resolve each match to the root of its thread
        3. Order and paginate the distinct roots
        4. Load the selected threads in full and assemble them, so
           replies that do not match are included too

        Args:
            comment_filter: Filter with a search string

        Returns:
            Ordered list of matching threads
        """
        comment_filter = comment_filter.normalized()
        pattern = comment_filter.search or ""
        with logfire.span("comment_service.search_forest", search=pattern):
            matches = await self.comment_repository.search(pattern)
            if not matches:
                logfire.info("No comments matched search", search=pattern)
                return []

            root_ids = await self.comment_repository.find_root_ids(
                [match.id for match in matches]
            )
            roots = await self.comment_repository.find_by_ids(root_ids)
            selected = paginate(
                order_roots(roots, comment_filter.sort_by, comment_filter.order),
                comment_filter.page,
                comment_filter.page_size,
            )
            logfire.info(
                "Search resolved to threads",
                search=pattern,
                match_count=len(matches),
                thread_count=len(roots),
                selected_count=len(selected),
            )
            if not selected:
                return []

            comments = await self.comment_repository.find_subtrees(
                [root.id for root in selected]
            )
            return build_forest(selected, comments)

    async def _get_root_forest(self, comment_filter: CommentFilter) -> list[CommentTree]:
        """Paginate root comments in the store, then load their threads."""
        start, end = page_bounds(comment_filter.page, comment_filter.page_size)
        roots = await self.comment_repository.find_roots(
            sort_by=comment_filter.sort_by,
            order=comment_filter.order,
            limit=end - start,
            offset=start,
        )
        if not roots:
            return []
        comments = await self.comment_repository.find_subtrees(
            [root.id for root in roots]
        )
        return build_forest(roots, comments)

    async def _get_subtree_forest(
        self, comment_filter: CommentFilter
    ) -> list[CommentTree]:
        """Return the thread rooted at the filter's root_id.

        The scoped comment is the only top-level entry, whether or not it
        has a parent of its own.
        """
        comments = await self.comment_repository.find_subtree(comment_filter.root_id)
        roots = [c for c in comments if c.id == comment_filter.root_id]
        selected = paginate(roots, comment_filter.page, comment_filter.page_size)
        return build_forest(selected, comments)

    async def get_total_count(
        self,
        root_id: Optional[CommentId] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count comments for a listing.

        Args:
            root_id: Subtree root, counts the subtree size
            search: Search text, counts matching comments (takes precedence)

        Returns:
            Number of root comments when neither argument is given
        """
        with logfire.span(
            "comment_service.get_total_count", root_id=root_id, search=search
        ):
            total = await self.comment_repository.count(
                root_id=root_id, search=search or None
            )
            logfire.info("Comments counted", root_id=root_id, total=total)
            return total

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment together with all of its replies.

        Args:
            comment_id: Comment ID

        Raises:
            CommentNotFoundError: If comment does not exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            existing = await self.comment_repository.find_by_id(comment_id)
            if existing is None:
                logfire.warn("Comment not found for delete", comment_id=comment_id)
                raise CommentNotFoundError(comment_id)

            await self.comment_repository.delete_subtree(comment_id)
            logfire.info("Comment subtree deleted", comment_id=comment_id)
