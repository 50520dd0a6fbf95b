"""Comment entity and tree structures.

Comments form a forest: each comment optionally references a parent
comment, and comments without a parent are the roots of threads.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commenttree.domain.model.common import DomainModel
from commenttree.domain.value import CommentId, SortField, SortOrder

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 50


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through parent_id alone: None marks a root,
    otherwise it references a comment that existed when this one was
    created. Timestamps are stamped by the store at insert time and
    updated_at starts equal to created_at.
    """

    id: CommentId
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class CommentTree(DomainModel):
    """A comment together with all of its nested replies."""

    comment: Comment
    children: list["CommentTree"] = Field(default_factory=list)

    def size(self) -> int:
        """Number of comments in this tree, root included."""
        count = 0
        stack: list[CommentTree] = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children)
        return count


class CommentFilter(DomainModel):
    """Scoping, search, ordering and pagination options for a forest read.

    Unset or non-positive values are replaced by defaults in normalized().
    """

    root_id: Optional[CommentId] = None
    search: Optional[str] = None
    page: Optional[int] = None
    page_size: Optional[int] = None
    sort_by: Optional[SortField] = None
    order: Optional[SortOrder] = None

    def normalized(self) -> "CommentFilter":
        """Return a copy with defaults applied.

        page=1, page_size=50, sort_by=created_at, order=desc. An empty
        search string means no search.
        """
        return CommentFilter(
            root_id=self.root_id,
            search=self.search or None,
            page=self.page if self.page and self.page > 0 else DEFAULT_PAGE,
            page_size=(
                self.page_size
                if self.page_size and self.page_size > 0
                else DEFAULT_PAGE_SIZE
            ),
            sort_by=self.sort_by or SortField.CREATED_AT,
            order=self.order or SortOrder.DESC,
        )

