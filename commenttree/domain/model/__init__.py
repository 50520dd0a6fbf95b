"""Domain models."""

from commenttree.domain.model.comment import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    Comment,
    CommentFilter,
    CommentTree,
)
from commenttree.domain.model.common import DomainModel

__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "Comment",
    "CommentFilter",
    "CommentTree",
    "DomainModel",
]
