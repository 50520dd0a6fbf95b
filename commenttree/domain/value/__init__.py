"""Domain value objects for the comment tree."""

from commenttree.domain.value.identifiers import CommentId
from commenttree.domain.value.types import SortField, SortOrder

__all__ = [
    # Identifiers
    "CommentId",
    # Types
    "SortField",
    "SortOrder",
]
