"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .pagination import order_roots, page_bounds, paginate
from .tree_builder import build_forest, build_tree, index_children

__all__ = [
    "CommentService",
    "Service",
    "build_forest",
    "build_tree",
    "index_children",
    "order_roots",
    "page_bounds",
    "paginate",
]
