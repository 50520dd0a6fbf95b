"""Ordering and pagination of root comments.

Only roots are ever paginated: once a root is selected its whole thread is
returned.
"""

from typing import Sequence, TypeVar

from commenttree.domain.model import Comment
from commenttree.domain.value import SortField, SortOrder

T = TypeVar("T")


def order_roots(
    roots: Sequence[Comment],
    sort_by: SortField = SortField.CREATED_AT,
    order: SortOrder = SortOrder.DESC,
) -> list[Comment]:
    """Stable sort of roots by a timestamp field.

    Roots with equal timestamps keep their relative input order in both
    directions.
    """
    return sorted(
        roots,
        key=lambda comment: getattr(comment, sort_by.value),
        reverse=order == SortOrder.DESC,
    )


def page_bounds(page: int, page_size: int) -> tuple[int, int]:
    """Half-open slice bounds [start, end) for a 1-based page."""
    start = (page - 1) * page_size
    return start, start + page_size


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Return the requested page, empty when it starts past the end."""
    start, end = page_bounds(page, page_size)
    if start >= len(items):
        return []
    return list(items[start:end])
