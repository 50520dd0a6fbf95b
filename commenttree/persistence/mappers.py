"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from commenttree.domain.model import Comment
from commenttree.domain.value import CommentId


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(int(row["id"])),
        parent_id=CommentId(int(row["parent_id"]))
        if row.get("parent_id") is not None
        else None,
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
