"""Test configuration and fixtures."""

from datetime import datetime, timedelta

import logfire

from commenttree.domain.model import Comment
from commenttree.domain.value import CommentId

# Keep spans local; the FastAPI app is instrumented at import time
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_comment(
    comment_id: int,
    content: str = "comment",
    parent_id: int | None = None,
    minutes: int = 0,
    updated_minutes: int | None = None,
) -> Comment:
    """Build a comment with timestamps offset from a fixed base time.

    Args:
        comment_id: Comment ID
        content: Comment text
        parent_id: Parent comment ID (None for roots)
        minutes: created_at offset from BASE_TIME in minutes
        updated_minutes: updated_at offset, defaults to the created_at offset

    Returns:
        Comment domain model
    """
    created_at = BASE_TIME + timedelta(minutes=minutes)
    updated_at = (
        BASE_TIME + timedelta(minutes=updated_minutes)
        if updated_minutes is not None
        else created_at
    )
    return Comment(
        id=CommentId(comment_id),
        content=content,
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        created_at=created_at,
        updated_at=updated_at,
    )
