"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel

from commenttree.application.usecase.base import BaseUseCase
from commenttree.domain.model import Comment
from commenttree.domain.service import CommentService
from commenttree.domain.value import CommentId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    content: str
    parent_id: int | None = None  # Parent comment ID for replies


class CommentResponse(BaseModel):
    """A single comment as returned by the API."""

    id: int
    parent_id: int | None
    content: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentResponse":
        """Convert domain Comment to response model."""
        return cls(
            id=comment.id,
            parent_id=comment.parent_id,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CreateCommentResponse(CommentResponse):
    """Create comment response."""


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a root comment or a reply."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment details

        Raises:
            EmptyContentError: If content is empty
            InvalidParentError: If parent comment does not exist
        """
        parent_id = CommentId(request.parent_id) if request.parent_id is not None else None
        comment = await self.comment_service.create_comment(
            content=request.content,
            parent_id=parent_id,
        )
        return CreateCommentResponse.from_domain(comment)
