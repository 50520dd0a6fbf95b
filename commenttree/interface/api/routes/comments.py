"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Response, status
from pydantic import BaseModel

from commenttree.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from commenttree.domain.error import NotFoundError, StoreError, ValidationError
from commenttree.domain.value import SortField, SortOrder

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    parent_id: int | None = None  # Parent comment ID for replies


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Create a root comment or reply to another comment.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment details

    Raises:
        HTTPException: 400 if content is empty or the parent does not exist
    """
    try:
        use_case_request = CreateCommentRequest(
            content=request.content,
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except ValidationError as e:
        logfire.warn("Comment creation rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StoreError as e:
        logfire.error("Store failure creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.get("", response_model=GetCommentsResponse)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    parent: int | None = Query(default=None, description="Thread root comment ID"),
    search: str | None = Query(default=None),
    page: int | None = Query(default=None),
    page_size: int | None = Query(default=None),
    sort_by: SortField | None = Query(default=None),
    order: SortOrder | None = Query(default=None),
) -> Response:
    """Get a page of comment threads.

    Roots are paginated; every returned root carries all of its replies.
    With `search`, threads containing at least one matching comment are
    returned in full.

    `parent` may name any comment, not only a root: that comment is
    returned as the single top-level entry with its replies, and `total`
    is the size of its subtree. Query values that do not parse (an
    unknown `sort_by` or `order`, a non-integer `page`) are rejected with
    422 instead of falling back to the defaults. Only unset or
    non-positive `page` and `page_size` take the defaults (1 and 50).

    The body is written by GetCommentsResponse.to_json so reply chains
    of any depth serialize.

    Example:
        GET /comments?search=hello&page=1&page_size=10&sort_by=created_at&order=asc

        Response:
        {
            "comments": [
                {"comment": {"id": 1, "content": "hello", ...},
                 "children": [{"comment": {"id": 2, ...}, "children": []}]}
            ],
            "total": 1,
            "page": 1,
            "page_size": 10
        }
    """
    request = GetCommentsRequest(
        parent_id=parent,
        search=search,
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        order=order,
    )
    try:
        response = await get_comments_use_case.execute(request)
    except StoreError as e:
        logfire.error("Store failure reading comments", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load comments",
        )
    return Response(content=response.to_json(), media_type="application/json")


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> Response:
    """Delete a comment and all of its replies.

    Raises:
        HTTPException: 404 if the comment does not exist
    """
    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except StoreError as e:
        logfire.error(
            "Store failure deleting comment", comment_id=comment_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
