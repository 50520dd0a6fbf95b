"""Get comments use case."""

from pydantic import BaseModel

from commenttree.application.usecase.base import BaseUseCase
from commenttree.application.usecase.comment.create_comment import CommentResponse
from commenttree.domain.model import CommentFilter, CommentTree
from commenttree.domain.service import CommentService
from commenttree.domain.value import CommentId, SortField, SortOrder


class CommentTreeResponse(BaseModel):
    """Comment with its nested replies.

    Recursive structure mirroring the domain model. Reply chains can be
    deeper than the nesting pydantic serializes, so conversion and JSON
    output walk the tree with an explicit stack.
    """

    comment: CommentResponse
    children: list["CommentTreeResponse"]

    @classmethod
    def from_domain(cls, tree: CommentTree) -> "CommentTreeResponse":
        """Convert domain CommentTree to response model.

        Args:
            tree: Domain comment tree

        Returns:
            API response model with children converted bottom-up
        """
        order: list[CommentTree] = []
        stack = [tree]
        while stack:
            node = stack.pop()
            order.append(node)
            stack.extend(node.children)

        built: dict[int, CommentTreeResponse] = {}
        for node in reversed(order):
            built[node.comment.id] = cls(
                comment=CommentResponse.from_domain(node.comment),
                children=[built[child.comment.id] for child in node.children],
            )
        return built[tree.comment.id]


def dump_forest_json(trees: list[CommentTreeResponse]) -> str:
    """Serialize a list of comment trees to a JSON array.

    Each comment is dumped by pydantic; the nesting around it is written
    from an explicit stack of pending trees and closing tokens.

    Args:
        trees: Comment trees in output order

    Returns:
        JSON text of the form [{"comment": {...}, "children": [...]}, ...]
    """
    parts: list[str] = ["["]
    stack: list[CommentTreeResponse | str] = ["]"]
    for i, tree in reversed(list(enumerate(trees))):
        stack.append(tree)
        if i > 0:
            stack.append(",")

    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        parts.append('{"comment":')
        parts.append(item.comment.model_dump_json())
        parts.append(',"children":[')
        stack.append("]}")
        for i, child in reversed(list(enumerate(item.children))):
            stack.append(child)
            if i > 0:
                stack.append(",")
    return "".join(parts)


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    parent_id: int | None = None  # Scope to the thread rooted at this comment
    search: str | None = None
    page: int | None = None
    page_size: int | None = None
    sort_by: SortField | None = None
    order: SortOrder | None = None


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentTreeResponse]
    total: int
    page: int
    page_size: int

    def to_json(self) -> str:
        """Serialize the response without depth limits on the comment trees."""
        header = self.model_dump_json(exclude={"comments"})
        return '{"comments":' + dump_forest_json(self.comments) + "," + header[1:]


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading a page of comment threads."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Steps:
        1. Normalize the filter (defaults for page, size, sort and order)
        2. Fetch the forest for the filter
        3. Count comments for the same scope

        Args:
            request: Get comments request

        Returns:
            Page of nested comment trees with the total count
        """
        comment_filter = CommentFilter(
            root_id=CommentId(request.parent_id) if request.parent_id is not None else None,
            search=request.search,
            page=request.page,
            page_size=request.page_size,
            sort_by=request.sort_by,
            order=request.order,
        ).normalized()

        trees = await self.comment_service.get_forest(comment_filter)
        total = await self.comment_service.get_total_count(
            root_id=comment_filter.root_id,
            search=comment_filter.search,
        )

        return GetCommentsResponse(
            comments=[CommentTreeResponse.from_domain(tree) for tree in trees],
            total=total,
            page=comment_filter.page,
            page_size=comment_filter.page_size,
        )
