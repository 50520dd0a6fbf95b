"""Assembly of nested comment trees from flat record sets."""

from collections import defaultdict
from typing import Iterable, Sequence

from commenttree.domain.model import Comment, CommentTree
from commenttree.domain.value import CommentId

ChildIndex = dict[CommentId | None, list[Comment]]


def sibling_key(comment: Comment) -> tuple:
    """Ordering of replies under one parent: oldest first, ID as tiebreaker."""
    return (comment.created_at, comment.id)


def index_children(comments: Iterable[Comment]) -> ChildIndex:
    """Group comments by parent_id in a single pass.

    Each child list is sorted with sibling_key so tree output does not
    depend on the order the records were loaded in.

    Args:
        comments: Flat set of comments

    Returns:
        Mapping of parent ID (None for roots) to its direct children
    """
    index: ChildIndex = defaultdict(list)
    for comment in comments:
        index[comment.parent_id].append(comment)
    for children in index.values():
        children.sort(key=sibling_key)
    return index


def build_tree(root: Comment, index: ChildIndex) -> CommentTree:
    """Expand a comment into a tree using a prebuilt child index.

    Every comment reachable from root through the index appears exactly
    once. The index must be acyclic, which holds for any record set the
    store returns because parents always exist before their children.

    Nodes are built bottom-up from an explicit stack, so reply chains of
    any depth are assembled without recursion.
    """
    order: list[Comment] = []
    stack = [root]
    while stack:
        comment = stack.pop()
        order.append(comment)
        stack.extend(index.get(comment.id, []))

    # Descendants always follow their ancestors in order
    built: dict[CommentId, CommentTree] = {}
    for comment in reversed(order):
        built[comment.id] = CommentTree(
            comment=comment,
            children=[built[child.id] for child in index.get(comment.id, [])],
        )
    return built[root.id]


def build_forest(roots: Sequence[Comment], comments: Iterable[Comment]) -> list[CommentTree]:
    """Build one tree per root, in the order the roots are given.

    Args:
        roots: Already ordered and paginated roots
        comments: Flat set containing at least every descendant of roots

    Returns:
        List of nested trees
    """
    index = index_children(comments)
    return [build_tree(root, index) for root in roots]
