"""PostgreSQL implementation of Comment repository.

Subtree and ancestor lookups use recursive CTEs over parent_id.
"""

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterable, Iterator, List, Optional, Set

from sqlalchemy import asc, desc, distinct, func, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import CTE

from commenttree.domain.error import InvalidParentError, StoreError
from commenttree.domain.model import Comment
from commenttree.domain.repository import CommentRepository
from commenttree.domain.value import CommentId, SortField, SortOrder
from commenttree.persistence.mappers import row_to_comment
from commenttree.persistence.tables import comments_table


def _subtree_cte(root_ids: List[CommentId]) -> CTE:
    """Descendant closure of root_ids, the roots included."""
    tree = (
        select(comments_table.c.id)
        .where(comments_table.c.id.in_(root_ids))
        .cte("comment_tree", recursive=True)
    )
    tree_alias = tree.alias()
    children = comments_table.alias()
    return tree.union_all(
        select(children.c.id).where(children.c.parent_id == tree_alias.c.id)
    )


def _ancestor_cte(comment_ids: List[CommentId]) -> CTE:
    """Ancestor closure of comment_ids, the comments included."""
    path = (
        select(comments_table.c.id, comments_table.c.parent_id)
        .where(comments_table.c.id.in_(comment_ids))
        .cte("comment_path", recursive=True)
    )
    path_alias = path.alias()
    parents = comments_table.alias()
    return path.union_all(
        select(parents.c.id, parents.c.parent_id).where(
            parents.c.id == path_alias.c.parent_id
        )
    )


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        """Re-raise database failures as StoreError."""
        try:
            yield
        except SQLAlchemyError as e:
            raise StoreError(operation, e) from e

    async def _fetch(self, stmt) -> List[Comment]:
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def create(
        self, content: str, parent_id: Optional[CommentId] = None
    ) -> Comment:
        """Insert a comment and return it with its generated ID."""
        now = datetime.now(timezone.utc)
        stmt = (
            insert(comments_table)
            .values(
                parent_id=parent_id,
                content=content,
                created_at=now,
                updated_at=now,
            )
            .returning(comments_table)
        )
        with self._store_errors("create comment"):
            try:
                result = await self.session.execute(stmt)
            except IntegrityError as e:
                # Parent removed between the existence check and the insert
                if parent_id is not None:
                    raise InvalidParentError(parent_id) from e
                raise
            row = result.fetchone()
            await self.session.flush()
        return row_to_comment(row._asdict())

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        with self._store_errors("get comment"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(self, comment_ids: Iterable[CommentId]) -> List[Comment]:
        """Find comments by ID."""
        ids = list(comment_ids)
        if not ids:
            return []
        stmt = (
            select(comments_table)
            .where(comments_table.c.id.in_(ids))
            .order_by(comments_table.c.id)
        )
        with self._store_errors("get comments"):
            return await self._fetch(stmt)

    async def find_all(self) -> List[Comment]:
        """Return every comment."""
        stmt = select(comments_table).order_by(comments_table.c.id)
        with self._store_errors("get all comments"):
            return await self._fetch(stmt)

    async def find_roots(
        self,
        sort_by: SortField = SortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one page of root comments."""
        direction = desc if order == SortOrder.DESC else asc
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(direction(comments_table.c[sort_by.value]), comments_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        with self._store_errors("get root comments"):
            return await self._fetch(stmt)

    async def find_subtree(self, root_id: CommentId) -> List[Comment]:
        """Find a comment and all of its descendants."""
        return await self.find_subtrees([root_id])

    async def find_subtrees(self, root_ids: Iterable[CommentId]) -> List[Comment]:
        """Find the union of several subtrees in one query."""
        ids = list(root_ids)
        if not ids:
            return []
        tree = _subtree_cte(ids)
        stmt = (
            select(comments_table)
            .where(comments_table.c.id.in_(select(tree.c.id)))
            .order_by(comments_table.c.id)
        )
        with self._store_errors("get comment tree"):
            return await self._fetch(stmt)

    async def find_root_ids(self, comment_ids: Iterable[CommentId]) -> Set[CommentId]:
        """Resolve comments to the roots of their threads."""
        ids = list(comment_ids)
        if not ids:
            return set()
        path = _ancestor_cte(ids)
        stmt = select(path.c.id).where(path.c.parent_id.is_(None)).distinct()
        with self._store_errors("resolve root comments"):
            result = await self.session.execute(stmt)
            return {CommentId(int(root_id)) for root_id in result.scalars()}

    async def search(self, pattern: str) -> List[Comment]:
        """Case-insensitive substring search on content."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.content.icontains(pattern, autoescape=True))
            .order_by(comments_table.c.id)
        )
        with self._store_errors("search comments"):
            return await self._fetch(stmt)

    async def delete_subtree(self, root_id: CommentId) -> None:
        """Delete a comment and its descendants in a single statement."""
        tree = _subtree_cte([root_id])
        stmt = comments_table.delete().where(
            comments_table.c.id.in_(select(tree.c.id))
        )
        with self._store_errors("delete comment"):
            await self.session.execute(stmt)
            await self.session.flush()

    async def count(
        self,
        root_id: Optional[CommentId] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count matches, subtree size, or root comments."""
        if search:
            stmt = select(func.count(distinct(comments_table.c.id))).where(
                comments_table.c.content.icontains(search, autoescape=True)
            )
        elif root_id is not None:
            tree = _subtree_cte([root_id])
            stmt = select(func.count()).select_from(tree)
        else:
            stmt = (
                select(func.count())
                .select_from(comments_table)
                .where(comments_table.c.parent_id.is_(None))
            )
        with self._store_errors("count comments"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0
