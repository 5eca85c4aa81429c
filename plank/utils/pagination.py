"""
Limit/offset pagination over SQLAlchemy ORM queries.

Typical use inside a route or repository:

    paginator = Paginator(limit=20, page=2)
    query = db.query(User).filter(User.is_active)
    paginator.set_count(query)
    paginator.paginate(query.with_transformation(paginator.scopes()).all())
    return paginator.model_dump()
"""
from __future__ import annotations

import math
from typing import Callable, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, PrivateAttr
from sqlalchemy import text
from sqlalchemy.orm import Query

from plank.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1
DEFAULT_SORT = "asc"
DEFAULT_ORDER = "id"

RowsT = TypeVar("RowsT")


class Paginator(BaseModel, Generic[RowsT]):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    limit: int = 0        # rows per page
    page: int = 0         # 1-based page number
    sort: str = ""        # direction appended after the order column
    order: str = ""       # column to order by
    total_rows: int = 0
    total_pages: int = 0
    rows: Optional[RowsT] = None

    # Derived from page and limit only; never read from or written to the wire.
    _offset: int = PrivateAttr(default=0)

    @property
    def offset(self) -> int:
        return self._offset

    def normalize(self) -> None:
        """Apply defaults to unset or out-of-range request fields."""
        if self.limit <= 0:
            self.limit = DEFAULT_LIMIT
        if self.page <= 0:
            self.page = DEFAULT_PAGE
        self._offset = (self.page - 1) * self.limit
        if not self.sort:
            self.sort = DEFAULT_SORT
        if not self.order:
            self.order = DEFAULT_ORDER

    def scopes(self) -> Callable[[Query], Query]:
        """Return a query modifier applying offset, limit and ordering.

        The modifier reads the paginator when it is applied, so it can be
        built before ``set_count`` and still use the final offset.
        """
        if self.limit <= 0:
            self.limit = DEFAULT_LIMIT

        def _apply(query: Query) -> Query:
            # Query.order_by() refuses a query that already has LIMIT/OFFSET
            return (
                query.order_by(text(f"{self.order} {self.sort}"))
                .offset(self.offset)
                .limit(self.limit)
            )

        return _apply

    def set_count(self, count_query: Query) -> None:
        """Count rows matching ``count_query`` and compute page metadata.

        Errors raised by the query are propagated untouched.
        """
        try:
            total = count_query.count()
        except Exception:
            logger.warning("Pagination count query failed", exc_info=True)
            raise
        self.set_total(total)

    def set_total(self, total: int) -> None:
        self.normalize()
        self.total_rows = total
        self.total_pages = int(math.ceil(float(self.total_rows) / float(self.limit)))
        logger.debug(
            "Paginator page=%d limit=%d offset=%d total_rows=%d total_pages=%d",
            self.page, self.limit, self.offset, self.total_rows, self.total_pages,
        )

    def paginate(self, rows: RowsT) -> None:
        self.rows = rows
