"""
FastAPI helpers for paginated endpoints.

    @router.get("/users", response_model=Page[list[UserOut]])
    def list_users(
        paginator: Paginator = Depends(pagination_params),
        db: Session = Depends(get_db),
    ):
        query = db.query(User)
        paginator.set_count(query)
        paginator.paginate(query.with_transformation(paginator.scopes()).all())
        return paginator
"""
from __future__ import annotations

from typing import Generic, Optional, TypeVar

from fastapi import Query
from pydantic import BaseModel, ConfigDict

from plank.utils.pagination import Paginator

RowsT = TypeVar("RowsT")

# Column names reach ORDER BY as raw text, so only plain identifiers pass.
SORT_PATTERN = r"^(?i:asc|desc)?$"
ORDER_PATTERN = r"^([A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?)?$"


def pagination_params(
    limit: int = Query(0, description="Rows per page (defaults to 10)"),
    page: int = Query(0, description="1-based page number (defaults to 1)"),
    sort: str = Query("", pattern=SORT_PATTERN, description="asc or desc"),
    order: str = Query("", pattern=ORDER_PATTERN, description="Column to order by"),
) -> Paginator:
    return Paginator(limit=limit, page=page, sort=sort, order=order)


class Page(BaseModel, Generic[RowsT]):
    """Outbound page shape; ``offset`` is never part of it."""

    model_config = ConfigDict(from_attributes=True)

    limit: int
    page: int
    sort: str
    order: str
    total_rows: int
    total_pages: int
    rows: Optional[RowsT] = None
