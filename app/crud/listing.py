"""
Listing query builder: search, whitelisted sort and pagination.

Turns raw query parameters into a normalized ListingParams, then into a
filtered/sorted/windowed query plus an independent count over the same filter.
"""

import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Tuple
from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.schemas.common import MetaInfo

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class ListingConfig:
    """Per-collection listing rules."""
    sort_columns: Mapping[str, Any]  # whitelist: public name -> mapped column
    default_sort: str
    search_columns: Sequence[Any]


@dataclass(frozen=True)
class ListingParams:
    search: str
    sort_by: str
    order: str
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def normalize_params(
    config: ListingConfig,
    search: Optional[str] = None,
    sort_by: Optional[str] = None,
    order: Optional[str] = None,
    page: int = 1,
    limit: int = 10,
) -> ListingParams:
    """
    Normalize raw listing parameters.

    Unknown sort columns fall back to the default column and any order other
    than "desc" becomes "asc"; neither is an error. The search term is kept
    verbatim, surrounding whitespace included.
    """
    if sort_by not in config.sort_columns:
        sort_by = config.default_sort

    order = "desc" if (order or "").lower() == "desc" else "asc"

    return ListingParams(
        search=search or "",
        sort_by=sort_by,
        order=order,
        page=max(page, 1),
        limit=min(max(limit, 1), MAX_PAGE_SIZE),
    )


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_filter(columns: Sequence[Any], search: str):
    """Case-insensitive substring match OR-ed across columns, or None for no search."""
    if not search:
        return None
    pattern = f"%{_escape_like(search)}%"
    return or_(*[column.ilike(pattern, escape="\\") for column in columns])


def fetch_page(db: Session, model, config: ListingConfig, params: ListingParams) -> Tuple[List[Any], int]:
    """
    Run the page query and the count query.

    Both use the same filter but are two separate statements, so a concurrent
    write can make the total disagree with the page.
    """
    criterion = search_filter(config.search_columns, params.search)

    query = db.query(model)
    if criterion is not None:
        query = query.filter(criterion)

    total = query.order_by(None).count()

    column = config.sort_columns[params.sort_by]
    ordering = column.desc() if params.order == "desc" else column.asc()
    items = (
        query.order_by(ordering, model.id.asc())
        .offset(params.offset)
        .limit(params.limit)
        .all()
    )
    return items, total


def build_meta(params: ListingParams, total: int) -> MetaInfo:
    return MetaInfo(
        page=params.page,
        limit=params.limit,
        total=total,
        pages=math.ceil(total / params.limit),
        sort_by=params.sort_by,
        order=params.order,
        search=params.search,
    )
