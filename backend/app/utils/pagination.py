"""
Shared paginated-list helpers.

Every list endpoint describes its filters once as a FilterSpec (which query
parameter filters which column, and how) and hands the resulting predicate to
paginate(), which runs the count and page queries and builds the pagination
envelope.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from fastapi import Query as QueryParam
from sqlalchemy import and_, or_
from sqlalchemy.orm import Query

from backend.app.core.exceptions import ValidationFailure
from backend.app.schemas.common import Pagination


@dataclass(frozen=True)
class FilterSpec:
    """
    Filter specification for one entity.

    - search_fields: columns matched by the free-text ``search`` parameter
      (case-insensitive substring, ORed across columns)
    - exact_fields: param name -> column, equality match
    - contains_fields: param name -> column, case-insensitive substring on one column
    - boolean_fields: param name -> column, only applied when the param was supplied
    - date_range: (column, start param, end param), inclusive bounds
    """

    search_fields: Sequence[Any] = ()
    exact_fields: Mapping[str, Any] = field(default_factory=dict)
    contains_fields: Mapping[str, Any] = field(default_factory=dict)
    boolean_fields: Mapping[str, Any] = field(default_factory=dict)
    date_range: tuple[Any, str, str] | None = None
    search_param: str = "search"

    def build(self, params: Mapping[str, Any]) -> list:
        """Return the list of clauses for the supplied params. Clauses are ANDed by the caller."""
        clauses = []

        term = params.get(self.search_param)
        if term and self.search_fields:
            clauses.append(
                or_(*[col.icontains(term, autoescape=True) for col in self.search_fields])
            )

        for name, col in self.exact_fields.items():
            value = params.get(name)
            if value not in (None, ""):
                clauses.append(col == value)

        for name, col in self.contains_fields.items():
            value = params.get(name)
            if value:
                clauses.append(col.icontains(value, autoescape=True))

        # None means "not in the query string"; False is a real filter value
        for name, col in self.boolean_fields.items():
            value = params.get(name)
            if value is not None:
                clauses.append(col == bool(value))

        if self.date_range is not None:
            col, start_name, end_name = self.date_range
            start = params.get(start_name)
            end = params.get(end_name)
            if start is not None:
                clauses.append(col >= start)
            if end is not None:
                clauses.append(col <= end)

        return clauses

    def apply(self, query: Query, params: Mapping[str, Any]) -> Query:
        clauses = self.build(params)
        if clauses:
            query = query.filter(and_(*clauses))
        return query


def build_pagination(page: int, page_size: int, total_count: int) -> Pagination:
    """Pagination envelope for a page of a result set of total_count rows."""
    total_pages = math.ceil(total_count / page_size) if page_size else 0
    return Pagination(
        page=page,
        page_size=page_size,
        total_count=total_count,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )


def paginate(
    query: Query,
    page: int,
    page_size: int,
    order_by: Sequence[Any] = (),
) -> tuple[list, Pagination]:
    """
    Run a count query and an offset/limit page query over the same filtered query.
    No upper bound on page_size is enforced.
    """
    if page < 1:
        raise ValidationFailure("page must be >= 1")
    if page_size < 1:
        raise ValidationFailure("pageSize must be >= 1")

    total_count = query.order_by(None).count()
    items = (
        query.order_by(*order_by)
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return items, build_pagination(page, page_size, total_count)


@dataclass(frozen=True)
class PageParams:
    page: int
    page_size: int


def page_params(default_page_size: int) -> Callable[..., PageParams]:
    """FastAPI dependency factory for ?page=&pageSize= with an endpoint-specific default."""

    def _dependency(
        page: int = QueryParam(1, ge=1),
        page_size: int = QueryParam(default_page_size, alias="pageSize", ge=1),
    ) -> PageParams:
        return PageParams(page=page, page_size=page_size)

    return _dependency
