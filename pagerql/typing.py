from __future__ import annotations

from typing import Any, Optional, TypedDict

from pagerql.query_object.sort import OrderingList


# Annotation for result rows: dicts, or objects with attributes
Row = Any


class QuerySpecDict(TypedDict, total=False):
    """ Query specification: what to ask the backend for

    Keyset pagination: {where, limit, order}
    Offset pagination: {offset, limit, order} + extra fields
    """
    where: dict[str, Any]
    offset: int
    limit: int
    order: OrderingList


class PageInfoDict(TypedDict):
    """ Page info: boundaries of the current page """
    startCursor: Optional[str]
    endCursor: Optional[str]
    hasNextPage: bool
    hasPreviousPage: bool


class EdgeDict(TypedDict):
    """ Edge: a result row, paired with a cursor that points right after it """
    cursor: str
    node: Row


class ResponseDict(TypedDict):
    """ Paginated response envelope """
    totalCount: int
    pageInfo: PageInfoDict
    edges: list[EdgeDict]
    nodes: list[Row]
