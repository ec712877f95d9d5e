from __future__ import annotations

from collections import abc
from typing import Optional, TypedDict, Union

import fastapi

from pagerql import Connection, ConnectionSettings, SortOrder


class PagingArgumentsDict(TypedDict):
    """ Paging arguments, as given by the client """
    first: Optional[int]
    after: Optional[str]
    last: Optional[int]
    before: Optional[str]
    order: Optional[str]


def paging_arguments(*,
        first: Optional[int] = fastapi.Query(
            None,
            title='Pagination. The number of items to get, paginating forwards.',
            description='Requires ascending `order`.',
        ),
        after: Optional[str] = fastapi.Query(
            None,
            title='Pagination. Cursor to paginate forwards from.',
            description='Use `endCursor` of the previous page. Only with `first`.',
        ),
        last: Optional[int] = fastapi.Query(
            None,
            title='Pagination. The number of items to get, paginating backwards.',
            description='Requires descending `order`.',
        ),
        before: Optional[str] = fastapi.Query(
            None,
            title='Pagination. Cursor to paginate backwards from.',
            description='Use `endCursor` of the previous page. Only with `last`.',
        ),
        order: Optional[str] = fastapi.Query(
            None,
            title='Sorting order',
            description='Field name with an optional `+` or `-`. Example: `-createdAt`.',
        ),
) -> PagingArgumentsDict:
    """ Get paging arguments from the request parameters

    Example:
        /api/users?first=10&after=cEs9aWQmZj1pZCZvPTEw&order=id
    """
    return PagingArgumentsDict(first=first, after=after, last=last, before=before, order=order)


def connection_dependency(*,
                          default_order: Optional[Union[str, SortOrder]] = None,
                          settings: Optional[ConnectionSettings] = None
                          ) -> abc.Callable[[PagingArgumentsDict], Connection]:
    """ Make a dependency that gives a Connection for the request

    Example:
        @app.get('/api/users')
        def list_users(connection: Connection = Depends(connection_dependency(default_order='id'))):
            ...

    Raises:
        exc.PagingArgumentError, exc.LiteralSyntaxError, exc.CursorFormatError: when the dependency is resolved
    """
    def dependency(args: PagingArgumentsDict = fastapi.Depends(paging_arguments)) -> Connection:
        return Connection.from_arguments(args, default_order=default_order, settings=settings)
    return dependency
