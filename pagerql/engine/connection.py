""" Connection: Relay-style pagination over any backend """

from __future__ import annotations

import logging
from collections import abc
from typing import Optional, Union

from pagerql import exc
from pagerql.typing import Row, QuerySpecDict, PageInfoDict, EdgeDict, ResponseDict
from pagerql.query_object import SortOrder, SortingDirection
from pagerql.features.cursor import Cursor
from pagerql.util.funcy import filter_none

from .settings import ConnectionSettings


logger = logging.getLogger(__name__)


class Connection:
    """ Connection: turns paging arguments into a query, and query results into a paginated response

    Lifecycle:

    1. Construct it with the client's arguments. They are validated right away.
    2. get_query_spec(): get the declarative query to run against your storage
    3. set_nodes(), set_total_count(): give back the results
    4. to_response(): get the response envelope: edges, page info, total count

    Only two windows are supported: "first N" with ascending order, and "last N" with descending order.

    Example:
        connection = Connection(first=10, after=after, order=order, default_order='-createdAt',
                                settings=ConnectionSettings(primary_key='id'))
        spec = connection.get_query_spec()
        rows = ...  # query your storage
        return connection.set_nodes(rows).set_total_count(count).to_response()
    """
    # Sort order
    order: SortOrder

    # Tie-break SortOrder literal
    secondary_order: Optional[str]

    # Name of the primary key field
    primary_key: Optional[str]

    # The active cursor: where the page starts
    cursor: Cursor

    # The number of items per page
    limit: int

    # Total number of rows. Only available after set_total_count()
    total_count: Optional[int]

    # Result rows. Only available after set_nodes()
    nodes: Optional[list[Row]]

    settings: ConnectionSettings

    __slots__ = 'order', 'secondary_order', 'primary_key', 'cursor', 'limit', 'total_count', 'nodes', 'settings'

    def __init__(self, *,
                 first: Optional[int] = None, after: Optional[str] = None,
                 last: Optional[int] = None, before: Optional[str] = None,
                 order: Optional[Union[str, SortOrder]] = None,
                 default_order: Optional[Union[str, SortOrder]] = None,
                 settings: Optional[ConnectionSettings] = None):
        """ Validate paging arguments and resolve the cursor

        Args:
            first: The number of items to get, when paginating forwards
            after: Cursor to paginate forwards from. Only used with `first`
            last: The number of items to get, when paginating backwards
            before: Cursor to paginate backwards from. Only used with `last`
            order: SortOrder literal (or object) given by the client
            default_order: SortOrder to use when `order` is not given
            settings: Pagination settings

        Raises:
            exc.PagingArgumentError: invalid arguments
            exc.LiteralSyntaxError: invalid `order`
            exc.CursorFormatError: invalid `after`/`before`
        """
        self.settings = settings or ConnectionSettings()
        self.primary_key = self.settings.primary_key
        self.secondary_order = self.settings.secondary_order
        self.total_count = None
        self.nodes = None

        # Paging direction: exactly one
        if first is None and last is None:
            raise exc.PagingArgumentError('Either `first` or `last` is required')
        if first is not None and last is not None:
            raise exc.PagingArgumentError('Use either `first` or `last`, not both')

        # Order
        input_order = order or default_order
        if not input_order:
            raise exc.PagingArgumentError('Either `order` or `defaultOrder` is required')
        self.order = input_order if isinstance(input_order, SortOrder) else SortOrder.parse(input_order)

        # Limit
        limit: int = first if first is not None else last  # type: ignore[assignment]
        if not isinstance(limit, int) or isinstance(limit, bool) or limit <= 0:
            raise exc.PagingArgumentError(f'The number of items must be a positive integer, {limit!r} given')
        if limit >= self.settings.max_limit:
            raise exc.PagingArgumentError(f'Too many items requested: {limit}. The limit is {self.settings.max_limit - 1}')
        self.limit = limit

        # Direction must match the paging mode
        if first is not None and self.order.direction != SortingDirection.ASC:
            raise exc.PagingArgumentError('`first` requires ASC order; use `last` to paginate in DESC order')
        if last is not None and self.order.direction != SortingDirection.DESC:
            raise exc.PagingArgumentError('`last` requires DESC order; use `first` to paginate in ASC order')

        # Cursor
        if first is not None and before is not None:
            raise exc.PagingArgumentError('`before` can only be used with `last`')
        if last is not None and after is not None:
            raise exc.PagingArgumentError('`after` can only be used with `first`')

        token = after if first is not None else before
        if token:
            self.cursor = Cursor.decode(token, debug=self.settings.debug_cursors)
        else:
            self.cursor = Cursor(
                field=self.order.field,
                offset=0,
                primary_key=self.primary_key,
                debug=self.settings.debug_cursors,
            )

    @classmethod
    def from_arguments(cls, arguments: abc.Mapping, *,
                       default_order: Optional[Union[str, SortOrder]] = None,
                       settings: Optional[ConnectionSettings] = None) -> Connection:
        """ Construct from a mapping of paging arguments: first, after, last, before, order

        Unrelated keys are ignored, so you can feed it resolver arguments as they are.
        """
        args = filter_none({
            name: arguments.get(name)
            for name in ('first', 'after', 'last', 'before', 'order')
        })
        return cls(**args, default_order=default_order, settings=settings)

    def get_cursor(self) -> Cursor:
        """ Get the active cursor """
        return self.cursor

    def is_keyset_pagination(self) -> bool:
        """ Can we use keyset pagination?

        Keyset pagination is possible when:
        * The primary key is known
        * Results are sorted by the primary key
        * The cursor is positioned by the primary key, and has its value
        """
        return (
            self.primary_key is not None and
            self.order.field == self.primary_key and
            self.cursor.field == self.primary_key and
            self.cursor.primary_value is not None
        )

    def get_query_spec(self, extra: Optional[abc.Mapping] = None) -> QuerySpecDict:
        """ Get the query specification to run against the storage

        Args:
            extra: Additional query fields, e.g. {'where': {...}}.
                With offset pagination, they take precedence.
                With keyset pagination, `where` is combined with the keyset predicate.
        """
        extra = dict(extra or {})
        ordering = self.order.to_ordering_list(self.secondary_order)

        # Keyset pagination
        if self.is_keyset_pagination():
            logger.debug('Keyset pagination: %s after %r', self.primary_key, self.cursor.primary_value)
            op = 'gt' if self.order.direction == SortingDirection.ASC else 'lt'
            # No offset: the keyset predicate skips the previous rows
            extra.pop('offset', None)
            return {  # type: ignore[return-value]
                **extra,
                'where': {
                    **(extra.get('where') or {}),
                    self.primary_key: {op: self.cursor.primary_value},  # type: ignore[dict-item]
                },
                'limit': self.limit,
                'order': ordering,
            }
        # Offset pagination
        else:
            logger.debug('Offset pagination: skip %d', self.cursor.offset)
            return {  # type: ignore[return-value]
                'offset': self.cursor.offset,
                'limit': self.limit,
                'order': ordering,
                **extra,
            }

    def set_nodes(self, rows: abc.Iterable[Row]) -> Connection:
        """ Bind result rows """
        self.nodes = list(rows)
        return self

    def set_total_count(self, total_count: int) -> Connection:
        """ Bind the total number of rows """
        self.total_count = total_count
        return self

    def get_edges(self) -> list[EdgeDict]:
        """ Get edges: every row, paired with a cursor that points right after it """
        if self.nodes is None:
            return []

        return [
            {
                'cursor': self._cursor_after(row, self.cursor.offset + i + 1).encode(),
                'node': row,
            }
            for i, row in enumerate(self.nodes)
        ]

    def get_page_info(self) -> PageInfoDict:
        """ Get page info: boundary cursors, whether there are more pages

        Raises:
            exc.PreconditionError: set_total_count() hasn't been called
        """
        if self.total_count is None:
            raise exc.PreconditionError('Call set_total_count() before get_page_info()')

        offset = self.cursor.offset
        end_offset = offset + self.limit

        # The end cursor remembers the last row, if we have it: otherwise, keyset pagination would return the same page
        if self.nodes:
            end_cursor = self._cursor_after(self.nodes[-1], end_offset)
        else:
            end_cursor = self.cursor.with_overrides(offset=end_offset)

        return {
            'startCursor': self.cursor.encode(),
            'endCursor': end_cursor.encode(),
            'hasNextPage': end_offset < self.total_count,
            'hasPreviousPage': offset > 0,
        }

    def to_response(self) -> ResponseDict:
        """ Get the paginated response envelope """
        return {
            'totalCount': self.total_count,  # type: ignore[typeddict-item]
            'pageInfo': self.get_page_info(),
            'edges': self.get_edges(),
            'nodes': self.nodes or [],
        }

    def _cursor_after(self, row: Row, offset: int) -> Cursor:
        """ Make a cursor that points right after the given row """
        if self.primary_key is None:
            return self.cursor.with_overrides(offset=offset)
        else:
            return self.cursor.with_overrides(offset=offset, primary_value=get_row_value(row, self.primary_key))

    def __repr__(self):
        return f'{type(self).__name__}(order={self.order.serialize()!r}, limit={self.limit!r}, cursor={self.cursor!r})'


def get_row_value(row: Row, key: str):
    """ Get a value from a row: a dict, or an object """
    if isinstance(row, abc.Mapping):
        return row[key]
    else:
        return getattr(row, key)
