""" Build SqlAlchemy statements from a query specification """

from __future__ import annotations

import operator
from collections import abc
from typing import Any, Optional

import sqlalchemy as sa

from pagerql import exc
from pagerql.query_object import Range, SortingDirection
from pagerql.typing import QuerySpecDict

from .columns import resolve_column_by_name


# Comparison operators supported in `where`
OPERATORS: dict[str, abc.Callable[[Any, Any], Any]] = {
    'eq': operator.eq,
    'ne': operator.ne,
    'gt': operator.gt,
    'gte': operator.ge,
    'lt': operator.lt,
    'lte': operator.le,
    'in': lambda column, values: column.in_(values),
}


def select_statement(spec: QuerySpecDict, Model: type, stmt: Optional[sa.sql.Select] = None) -> sa.sql.Select:
    """ Build a SELECT statement from a query specification

    Applies: where, order, offset, limit

    Args:
        spec: Query specification, e.g. from Connection.get_query_spec()
        Model: The model to resolve the fields against
        stmt: The statement to start with. Default: select the whole model
    """
    if stmt is None:
        stmt = sa.select(Model)

    # Filter
    stmt = stmt.where(*where_expressions(spec.get('where') or {}, Model))

    # Sort
    stmt = stmt.order_by(*order_expressions(spec.get('order') or [], Model))

    # Paginate
    if spec.get('offset'):
        stmt = stmt.offset(spec['offset'])
    if spec.get('limit') is not None:
        stmt = stmt.limit(spec['limit'])

    return stmt


def count_statement(spec: QuerySpecDict, Model: type) -> sa.sql.Select:
    """ Build a SELECT COUNT(*) statement: the number of rows that match `where`, regardless of the page

    Use it to get the value for Connection.set_total_count()
    """
    return (
        sa.select(sa.func.count())
        .select_from(Model)
        .where(*where_expressions(spec.get('where') or {}, Model))
    )


def where_expressions(where: abc.Mapping[str, Any], Model: type) -> abc.Iterator[sa.sql.ColumnElement]:
    """ Generate filter expressions

    Supported conditions:
    * {field: value}: equality
    * {field: {op: value, ...}}: comparisons; op is one of: eq, ne, gt, gte, lt, lte, in
    * {field: Range}: a range
    """
    for field_name, condition in where.items():
        column = resolve_column_by_name(field_name, Model, where='where')

        if isinstance(condition, Range):
            condition = condition.query

        if isinstance(condition, abc.Mapping):
            for op_name, value in condition.items():
                try:
                    op = OPERATORS[op_name]
                except KeyError as e:
                    raise exc.LiteralSyntaxError('operator', op_name) from e
                yield op(column, value)
        else:
            yield column == condition


def order_expressions(ordering: abc.Iterable[tuple[str, str]], Model: type) -> abc.Iterator[sa.sql.ColumnElement]:
    """ Generate the list of columns, sorted asc()/desc(), to be used in the query """
    for field_name, direction in ordering:
        column = resolve_column_by_name(field_name, Model, where='order')

        if direction == SortingDirection.DESC:
            yield column.desc()
        else:
            yield column.asc()
