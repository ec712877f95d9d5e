""" Custom scalars: Range, SortOrder, JSON, UnixTimestamp

Every function is a factory that makes a scalar type with the given name.
"""

from __future__ import annotations

from typing import Any, Optional

import graphql

from pagerql.query_object import Range, SortOrder

from .literal import value_from_literal


# The max value for a Unix timestamp: 10 digits
MAX_UNIX_TIMESTAMP = 9999999999


def range_scalar(name: str = 'Range') -> graphql.GraphQLScalarType:
    """ Range scalar: "[from,to]", "(from,to)", "[from,)", "(,to]" """
    def serialize(value: Any) -> str:
        return value.serialize() if isinstance(value, Range) else value

    def parse_literal(node: graphql.ValueNode, variables: Optional[dict[str, Any]] = None) -> Range:
        if not isinstance(node, graphql.StringValueNode):
            raise graphql.GraphQLError(f'{name} must be a string', node)

        value = Range.try_parse(node.value)
        if value is None:
            raise graphql.GraphQLError(f'Invalid {name} literal: {node.value!r}', node)
        return value

    return graphql.GraphQLScalarType(
        name,
        description=(
            'The Range scalar type defines two values as a value range:\n'
            '- [fromValue,toValue] means greater than or equal fromValue, less than or equal toValue,\n'
            '- (fromValue,toValue) means greater than fromValue, less than toValue'
        ),
        serialize=serialize,
        parse_value=Range.parse,
        parse_literal=parse_literal,
    )


def sort_order_scalar(name: str = 'SortOrder') -> graphql.GraphQLScalarType:
    """ SortOrder scalar: "field", "+field", "-field" """
    def serialize(value: Any) -> str:
        return value.serialize() if isinstance(value, SortOrder) else value

    def parse_literal(node: graphql.ValueNode, variables: Optional[dict[str, Any]] = None) -> SortOrder:
        if not isinstance(node, graphql.StringValueNode):
            raise graphql.GraphQLError(f'{name} must be a string', node)
        return SortOrder.parse(node.value)

    return graphql.GraphQLScalarType(
        name,
        description=(
            'The SortOrder scalar type defines a string with prefix +(optional) or -:\n'
            '- +createdAt/createdAt means order field is `createdAt`, sort order is ASC\n'
            '- -createdAt means order field is `createdAt`, sort order is DESC'
        ),
        serialize=serialize,
        parse_value=SortOrder.parse,
        parse_literal=parse_literal,
    )


def json_scalar(name: str = 'JSON') -> graphql.GraphQLScalarType:
    """ JSON scalar: any value """
    return graphql.GraphQLScalarType(
        name,
        description='The `JSON` scalar type represents JSON values as specified by ECMA-404',
        serialize=lambda value: value,
        parse_value=lambda value: value,
        parse_literal=value_from_literal,
    )


def unix_timestamp_scalar(name: str = 'UnixTimestamp') -> graphql.GraphQLScalarType:
    """ UnixTimestamp scalar: the number of seconds since 1970-01-01 00:00:00 UTC """
    def parse_value(value: Any) -> int:
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= MAX_UNIX_TIMESTAMP:
            raise ValueError(f'Invalid {name}: {value!r}')
        return value

    def parse_literal(node: graphql.ValueNode, variables: Optional[dict[str, Any]] = None) -> int:
        if not isinstance(node, graphql.IntValueNode):
            raise graphql.GraphQLError(f'{name} must be an integer', node)
        return parse_value(int(node.value))

    return graphql.GraphQLScalarType(
        name,
        description='The UnixTimestamp scalar type defines a positive integer as '
                    'the number of seconds since 00:00:00 UTC on January 1, 1970',
        serialize=lambda value: value,
        parse_value=parse_value,
        parse_literal=parse_literal,
    )


# Builtin scalars: { name => factory }
SCALARS = {
    'Range': range_scalar,
    'SortOrder': sort_order_scalar,
    'JSON': json_scalar,
    'UnixTimestamp': unix_timestamp_scalar,
}
