""" Merge resolver maps """

from __future__ import annotations

from collections import abc
from typing import Callable, Union

import graphql

from pagerql import exc


# Resolvers for one type: { field name => resolver }
FieldResolvers = dict[str, Callable]

# Resolver map: { type name => field resolvers }, or { scalar name => scalar type }
ResolverMap = dict[str, Union[FieldResolvers, graphql.GraphQLScalarType]]


def merge_resolver_maps(*maps: abc.Mapping) -> ResolverMap:
    """ Merge resolver maps into a new one. The inputs are not modified.

    Conflicts are resolved in order: later maps win.

    * Field resolvers of the same type are combined; the same field is replaced
    * Scalar types replace whatever was there

    Example:
        merge_resolver_maps(
            {'Query': {'users': resolve_users}},
            {'Query': {'posts': resolve_posts}, 'Range': range_scalar()},
        )
        -> {'Query': {'users': resolve_users, 'posts': resolve_posts}, 'Range': <Range>}

    Raises:
        exc.SchemaError: a value is neither a mapping nor a scalar type
    """
    merged: ResolverMap = {}

    for resolver_map in maps:
        for type_name, value in resolver_map.items():
            if isinstance(value, graphql.GraphQLScalarType):
                merged[type_name] = value
            elif isinstance(value, abc.Mapping):
                existing = merged.get(type_name)
                if isinstance(existing, dict):
                    merged[type_name] = {**existing, **value}
                else:
                    merged[type_name] = dict(value)
            else:
                raise exc.SchemaError(
                    f'Resolver map must be a 2 depth mapping such as {{"Query": {{"foo": resolver}}}}; '
                    f'got {type(value).__name__} for {type_name!r}'
                )

    return merged
