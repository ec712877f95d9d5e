""" Integration with GraphQL: graphql-core """

# High-level APIs
from .schema import SchemaBuilder
from .registry import SchemaRegistry
from .relay import connection_for, graphql_relay_schema, ConnectionDict
from .scalars import SCALARS, range_scalar, sort_order_scalar, json_scalar, unix_timestamp_scalar

# Lower-level APIs
from .schema import bind_resolvers
from .merge import merge_resolver_maps
from .literal import value_from_literal
