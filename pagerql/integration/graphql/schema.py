""" Build an executable schema from type definitions and resolvers """

from __future__ import annotations

import glob
import logging
from collections import abc
from typing import Callable, Optional

import graphql

from pagerql import exc

from .merge import merge_resolver_maps, ResolverMap
from .registry import SchemaRegistry
from .scalars import SCALARS


logger = logging.getLogger(__name__)


class SchemaBuilder:
    """ Schema builder: collects type definitions & resolvers, and makes an executable schema

    Out of the box, it provides:
    * `Query.health` field that returns `true`
    * Builtin scalars: Range, SortOrder, JSON, UnixTimestamp

    Example:
        schema = SchemaBuilder('app/**/*.graphql').get_schema(
            resolvers=[{'Query': {'users': resolve_users}}],
        )
    """

    def __init__(self, schema_scan_path: Optional[str] = None, *,
                 builtin_scalars: Optional[abc.Mapping[str, Callable[[str], graphql.GraphQLScalarType]]] = SCALARS,
                 registry: Optional[SchemaRegistry] = None):
        """
        Args:
            schema_scan_path: Glob pattern for schema files to load. Recursive: "**" is supported.
            builtin_scalars: Scalars to add: { name => factory }
            registry: Schema fragments associated with resolvers
        """
        self._type_defs: list[str] = [
            'type Query {\n'
            '  # Service health check\n'
            '  health: Boolean!\n'
            '}\n'
        ]
        self._resolvers: ResolverMap = {
            'Query': {'health': lambda root, info: True},
        }
        self.schema_scan_path = schema_scan_path
        self.registry = registry or SchemaRegistry()

        for scalar_name, scalar_factory in (builtin_scalars or {}).items():
            self.add_scalar(f'scalar {scalar_name}\n', {scalar_name: scalar_factory(scalar_name)})

    def add_type_def(self, type_def: str) -> SchemaBuilder:
        """ Add a type definition """
        self._type_defs.append(type_def)
        return self

    def add_resolver(self, resolver_map: abc.Mapping) -> SchemaBuilder:
        """ Add resolvers. Later resolvers win """
        self._resolvers = merge_resolver_maps(self._resolvers, resolver_map)
        return self

    def add_scalar(self, type_def: str, resolver_map: abc.Mapping) -> SchemaBuilder:
        """ Add a scalar: its definition and its implementation """
        return self.add_type_def(type_def).add_resolver(resolver_map)

    def get_default_type_defs(self) -> list[str]:
        return list(self._type_defs)

    def get_default_resolvers(self) -> ResolverMap:
        return self._resolvers

    def get_type_defs(self) -> list[str]:
        """ Get type definitions: defaults + schema files """
        type_defs = self.get_default_type_defs()

        if self.schema_scan_path:
            for filename in sorted(glob.glob(self.schema_scan_path, recursive=True)):
                logger.debug('Loading schema file: %s', filename)
                with open(filename, 'rt') as f:
                    type_defs.append(f.read())

        return type_defs

    def get_schema(self, type_defs: abc.Iterable[str] = (), resolvers: abc.Iterable[abc.Mapping] = ()) -> graphql.GraphQLSchema:
        """ Build an executable schema

        Args:
            type_defs: Additional type definitions
            resolvers: Resolver maps: { type name => { field name => resolver } }, or { scalar name => scalar type }

        Raises:
            exc.SchemaError: resolvers do not match the schema
            graphql.GraphQLError: invalid type definitions
        """
        resolvers = list(resolvers)
        all_type_defs = [
            *self.get_type_defs(),
            *type_defs,
            *self.registry.type_defs_for(resolvers),
        ]
        logger.info('Building a schema from %d type definitions', len(all_type_defs))

        schema = graphql.build_schema('\n\n'.join(all_type_defs))
        bind_resolvers(schema, merge_resolver_maps(self.get_default_resolvers(), *resolvers))
        return schema


def bind_resolvers(schema: graphql.GraphQLSchema, resolver_map: ResolverMap):
    """ Bind resolvers to the schema: field resolvers to fields, scalar implementations to scalars

    Raises:
        exc.SchemaError: unknown type or field
    """
    for type_name, value in resolver_map.items():
        try:
            type_ = schema.type_map[type_name]
        except KeyError as e:
            raise exc.SchemaError(f'Resolvers given for an unknown type: {type_name!r}') from e

        # Scalar: copy its implementation
        if isinstance(value, graphql.GraphQLScalarType):
            if not isinstance(type_, graphql.GraphQLScalarType):
                raise exc.SchemaError(f'Scalar implementation given for a non-scalar type: {type_name!r}')

            # Only the overridden ones: defaults call each other through `self`
            implementation = vars(value)
            for attr in SCALAR_IMPLEMENTATION_ATTRS:
                if attr in implementation:
                    setattr(type_, attr, implementation[attr])
            type_.description = type_.description or value.description
        # Object: field resolvers
        else:
            if not isinstance(type_, graphql.GraphQLObjectType):
                raise exc.SchemaError(f'Field resolvers given for a non-object type: {type_name!r}')

            for field_name, resolver in value.items():
                try:
                    field = type_.fields[field_name]
                except KeyError as e:
                    raise exc.SchemaError(f'Resolver given for an unknown field: {type_name}.{field_name}') from e

                field.resolve = resolver


# Scalar implementation attributes.
# graphql-core 3.3 reads the `coerce_*` names; earlier versions read `serialize` & `parse_*`
SCALAR_IMPLEMENTATION_ATTRS = (
    'serialize', 'parse_value', 'parse_literal',
    'coerce_output_value', 'coerce_input_value', 'coerce_input_literal', 'value_to_literal',
)
