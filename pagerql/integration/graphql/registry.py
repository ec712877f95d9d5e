""" Schema fragments, associated with resolvers """

from __future__ import annotations

from collections import abc
from typing import Callable


class SchemaRegistry:
    """ Registry: resolver => schema fragments that define it

    This lets you keep the schema of a field right next to its resolver.

    Example:
        registry = SchemaRegistry()

        @registry.schema('''
            extend type Query {
                users(first: Int, after: String): UserConnection!
            }
        ''')
        def resolve_users(root, info, **args):
            ...

        schema = SchemaBuilder(registry=registry).get_schema(
            type_defs=[...],
            resolvers=[{'Query': {'users': resolve_users}}],
        )
    """

    def __init__(self):
        self._fragments: dict[Callable, list[str]] = {}

    def register(self, resolver: Callable, sdl: str):
        """ Associate a schema fragment with a resolver """
        self._fragments.setdefault(resolver, []).append(sdl)
        return self

    def schema(self, sdl: str):
        """ Decorator: associate a schema fragment with the decorated resolver """
        def decorator(resolver: Callable):
            self.register(resolver, sdl)
            return resolver
        return decorator

    def lookup(self, resolver: Callable) -> list[str]:
        """ Get schema fragments for a resolver """
        return list(self._fragments.get(resolver, ()))

    def type_defs_for(self, resolver_maps: abc.Iterable[abc.Mapping]) -> list[str]:
        """ Get schema fragments for every resolver in the given resolver maps """
        type_defs: list[str] = []

        for resolver_map in resolver_maps:
            for field_resolvers in resolver_map.values():
                if not isinstance(field_resolvers, abc.Mapping):
                    continue  # scalars
                for resolver in field_resolvers.values():
                    for sdl in self.lookup(resolver):
                        if sdl not in type_defs:
                            type_defs.append(sdl)

        return type_defs

    def __contains__(self, resolver: Callable):
        return resolver in self._fragments
