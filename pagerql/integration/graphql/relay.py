""" Relay pagination """

from __future__ import annotations

import os.path
from collections import abc
from typing import Optional, Union

from pagerql import Connection, ConnectionSettings, SortOrder
from pagerql.typing import ResponseDict, EdgeDict, PageInfoDict  # noqa: shortcut


# Load GraphQL definitions from the file
pwd = os.path.dirname(__file__)

with open(os.path.join(pwd, './relay.graphql'), 'rt') as f:
    graphql_relay_schema = f.read()


# Relay Connection type: paginated list
ConnectionDict = ResponseDict


def connection_for(args: abc.Mapping, *,
                   default_order: Optional[Union[str, SortOrder]] = None,
                   settings: Optional[ConnectionSettings] = None) -> Connection:
    """ Make a Connection from resolver arguments: first, after, last, before, order

    Example:
        type Query {
            users(first: Int, after: String, last: Int, before: String, order: SortOrder): UserConnection!
        }

        def resolve_users(root, info, **args):
            connection = connection_for(args, default_order='id', settings=ConnectionSettings(primary_key='id'))
            spec = connection.get_query_spec()
            ...
            return connection.set_nodes(rows).set_total_count(count).to_response()
    """
    return Connection.from_arguments(args, default_order=default_order, settings=settings)
