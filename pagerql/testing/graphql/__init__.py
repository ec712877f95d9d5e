from .query import graphql_query_sync
