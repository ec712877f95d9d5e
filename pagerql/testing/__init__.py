""" Tools for testing """

from .stmt_text import stmt2sql
from .graphql import graphql_query_sync
