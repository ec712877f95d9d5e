""" Integration with SqlAlchemy: turn a query specification into statements

Statements are only built here. Executing them is up to you.
"""

from .statement import select_statement, count_statement
from .statement import where_expressions, order_expressions
from .columns import resolve_column_by_name
