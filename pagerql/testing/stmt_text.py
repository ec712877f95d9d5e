""" Convert a SA SQL statement to readable text """
import sqlalchemy as sa
from sqlalchemy.dialects import sqlite


# The dialect to use for compiling statements
DEFAULT_DIALECT: sa.engine.interfaces.Dialect = sqlite.dialect()  # type: ignore[misc]


def stmt2sql(stmt: sa.sql.ClauseElement, dialect: sa.engine.interfaces.Dialect = None) -> str:
    """ Convert an SqlAlchemy statement into a string, with values rendered inline (for inspection) """
    return str(stmt.compile(dialect=dialect or DEFAULT_DIALECT, compile_kwargs={'literal_binds': True}))
