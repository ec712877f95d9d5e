""" Cursor-based pagination

A cursor is an opaque token that points to a position within a sorted result set.
When the results are sorted by the primary key, it enables keyset pagination, which is much more performant than offset pagination!
"""

from .cursor import Cursor
from .encode import encode_opaque_cursor, decode_opaque_cursor
