from __future__ import annotations

import dataclasses
from typing import Optional


@dataclasses.dataclass
class ConnectionSettings:
    """ Settings for Connection

    This object defines how pagination behaves: limits, keys, tie-breaking, cursor encoding
    """
    # The max number of items per page. The requested `first`/`last` must be strictly less
    max_limit: int = 100

    # Name of the primary key field.
    # When set, cursors remember the primary key value of every row, and keyset pagination becomes possible
    primary_key: Optional[str] = None

    # SortOrder literal to break ties with, e.g. "id".
    # Is appended to the ordering unless it's the same field
    secondary_order: Optional[str] = None

    # Debug mode for cursors: emit and accept raw key=value tokens, so that a developer can read them
    debug_cursors: bool = False

    def __post_init__(self):
        if not isinstance(self.max_limit, int) or self.max_limit <= 0:
            raise ValueError(f'max_limit must be a positive integer, {self.max_limit!r} given')
