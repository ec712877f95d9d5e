""" Literal inputs: parsers for the paging & filtering arguments

These classes only represent the parsed client input.
They do not interact with any backend in any way.
"""

from .base import LiteralInputBase
from .sort import SortOrder, SortingDirection, OrderingList
from .range import Range
