from importlib.metadata import version

__version__ = version('pagerql')

from .engine import Connection
from .engine.settings import ConnectionSettings
from .query_object import SortOrder, SortingDirection, Range
from .features.cursor import Cursor

from . import query_object
from . import exc
