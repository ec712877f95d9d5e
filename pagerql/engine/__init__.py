from .connection import Connection
from .settings import ConnectionSettings
