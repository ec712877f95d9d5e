""" Integration with FastAPI """

from .paging import paging_arguments, connection_dependency, PagingArgumentsDict
