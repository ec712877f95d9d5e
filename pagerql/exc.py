class BasePagerqlException(AssertionError):  # `AssertionError`: these are assert-style caller errors
    pass


class PagingArgumentError(BasePagerqlException):
    """ Invalid paging arguments provided by the User

    Reported when a Connection is constructed: first/last, order, limit, before/after
    """

    def __init__(self, err: str):
        super().__init__(f'Paging argument error: {err}')


class LiteralSyntaxError(BasePagerqlException, ValueError):
    """ A malformed SortOrder or Range literal

    Is a `ValueError` too: GraphQL scalars report it as an invalid value
    """

    def __init__(self, type_name: str, literal: object):
        self.type_name = type_name
        self.literal = literal

        super().__init__(f'Invalid {type_name} literal: {literal!r}')


class CursorFormatError(BasePagerqlException):
    """ A cursor token could not be decoded

    Reported when a token is corrupted, or has been tampered with
    """

    def __init__(self, err: str):
        super().__init__(f'Invalid cursor: {err}')


class CursorValueError(BasePagerqlException):
    """ A cursor cannot hold the given value

    Reported when the server makes a cursor: e.g. a row's primary key is not an integer
    """

    def __init__(self, err: str):
        super().__init__(f'Invalid cursor value: {err}')


class PreconditionError(BasePagerqlException):
    """ An operation was called too early

    For instance, page info requested before the total count is known
    """


class SchemaError(BasePagerqlException):
    """ Malformed resolvers or schema definitions """


class InvalidColumnError(BasePagerqlException):
    """ Query specification mentioned an invalid column name

    Reported when a column mentioned by name is not found on the SqlAlchemy model
    """

    def __init__(self, model: str, column_name: str, where: str):
        self.model = model
        self.column_name = column_name
        self.where = where

        super().__init__(f'Invalid column "{column_name}" for "{model}" specified in {where}')
