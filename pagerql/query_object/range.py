""" Literals: value range """

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Optional

from pagerql import exc

from .base import LiteralInputBase


@dataclass(frozen=True)
class Range(LiteralInputBase):
    """ Range: two values that define an interval

    Literal format:

    * "[from,to]": greater than or equal `from`, less than or equal `to`
    * "(from,to)": greater than `from`, less than `to`
    * "[from,)", "(,to]": one of the bounds may be omitted, but not both

    Values are kept as strings: it's up to the backend to compare them.
    """
    # Lower bound operator: '[' inclusive, '(' exclusive
    from_operator: str

    # Lower bound value, if any
    from_value: Optional[str]

    # Upper bound value, if any
    to_value: Optional[str]

    # Upper bound operator: ']' inclusive, ')' exclusive
    to_operator: str

    @classmethod
    def try_parse(cls, literal: str) -> Optional[Range]:
        """ Parse a literal; give `None` if it's invalid """
        m = RANGE_REX.fullmatch(literal) if isinstance(literal, str) else None
        if not m:
            return None

        from_operator, from_value, to_value, to_operator = m.groups()
        if not from_value and not to_value:
            return None

        return cls(
            from_operator=from_operator,
            from_value=from_value or None,
            to_value=to_value or None,
            to_operator=to_operator,
        )

    @classmethod
    def parse(cls, literal: str) -> Range:
        """ Parse a literal; fail if it's invalid

        Raises:
            exc.LiteralSyntaxError
        """
        value = cls.try_parse(literal)
        if value is None:
            raise exc.LiteralSyntaxError('Range', literal)
        return value

    @cached_property
    def query(self) -> dict[str, str]:
        """ Comparison entries for a query predicate: {'gte'|'gt': from, 'lte'|'lt': to} """
        query = {}
        if self.from_value is not None:
            query['gte' if self.from_operator == '[' else 'gt'] = self.from_value
        if self.to_value is not None:
            query['lte' if self.to_operator == ']' else 'lt'] = self.to_value
        return query

    def where(self, field: str) -> dict[str, dict[str, str]]:
        """ Get a `where` predicate for a field

        Example:
            Range.parse('[1,2]').where('age') -> {'age': {'gte': '1', 'lte': '2'}}
        """
        return {field: self.query}

    def serialize(self) -> str:
        return f'{self.from_operator}{self.from_value or ""},{self.to_value or ""}{self.to_operator}'

    def __str__(self):
        return self.serialize()


# The whole range literal: <open><lower>,<upper><close>
RANGE_REX = re.compile(r'^([\[(])([\w:-]+)?,([\w:-]+)?([\])])$', re.ASCII)
