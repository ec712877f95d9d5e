""" Literals: sort order """

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pagerql import exc

from .base import LiteralInputBase


# Ordering list: a list of (field, direction) pairs, as given to a backend
OrderingList = list[tuple[str, str]]


@dataclass(frozen=True)
class SortOrder(LiteralInputBase):
    """ Sort order: a field and a direction

    Literal format: an optional "+" or "-" followed by a field name:

    * "createdAt", "+createdAt": order by `createdAt` ASC
    * "-createdAt": order by `createdAt` DESC
    """
    field: str
    direction: SortingDirection

    __slots__ = 'field', 'direction'

    @classmethod
    def parse(cls, literal: str) -> SortOrder:
        # Check the characters
        if not isinstance(literal, str) or not SORT_ORDER_REX.fullmatch(literal):
            raise exc.LiteralSyntaxError('SortOrder', literal)

        # Look at the starting character
        start_c = literal[:1]
        if start_c == '-':
            field, direction = literal[1:], SortingDirection.DESC
        elif start_c == '+':
            field, direction = literal[1:], SortingDirection.ASC
        else:
            field, direction = literal, SortingDirection.ASC

        return cls(field=field, direction=direction)

    def serialize(self) -> str:
        if self.direction == SortingDirection.DESC:
            return f'-{self.field}'
        else:
            return self.field

    def to_ordering_list(self, secondary: Optional[str] = None) -> OrderingList:
        """ Get the list of (field, direction) pairs to order by

        Args:
            secondary: SortOrder literal to break ties with. Skipped when it names the same field.
        """
        ordering = [(self.field, self.direction.value)]

        if secondary:
            secondary_order = SortOrder.parse(secondary)
            if secondary_order.field != self.field:
                ordering.append((secondary_order.field, secondary_order.direction.value))

        return ordering

    def __str__(self):
        return self.serialize()


class SortingDirection(str, Enum):
    ASC = 'ASC'
    DESC = 'DESC'


# An optional sign, then a field name that does not start with a sign
SORT_ORDER_REX = re.compile(r'^[+-]?[A-Za-z0-9_][A-Za-z0-9_+-]*$')
