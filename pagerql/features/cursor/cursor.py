from __future__ import annotations

import dataclasses
from typing import Optional

from pagerql import exc
from pagerql.util.funcy import filter_none

from .encode import encode_opaque_cursor, decode_opaque_cursor


@dataclasses.dataclass(frozen=True)
class Cursor:
    """ Cursor: an opaque token that points to a position within a sorted result set

    A cursor is immutable. Use with_overrides() to get a modified copy.
    """
    # The field the results are sorted by
    field: str

    # How many rows come before the position
    offset: int = 0

    # Name of the primary key field, if any
    primary_key: Optional[str] = None

    # Primary key value of the row at the position, if known.
    # Enables keyset pagination when the results are sorted by the primary key.
    primary_value: Optional[int] = None

    # Debug mode: the token is not wrapped, and the key=value pairs are human-readable
    debug: bool = dataclasses.field(default=False, compare=False, repr=False)

    def __post_init__(self):
        # Only integers survive encode() + decode()
        if self.primary_value is not None and (not isinstance(self.primary_value, int) or isinstance(self.primary_value, bool)):
            raise exc.CursorValueError(f'primary value must be an integer, {self.primary_value!r} given')

    def with_overrides(self, **fields) -> Cursor:
        """ Get a copy of this cursor with some fields replaced

        Example:
            cursor.with_overrides(offset=cursor.offset + 1, primary_value=row['id'])
        """
        return dataclasses.replace(self, **fields)

    def serialize(self) -> dict[str, str]:
        """ Get cursor data as key=value pairs. Absent values are omitted """
        return filter_none({
            'pK': self.primary_key,
            'pV': None if self.primary_value is None else str(self.primary_value),
            'f': self.field,
            'o': str(self.offset),
        })

    def encode(self) -> str:
        return encode_opaque_cursor(self.serialize(), debug=self.debug)

    @classmethod
    def decode(cls, token: str, *, debug: bool = False) -> Cursor:
        """ Decode a cursor token

        Raises:
            exc.CursorFormatError: the token is malformed
        """
        try:
            data = decode_opaque_cursor(token, debug=debug)
        except ValueError as e:
            raise exc.CursorFormatError('cannot decode the token') from e

        # Field name is required
        if not data.get('f'):
            raise exc.CursorFormatError('no sort field')

        return cls(
            field=data['f'],
            offset=_parse_int(data.get('o'), 'offset'),
            primary_key=data.get('pK') or None,
            primary_value=_parse_int(data['pV'], 'primary value', non_negative=False) if 'pV' in data else None,
            debug=debug,
        )

    def __str__(self):
        return self.encode()


def _parse_int(value: Optional[str], name: str, *, non_negative: bool = True) -> int:
    """ Parse an integer, or fail with CursorFormatError """
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise exc.CursorFormatError(f'{name} is not an integer') from e

    if non_negative and number < 0:
        raise exc.CursorFormatError(f'{name} is negative')

    return number
