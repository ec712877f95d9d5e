import base64

import pytest

from pagerql import exc
from pagerql.features.cursor import Cursor


@pytest.mark.parametrize('cursor', [
    Cursor(field='id'),
    Cursor(field='id', offset=100),
    Cursor(field='id', offset=100, primary_key='id', primary_value=999),
    Cursor(field='createdAt', offset=5, primary_key='id'),
    Cursor(field='created at&=?', offset=1, primary_key='the id', primary_value=-1),
])
def test_cursor_round_trip(cursor: Cursor):
    """ decode(encode(c)) == c """
    assert Cursor.decode(cursor.encode()) == cursor
    assert Cursor.decode(str(cursor)) == cursor

    # Debug mode
    debug_cursor = cursor.with_overrides(debug=True)
    assert Cursor.decode(debug_cursor.encode(), debug=True) == cursor


def test_cursor_wire_format():
    """ Check the token format: key=value pairs, wrapped with base64 """
    cursor = Cursor(field='id', offset=100, primary_key='id', primary_value=999)

    # Debug: readable
    assert cursor.with_overrides(debug=True).encode() == 'pK=id&pV=999&f=id&o=100'

    # Default: base64
    token = cursor.encode()
    assert base64.urlsafe_b64decode(token).decode() == 'pK=id&pV=999&f=id&o=100'

    # Absent fields are omitted
    assert Cursor(field='id', debug=True).encode() == 'f=id&o=0'

    # Values are escaped
    assert Cursor(field='a&b', debug=True).encode() == 'f=a%26b&o=0'

    # Debug mode is not a part of the value
    assert cursor.with_overrides(debug=True) == cursor


def test_cursor_decode_numbers():
    """ Numbers are decoded as integers """
    cursor = Cursor.decode('pV=999&f=id&o=100', debug=True)
    assert cursor.offset == 100
    assert cursor.primary_value == 999
    assert cursor.primary_key is None


def test_cursor_with_overrides():
    """ with_overrides() gives a new object """
    cursor = Cursor(field='id', offset=1, primary_key='id')

    next_cursor = cursor.with_overrides(offset=2, primary_value=10)
    assert next_cursor == Cursor(field='id', offset=2, primary_key='id', primary_value=10)

    # The original one is intact
    assert cursor == Cursor(field='id', offset=1, primary_key='id')

    # Immutable
    with pytest.raises(AttributeError):
        cursor.offset = 3  # type: ignore[misc]


@pytest.mark.parametrize(('token', 'debug'), [
    # Not base64
    ('!!!', False),
    ('f=id&o=0', False),
    # Not a key=value string
    (base64.urlsafe_b64encode(b'garbage').decode(), False),
    # Not UTF-8
    (base64.urlsafe_b64encode(b'\xff\xfe').decode(), False),
    # Bad offset
    ('f=id&o=ten', True),
    ('f=id&o=-1', True),
    ('f=id', True),
    # Bad primary value
    ('f=id&o=0&pV=abc', True),
    # No field
    ('o=0', True),
    ('f=&o=0', True),
    ('', True),
])
def test_cursor_decode_invalid(token: str, debug: bool):
    with pytest.raises(exc.CursorFormatError):
        Cursor.decode(token, debug=debug)


@pytest.mark.parametrize('primary_value', ['a1', '10', 1.5, True])
def test_cursor_primary_value_not_an_integer(primary_value):
    """ Only integer primary values can be encoded """
    with pytest.raises(exc.CursorValueError):
        Cursor(field='id', primary_key='id', primary_value=primary_value)

    with pytest.raises(exc.CursorValueError):
        Cursor(field='id', primary_key='id').with_overrides(primary_value=primary_value)
