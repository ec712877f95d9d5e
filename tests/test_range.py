import pytest

from pagerql import exc
from pagerql.query_object import Range


@pytest.mark.parametrize('literal', [
    'foo',
    '[1,2',
    '1,2)',
    '1,2]',
    '[12]',
    '[,]',
    '(,)',
    '[1,2,3]',
    '[a b,c]',
    '[1,2]\n',
    '',
])
def test_range_invalid(literal: str):
    """ Invalid literals: try_parse() gives None, parse() fails """
    assert Range.try_parse(literal) is None

    with pytest.raises(exc.LiteralSyntaxError):
        Range.parse(literal)


@pytest.mark.parametrize(('literal', 'expected_range', 'expected_query'), [
    ('[1,2]', Range(from_operator='[', from_value='1', to_value='2', to_operator=']'), {'gte': '1', 'lte': '2'}),
    ('(foo,bar)', Range(from_operator='(', from_value='foo', to_value='bar', to_operator=')'), {'gt': 'foo', 'lt': 'bar'}),
    ('(foo,]', Range(from_operator='(', from_value='foo', to_value=None, to_operator=']'), {'gt': 'foo'}),
    ('[,bar)', Range(from_operator='[', from_value=None, to_value='bar', to_operator=')'), {'lt': 'bar'}),
    ('[2020-01-01T00:00:00,)', Range(from_operator='[', from_value='2020-01-01T00:00:00', to_value=None, to_operator=')'), {'gte': '2020-01-01T00:00:00'}),
])
def test_range_parse(literal: str, expected_range: Range, expected_query: dict):
    """ Valid literals: both methods agree """
    assert Range.try_parse(literal) == expected_range
    assert Range.parse(literal) == expected_range
    assert Range.parse(literal).query == expected_query

    # Serialize: back to the literal
    assert Range.parse(literal).serialize() == literal
    assert str(Range.parse(literal)) == literal


def test_range_where():
    assert Range.parse('[1,2]').where('age') == {'age': {'gte': '1', 'lte': '2'}}
