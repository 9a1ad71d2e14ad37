import pytest

from table_booking.utils.http import build_error, parse_int_prefix


@pytest.mark.parametrize(
    'value, expected',
    [
        ('12', 12),
        ('12abc', 12),
        (' 7', 7),
        ('-3', -3),
        ('abc', None),
        ('', None),
        ('\u0661', None),
        ('7\u0662', 7),
    ],
)
def test_parse_int_prefix(value, expected):
    assert parse_int_prefix(value) == expected


def test_build_error():
    assert build_error('boom') == {'error': 'boom'}
    assert build_error(None) == {'error': ''}
