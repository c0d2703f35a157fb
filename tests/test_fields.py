import ibwire
import pytest

from ibwire.protocol import fields
from ibwire.protocol.fields import UNSET_INTEGER, UNSET_LONG, UNSET_DOUBLE


def test_encode():

    assert fields.encode('AAPL') == b'AAPL\0'
    assert fields.encode('') == b'\0'
    assert fields.encode(None) == b'\0'
    assert fields.encode(42) == b'42\0'
    assert fields.encode(-1) == b'-1\0'
    assert fields.encode(1.5) == b'1.5\0'
    assert fields.encode(True) == b'1\0'
    assert fields.encode(False) == b'0\0'

    with pytest.raises(TypeError):
        fields.encode(object())


def test_encode_float_plain_decimal():

    assert fields.encode(100.0) == b'100.0\0'
    assert fields.encode(0.1) == b'0.1\0'
    assert fields.encode(1e-05) == b'0.00001\0'
    assert fields.encode(-2.5e-07) == b'-0.00000025\0'
    assert fields.encode(1e16) == b'10000000000000000\0'


def test_encode_unset():

    assert fields.encode(UNSET_INTEGER) == b'\0'
    assert fields.encode(UNSET_LONG) == b'\0'
    assert fields.encode(UNSET_DOUBLE) == b'\0'


def test_encode_all():

    assert fields.encode_all((71, 2, 0, '')) == b'71\x002\x000\x00\x00'


def test_split():

    assert fields.split_fields(b'') == []
    assert fields.split_fields(b'4\0') == ['4']
    assert fields.split_fields(b'4\0\0x\0') == ['4', '', 'x']


def test_decode():

    reader = fields.reader(b'12\x00-3\x002.5\x00hello\x001\x000\x00')

    assert len(reader) == 6
    assert reader.decode_int() == 12
    assert reader.decode_long() == -3
    assert reader.decode_float() == 2.5
    assert reader.decode_str() == 'hello'
    assert reader.decode_bool() == True
    assert reader.decode_bool() == False
    assert reader.remaining() == 0


def test_decode_empty():

    reader = fields.reader(b'\0\0\0\0\0')

    assert reader.decode_int() == UNSET_INTEGER
    assert reader.decode_long() == UNSET_LONG
    assert reader.decode_float() == UNSET_DOUBLE
    assert reader.decode_str() == ''
    assert reader.decode_bool() == False


def test_decode_sentinel_round_trip():

    payload = fields.encode_all((UNSET_INTEGER, UNSET_DOUBLE, UNSET_LONG))
    reader = fields.reader(payload)

    assert reader.decode_int() == UNSET_INTEGER
    assert reader.decode_float() == UNSET_DOUBLE
    assert reader.decode_long() == UNSET_LONG


def test_decode_errors():

    reader = fields.reader(b'1\x00abc\x00')
    reader.skip()

    with pytest.raises(ibwire.errors.DecodeError) as caught:
        reader.decode_int()

    assert caught.value.token == 'abc'
    assert caught.value.position == 1

    reader = fields.reader(b'1\x00')
    reader.decode_int()

    with pytest.raises(ibwire.errors.DecodeError) as caught:
        reader.decode_str()

    assert caught.value.token is None


def test_quantity():

    reader = fields.reader(b'100\x0012.5\x00')
    assert reader.decode_float_or_int(False) == 100
    assert reader.decode_float_or_int(True) == 12.5

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
