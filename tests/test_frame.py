import ibwire
import pytest

from ibwire.protocol import frame


def test_write():

    assert frame.write_frame(b'') == b'\x00\x00\x00\x00'
    assert frame.write_frame(b'49\x001\x00') == b'\x00\x00\x00\x0549\x001\x00'


def test_handshake():

    data = frame.handshake(100, 151)
    assert data == b'API\x00\x00\x00\x00\x09v100..151'


def test_try_read():

    data = frame.write_frame(b'abc') + frame.write_frame(b'de')

    payload, rest = frame.try_read_frame(data)
    assert payload == b'abc'

    payload, rest = frame.try_read_frame(rest)
    assert payload == b'de'
    assert rest == b''

    payload, rest = frame.try_read_frame(b'\x00\x00')
    assert payload is None
    assert rest == b'\x00\x00'

    payload, rest = frame.try_read_frame(b'\x00\x00\x00\x05ab')
    assert payload is None
    assert rest == b'\x00\x00\x00\x05ab'


def test_byte_by_byte():

    messages = [b'9\x001\x001\x00', b'', b'15\x001\x00DU123,DU456\x00']
    data = b''.join(frame.write_frame(message) for message in messages)

    received = list()
    buffer = b''

    for index in range(len(data)):
        buffer += data[index:index + 1]
        payloads, buffer = frame.read_frames(buffer)
        received.extend(payloads)

    assert received == messages
    assert buffer == b''


def test_whole_chunk():

    messages = [b'a\x00', b'b\x00', b'c\x00']
    data = b''.join(frame.write_frame(message) for message in messages)

    payloads, rest = frame.read_frames(data + b'\x00')
    assert payloads == messages
    assert rest == b'\x00'


def test_too_long():

    header = (frame.MAX_MSG_LEN + 1).to_bytes(4, 'big')

    with pytest.raises(ibwire.errors.BadLengthError):
        frame.try_read_frame(header)

    # The maximum itself is acceptable, merely incomplete.

    header = frame.MAX_MSG_LEN.to_bytes(4, 'big')
    payload, rest = frame.try_read_frame(header)
    assert payload is None

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
