""" Message framing. Each message on the socket is a four byte, big-endian
    length prefix followed by exactly that many bytes of payload:

        [length][field\\0field\\0...field\\0]

    The one exception is the very start of a connection, where the client
    sends the literal bytes ``API\\0`` ahead of its first framed message.
"""

from __future__ import annotations

import struct
from typing import Optional, Tuple

from ..errors import BadLengthError


MAX_MSG_LEN = 0xFFFFFF
PREFIX = b'API\0'

_header = struct.Struct('!I')
header_size = _header.size


def write_frame(payload: bytes) -> bytes:
    """ Prepend the length prefix to *payload*.
    """

    return _header.pack(len(payload)) + payload


def try_read_frame(buffer: bytes) -> Tuple[Optional[bytes], bytes]:
    """ Attempt to extract one complete frame from the start of *buffer*.
        Returns a (payload, remainder) tuple; if the buffer does not yet hold
        a complete frame the payload is None and the buffer is returned
        untouched, so that the caller can append more bytes and try again.

        A :class:`BadLengthError` is raised if the declared length is larger
        than :data:`MAX_MSG_LEN`.
    """

    if len(buffer) < header_size:
        return None, buffer

    length = _header.unpack_from(buffer)[0]
    if length > MAX_MSG_LEN:
        raise BadLengthError(length)

    end = header_size + length
    if len(buffer) < end:
        return None, buffer

    return buffer[header_size:end], buffer[end:]


def read_frames(buffer: bytes):
    """ Extract every complete frame from *buffer*. Returns a list of
        payloads, in order, and whatever bytes were left over.
    """

    payloads = list()

    while True:
        payload, buffer = try_read_frame(buffer)
        if payload is None:
            break
        payloads.append(payload)

    return payloads, buffer


def handshake(min_version: int, max_version: int) -> bytes:
    """ The opening bytes a client sends to advertise the range of protocol
        versions it supports. The version token is framed, not terminated.
    """

    versions = f"v{min_version}..{max_version}"
    return PREFIX + write_frame(versions.encode())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
