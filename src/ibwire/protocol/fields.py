""" Encoding and decoding of individual protocol fields. Every field on the
    wire is a run of ASCII text terminated by a single NUL byte; the type of
    a field is implied by its position in the message, so the decoding side
    has to ask for the type it expects.

    Numeric fields have an "unset" sentinel, the maximum representable value
    for the type. An unset value goes out as an empty field, and an empty
    numeric field comes back as the sentinel.
"""

from __future__ import annotations

import decimal
import sys
from typing import Iterable, List

from ..errors import DecodeError


UNSET_INTEGER = 2 ** 31 - 1
UNSET_LONG = 2 ** 63 - 1
UNSET_DOUBLE = sys.float_info.max

NO_VALID_ID = -1

_unset = (UNSET_INTEGER, UNSET_LONG)
_terminator = b'\0'


def encode(value) -> bytes:
    """ Return the wire representation of a single *value*, including the
        trailing NUL terminator.
    """

    # bool is a subclass of int, it must be checked first.

    if value is None:
        text = ''
    elif isinstance(value, bool):
        text = '1' if value else '0'
    elif isinstance(value, int):
        if value in _unset:
            text = ''
        else:
            text = str(value)
    elif isinstance(value, float):
        if value == UNSET_DOUBLE:
            text = ''
        else:
            text = _decimal(value)
    elif isinstance(value, str):
        text = value
    else:
        raise TypeError('cannot encode field of type ' + type(value).__name__)

    return text.encode() + _terminator


def _decimal(value: float) -> str:
    """ Plain decimal text for a float: the shortest repr, with any exponent
        expanded, so 1e-05 goes out as 0.00001 and 100.0 as 100.0.
    """

    text = repr(value)

    if 'e' in text:
        text = format(decimal.Decimal(text), 'f')

    return text


def encode_all(values: Iterable) -> bytes:
    """ Concatenate the encoded form of every item in *values*.
    """

    return b''.join(encode(value) for value in values)


def split_fields(payload: bytes) -> List[str]:
    """ Break a message payload into its component fields. The final
        terminator produces an empty trailing element, which is discarded.
    """

    if payload == b'':
        return []

    fields = payload.split(_terminator)
    if fields[-1] == b'':
        fields.pop()

    return [field.decode(errors='backslashreplace') for field in fields]



class FieldReader:
    """ Sequential access to the fields of a single message. Each decode
        method consumes exactly one field; the :ivar position: tracks how
        far into the message the reader has progressed, which is reported
        alongside any :class:`DecodeError`.
    """

    def __init__(self, fields: List[str]):
        self.fields = fields
        self.position = 0


    def __len__(self):
        return len(self.fields)


    def remaining(self) -> int:
        return len(self.fields) - self.position


    def next(self) -> str:
        """ Return the next raw field as a string.
        """

        try:
            field = self.fields[self.position]
        except IndexError:
            raise DecodeError(None, self.position, 'message truncated') from None

        self.position += 1
        return field


    def skip(self, count: int = 1) -> None:
        for _ in range(count):
            self.next()


    def decode_str(self) -> str:
        return self.next()


    def decode_int(self) -> int:
        return self._number(int, UNSET_INTEGER)


    def decode_long(self) -> int:
        return self._number(int, UNSET_LONG)


    def decode_float(self) -> float:
        return self._number(float, UNSET_DOUBLE)


    def decode_bool(self) -> bool:
        """ Booleans travel as integers; anything non-zero is True, and an
            empty field is False.
        """

        field = self.next()
        if field == '':
            return False

        try:
            return int(field) != 0
        except ValueError:
            raise DecodeError(field, self.position - 1, 'expected boolean') from None


    def decode_float_or_int(self, fractional: bool):
        """ Quantities switched from integers to floats when fractional
            positions were introduced.
        """

        if fractional:
            return self.decode_float()
        else:
            return self.decode_int()


    def _number(self, kind, unset):

        field = self.next()
        if field == '':
            return unset

        try:
            return kind(field)
        except ValueError:
            raise DecodeError(field, self.position - 1, 'expected ' + kind.__name__) from None


# end of class FieldReader


def reader(payload: bytes) -> FieldReader:
    return FieldReader(split_fields(payload))

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
