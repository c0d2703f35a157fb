""" Error codes reported through :func:`ibwire.Wrapper.error`, and the small
    set of exceptions used internally. Exceptions never cross a thread
    boundary: whoever catches one converts it to an error callback.
"""

from __future__ import annotations


class TwsError:
    """ A fixed error code and its stock message text.
    """

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message


    def __repr__(self):
        return f"TwsError({self.code}, {self.message!r})"


    def text(self, detail: str = '') -> str:
        return self.message + detail


# end of class TwsError


ALREADY_CONNECTED = TwsError(501, 'Already connected.')
CONNECT_FAIL = TwsError(502, "Couldn't connect to TWS. Confirm that \"Enable ActiveX and Socket EClients\" is enabled and connection port is the same as \"Socket Port\" on the TWS \"Edit->Global Configuration...->API->Settings\" menu. Live Trading ports: TWS: 7496; IB Gateway: 4001. Simulated Trading ports for new installations of version 954.1 or newer:  TWS: 7497; IB Gateway: 4002")
UPDATE_TWS = TwsError(503, 'The TWS is out of date and must be upgraded.')
NOT_CONNECTED = TwsError(504, 'Not connected')
UNKNOWN_ID = TwsError(505, 'Fatal Error: Unknown message id.')
UNSUPPORTED = TwsError(506, 'Unsupported version')
BAD_LENGTH = TwsError(507, 'Bad message length')
BAD_MESSAGE = TwsError(508, 'Bad message')
SOCKET_EXCEPTION = TwsError(509, 'Exception caught while reading socket - ')
FAIL_CREATE_SOCK = TwsError(520, 'Failed to create socket')
SSL_FAIL = TwsError(530, 'SSL specific error: ')

by_code = dict()
for _error in (ALREADY_CONNECTED, CONNECT_FAIL, UPDATE_TWS, NOT_CONNECTED,
               UNKNOWN_ID, UNSUPPORTED, BAD_LENGTH, BAD_MESSAGE,
               SOCKET_EXCEPTION, FAIL_CREATE_SOCK, SSL_FAIL):
    by_code[_error.code] = _error
del _error


class IBWireError(Exception):
    """Base class for all ibwire errors."""


class DecodeError(IBWireError):
    """ A field could not be decoded as the requested type, or the message
        ran out of fields. The offending *token* (None when the message was
        truncated) and its *position* in the message are retained.
    """

    def __init__(self, token, position, reason='parse failure'):
        self.token = token
        self.position = position
        self.reason = reason

        if token is None:
            text = f"{reason} at field {position}"
        else:
            text = f"{reason} at field {position}: {token!r}"

        super().__init__(text)


class BadLengthError(IBWireError):
    """A frame declared a length beyond the protocol maximum."""

    def __init__(self, length):
        self.length = length
        super().__init__(f"declared frame length {length} exceeds maximum")


class RequestError(IBWireError):
    """ A request could not be sent. Carries the :class:`TwsError` to report,
        the request id it applies to, and any detail appended to the stock
        message.
    """

    def __init__(self, error: TwsError, req_id: int, detail: str = ''):
        self.error = error
        self.req_id = req_id
        self.detail = detail
        super().__init__(error.text(detail))


    @property
    def code(self):
        return self.error.code


    @property
    def message(self):
        return self.error.text(self.detail)


class ProtocolVersionError(RequestError):
    """The negotiated server version is too old for a requested feature."""

    def __init__(self, req_id: int, detail: str):
        super().__init__(UPDATE_TWS, req_id, detail)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
