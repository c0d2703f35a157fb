""" Connection management: the TCP socket, the opening handshake that
    negotiates the server version, the connection state, and the start and
    stop of the reader and decoder threads. :class:`ibwire.client.Client`
    builds every outgoing request on top of the :class:`Connection` defined
    here.
"""

from __future__ import annotations

import enum
import functools
import logging
import socket
import threading

from . import config
from . import errors
from .decoder import Decoder
from .protocol import fields, frame
from .protocol.builder import MessageBuilder
from .protocol.fields import NO_VALID_ID
from .protocol.ids import OutgoingMessage
from .server_versions import (MAX_CLIENT_VER, MIN_CLIENT_VER,
                              MIN_SERVER_VER_OPTIONAL_CAPABILITIES)
from .transport import Channel, Reader

logger = logging.getLogger(__name__)


class ConnectionState(enum.Enum):
    DISCONNECTED = 0
    CONNECTING = 1
    CONNECTED = 2
    REDIRECT = 3


class StateCell:
    """ The connection state, shared between the caller's thread and the
        decoder thread. Every read and write goes through the lock.
    """

    def __init__(self, state: ConnectionState = ConnectionState.DISCONNECTED):
        self._lock = threading.Lock()
        self._state = state


    def get(self) -> ConnectionState:
        with self._lock:
            return self._state


    def set(self, state: ConnectionState) -> None:
        with self._lock:
            previous = self._state
            self._state = state

        if previous != state:
            logger.debug('connection state %s -> %s', previous.name, state.name)


# end of class StateCell



class HandshakeError(errors.IBWireError):
    """The server closed the connection before the handshake completed."""



class Connection:
    """ One connection to a trading platform process. Callbacks are
        delivered to *wrapper*, an instance of :class:`ibwire.Wrapper`.
    """

    def __init__(self, wrapper):

        self.wrapper = wrapper

        self.socket = None
        self.host = None
        self.port = None
        self.client_id = None

        # Set to True before connecting to announce an intent to
        # authenticate via verify_request; see Client.verify_request.
        self.extra_auth = False
        self.optional_capabilities = config.optional_capabilities

        self.channel = None
        self.reader = None
        self.decoder = None
        self.disconnect_requested = threading.Event()

        self._state = StateCell()
        self._server_version = 0
        self._connection_time = ''
        self._send_lock = threading.Lock()


    def connect(self, host: str = None, port: int = None, client_id: int = None) -> None:
        """ Connect and negotiate the server version. On success the reader
            and decoder threads are running and the API session has been
            started; on failure the error callback has been invoked and the
            connection is left disconnected.
        """

        if self.is_connected():
            self.report(NO_VALID_ID, errors.ALREADY_CONNECTED)
            return

        self.host = config.host if host is None else host
        self.port = config.port if port is None else port
        self.client_id = config.client_id if client_id is None else client_id

        # Each connection gets its own flag; a reader still winding down
        # from an earlier connection keeps the one it was given.
        self.disconnect_requested = threading.Event()
        self._state.set(ConnectionState.CONNECTING)

        timeout = config.connect_timeout or None

        logger.info('connecting to %s:%d as client %d', self.host, self.port, self.client_id)

        try:
            sock = socket.create_connection((self.host, self.port), timeout=timeout)
        except OSError as e:
            logger.error('connection to %s:%d failed: %s', self.host, self.port, e)
            self._state.set(ConnectionState.DISCONNECTED)
            self.report(NO_VALID_ID, errors.CONNECT_FAIL)
            return

        try:
            server_version, connection_time, leftover = self.negotiate(sock)
        except (OSError, errors.IBWireError, ValueError) as e:
            logger.error('handshake with %s:%d failed: %s', self.host, self.port, e)
            sock.close()
            self._state.set(ConnectionState.DISCONNECTED)
            self.report(NO_VALID_ID, errors.SOCKET_EXCEPTION, str(e))
            return

        sock.settimeout(None)

        self.socket = sock
        self._server_version = server_version
        self._connection_time = connection_time

        logger.info('server version %d, connection time %s', server_version, connection_time)

        self.channel = Channel(config.channel_hwm)
        on_end = functools.partial(self._connection_ended, sock)
        self.decoder = Decoder(self.wrapper, server_version, self.channel, on_end)
        self.reader = Reader(sock, self.channel, self.disconnect_requested,
                             config.chunk_size, leftover)

        self._state.set(ConnectionState.CONNECTED)

        self.decoder.start()
        self.reader.start()

        try:
            self.start_api()
        except OSError as e:
            logger.error('start API on %s:%d failed: %s', self.host, self.port, e)
            self.report(NO_VALID_ID, errors.SOCKET_EXCEPTION, str(e))
            self.disconnect()


    def negotiate(self, sock):
        """ Send the handshake and wait for the server's version frame, the
            first frame holding exactly two fields. Anything else that
            arrives first is logged and discarded. Returns the negotiated
            server version, the connection time, and any bytes received
            after the version frame.
        """

        sock.sendall(frame.handshake(MIN_CLIENT_VER, MAX_CLIENT_VER))

        buffer = b''

        while True:
            payload, buffer = frame.try_read_frame(buffer)

            if payload is None:
                chunk = sock.recv(config.chunk_size)
                if chunk == b'':
                    raise HandshakeError('connection closed during handshake')
                buffer += chunk
                continue

            tokens = fields.split_fields(payload)

            if len(tokens) == 2:
                return int(tokens[0]), tokens[1], buffer

            logger.warning('discarding %d-field frame received during handshake: %r',
                           len(tokens), tokens)


    def start_api(self) -> None:

        if not self.check_connected(NO_VALID_ID):
            return

        builder = MessageBuilder(OutgoingMessage.START_API)
        builder.add(2, self.client_id)
        builder.add(self.optional_capabilities,
                    when=self._server_version >= MIN_SERVER_VER_OPTIONAL_CAPABILITIES)

        self.send_msg(builder.build())


    def disconnect(self) -> None:
        """ Close the connection. The reader thread notices the closed
            socket and stops; the decoder drains what remains, then invokes
            :func:`connection_closed` on the wrapper.
        """

        if not self.is_connected():
            return

        logger.info('disconnecting from %s:%d', self.host, self.port)

        self.disconnect_requested.set()
        sock = self.socket

        try:
            sock.shutdown(socket.SHUT_RDWR)
        except OSError as e:
            logger.debug('socket shutdown: %s', e)

        sock.close()

        self._state.set(ConnectionState.DISCONNECTED)
        self._server_version = 0


    def _connection_ended(self, sock) -> None:
        """ Invoked from the decoder thread when the connection using *sock*
            has ended. The state only changes if *sock* is still the current
            socket; an earlier connection ending late must not disturb a
            newer one.
        """

        sock.close()

        if sock is self.socket:
            self._state.set(ConnectionState.DISCONNECTED)


    def is_connected(self) -> bool:
        return self._state.get() == ConnectionState.CONNECTED


    def server_version(self) -> int:
        return self._server_version


    def tws_connection_time(self) -> str:
        return self._connection_time


    def connection_state(self) -> ConnectionState:
        return self._state.get()


    def check_connected(self, req_id: int) -> bool:
        """ Return True if connected; otherwise report the NOT_CONNECTED
            error for *req_id* and return False.
        """

        if self.is_connected():
            return True

        self.report(req_id, errors.NOT_CONNECTED)
        return False


    def send_msg(self, payload: bytes) -> None:
        """ Frame and send one complete message. Sends from concurrent
            callers are serialized so frames never interleave.
        """

        data = frame.write_frame(payload)

        with self._send_lock:
            self.socket.sendall(data)


    def report(self, req_id: int, error: errors.TwsError, detail: str = '') -> None:
        self.wrapper.error(req_id, error.code, error.text(detail))


# end of class Connection


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
