""" The background reader: pull bytes from the socket, reassemble frames,
    and forward each complete payload to the decoder over a
    :class:`ibwire.transport.channel.Channel`. The reader never invokes any
    callbacks; problems are forwarded over the channel for the decoder
    thread to report.
"""

from __future__ import annotations

import logging
import socket
import threading

from .. import errors
from ..protocol import frame

logger = logging.getLogger(__name__)


class Reader:
    """ Reader thread for a single connection. Any bytes already received
        during the handshake can be passed as the initial *buffer*; they are
        processed before the first socket read.

        The thread stops when a read returns zero bytes (the remote end
        closed, or the socket was shut down locally), when the socket raises
        an error, or when a frame declares an impossible length. In every
        case the last thing sent over the channel is the END marker.
    """

    def __init__(self, sock, channel, disconnect_requested, chunk_size=4096, buffer=b''):

        self.socket = sock
        self.channel = channel
        self.disconnect_requested = disconnect_requested
        self.chunk_size = chunk_size
        self.buffer = bytes(buffer)

        self.thread = threading.Thread(target=self.run, name='ibwire.Reader')
        self.thread.daemon = True


    def start(self):
        self.thread.start()


    def join(self, timeout=None):
        self.thread.join(timeout)


    def is_alive(self):
        return self.thread.is_alive()


    def run(self):

        buffer = self.buffer
        self.buffer = b''

        try:
            while True:
                payloads, buffer = frame.read_frames(buffer)
                for payload in payloads:
                    self.channel.put(payload)

                try:
                    chunk = self.socket.recv(self.chunk_size)
                except OSError as e:
                    if self.disconnect_requested.is_set():
                        logger.debug('socket closed during disconnect: %s', e)
                    else:
                        logger.warning('socket error: %s', e)
                        error = errors.SOCKET_EXCEPTION
                        self.channel.error(error.code, error.text(str(e)))
                    break

                if chunk == b'':
                    logger.info('connection closed, reader stopping')
                    self.shutdown()
                    break

                buffer += chunk

        except errors.BadLengthError as e:
            logger.error('%s', e)
            error = errors.BAD_LENGTH
            self.channel.error(error.code, error.text(': ' + str(e)))
            self.shutdown()

        finally:
            self.channel.end()


    def shutdown(self):
        """ Shut the socket down in both directions. The socket may already
            be shut down or closed by a concurrent disconnect, which is fine.
        """

        try:
            self.socket.shutdown(socket.SHUT_RDWR)
        except OSError as e:
            logger.debug('socket shutdown: %s', e)


# end of class Reader


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
