""" The single-producer, single-consumer channel between the reader thread
    and the decoder thread, built on a pair of ZeroMQ PAIR sockets over an
    inproc:// endpoint. Each end of the channel belongs to exactly one
    thread; the sending end to the reader, the receiving end to the decoder.

    Channel messages are multipart:

        [b'MSG', payload]       one complete protocol message
        [b'ERR', code, text]    a transport error to report
        [b'END']                the reader has stopped; nothing follows
"""

from __future__ import annotations

import atexit
import itertools
from typing import Optional, Tuple

import zmq


MSG = b'MSG'
ERR = b'ERR'
END = b'END'

zmq_context = zmq.Context()
_sequence = itertools.count()


class Channel:

    def __init__(self, hwm: int = 0):

        self.address = f"inproc://ibwire.channel:{next(_sequence)}"

        self._rx = zmq_context.socket(zmq.PAIR)
        self._rx.setsockopt(zmq.LINGER, 0)
        self._rx.setsockopt(zmq.RCVHWM, hwm)
        self._rx.bind(self.address)

        self._tx = zmq_context.socket(zmq.PAIR)
        self._tx.setsockopt(zmq.LINGER, 0)
        self._tx.setsockopt(zmq.SNDHWM, hwm)
        self._tx.connect(self.address)


    # Sending side, used by the reader thread.

    def put(self, payload: bytes) -> None:
        self._tx.send_multipart((MSG, payload))


    def error(self, code: int, text: str) -> None:
        self._tx.send_multipart((ERR, str(code).encode(), text.encode()))


    def end(self) -> None:
        """ Signal that no further messages will be sent, and release the
            sending socket.
        """

        self._tx.send_multipart((END,))
        self._tx.close()


    # Receiving side, used by the decoder thread.

    def get(self, timeout: Optional[float] = None) -> Optional[Tuple[bytes, ...]]:
        """ Block until the next channel message arrives and return its
            parts as a tuple. If a *timeout* in seconds is given and nothing
            arrives in time, None is returned.
        """

        if timeout is not None:
            ready = self._rx.poll(int(timeout * 1000), zmq.POLLIN)
            if ready == 0:
                return None

        return tuple(self._rx.recv_multipart())


    def close(self) -> None:
        """ Release the receiving socket.
        """

        self._rx.close()


# end of class Channel


def _cleanup() -> None:
    try:
        zmq_context.destroy(linger=0)
    except zmq.ZMQError:
        pass


atexit.register(_cleanup)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
