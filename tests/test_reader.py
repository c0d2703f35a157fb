import pytest
import socket
import threading

from conftest import message
from ibwire.protocol import frame
from ibwire.transport import Channel, Reader
from ibwire.transport.channel import END, ERR, MSG


class FailingSocket:
    """ Every read fails as if the peer reset the connection.
    """

    def __init__(self):
        self.shut = False


    def recv(self, size):
        raise ConnectionResetError('reset by peer')


    def shutdown(self, how):
        self.shut = True



def drain(channel):

    parts = list()

    while True:
        received = channel.get(5)
        assert received is not None
        parts.append(received)
        if received[0] == END:
            return parts


def test_remote_close():

    local, remote = socket.socketpair()
    channel = Channel()

    reader = Reader(local, channel, threading.Event(), buffer=frame.write_frame(message(9, 1, 1)))
    reader.start()

    remote.sendall(frame.write_frame(message(49, 1, 1700000000)))
    remote.close()

    reader.join(5)
    assert reader.is_alive() == False

    assert drain(channel) == [
        (MSG, message(9, 1, 1)),
        (MSG, message(49, 1, 1700000000)),
        (END,),
    ]

    local.close()
    channel.close()


def test_read_error_reported():

    channel = Channel()

    reader = Reader(FailingSocket(), channel, threading.Event())
    reader.start()
    reader.join(5)

    parts = drain(channel)
    assert len(parts) == 2

    marker, code, text = parts[0]
    assert marker == ERR
    assert code == b'509'
    assert text == b'Exception caught while reading socket - reset by peer'
    assert parts[1] == (END,)

    channel.close()


def test_read_error_after_disconnect_is_silent():

    requested = threading.Event()
    requested.set()

    channel = Channel()

    reader = Reader(FailingSocket(), channel, requested)
    reader.start()
    reader.join(5)

    assert drain(channel) == [(END,)]
    channel.close()


def test_bad_length():

    channel = Channel()
    sock = FailingSocket()

    oversize = (frame.MAX_MSG_LEN + 1).to_bytes(4, 'big')

    reader = Reader(sock, channel, threading.Event(), buffer=oversize)
    reader.start()
    reader.join(5)

    parts = drain(channel)
    assert parts[0][:2] == (ERR, b'507')
    assert parts[-1] == (END,)
    assert sock.shut == True

    channel.close()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
