import ibwire
import pytest
import socket
import threading

from conftest import Recorder, message
from ibwire.protocol import fields, frame


class FakeServer:
    """ A single-connection stand-in for the trading platform. The *script*
        is invoked on the server thread with the accepted socket once the
        client handshake has been received.
    """

    def __init__(self, script):

        self.script = script
        self.received = list()
        self.listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.listener.bind(('127.0.0.1', 0))
        self.listener.listen(1)
        self.port = self.listener.getsockname()[1]

        self.thread = threading.Thread(target=self.run)
        self.thread.daemon = True
        self.thread.start()


    def run(self):

        connection, address = self.listener.accept()
        self.listener.close()

        try:
            prefix = self.read_exactly(connection, len(frame.PREFIX))
            assert prefix == frame.PREFIX
            self.received.append(self.read_frame(connection))
            self.script(self, connection)
        finally:
            connection.close()


    def read_exactly(self, connection, count):
        data = b''
        while len(data) < count:
            chunk = connection.recv(count - len(data))
            if chunk == b'':
                raise EOFError('client went away')
            data += chunk
        return data


    def read_frame(self, connection):
        header = self.read_exactly(connection, frame.header_size)
        length = int.from_bytes(header, 'big')
        payload = self.read_exactly(connection, length)
        return fields.split_fields(payload)


    def send(self, connection, *values):
        connection.sendall(frame.write_frame(message(*values)))



def test_handshake_and_session(recorder):

    def script(server, connection):

        # Anything other than a two-field frame is discarded by the client
        # while it waits for the server version.

        server.send(connection, 'stray')
        server.send(connection, 151, '20240102 09:30:00 EST')

        server.received.append(server.read_frame(connection))
        server.send(connection, 9, 1, 1)
        server.send(connection, 15, 1, 'DU123')

    server = FakeServer(script)

    client = ibwire.Client(recorder)
    client.connect('127.0.0.1', server.port, 3)

    assert client.server_version() == 151
    assert client.tws_connection_time() == '20240102 09:30:00 EST'

    assert recorder.closed.wait(5)

    server.thread.join(5)
    assert server.received == [['v100..151'], ['71', '2', '3', '']]

    assert recorder.events == [
        ('next_valid_id', 1),
        ('managed_accounts', 'DU123'),
        ('connection_closed',),
    ]

    assert client.is_connected() == False
    assert client.connection_state() == ibwire.ConnectionState.DISCONNECTED

    # The socket of the ended connection has been released.
    assert client.socket.fileno() == -1


def test_version_in_first_chunk(recorder):

    def script(server, connection):

        # The version frame and the first message arrive together.

        data = frame.write_frame(message(151, 'now'))
        data += frame.write_frame(message(49, 1, 1700000000))
        connection.sendall(data)
        server.received.append(server.read_frame(connection))

    server = FakeServer(script)

    client = ibwire.Client(recorder)
    client.connect('127.0.0.1', server.port, 0)

    assert recorder.closed.wait(5)
    assert recorder.events[0] == ('current_time', 1700000000)


def test_closed_during_handshake(recorder):

    def script(server, connection):
        pass

    server = FakeServer(script)

    client = ibwire.Client(recorder)
    client.connect('127.0.0.1', server.port, 0)

    assert client.is_connected() == False

    name, req_id, code, text = recorder.events[0]
    assert code == 509
    assert recorder.closed.is_set() == False


def test_connect_refused(recorder):

    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(('127.0.0.1', 0))
    port = listener.getsockname()[1]
    listener.close()

    client = ibwire.Client(recorder)
    client.connect('127.0.0.1', port, 0)

    assert client.is_connected() == False
    assert recorder.events[0][2] == 502


def test_disconnect(recorder):

    done = threading.Event()

    def script(server, connection):
        server.send(connection, 151, 'now')
        server.received.append(server.read_frame(connection))
        done.wait(5)

    server = FakeServer(script)

    client = ibwire.Client(recorder)
    client.connect('127.0.0.1', server.port, 0)
    assert client.is_connected() == True

    client.connect('127.0.0.1', server.port, 0)
    assert recorder.named('error')[0][1] == 501

    client.disconnect()
    done.set()

    assert recorder.closed.wait(5)
    assert client.is_connected() == False

    client.req_current_time()
    assert recorder.named('error')[-1][1] == 504



def test_start_api_send_failure(recorder):

    done = threading.Event()

    def script(server, connection):
        server.send(connection, 151, 'now')
        done.wait(5)

    server = FakeServer(script)

    def broken(payload):
        raise BrokenPipeError(32, 'Broken pipe')

    client = ibwire.Client(recorder)
    client.send_msg = broken
    client.connect('127.0.0.1', server.port, 0)

    assert client.is_connected() == False
    assert client.connection_state() == ibwire.ConnectionState.DISCONNECTED

    name, req_id, code, text = recorder.events[0]
    assert (name, req_id, code) == ('error', -1, 509)
    assert 'Broken pipe' in text

    assert recorder.closed.wait(5)
    assert recorder.named('error') == [(-1, 509, text)]

    done.set()


def test_reconnect_while_old_decoder_busy():

    entered = threading.Event()
    release = threading.Event()

    class Slow(Recorder):
        def next_valid_id(self, order_id):
            entered.set()
            release.wait(5)
            super().next_valid_id(order_id)

    first_done = threading.Event()

    def first(server, connection):
        server.send(connection, 151, 'now')
        server.read_frame(connection)
        server.send(connection, 9, 1, 1)
        first_done.wait(5)

    def second(server, connection):
        server.send(connection, 151, 'later')
        server.received.append(server.read_frame(connection))
        server.received.append(server.read_frame(connection))

    wrapper = Slow()
    client = ibwire.Client(wrapper)

    server = FakeServer(first)
    client.connect('127.0.0.1', server.port, 0)
    assert entered.wait(5)

    client.disconnect()
    first_done.set()

    other = FakeServer(second)
    client.connect('127.0.0.1', other.port, 0)
    assert client.is_connected() == True

    # The first connection's decoder only finishes now, after the second
    # connection is up.

    release.set()
    assert wrapper.closed.wait(5)

    assert client.is_connected() == True
    assert client.tws_connection_time() == 'later'

    client.req_current_time()

    other.thread.join(5)
    assert other.received == [['v100..151'], ['71', '2', '0', ''], ['49', '1']]
    assert wrapper.named('error') == []

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
