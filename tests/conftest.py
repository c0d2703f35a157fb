import ibwire
import pytest
import threading


class Recorder(ibwire.Wrapper):
    """ Wrapper that remembers every callback, in order, as a tuple of the
        callback name followed by its arguments.
    """

    def __init__(self):
        self.events = list()
        self.closed = threading.Event()


    def event(self, name, *args):
        self.events.append((name,) + args)
        if name == 'connection_closed':
            self.closed.set()


    def error(self, req_id, error_code, error_string):
        self.event('error', req_id, error_code, error_string)


    def named(self, name):
        return [event[1:] for event in self.events if event[0] == name]



class FakeSocket:
    """ Stands in for a connected socket; everything sent is kept.
    """

    def __init__(self):
        self.sent = list()


    def sendall(self, data):
        self.sent.append(data)


    def messages(self):
        """ Return the field lists of every frame sent so far.
        """

        buffer = b''.join(self.sent)
        payloads, remainder = ibwire.protocol.frame.read_frames(buffer)
        assert remainder == b''
        return [ibwire.protocol.fields.split_fields(payload) for payload in payloads]



@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def client_factory(recorder):
    """ Return a function creating a :class:`ibwire.Client` that believes it
        is connected at the requested server version, sending into a
        :class:`FakeSocket`.
    """

    def factory(server_version=ibwire.server_versions.MAX_CLIENT_VER):
        client = ibwire.Client(recorder)
        client.socket = FakeSocket()
        client._server_version = server_version
        client._state.set(ibwire.ConnectionState.CONNECTED)
        return client

    return factory


def message(*values):
    """ Encode *values* as a message payload, the way a server would.
    """

    return ibwire.protocol.fields.encode_all(str(value) for value in values)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
