import ibwire
import pytest

from ibwire import server_versions


def test_range():

    assert server_versions.MIN_CLIENT_VER == 100
    assert server_versions.MAX_CLIENT_VER == 151
    assert server_versions.MIN_CLIENT_VER <= server_versions.MAX_CLIENT_VER


def test_features():

    features = server_versions.features()

    assert features['PNL'] == 127
    assert features['PRICE_MGMT_ALGO'] == server_versions.MAX_CLIENT_VER

    for name, version in features.items():
        assert isinstance(version, int), name


def test_gates_monotonic(client_factory):

    # A feature available at some server version stays available at every
    # later version.

    for version in server_versions.features().values():
        older = client_factory(version - 1)
        newer = client_factory(version)
        newest = client_factory(version + 10)

        assert older.supports(version) == False
        assert newer.supports(version) == True
        assert newest.supports(version) == True

def stock():

    contract = ibwire.Contract()
    contract.symbol = 'AAPL'
    contract.sec_type = 'STK'
    contract.exchange = 'SMART'
    contract.currency = 'USD'
    return contract


def test_gate_adds_fields(client_factory):

    # Crossing a gate appends the gated fields; everything before them is
    # encoded identically on either side of the gate.

    gate = server_versions.MIN_SERVER_VER_SMART_DEPTH
    older = client_factory(gate - 1)
    newer = client_factory(gate)

    older.req_mkt_depth(4, stock(), 5)
    newer.req_mkt_depth(4, stock(), 5)

    before = older.socket.messages()[0]
    after = newer.socket.messages()[0]

    assert before[-2:] == ['5', '']
    assert after == before[:-1] + ['0', '']

    gate = server_versions.MIN_SERVER_VER_TICK_BY_TICK_IGNORE_SIZE
    older = client_factory(gate - 1)
    newer = client_factory(gate)

    older.req_tick_by_tick_data(9, stock(), 'Last')
    newer.req_tick_by_tick_data(9, stock(), 'Last')

    before = older.socket.messages()[0]
    after = newer.socket.messages()[0]

    assert before[-1] == 'Last'
    assert after == before + ['0', '0']

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
