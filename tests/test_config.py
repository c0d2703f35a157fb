import ibwire
import pytest

from ibwire import config


@pytest.fixture
def environment(monkeypatch):

    yield monkeypatch

    monkeypatch.undo()
    config.reload()


def test_defaults(environment):

    for name in ('HOST', 'PORT', 'CLIENT_ID', 'CHUNK_SIZE', 'CONNECT_TIMEOUT',
                 'CHANNEL_HWM', 'OPTIONAL_CAPABILITIES'):
        environment.delenv('IBWIRE_' + name, raising=False)

    config.reload()

    assert config.host == '127.0.0.1'
    assert config.port == 7497
    assert config.client_id == 0
    assert config.chunk_size == 4096
    assert config.connect_timeout == 10.0
    assert config.channel_hwm == 0
    assert config.optional_capabilities == ''


def test_overrides(environment):

    environment.setenv('IBWIRE_PORT', '4002')
    environment.setenv('IBWIRE_CONNECT_TIMEOUT', '2.5')
    environment.setenv('IBWIRE_OPTIONAL_CAPABILITIES', '+PACEAPI')

    config.reload()

    assert config.port == 4002
    assert config.connect_timeout == 2.5
    assert config.optional_capabilities == '+PACEAPI'


def test_malformed(environment):

    environment.setenv('IBWIRE_PORT', 'seventy')

    with pytest.raises(ValueError) as caught:
        config.reload()

    assert 'IBWIRE_PORT' in str(caught.value)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
