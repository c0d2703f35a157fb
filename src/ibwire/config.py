""" Run-time defaults for ibwire. Each value may be overridden by an
    environment variable of the same name, upper-cased and prefixed with
    ``IBWIRE_``; for example, ``IBWIRE_PORT=4002`` changes the default port
    used by :func:`ibwire.Client.connect`. The environment is read once, when
    this module is first imported; call :func:`reload` to read it again.
"""

import os

prefix = 'IBWIRE_'


def string(name, default):
    """ Return the environment override for *name*, or *default* if there
        is none.
    """

    return os.environ.get(prefix + name.upper(), default)



def integer(name, default):

    value = string(name, None)
    if value is None or value == '':
        return default

    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{prefix}{name.upper()} must be an integer, not {value!r}") from None



def real(name, default):

    value = string(name, None)
    if value is None or value == '':
        return default

    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{prefix}{name.upper()} must be a number, not {value!r}") from None



def reload():
    """ Re-read every setting from the environment.
    """

    global host, port, client_id, chunk_size, connect_timeout
    global channel_hwm, optional_capabilities

    host = string('host', '127.0.0.1')
    port = integer('port', 7497)
    client_id = integer('client_id', 0)

    # Size of each socket read performed by the background reader.
    chunk_size = integer('chunk_size', 4096)

    # Bound, in seconds, on each blocking read during the handshake. Zero
    # disables the timeout; no timeout ever applies once connected.
    connect_timeout = real('connect_timeout', 10.0)

    # Queue depth between the reader and decoder threads; zero is unbounded.
    channel_hwm = integer('channel_hwm', 0)

    optional_capabilities = string('optional_capabilities', '')


reload()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
