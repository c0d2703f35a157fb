""" The ibwire protocol layer: field encoding, framing, message identifiers
    and outgoing message assembly. Nothing in this package touches a socket.
"""

from . import fields
from . import frame
from . import ids
from . import builder

from .fields import UNSET_INTEGER, UNSET_LONG, UNSET_DOUBLE, NO_VALID_ID
from .ids import IncomingMessage, OutgoingMessage
from .builder import MessageBuilder

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
