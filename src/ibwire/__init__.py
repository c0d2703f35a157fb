""" Python implementation of the client side of the Interactive Brokers
    TWS API wire protocol. A :class:`Client` connects to a trading platform
    process, sends requests, and delivers every decoded response to a
    :class:`Wrapper` subclass supplied by the caller.
"""

# Submodules used by multiple other components.

from . import config
from . import errors
from . import protocol
from . import server_versions

# Data descriptions.

from .common import TagValue, TickType, FaDataType, TickByTickType, MarketDataType
from .contract import Contract, ContractDetails, ComboLeg, DeltaNeutralContract
from .order import Order, OrderState, OrderComboLeg
from .execution import Execution, ExecutionFilter
from .scanner import ScannerSubscription
from . import condition

# Helpers for building requests.

from . import account_summary_tags
from . import algo_params

# Primary public-facing interfaces.

from .wrapper import Wrapper
from .connection import Connection, ConnectionState
from .client import Client

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
