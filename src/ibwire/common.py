""" Small value types shared across requests and callbacks: bars, tick
    attributes, tag/value pairs, and the enumerations for tick types and the
    handful of other integer codes that appear on the wire.
"""

import enum

from .protocol.fields import UNSET_INTEGER


class Holder:
    """ Base class for the plain data holders. Subclasses assign their
        attributes in __init__; equality and representation are derived from
        those attributes.
    """

    def __eq__(self, other):
        if type(self) != type(other):
            return NotImplemented
        return vars(self) == vars(other)


    def __repr__(self):
        values = ', '.join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({values})"


# end of class Holder



class TagValue(Holder):

    def __init__(self, tag='', value=''):
        self.tag = str(tag)
        self.value = str(value)


    def __str__(self):
        return f"{self.tag}={self.value};"



class SoftDollarTier(Holder):

    def __init__(self, name='', val='', display_name=''):
        self.name = name
        self.val = val
        self.display_name = display_name



class BarData(Holder):

    def __init__(self):
        self.date = ''
        self.open = 0.0
        self.high = 0.0
        self.low = 0.0
        self.close = 0.0
        self.volume = 0
        self.bar_count = 0
        self.average = 0.0



class RealTimeBar(Holder):

    def __init__(self):
        self.time = 0
        self.end_time = -1
        self.open = 0.0
        self.high = 0.0
        self.low = 0.0
        self.close = 0.0
        self.volume = 0
        self.wap = 0.0
        self.count = 0



class HistogramData(Holder):

    def __init__(self, price=0.0, count=0):
        self.price = price
        self.count = count



class DepthMktDataDescription(Holder):

    def __init__(self):
        self.exchange = ''
        self.sec_type = ''
        self.listing_exch = ''
        self.service_data_type = ''
        self.agg_group = UNSET_INTEGER



class SmartComponent(Holder):

    def __init__(self, bit_number=0, exchange='', exchange_letter=''):
        self.bit_number = bit_number
        self.exchange = exchange
        self.exchange_letter = exchange_letter



class TickAttrib(Holder):

    def __init__(self):
        self.can_auto_execute = False
        self.past_limit = False
        self.pre_open = False



class TickAttribBidAsk(Holder):

    def __init__(self):
        self.bid_past_low = False
        self.ask_past_high = False



class TickAttribLast(Holder):

    def __init__(self):
        self.past_limit = False
        self.unreported = False



class FamilyCode(Holder):

    def __init__(self, account_id='', family_code=''):
        self.account_id = account_id
        self.family_code = family_code



class PriceIncrement(Holder):

    def __init__(self, low_edge=0.0, increment=0.0):
        self.low_edge = low_edge
        self.increment = increment



class HistoricalTick(Holder):

    def __init__(self):
        self.time = 0
        self.price = 0.0
        self.size = 0



class HistoricalTickBidAsk(Holder):

    def __init__(self):
        self.time = 0
        self.tick_attrib_bid_ask = TickAttribBidAsk()
        self.price_bid = 0.0
        self.price_ask = 0.0
        self.size_bid = 0
        self.size_ask = 0



class HistoricalTickLast(Holder):

    def __init__(self):
        self.time = 0
        self.tick_attrib_last = TickAttribLast()
        self.price = 0.0
        self.size = 0
        self.exchange = ''
        self.special_conditions = ''



class CommissionReport(Holder):

    def __init__(self):
        self.exec_id = ''
        self.commission = 0.0
        self.currency = ''
        self.realized_pnl = 0.0
        self.yield_ = 0.0
        self.yield_redemption_date = 0



class NewsProvider(Holder):

    def __init__(self, code='', name=''):
        self.code = code
        self.name = name



class TickType(enum.IntEnum):
    """ Tick types as delivered by tick_price, tick_size, tick_string,
        tick_generic and tick_option_computation.
    """

    BID_SIZE = 0
    BID = 1
    ASK = 2
    ASK_SIZE = 3
    LAST = 4
    LAST_SIZE = 5
    HIGH = 6
    LOW = 7
    VOLUME = 8
    CLOSE = 9
    BID_OPTION_COMPUTATION = 10
    ASK_OPTION_COMPUTATION = 11
    LAST_OPTION_COMPUTATION = 12
    MODEL_OPTION = 13
    OPEN = 14
    LOW_13_WEEK = 15
    HIGH_13_WEEK = 16
    LOW_26_WEEK = 17
    HIGH_26_WEEK = 18
    LOW_52_WEEK = 19
    HIGH_52_WEEK = 20
    AVG_VOLUME = 21
    OPEN_INTEREST = 22
    OPTION_HISTORICAL_VOL = 23
    OPTION_IMPLIED_VOL = 24
    OPTION_BID_EXCH = 25
    OPTION_ASK_EXCH = 26
    OPTION_CALL_OPEN_INTEREST = 27
    OPTION_PUT_OPEN_INTEREST = 28
    OPTION_CALL_VOLUME = 29
    OPTION_PUT_VOLUME = 30
    INDEX_FUTURE_PREMIUM = 31
    BID_EXCH = 32
    ASK_EXCH = 33
    AUCTION_VOLUME = 34
    AUCTION_PRICE = 35
    AUCTION_IMBALANCE = 36
    MARK_PRICE = 37
    BID_EFP_COMPUTATION = 38
    ASK_EFP_COMPUTATION = 39
    LAST_EFP_COMPUTATION = 40
    OPEN_EFP_COMPUTATION = 41
    HIGH_EFP_COMPUTATION = 42
    LOW_EFP_COMPUTATION = 43
    CLOSE_EFP_COMPUTATION = 44
    LAST_TIMESTAMP = 45
    SHORTABLE = 46
    FUNDAMENTAL_RATIOS = 47
    RT_VOLUME = 48
    HALTED = 49
    BID_YIELD = 50
    ASK_YIELD = 51
    LAST_YIELD = 52
    CUST_OPTION_COMPUTATION = 53
    TRADE_COUNT = 54
    TRADE_RATE = 55
    VOLUME_RATE = 56
    LAST_RTH_TRADE = 57
    RT_HISTORICAL_VOL = 58
    IB_DIVIDENDS = 59
    BOND_FACTOR_MULTIPLIER = 60
    REGULATORY_IMBALANCE = 61
    NEWS_TICK = 62
    SHORT_TERM_VOLUME_3_MIN = 63
    SHORT_TERM_VOLUME_5_MIN = 64
    SHORT_TERM_VOLUME_10_MIN = 65
    DELAYED_BID = 66
    DELAYED_ASK = 67
    DELAYED_LAST = 68
    DELAYED_BID_SIZE = 69
    DELAYED_ASK_SIZE = 70
    DELAYED_LAST_SIZE = 71
    DELAYED_HIGH = 72
    DELAYED_LOW = 73
    DELAYED_VOLUME = 74
    DELAYED_CLOSE = 75
    DELAYED_OPEN = 76
    RT_TRD_VOLUME = 77
    CREDITMAN_MARK_PRICE = 78
    CREDITMAN_SLOW_MARK_PRICE = 79
    DELAYED_BID_OPTION = 80
    DELAYED_ASK_OPTION = 81
    DELAYED_LAST_OPTION = 82
    DELAYED_MODEL_OPTION = 83
    LAST_EXCH = 84
    LAST_REG_TIME = 85
    FUTURES_OPEN_INTEREST = 86
    AVG_OPT_VOLUME = 87
    DELAYED_LAST_TIMESTAMP = 88
    SHORTABLE_SHARES = 89
    NOT_SET = UNSET_INTEGER


# end of class TickType


def tick_name(tick_type):
    """ Return the readable name for an integer *tick_type*, or the integer
        itself as a string if it is not a known tick type.
    """

    try:
        return TickType(tick_type).name
    except ValueError:
        return str(tick_type)


# Price ticks that carry an accompanying size tick.

price_to_size_tick = {
    TickType.BID: TickType.BID_SIZE,
    TickType.ASK: TickType.ASK_SIZE,
    TickType.LAST: TickType.LAST_SIZE,
    TickType.DELAYED_BID: TickType.DELAYED_BID_SIZE,
    TickType.DELAYED_ASK: TickType.DELAYED_ASK_SIZE,
    TickType.DELAYED_LAST: TickType.DELAYED_LAST_SIZE,
}


class FaDataType(enum.IntEnum):
    GROUPS = 1
    PROFILES = 2
    ALIASES = 3


class TickByTickType(enum.Enum):
    """ The string values are what req_tick_by_tick_data sends.
    """

    LAST = 'Last'
    ALL_LAST = 'AllLast'
    BID_ASK = 'BidAsk'
    MID_POINT = 'MidPoint'


class MarketDataType(enum.IntEnum):
    REALTIME = 1
    FROZEN = 2
    DELAYED = 3
    DELAYED_FROZEN = 4


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
