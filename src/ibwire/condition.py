""" Conditions attached to an order, which gate its activation or
    cancellation. On the wire each condition is its integer type followed by
    the fields of the condition; the class hierarchy mirrors how the fields
    accumulate:

        OrderCondition          conjunction
          ExecutionCondition        + sec type, exchange, symbol
          OperatorCondition         + is more
            MarginCondition             + percent
            TimeCondition               + time
            ContractCondition           + con id, exchange
              PriceCondition                + price, trigger method
              PercentChangeCondition        + change percent
              VolumeCondition               + volume
"""

from .common import Holder
from .protocol.fields import UNSET_DOUBLE, UNSET_INTEGER


PRICE = 1
TIME = 3
MARGIN = 4
EXECUTION = 5
VOLUME = 6
PERCENT_CHANGE = 7


class OrderCondition(Holder):

    type = None

    def __init__(self):
        self.is_conjunction_connection = True


    def and_(self):
        self.is_conjunction_connection = True
        return self


    def or_(self):
        self.is_conjunction_connection = False
        return self


    def decode(self, reader):
        connector = reader.decode_str()
        self.is_conjunction_connection = connector == 'a'


    def fields(self):
        """ Return the list of values representing this condition on the
            wire, not including the leading condition type.
        """

        return ['a' if self.is_conjunction_connection else 'o']


# end of class OrderCondition



class ExecutionCondition(OrderCondition):

    type = EXECUTION

    def __init__(self, sec_type='', exchange='', symbol=''):
        OrderCondition.__init__(self)
        self.sec_type = sec_type
        self.exchange = exchange
        self.symbol = symbol


    def decode(self, reader):
        OrderCondition.decode(self, reader)
        self.sec_type = reader.decode_str()
        self.exchange = reader.decode_str()
        self.symbol = reader.decode_str()


    def fields(self):
        return OrderCondition.fields(self) + [self.sec_type, self.exchange, self.symbol]



class OperatorCondition(OrderCondition):

    def __init__(self, is_more=False):
        OrderCondition.__init__(self)
        self.is_more = is_more


    def decode(self, reader):
        OrderCondition.decode(self, reader)
        self.is_more = reader.decode_bool()


    def fields(self):
        return OrderCondition.fields(self) + [self.is_more]



class MarginCondition(OperatorCondition):

    type = MARGIN

    def __init__(self, is_more=False, percent=0):
        OperatorCondition.__init__(self, is_more)
        self.percent = percent


    def decode(self, reader):
        OperatorCondition.decode(self, reader)
        self.percent = reader.decode_int()


    def fields(self):
        return OperatorCondition.fields(self) + [self.percent]



class TimeCondition(OperatorCondition):

    type = TIME

    def __init__(self, is_more=False, time=''):
        OperatorCondition.__init__(self, is_more)
        self.time = time


    def decode(self, reader):
        OperatorCondition.decode(self, reader)
        self.time = reader.decode_str()


    def fields(self):
        return OperatorCondition.fields(self) + [self.time]



class ContractCondition(OperatorCondition):

    def __init__(self, con_id=0, exchange='', is_more=False):
        OperatorCondition.__init__(self, is_more)
        self.con_id = con_id
        self.exchange = exchange


    def decode(self, reader):
        OperatorCondition.decode(self, reader)
        self.con_id = reader.decode_int()
        self.exchange = reader.decode_str()


    def fields(self):
        return OperatorCondition.fields(self) + [self.con_id, self.exchange]



class PriceCondition(ContractCondition):

    type = PRICE

    # Trigger methods.

    DEFAULT = 0
    DOUBLE_BID_ASK = 1
    LAST = 2
    DOUBLE_LAST = 3
    BID_ASK = 4
    LAST_BID_ASK = 7
    MID_POINT = 8

    def __init__(self, trigger_method=0, con_id=0, exchange='', is_more=False, price=0.0):
        ContractCondition.__init__(self, con_id, exchange, is_more)
        self.price = price
        self.trigger_method = trigger_method


    def decode(self, reader):
        ContractCondition.decode(self, reader)
        self.price = reader.decode_float()
        self.trigger_method = reader.decode_int()


    def fields(self):
        return ContractCondition.fields(self) + [self.price, self.trigger_method]



class PercentChangeCondition(ContractCondition):

    type = PERCENT_CHANGE

    def __init__(self, con_id=0, exchange='', is_more=False, change_percent=UNSET_DOUBLE):
        ContractCondition.__init__(self, con_id, exchange, is_more)
        self.change_percent = change_percent


    def decode(self, reader):
        ContractCondition.decode(self, reader)
        self.change_percent = reader.decode_float()


    def fields(self):
        return ContractCondition.fields(self) + [self.change_percent]



class VolumeCondition(ContractCondition):

    type = VOLUME

    def __init__(self, con_id=0, exchange='', is_more=False, volume=UNSET_INTEGER):
        ContractCondition.__init__(self, con_id, exchange, is_more)
        self.volume = volume


    def decode(self, reader):
        ContractCondition.decode(self, reader)
        self.volume = reader.decode_int()


    def fields(self):
        return ContractCondition.fields(self) + [self.volume]


_by_type = {
    PRICE: PriceCondition,
    TIME: TimeCondition,
    MARGIN: MarginCondition,
    EXECUTION: ExecutionCondition,
    VOLUME: VolumeCondition,
    PERCENT_CHANGE: PercentChangeCondition,
}


def create(condition_type):
    """ Return a new, empty condition of the requested integer type. A
        ValueError is raised for an unrecognized type.
    """

    try:
        cls = _by_type[condition_type]
    except KeyError:
        raise ValueError('unknown order condition type: ' + repr(condition_type)) from None

    return cls()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
