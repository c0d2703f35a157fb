""" Contract descriptions, as sent with requests and returned in contract
    details callbacks.
"""

from .common import Holder


# Combo leg open/close values.

SAME_POS = 0
OPEN_POS = 1
CLOSE_POS = 2
UNKNOWN_POS = 3


class ComboLeg(Holder):

    def __init__(self):
        self.con_id = 0
        self.ratio = 0
        self.action = ''
        self.exchange = ''
        self.open_close = SAME_POS
        self.short_sale_slot = 0
        self.designated_location = ''
        self.exempt_code = -1



class DeltaNeutralContract(Holder):

    def __init__(self):
        self.con_id = 0
        self.delta = 0.0
        self.price = 0.0



class Contract(Holder):
    """ A description of a tradeable instrument. Most requests only need a
        subset of the fields; an empty string or zero means "not specified".

        :ivar combo_legs: A list of :class:`ComboLeg` for a BAG contract.
        :ivar delta_neutral_contract: A :class:`DeltaNeutralContract`, or None.
        :ivar sec_id_list: A list of :class:`ibwire.common.TagValue`.
    """

    def __init__(self):
        self.con_id = 0
        self.symbol = ''
        self.sec_type = ''
        self.last_trade_date_or_contract_month = ''
        self.strike = 0.0
        self.right = ''
        self.multiplier = ''
        self.exchange = ''
        self.primary_exchange = ''
        self.currency = ''
        self.local_symbol = ''
        self.trading_class = ''
        self.include_expired = False
        self.sec_id_type = ''
        self.sec_id = ''

        self.combo_legs_descrip = ''
        self.combo_legs = list()
        self.delta_neutral_contract = None


    def __str__(self):
        parts = (self.con_id, self.symbol, self.sec_type,
                 self.last_trade_date_or_contract_month, self.strike,
                 self.right, self.multiplier, self.exchange,
                 self.primary_exchange, self.currency, self.local_symbol,
                 self.trading_class)
        return ','.join(str(part) for part in parts)



class ContractDetails(Holder):

    def __init__(self):
        self.contract = Contract()
        self.market_name = ''
        self.min_tick = 0.0
        self.order_types = ''
        self.valid_exchanges = ''
        self.price_magnifier = 0
        self.under_con_id = 0
        self.long_name = ''
        self.contract_month = ''
        self.industry = ''
        self.category = ''
        self.subcategory = ''
        self.time_zone_id = ''
        self.trading_hours = ''
        self.liquid_hours = ''
        self.ev_rule = ''
        self.ev_multiplier = 0.0
        self.md_size_multiplier = 0
        self.agg_group = 0
        self.under_symbol = ''
        self.under_sec_type = ''
        self.market_rule_ids = ''
        self.sec_id_list = list()
        self.real_expiration_date = ''
        self.last_trade_time = ''

        # Bond values.

        self.cusip = ''
        self.ratings = ''
        self.desc_append = ''
        self.bond_type = ''
        self.coupon_type = ''
        self.callable = False
        self.putable = False
        self.coupon = 0.0
        self.convertible = False
        self.maturity = ''
        self.issue_date = ''
        self.next_option_date = ''
        self.next_option_type = ''
        self.next_option_partial = False
        self.notes = ''



class ContractDescription(Holder):

    def __init__(self):
        self.contract = Contract()
        self.derivative_sec_types = list()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
