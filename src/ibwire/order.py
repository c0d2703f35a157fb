""" Order descriptions and order state. The :class:`Order` has a great many
    attributes, nearly all optional; numeric attributes default to the unset
    sentinel where zero is a meaningful value, so that an untouched attribute
    is sent as an empty field.
"""

from .common import Holder, SoftDollarTier
from .protocol.fields import UNSET_INTEGER, UNSET_DOUBLE


# Order origin.

CUSTOMER = 0
FIRM = 1
UNKNOWN = 2

# Auction strategy.

AUCTION_UNSET = 0
AUCTION_MATCH = 1
AUCTION_IMPROVEMENT = 2
AUCTION_TRANSPARENT = 3

COMPETE_AGAINST_BEST_OFFSET_UP_TO_MID = float('inf')


class OrderComboLeg(Holder):

    def __init__(self, price=UNSET_DOUBLE):
        self.price = price



class OrderState(Holder):
    """ Margin and commission information returned with an open order. The
        margin values are strings exactly as sent by the server.
    """

    def __init__(self):
        self.status = ''

        self.init_margin_before = ''
        self.maint_margin_before = ''
        self.equity_with_loan_before = ''
        self.init_margin_change = ''
        self.maint_margin_change = ''
        self.equity_with_loan_change = ''
        self.init_margin_after = ''
        self.maint_margin_after = ''
        self.equity_with_loan_after = ''

        self.commission = UNSET_DOUBLE
        self.min_commission = UNSET_DOUBLE
        self.max_commission = UNSET_DOUBLE
        self.commission_currency = ''
        self.warning_text = ''
        self.completed_time = ''
        self.completed_status = ''



class Order(Holder):

    def __init__(self):

        # Identifiers.

        self.order_id = 0
        self.client_id = 0
        self.perm_id = 0

        # Main order fields.

        self.action = ''
        self.total_quantity = 0.0
        self.order_type = ''
        self.lmt_price = UNSET_DOUBLE
        self.aux_price = UNSET_DOUBLE

        # Extended order fields.

        self.tif = ''
        self.active_start_time = ''
        self.active_stop_time = ''
        self.oca_group = ''
        self.oca_type = 0
        self.order_ref = ''
        self.transmit = True
        self.parent_id = 0
        self.block_order = False
        self.sweep_to_fill = False
        self.display_size = 0
        self.trigger_method = 0
        self.outside_rth = False
        self.hidden = False
        self.good_after_time = ''
        self.good_till_date = ''
        self.rule80a = ''
        self.all_or_none = False
        self.min_qty = UNSET_INTEGER
        self.percent_offset = UNSET_DOUBLE
        self.override_percentage_constraints = False
        self.trail_stop_price = UNSET_DOUBLE
        self.trailing_percent = UNSET_DOUBLE

        # Financial advisor fields.

        self.fa_group = ''
        self.fa_profile = ''
        self.fa_method = ''
        self.fa_percentage = ''

        # Institutional (ie non-cleared) only.

        self.designated_location = ''
        self.open_close = 'O'
        self.origin = CUSTOMER
        self.short_sale_slot = 0
        self.exempt_code = -1

        # SMART routing only.

        self.discretionary_amt = 0.0
        self.e_trade_only = True
        self.firm_quote_only = True
        self.nbbo_price_cap = UNSET_DOUBLE
        self.opt_out_smart_routing = False

        # BOX exchange orders only.

        self.auction_strategy = AUCTION_UNSET
        self.starting_price = UNSET_DOUBLE
        self.stock_ref_price = UNSET_DOUBLE
        self.delta = UNSET_DOUBLE

        # Pegged to stock and VOL orders only.

        self.stock_range_lower = UNSET_DOUBLE
        self.stock_range_upper = UNSET_DOUBLE

        self.randomize_price = False
        self.randomize_size = False

        # Volatility orders only.

        self.volatility = UNSET_DOUBLE
        self.volatility_type = UNSET_INTEGER
        self.delta_neutral_order_type = ''
        self.delta_neutral_aux_price = UNSET_DOUBLE
        self.delta_neutral_con_id = 0
        self.delta_neutral_settling_firm = ''
        self.delta_neutral_clearing_account = ''
        self.delta_neutral_clearing_intent = ''
        self.delta_neutral_open_close = ''
        self.delta_neutral_short_sale = False
        self.delta_neutral_short_sale_slot = 0
        self.delta_neutral_designated_location = ''
        self.continuous_update = False
        self.reference_price_type = UNSET_INTEGER

        # Combo orders only.

        self.basis_points = UNSET_DOUBLE
        self.basis_points_type = UNSET_INTEGER

        # Scale orders only.

        self.scale_init_level_size = UNSET_INTEGER
        self.scale_subs_level_size = UNSET_INTEGER
        self.scale_price_increment = UNSET_DOUBLE
        self.scale_price_adjust_value = UNSET_DOUBLE
        self.scale_price_adjust_interval = UNSET_INTEGER
        self.scale_profit_offset = UNSET_DOUBLE
        self.scale_auto_reset = False
        self.scale_init_position = UNSET_INTEGER
        self.scale_init_fill_qty = UNSET_INTEGER
        self.scale_random_percent = False
        self.scale_table = ''

        # Hedge orders.

        self.hedge_type = ''
        self.hedge_param = ''

        # Clearing information.

        self.account = ''
        self.settling_firm = ''
        self.clearing_account = ''
        self.clearing_intent = ''

        # Algo orders only.

        self.algo_strategy = ''
        self.algo_params = list()
        self.smart_combo_routing_params = list()
        self.algo_id = ''

        # What-if.

        self.what_if = False

        # Not held.

        self.not_held = False
        self.solicited = False

        # Models.

        self.model_code = ''

        # Order combo legs.

        self.order_combo_legs = list()
        self.order_misc_options = list()

        # Pegged to benchmark.

        self.reference_contract_id = 0
        self.pegged_change_amount = 0.0
        self.is_pegged_change_amount_decrease = False
        self.reference_change_amount = 0.0
        self.reference_exchange_id = ''
        self.adjusted_order_type = ''

        self.trigger_price = UNSET_DOUBLE
        self.adjusted_stop_price = UNSET_DOUBLE
        self.adjusted_stop_limit_price = UNSET_DOUBLE
        self.adjusted_trailing_amount = UNSET_DOUBLE
        self.adjustable_trailing_unit = 0
        self.lmt_price_offset = UNSET_DOUBLE

        self.conditions = list()
        self.conditions_cancel_order = False
        self.conditions_ignore_rth = False

        # Ext operator.

        self.ext_operator = ''

        self.soft_dollar_tier = SoftDollarTier()

        # Native cash quantity.

        self.cash_qty = UNSET_DOUBLE

        self.mifid2_decision_maker = ''
        self.mifid2_decision_algo = ''
        self.mifid2_execution_trader = ''
        self.mifid2_execution_algo = ''

        # Don't use auto price for hedge.

        self.dont_use_auto_price_for_hedge = False

        self.is_oms_container = False
        self.discretionary_up_to_limit_price = False

        self.auto_cancel_date = ''
        self.filled_quantity = UNSET_DOUBLE
        self.ref_futures_con_id = 0
        self.auto_cancel_parent = False
        self.shareholder = ''
        self.imbalance_only = False
        self.route_marketable_to_bbo = False
        self.parent_perm_id = 0

        # None means "not specified" and is sent as an empty field.

        self.use_price_mgmt_algo = None

        self.duration = UNSET_INTEGER
        self.post_to_ats = UNSET_INTEGER


    def __str__(self):
        return f"{self.order_id},{self.client_id},{self.perm_id}: " \
               f"{self.order_type} {self.action} {self.total_quantity}@{self.lmt_price}"


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
