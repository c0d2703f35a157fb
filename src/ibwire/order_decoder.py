""" Decoding of the open order and completed order messages, which carry a
    contract, an order and an order state in one long sequence of fields.
    Fields are gated both on the message-local *version* and on the
    negotiated *server_version*; the two are kept distinct throughout. A
    completed order has no message-local version and uses UNSET_INTEGER,
    which satisfies every version gate.
"""

from . import condition
from .common import TagValue
from .contract import ComboLeg, DeltaNeutralContract
from .order import OrderComboLeg
from .protocol.fields import UNSET_DOUBLE
from .server_versions import *


class OrderDecoder:

    def __init__(self, reader, contract, order, order_state, version, server_version):

        self.reader = reader
        self.contract = contract
        self.order = order
        self.order_state = order_state
        self.version = version
        self.server_version = server_version


    def decode_open(self):
        """ Decode an open order message, starting with the order id.
        """

        self.order.order_id = self.reader.decode_int()

        self.contract_fields()

        self.action()
        self.total_quantity()
        self.order_type()
        self.lmt_price()
        self.aux_price()
        self.tif()
        self.oca_group()
        self.account()
        self.open_close()
        self.origin()
        self.order_ref()
        self.client_id()
        self.perm_id()
        self.outside_rth()
        self.hidden()
        self.discretionary_amt()
        self.good_after_time()
        self.skip_shares_allocation()
        self.fa_params()
        self.model_code()
        self.good_till_date()
        self.rule80a()
        self.percent_offset()
        self.settling_firm()
        self.short_sale_params()
        self.auction_strategy()
        self.box_order_params()
        self.peg_to_stk_or_vol_order_params()
        self.display_size()
        self.block_order()
        self.sweep_to_fill()
        self.all_or_none()
        self.min_qty()
        self.oca_type()
        self.e_trade_only()
        self.firm_quote_only()
        self.nbbo_price_cap()
        self.parent_id()
        self.trigger_method()
        self.vol_order_params(True)
        self.trail_params()
        self.basis_points()
        self.combo_legs()
        self.smart_combo_routing_params()
        self.scale_order_params()
        self.hedge_params()
        self.opt_out_smart_routing()
        self.clearing_params()
        self.not_held()
        self.delta_neutral()
        self.algo_params()
        self.solicited()
        self.what_if_info_and_commission()
        self.vol_randomize_flags()
        self.peg_to_bench_params()
        self.conditions()
        self.adjusted_order_params()
        self.soft_dollar_tier()
        self.cash_qty()
        self.dont_use_auto_price_for_hedge()
        self.is_oms_container()
        self.discretionary_up_to_limit_price()
        self.use_price_mgmt_algo()


    def decode_completed(self):
        """ Decode a completed order message. The field sequence is similar
            to an open order, with some fields dropped and the completion
            details appended.
        """

        self.contract_fields()

        self.action()
        self.total_quantity()
        self.order_type()
        self.lmt_price()
        self.aux_price()
        self.tif()
        self.oca_group()
        self.account()
        self.open_close()
        self.origin()
        self.order_ref()
        self.perm_id()
        self.outside_rth()
        self.hidden()
        self.discretionary_amt()
        self.good_after_time()
        self.fa_params()
        self.model_code()
        self.good_till_date()
        self.rule80a()
        self.percent_offset()
        self.settling_firm()
        self.short_sale_params()
        self.box_order_params()
        self.peg_to_stk_or_vol_order_params()
        self.display_size()
        self.sweep_to_fill()
        self.all_or_none()
        self.min_qty()
        self.oca_type()
        self.trigger_method()
        self.vol_order_params(False)
        self.trail_params()
        self.combo_legs()
        self.smart_combo_routing_params()
        self.scale_order_params()
        self.hedge_params()
        self.clearing_params()
        self.not_held()
        self.delta_neutral()
        self.algo_params()
        self.solicited()
        self.order_status()
        self.vol_randomize_flags()
        self.peg_to_bench_params()
        self.conditions()
        self.stop_price_and_lmt_price_offset()
        self.cash_qty()
        self.dont_use_auto_price_for_hedge()
        self.is_oms_container()
        self.completed_order_fields()


    # Contract.

    def contract_fields(self):

        reader = self.reader
        contract = self.contract

        contract.con_id = reader.decode_int()
        contract.symbol = reader.decode_str()
        contract.sec_type = reader.decode_str()
        contract.last_trade_date_or_contract_month = reader.decode_str()
        contract.strike = reader.decode_float()
        contract.right = reader.decode_str()
        if self.version >= 32:
            contract.multiplier = reader.decode_str()
        contract.exchange = reader.decode_str()
        contract.currency = reader.decode_str()
        contract.local_symbol = reader.decode_str()
        if self.version >= 32:
            contract.trading_class = reader.decode_str()


    # Main order fields.

    def action(self):
        self.order.action = self.reader.decode_str()


    def total_quantity(self):
        if self.server_version >= MIN_SERVER_VER_FRACTIONAL_POSITIONS:
            self.order.total_quantity = self.reader.decode_float()
        else:
            self.order.total_quantity = float(self.reader.decode_int())


    def order_type(self):
        self.order.order_type = self.reader.decode_str()


    def lmt_price(self):
        self.order.lmt_price = self._price(29)


    def aux_price(self):
        self.order.aux_price = self._price(30)


    def _price(self, min_version):
        """ Before *min_version* an empty price field meant zero; from then
            on an empty field is unset.
        """

        price = self.reader.decode_float()
        if self.version < min_version and price == UNSET_DOUBLE:
            price = 0.0
        return price


    def tif(self):
        self.order.tif = self.reader.decode_str()


    def oca_group(self):
        self.order.oca_group = self.reader.decode_str()


    def account(self):
        self.order.account = self.reader.decode_str()


    def open_close(self):
        self.order.open_close = self.reader.decode_str()


    def origin(self):
        self.order.origin = self.reader.decode_int()


    def order_ref(self):
        self.order.order_ref = self.reader.decode_str()


    def client_id(self):
        self.order.client_id = self.reader.decode_int()


    def perm_id(self):
        self.order.perm_id = self.reader.decode_int()


    def outside_rth(self):
        self.order.outside_rth = self.reader.decode_bool()


    def hidden(self):
        self.order.hidden = self.reader.decode_bool()


    def discretionary_amt(self):
        self.order.discretionary_amt = self.reader.decode_float()


    def good_after_time(self):
        self.order.good_after_time = self.reader.decode_str()


    def skip_shares_allocation(self):
        self.reader.skip()


    def fa_params(self):
        reader = self.reader
        self.order.fa_group = reader.decode_str()
        self.order.fa_method = reader.decode_str()
        self.order.fa_percentage = reader.decode_str()
        self.order.fa_profile = reader.decode_str()


    def model_code(self):
        if self.server_version >= MIN_SERVER_VER_MODELS_SUPPORT:
            self.order.model_code = self.reader.decode_str()


    def good_till_date(self):
        self.order.good_till_date = self.reader.decode_str()


    def rule80a(self):
        self.order.rule80a = self.reader.decode_str()


    def percent_offset(self):
        self.order.percent_offset = self.reader.decode_float()


    def settling_firm(self):
        self.order.settling_firm = self.reader.decode_str()


    def short_sale_params(self):

        reader = self.reader
        order = self.order

        order.short_sale_slot = reader.decode_int()
        order.designated_location = reader.decode_str()

        # One short-lived server version sent an exempt code that must be
        # ignored.

        if self.server_version == MIN_SERVER_VER_SSHORTX_OLD:
            reader.skip()
        elif self.version >= 23:
            order.exempt_code = reader.decode_int()


    def auction_strategy(self):
        self.order.auction_strategy = self.reader.decode_int()


    def box_order_params(self):
        reader = self.reader
        self.order.starting_price = reader.decode_float()
        self.order.stock_ref_price = reader.decode_float()
        self.order.delta = reader.decode_float()


    def peg_to_stk_or_vol_order_params(self):
        self.order.stock_range_lower = self.reader.decode_float()
        self.order.stock_range_upper = self.reader.decode_float()


    def display_size(self):
        self.order.display_size = self.reader.decode_int()


    def block_order(self):
        self.order.block_order = self.reader.decode_bool()


    def sweep_to_fill(self):
        self.order.sweep_to_fill = self.reader.decode_bool()


    def all_or_none(self):
        self.order.all_or_none = self.reader.decode_bool()


    def min_qty(self):
        self.order.min_qty = self.reader.decode_int()


    def oca_type(self):
        self.order.oca_type = self.reader.decode_int()


    def e_trade_only(self):
        self.order.e_trade_only = self.reader.decode_bool()


    def firm_quote_only(self):
        self.order.firm_quote_only = self.reader.decode_bool()


    def nbbo_price_cap(self):
        self.order.nbbo_price_cap = self.reader.decode_float()


    def parent_id(self):
        self.order.parent_id = self.reader.decode_int()


    def trigger_method(self):
        self.order.trigger_method = self.reader.decode_int()


    def vol_order_params(self, read_open_order_attribs):
        """ Volatility order parameters. Some of the delta-neutral fields
            are only present in open order messages, not completed orders.
        """

        reader = self.reader
        order = self.order

        order.volatility = reader.decode_float()
        order.volatility_type = reader.decode_int()
        order.delta_neutral_order_type = reader.decode_str()
        order.delta_neutral_aux_price = reader.decode_float()

        if self.version >= 27 and order.delta_neutral_order_type != '':
            order.delta_neutral_con_id = reader.decode_int()
            if read_open_order_attribs:
                order.delta_neutral_settling_firm = reader.decode_str()
                order.delta_neutral_clearing_account = reader.decode_str()
                order.delta_neutral_clearing_intent = reader.decode_str()

        if self.version >= 31 and order.delta_neutral_order_type != '':
            if read_open_order_attribs:
                order.delta_neutral_open_close = reader.decode_str()
            order.delta_neutral_short_sale = reader.decode_bool()
            order.delta_neutral_short_sale_slot = reader.decode_int()
            order.delta_neutral_designated_location = reader.decode_str()

        order.continuous_update = reader.decode_bool()
        order.reference_price_type = reader.decode_int()


    def trail_params(self):
        self.order.trail_stop_price = self.reader.decode_float()
        if self.version >= 30:
            self.order.trailing_percent = self.reader.decode_float()


    def basis_points(self):
        self.order.basis_points = self.reader.decode_float()
        self.order.basis_points_type = self.reader.decode_int()


    def combo_legs(self):

        reader = self.reader
        self.contract.combo_legs_descrip = reader.decode_str()

        if self.version < 29:
            return

        count = reader.decode_int()
        legs = list()
        for _ in range(count):
            leg = ComboLeg()
            leg.con_id = reader.decode_int()
            leg.ratio = reader.decode_int()
            leg.action = reader.decode_str()
            leg.exchange = reader.decode_str()
            leg.open_close = reader.decode_int()
            leg.short_sale_slot = reader.decode_int()
            leg.designated_location = reader.decode_str()
            leg.exempt_code = reader.decode_int()
            legs.append(leg)
        self.contract.combo_legs = legs

        count = reader.decode_int()
        legs = list()
        for _ in range(count):
            legs.append(OrderComboLeg(reader.decode_float()))
        self.order.order_combo_legs = legs


    def smart_combo_routing_params(self):
        if self.version >= 26:
            self.order.smart_combo_routing_params = self._tag_values()


    def _tag_values(self):
        reader = self.reader
        count = reader.decode_int()
        pairs = list()
        for _ in range(count):
            tag = reader.decode_str()
            value = reader.decode_str()
            pairs.append(TagValue(tag, value))
        return pairs


    def scale_order_params(self):

        reader = self.reader
        order = self.order

        if self.version >= 20:
            order.scale_init_level_size = reader.decode_int()
            order.scale_subs_level_size = reader.decode_int()
        else:
            # Number of components, no longer supported.
            reader.skip()
            order.scale_init_level_size = reader.decode_int()

        order.scale_price_increment = reader.decode_float()

        increment = order.scale_price_increment
        if self.version >= 28 and increment != UNSET_DOUBLE and increment > 0.0:
            order.scale_price_adjust_value = reader.decode_float()
            order.scale_price_adjust_interval = reader.decode_int()
            order.scale_profit_offset = reader.decode_float()
            order.scale_auto_reset = reader.decode_bool()
            order.scale_init_position = reader.decode_int()
            order.scale_init_fill_qty = reader.decode_int()
            order.scale_random_percent = reader.decode_bool()


    def hedge_params(self):
        if self.version >= 24:
            self.order.hedge_type = self.reader.decode_str()
            if self.order.hedge_type != '':
                self.order.hedge_param = self.reader.decode_str()


    def opt_out_smart_routing(self):
        if self.version >= 25:
            self.order.opt_out_smart_routing = self.reader.decode_bool()


    def clearing_params(self):
        self.order.clearing_account = self.reader.decode_str()
        self.order.clearing_intent = self.reader.decode_str()


    def not_held(self):
        if self.version >= 22:
            self.order.not_held = self.reader.decode_bool()


    def delta_neutral(self):

        if self.version < 20:
            return

        reader = self.reader
        present = reader.decode_bool()
        if present:
            delta_neutral = DeltaNeutralContract()
            delta_neutral.con_id = reader.decode_int()
            delta_neutral.delta = reader.decode_float()
            delta_neutral.price = reader.decode_float()
            self.contract.delta_neutral_contract = delta_neutral


    def algo_params(self):
        if self.version >= 21:
            self.order.algo_strategy = self.reader.decode_str()
            if self.order.algo_strategy != '':
                self.order.algo_params = self._tag_values()


    def solicited(self):
        if self.version >= 33:
            self.order.solicited = self.reader.decode_bool()


    def order_status(self):
        self.order_state.status = self.reader.decode_str()


    def what_if_info_and_commission(self):

        reader = self.reader
        state = self.order_state

        self.order.what_if = reader.decode_bool()
        self.order_status()

        if self.server_version >= MIN_SERVER_VER_WHAT_IF_EXT_FIELDS:
            state.init_margin_before = reader.decode_str()
            state.maint_margin_before = reader.decode_str()
            state.equity_with_loan_before = reader.decode_str()
            state.init_margin_change = reader.decode_str()
            state.maint_margin_change = reader.decode_str()
            state.equity_with_loan_change = reader.decode_str()

        state.init_margin_after = reader.decode_str()
        state.maint_margin_after = reader.decode_str()
        state.equity_with_loan_after = reader.decode_str()

        state.commission = reader.decode_float()
        state.min_commission = reader.decode_float()
        state.max_commission = reader.decode_float()
        state.commission_currency = reader.decode_str()
        state.warning_text = reader.decode_str()


    def vol_randomize_flags(self):
        if self.version >= 34:
            self.order.randomize_size = self.reader.decode_bool()
            self.order.randomize_price = self.reader.decode_bool()


    def peg_to_bench_params(self):

        if self.server_version < MIN_SERVER_VER_PEGGED_TO_BENCHMARK:
            return

        if self.order.order_type == 'PEG BENCH':
            reader = self.reader
            order = self.order
            order.reference_contract_id = reader.decode_int()
            order.is_pegged_change_amount_decrease = reader.decode_bool()
            order.pegged_change_amount = reader.decode_float()
            order.reference_change_amount = reader.decode_float()
            order.reference_exchange_id = reader.decode_str()


    def conditions(self):

        if self.server_version < MIN_SERVER_VER_PEGGED_TO_BENCHMARK:
            return

        reader = self.reader
        count = reader.decode_int()
        if count > 0:
            conditions = list()
            for _ in range(count):
                condition_type = reader.decode_int()
                instance = condition.create(condition_type)
                instance.decode(reader)
                conditions.append(instance)

            self.order.conditions = conditions
            self.order.conditions_ignore_rth = reader.decode_bool()
            self.order.conditions_cancel_order = reader.decode_bool()


    def adjusted_order_params(self):

        if self.server_version < MIN_SERVER_VER_PEGGED_TO_BENCHMARK:
            return

        reader = self.reader
        order = self.order

        order.adjusted_order_type = reader.decode_str()
        order.trigger_price = reader.decode_float()
        self.stop_price_and_lmt_price_offset()
        order.adjusted_stop_price = reader.decode_float()
        order.adjusted_stop_limit_price = reader.decode_float()
        order.adjusted_trailing_amount = reader.decode_float()
        order.adjustable_trailing_unit = reader.decode_int()


    def stop_price_and_lmt_price_offset(self):
        self.order.trail_stop_price = self.reader.decode_float()
        self.order.lmt_price_offset = self.reader.decode_float()


    def soft_dollar_tier(self):
        if self.server_version >= MIN_SERVER_VER_SOFT_DOLLAR_TIER:
            tier = self.order.soft_dollar_tier
            tier.name = self.reader.decode_str()
            tier.val = self.reader.decode_str()
            tier.display_name = self.reader.decode_str()


    def cash_qty(self):
        if self.server_version >= MIN_SERVER_VER_CASH_QTY:
            self.order.cash_qty = self.reader.decode_float()


    def dont_use_auto_price_for_hedge(self):
        if self.server_version >= MIN_SERVER_VER_AUTO_PRICE_FOR_HEDGE:
            self.order.dont_use_auto_price_for_hedge = self.reader.decode_bool()


    def is_oms_container(self):
        if self.server_version >= MIN_SERVER_VER_ORDER_CONTAINER:
            self.order.is_oms_container = self.reader.decode_bool()


    def discretionary_up_to_limit_price(self):
        if self.server_version >= MIN_SERVER_VER_D_PEG_ORDERS:
            self.order.discretionary_up_to_limit_price = self.reader.decode_bool()


    def use_price_mgmt_algo(self):
        if self.server_version >= MIN_SERVER_VER_PRICE_MGMT_ALGO:
            self.order.use_price_mgmt_algo = self.reader.decode_bool()


    def completed_order_fields(self):

        reader = self.reader
        order = self.order
        state = self.order_state

        order.auto_cancel_date = reader.decode_str()
        order.filled_quantity = reader.decode_float()
        order.ref_futures_con_id = reader.decode_int()
        order.auto_cancel_parent = reader.decode_bool()
        order.shareholder = reader.decode_str()
        order.imbalance_only = reader.decode_bool()
        order.route_marketable_to_bbo = reader.decode_bool()
        order.parent_perm_id = reader.decode_long()
        state.completed_time = reader.decode_str()
        state.completed_status = reader.decode_str()


# end of class OrderDecoder


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
