""" The request side of the protocol. :class:`Client` extends
    :class:`ibwire.connection.Connection` with one method per outgoing
    request; each method checks the connection, verifies that the negotiated
    server version supports every feature the request uses, assembles the
    fields with a :class:`ibwire.protocol.builder.MessageBuilder`, and sends
    the framed result.

    Problems are never raised to the caller. They are reported through the
    error callback on the wrapper, and nothing is sent:

        504  not connected
        503  the server is too old for a requested feature
        506  an option reserved for internal use was supplied
        509  the socket failed while sending
"""

from __future__ import annotations

import functools
import inspect
import logging

from . import errors
from . import server_versions as sv
from .common import TickByTickType
from .connection import Connection
from .protocol.builder import MessageBuilder
from .protocol.fields import NO_VALID_ID, UNSET_DOUBLE, UNSET_INTEGER
from .protocol.ids import OutgoingMessage as Out

logger = logging.getLogger(__name__)


def request(method=None, *, with_id=True):
    """ Decorator for request methods. The decorated method returns the
        :class:`MessageBuilder` to send, or raises
        :class:`ibwire.errors.RequestError` to refuse the request. If
        *with_id* is True the first argument after self, given by position
        or by keyword, is the request id used when reporting problems;
        otherwise NO_VALID_ID is used.
    """

    if method is None:
        return functools.partial(request, with_id=with_id)

    id_name = None
    if with_id:
        id_name = list(inspect.signature(method).parameters)[1]

    @functools.wraps(method)
    def wrapped(self, *args, **kwargs):

        if id_name is None:
            req_id = NO_VALID_ID
        elif args:
            req_id = args[0]
        else:
            req_id = kwargs.get(id_name, NO_VALID_ID)

        if not self.check_connected(req_id):
            return

        try:
            builder = method(self, *args, **kwargs)
        except errors.RequestError as e:
            logger.debug('%s refused: %s', method.__name__, e)
            self.wrapper.error(e.req_id, e.code, e.message)
            return

        try:
            self.send_msg(builder.build())
        except OSError as e:
            logger.error('%s failed to send: %s', method.__name__, e)
            self.report(req_id, errors.SOCKET_EXCEPTION, str(e))

    return wrapped



class Client(Connection):
    """ Connection plus the complete set of outgoing requests. Typical use:

            client = ibwire.Client(MyWrapper())
            client.connect('127.0.0.1', 7497, client_id=0)
            client.req_current_time()

        Responses arrive on the wrapper, invoked from the decoder thread.
    """

    def require(self, minimum: int, req_id: int, detail: str, when: bool = True) -> None:
        """ Raise :class:`ibwire.errors.ProtocolVersionError` if *when* holds
            and the negotiated server version is older than *minimum*.
        """

        if when and self._server_version < minimum:
            raise errors.ProtocolVersionError(req_id, detail)


    def supports(self, minimum: int) -> bool:
        return self._server_version >= minimum


    def _internal_options(self, req_id, options, name):
        """ Option lists reserved for internal use are refused outright; an
            empty list is sent as an empty field.
        """

        if options:
            raise errors.RequestError(errors.UNSUPPORTED, req_id, ' ' + name + '.')

        return ''


    def _combo_legs(self, builder, contract):
        """ The short form of the combo legs, used by market data and
            historical data requests for BAG contracts.
        """

        if contract.sec_type != 'BAG':
            return

        legs = contract.combo_legs or ()
        builder.add(len(legs))
        for leg in legs:
            builder.add(leg.con_id, leg.ratio, leg.action, leg.exchange)


    # Market data.

    @request
    def req_mkt_data(self, req_id: int, contract, generic_tick_list: str = '',
                     snapshot: bool = False, regulatory_snapshot: bool = False,
                     mkt_data_options=None):
        """ Subscribe to streaming market data, or request a one-time
            snapshot. Ticks arrive on tick_price, tick_size, tick_string,
            tick_generic and friends.
        """

        self.require(sv.MIN_SERVER_VER_DELTA_NEUTRAL, req_id,
                     ' It does not support delta-neutral orders.',
                     when=contract.delta_neutral_contract is not None)
        self.require(sv.MIN_SERVER_VER_REQ_MKT_DATA_CONID, req_id,
                     ' It does not support conId parameter.',
                     when=contract.con_id > 0)
        self.require(sv.MIN_SERVER_VER_TRADING_CLASS, req_id,
                     ' It does not support tradingClass parameter in reqMktData.',
                     when=bool(contract.trading_class))

        builder = MessageBuilder(Out.REQ_MKT_DATA)
        builder.add(11, req_id)
        builder.contract(contract,
                         con_id=self.supports(sv.MIN_SERVER_VER_REQ_MKT_DATA_CONID),
                         trading_class=self.supports(sv.MIN_SERVER_VER_TRADING_CLASS))

        self._combo_legs(builder, contract)

        if self.supports(sv.MIN_SERVER_VER_DELTA_NEUTRAL):
            neutral = contract.delta_neutral_contract
            if neutral is None:
                builder.add(False)
            else:
                builder.add(True, neutral.con_id, neutral.delta, neutral.price)

        builder.add(generic_tick_list, snapshot)
        builder.add(regulatory_snapshot, when=self.supports(sv.MIN_SERVER_VER_REQ_SMART_COMPONENTS))

        if self.supports(sv.MIN_SERVER_VER_LINKING):
            builder.add(self._internal_options(req_id, mkt_data_options, 'mkt_data_options'))

        return builder


    @request
    def cancel_mkt_data(self, req_id: int):
        return MessageBuilder(Out.CANCEL_MKT_DATA).add(2, req_id)


    @request(with_id=False)
    def req_market_data_type(self, market_data_type: int):
        """ Switch subsequent market data between real-time, frozen, delayed
            and delayed-frozen; see :class:`ibwire.common.MarketDataType`.
        """

        self.require(sv.MIN_SERVER_VER_REQ_MARKET_DATA_TYPE, NO_VALID_ID,
                     ' It does not support market data type requests.')

        return MessageBuilder(Out.REQ_MARKET_DATA_TYPE).add(1, int(market_data_type))


    @request
    def req_smart_components(self, req_id: int, bbo_exchange: str):
        self.require(sv.MIN_SERVER_VER_REQ_SMART_COMPONENTS, req_id,
                     ' It does not support smart components request.')

        return MessageBuilder(Out.REQ_SMART_COMPONENTS).add(req_id, bbo_exchange)


    @request(with_id=False)
    def req_market_rule(self, market_rule_id: int):
        self.require(sv.MIN_SERVER_VER_MARKET_RULES, NO_VALID_ID,
                     ' It does not support market rule requests.')

        return MessageBuilder(Out.REQ_MARKET_RULE).add(market_rule_id)


    @request
    def req_tick_by_tick_data(self, req_id: int, contract, tick_type,
                              number_of_ticks: int = 0, ignore_size: bool = False):
        """ Subscribe to tick-by-tick data. *tick_type* is one of 'Last',
            'AllLast', 'BidAsk' or 'MidPoint', or a
            :class:`ibwire.common.TickByTickType`.
        """

        self.require(sv.MIN_SERVER_VER_TICK_BY_TICK, req_id,
                     ' It does not support tick-by-tick data requests.')
        self.require(sv.MIN_SERVER_VER_TICK_BY_TICK_IGNORE_SIZE, req_id,
                     ' It does not support ignoreSize and numberOfTicks parameters '
                     'in tick-by-tick data requests.',
                     when=ignore_size or number_of_ticks != 0)

        if isinstance(tick_type, TickByTickType):
            tick_type = tick_type.value

        builder = MessageBuilder(Out.REQ_TICK_BY_TICK_DATA)
        builder.add(req_id)
        builder.contract(contract, trading_class=True)
        builder.add(tick_type)
        builder.add(number_of_ticks, ignore_size,
                    when=self.supports(sv.MIN_SERVER_VER_TICK_BY_TICK_IGNORE_SIZE))

        return builder


    @request
    def cancel_tick_by_tick_data(self, req_id: int):
        self.require(sv.MIN_SERVER_VER_TICK_BY_TICK, req_id,
                     ' It does not support tick-by-tick data requests.')

        return MessageBuilder(Out.CANCEL_TICK_BY_TICK_DATA).add(req_id)


    # Options.

    def _option_calculation(self, msg_id, req_id, contract, first, second, options):

        builder = MessageBuilder(msg_id)
        builder.add(3, req_id)
        builder.contract(contract, trading_class=self.supports(sv.MIN_SERVER_VER_TRADING_CLASS))
        builder.add(first, second)

        if self.supports(sv.MIN_SERVER_VER_LINKING):
            options = options or ()
            builder.add(len(options))
            builder.tag_values(options)

        return builder


    @request
    def calculate_implied_volatility(self, req_id: int, contract, option_price: float,
                                     under_price: float, options=None):
        self.require(sv.MIN_SERVER_VER_REQ_CALC_IMPLIED_VOLAT, req_id,
                     ' It does not support calculateImpliedVolatility req.')
        self.require(sv.MIN_SERVER_VER_TRADING_CLASS, req_id,
                     ' It does not support tradingClass parameter in calculateImpliedVolatility.',
                     when=bool(contract.trading_class))

        return self._option_calculation(Out.REQ_CALC_IMPLIED_VOLAT, req_id, contract,
                                        option_price, under_price, options)


    @request
    def calculate_option_price(self, req_id: int, contract, volatility: float,
                               under_price: float, options=None):
        self.require(sv.MIN_SERVER_VER_REQ_CALC_OPTION_PRICE, req_id,
                     ' It does not support calculateOptionPrice req.')
        self.require(sv.MIN_SERVER_VER_TRADING_CLASS, req_id,
                     ' It does not support tradingClass parameter in calculateOptionPrice.',
                     when=bool(contract.trading_class))

        return self._option_calculation(Out.REQ_CALC_OPTION_PRICE, req_id, contract,
                                        volatility, under_price, options)


    @request
    def cancel_calculate_implied_volatility(self, req_id: int):
        self.require(sv.MIN_SERVER_VER_REQ_CALC_IMPLIED_VOLAT, req_id,
                     ' It does not support calculateImpliedVolatility req.')

        return MessageBuilder(Out.CANCEL_CALC_IMPLIED_VOLAT).add(1, req_id)


    @request
    def cancel_calculate_option_price(self, req_id: int):
        self.require(sv.MIN_SERVER_VER_REQ_CALC_OPTION_PRICE, req_id,
                     ' It does not support calculateOptionPrice req.')

        return MessageBuilder(Out.CANCEL_CALC_OPTION_PRICE).add(1, req_id)


    @request
    def exercise_options(self, req_id: int, contract, exercise_action: int,
                         exercise_quantity: int, account: str, override: int):
        """ Exercise (action 1) or lapse (action 2) an option position.
        """

        trading_class = self.supports(sv.MIN_SERVER_VER_TRADING_CLASS)

        self.require(sv.MIN_SERVER_VER_TRADING_CLASS, req_id,
                     ' It does not support conId, multiplier, tradingClass parameter '
                     'in exerciseOptions.',
                     when=bool(contract.trading_class) or contract.con_id > 0)

        builder = MessageBuilder(Out.EXERCISE_OPTIONS)
        builder.add(2, req_id)
        builder.contract(contract, con_id=trading_class, primary_exchange=False,
                         trading_class=trading_class)
        builder.add(exercise_action, exercise_quantity, account, override)

        return builder


    # Orders.

    @request
    def place_order(self, order_id: int, contract, order):
        """ Place a new order, or modify an open order by reusing its id.
            Every order attribute newer than the negotiated server version
            must be left at its default, otherwise the order is refused with
            a 503 error naming the attribute.
        """

        self._check_order(order_id, contract, order)

        version = self._server_version

        builder = MessageBuilder(Out.PLACE_ORDER)
        builder.add(27 if version < sv.MIN_SERVER_VER_NOT_HELD else 45,
                    when=version < sv.MIN_SERVER_VER_ORDER_CONTAINER)
        builder.add(order_id)

        # Contract.

        builder.contract(contract,
                         con_id=version >= sv.MIN_SERVER_VER_PLACE_ORDER_CONID,
                         trading_class=version >= sv.MIN_SERVER_VER_TRADING_CLASS)
        builder.add(contract.sec_id_type, contract.sec_id,
                    when=version >= sv.MIN_SERVER_VER_SEC_ID_TYPE)

        # Main order fields.

        builder.add(order.action)

        if version >= sv.MIN_SERVER_VER_FRACTIONAL_POSITIONS:
            builder.add(float(order.total_quantity))
        else:
            builder.add(int(order.total_quantity))

        builder.add(order.order_type)

        if version < sv.MIN_SERVER_VER_ORDER_COMBO_LEGS_PRICE:
            builder.add(0 if order.lmt_price == UNSET_DOUBLE else order.lmt_price)
        else:
            builder.add(order.lmt_price)

        if version < sv.MIN_SERVER_VER_TRAILING_PERCENT:
            builder.add(0 if order.aux_price == UNSET_DOUBLE else order.aux_price)
        else:
            builder.add(order.aux_price)

        # Extended order fields.

        builder.add(order.tif,
                    order.oca_group,
                    order.account,
                    order.open_close,
                    int(order.origin),
                    order.order_ref,
                    order.transmit,
                    order.parent_id,
                    order.block_order,
                    order.sweep_to_fill,
                    order.display_size,
                    order.trigger_method,
                    order.outside_rth,
                    order.hidden)

        self._order_combo(builder, contract, order)

        # Deprecated shares allocation field, always empty.
        builder.add('')

        builder.add(order.discretionary_amt,
                    order.good_after_time,
                    order.good_till_date,
                    order.fa_group,
                    order.fa_method,
                    order.fa_percentage,
                    order.fa_profile)
        builder.add(order.model_code, when=version >= sv.MIN_SERVER_VER_MODELS_SUPPORT)

        # Institutional short sale slot: 0 for retail, 1 or 2 for
        # institutions; the designated location only applies to slot 2.

        builder.add(order.short_sale_slot, order.designated_location)
        builder.add(order.exempt_code, when=version >= sv.MIN_SERVER_VER_SSHORTX_OLD)

        builder.add(order.oca_type,
                    order.rule80a,
                    order.settling_firm,
                    order.all_or_none,
                    order.min_qty,
                    order.percent_offset,
                    order.e_trade_only,
                    order.firm_quote_only,
                    order.nbbo_price_cap,
                    int(order.auction_strategy),
                    order.starting_price,
                    order.stock_ref_price,
                    order.delta,
                    order.stock_range_lower,
                    order.stock_range_upper,
                    order.override_percentage_constraints)

        self._order_volatility(builder, order)
        self._order_scale(builder, order)

        if version >= sv.MIN_SERVER_VER_HEDGE_ORDERS:
            builder.add(order.hedge_type)
            builder.add(order.hedge_param, when=bool(order.hedge_type))

        builder.add(order.opt_out_smart_routing,
                    when=version >= sv.MIN_SERVER_VER_OPT_OUT_SMART_ROUTING)
        builder.add(order.clearing_account, order.clearing_intent,
                    when=version >= sv.MIN_SERVER_VER_PTA_ORDERS)
        builder.add(order.not_held, when=version >= sv.MIN_SERVER_VER_NOT_HELD)

        if version >= sv.MIN_SERVER_VER_DELTA_NEUTRAL:
            neutral = contract.delta_neutral_contract
            if neutral is None:
                builder.add(False)
            else:
                builder.add(True, neutral.con_id, neutral.delta, neutral.price)

        if version >= sv.MIN_SERVER_VER_ALGO_ORDERS:
            builder.add(order.algo_strategy)
            if order.algo_strategy:
                params = order.algo_params or ()
                builder.add(len(params))
                for param in params:
                    builder.add(param.tag, param.value)

        builder.add(order.algo_id, when=version >= sv.MIN_SERVER_VER_ALGO_ID)
        builder.add(order.what_if)
        builder.tag_values(order.order_misc_options, when=version >= sv.MIN_SERVER_VER_LINKING)
        builder.add(order.solicited, when=version >= sv.MIN_SERVER_VER_ORDER_SOLICITED)
        builder.add(order.randomize_size, order.randomize_price,
                    when=version >= sv.MIN_SERVER_VER_RANDOMIZE_SIZE_AND_PRICE)

        if version >= sv.MIN_SERVER_VER_PEGGED_TO_BENCHMARK:
            self._order_pegged(builder, order)

        builder.add(order.ext_operator, when=version >= sv.MIN_SERVER_VER_EXT_OPERATOR)
        builder.add(order.soft_dollar_tier.name, order.soft_dollar_tier.val,
                    when=version >= sv.MIN_SERVER_VER_SOFT_DOLLAR_TIER)
        builder.add(order.cash_qty, when=version >= sv.MIN_SERVER_VER_CASH_QTY)
        builder.add(order.mifid2_decision_maker, order.mifid2_decision_algo,
                    when=version >= sv.MIN_SERVER_VER_DECISION_MAKER)
        builder.add(order.mifid2_execution_trader, order.mifid2_execution_algo,
                    when=version >= sv.MIN_SERVER_VER_MIFID_EXECUTION)
        builder.add(order.dont_use_auto_price_for_hedge,
                    when=version >= sv.MIN_SERVER_VER_AUTO_PRICE_FOR_HEDGE)
        builder.add(order.is_oms_container, when=version >= sv.MIN_SERVER_VER_ORDER_CONTAINER)
        builder.add(order.discretionary_up_to_limit_price,
                    when=version >= sv.MIN_SERVER_VER_D_PEG_ORDERS)
        builder.add(order.use_price_mgmt_algo, when=version >= sv.MIN_SERVER_VER_PRICE_MGMT_ALGO)
        builder.add(order.duration, when=version >= sv.MIN_SERVER_VER_DURATION)
        builder.add(order.post_to_ats, when=version >= sv.MIN_SERVER_VER_POST_TO_ATS)

        return builder


    def _check_order(self, order_id, contract, order):
        """ Refuse any order attribute the negotiated server cannot accept.
        """

        def check(minimum, when, detail):
            self.require(minimum, order_id, detail, when=when)

        check(sv.MIN_SERVER_VER_DELTA_NEUTRAL,
              contract.delta_neutral_contract is not None,
              ' It does not support delta-neutral orders.')
        check(sv.MIN_SERVER_VER_SCALE_ORDERS2,
              order.scale_subs_level_size != UNSET_INTEGER,
              ' It does not support Subsequent Level Size for Scale orders.')
        check(sv.MIN_SERVER_VER_ALGO_ORDERS,
              bool(order.algo_strategy),
              ' It does not support algo orders.')
        check(sv.MIN_SERVER_VER_NOT_HELD,
              order.not_held,
              ' It does not support notHeld parameter.')
        check(sv.MIN_SERVER_VER_SEC_ID_TYPE,
              bool(contract.sec_id_type or contract.sec_id),
              ' It does not support secIdType and secId parameters.')
        check(sv.MIN_SERVER_VER_PLACE_ORDER_CONID,
              contract.con_id > 0,
              ' It does not support conId parameter.')

        legs = contract.combo_legs or ()
        exempt = order.exempt_code != -1 or any(leg.exempt_code != -1 for leg in legs)
        check(sv.MIN_SERVER_VER_SSHORTX, exempt,
              ' It does not support exemptCode parameter.')

        check(sv.MIN_SERVER_VER_HEDGE_ORDERS,
              bool(order.hedge_type),
              ' It does not support hedge orders.')
        check(sv.MIN_SERVER_VER_OPT_OUT_SMART_ROUTING,
              order.opt_out_smart_routing,
              ' It does not support optOutSmartRouting parameter.')

        neutral_clearing = (order.delta_neutral_con_id > 0
                            or order.delta_neutral_settling_firm
                            or order.delta_neutral_clearing_account
                            or order.delta_neutral_clearing_intent)
        check(sv.MIN_SERVER_VER_DELTA_NEUTRAL_CONID, bool(neutral_clearing),
              ' It does not support deltaNeutral parameters: ConId, SettlingFirm, '
              'ClearingAccount, ClearingIntent.')

        neutral_open_close = (order.delta_neutral_open_close
                              or order.delta_neutral_short_sale
                              or order.delta_neutral_short_sale_slot > 0
                              or order.delta_neutral_designated_location)
        check(sv.MIN_SERVER_VER_DELTA_NEUTRAL_OPEN_CLOSE, bool(neutral_open_close),
              ' It does not support deltaNeutral parameters: OpenClose, ShortSale, '
              'ShortSaleSlot, DesignatedLocation.')

        scale3 = (self._scale_increment(order)
                  and (order.scale_price_adjust_value != UNSET_DOUBLE
                       or order.scale_price_adjust_interval != UNSET_INTEGER
                       or order.scale_profit_offset != UNSET_DOUBLE
                       or order.scale_auto_reset
                       or order.scale_init_position != UNSET_INTEGER
                       or order.scale_init_fill_qty != UNSET_INTEGER
                       or order.scale_random_percent))
        check(sv.MIN_SERVER_VER_SCALE_ORDERS3, scale3,
              ' It does not support Scale order parameters: PriceAdjustValue, '
              'PriceAdjustInterval, ProfitOffset, AutoReset, InitPosition, '
              'InitFillQty and RandomPercent')

        leg_prices = (contract.sec_type == 'BAG'
                      and any(leg.price != UNSET_DOUBLE for leg in order.order_combo_legs or ()))
        check(sv.MIN_SERVER_VER_ORDER_COMBO_LEGS_PRICE, leg_prices,
              ' It does not support per-leg prices for order combo legs.')

        check(sv.MIN_SERVER_VER_TRAILING_PERCENT,
              order.trailing_percent != UNSET_DOUBLE,
              ' It does not support trailing percent parameter.')
        check(sv.MIN_SERVER_VER_TRADING_CLASS,
              bool(contract.trading_class),
              ' It does not support tradingClass parameter in placeOrder.')
        check(sv.MIN_SERVER_VER_SCALE_TABLE,
              bool(order.scale_table or order.active_start_time or order.active_stop_time),
              ' It does not support scaleTable, activeStartTime and activeStopTime parameters.')
        check(sv.MIN_SERVER_VER_ALGO_ID,
              bool(order.algo_id),
              ' It does not support algoId parameter.')
        check(sv.MIN_SERVER_VER_ORDER_SOLICITED,
              order.solicited,
              ' It does not support order solicited parameter.')
        check(sv.MIN_SERVER_VER_MODELS_SUPPORT,
              bool(order.model_code),
              ' It does not support model code parameter.')
        check(sv.MIN_SERVER_VER_EXT_OPERATOR,
              bool(order.ext_operator),
              ' It does not support ext operator parameter.')
        check(sv.MIN_SERVER_VER_SOFT_DOLLAR_TIER,
              bool(order.soft_dollar_tier.name or order.soft_dollar_tier.val),
              ' It does not support soft dollar tier.')
        check(sv.MIN_SERVER_VER_CASH_QTY,
              order.cash_qty != UNSET_DOUBLE,
              ' It does not support cash quantity parameter.')
        check(sv.MIN_SERVER_VER_DECISION_MAKER,
              bool(order.mifid2_decision_maker or order.mifid2_decision_algo),
              ' It does not support MIFID II decision maker parameters.')
        check(sv.MIN_SERVER_VER_MIFID_EXECUTION,
              bool(order.mifid2_execution_trader or order.mifid2_execution_algo),
              ' It does not support MIFID II execution parameters.')
        check(sv.MIN_SERVER_VER_AUTO_PRICE_FOR_HEDGE,
              order.dont_use_auto_price_for_hedge,
              ' It does not support dontUseAutoPriceForHedge parameter.')
        check(sv.MIN_SERVER_VER_ORDER_CONTAINER,
              order.is_oms_container,
              ' It does not support oms container parameter.')
        check(sv.MIN_SERVER_VER_PRICE_MGMT_ALGO,
              order.use_price_mgmt_algo is not None,
              ' It does not support Use price management algo requests.')
        check(sv.MIN_SERVER_VER_DURATION,
              order.duration != UNSET_INTEGER,
              ' It does not support duration attribute.')
        check(sv.MIN_SERVER_VER_POST_TO_ATS,
              order.post_to_ats != UNSET_INTEGER,
              ' It does not support postToAts attribute.')


    @staticmethod
    def _scale_increment(order):
        increment = order.scale_price_increment
        return increment != UNSET_DOUBLE and increment > 0


    def _order_combo(self, builder, contract, order):

        if contract.sec_type != 'BAG':
            return

        version = self._server_version

        legs = contract.combo_legs or ()
        builder.add(len(legs))
        for leg in legs:
            builder.add(leg.con_id,
                        leg.ratio,
                        leg.action,
                        leg.exchange,
                        int(leg.open_close),
                        leg.short_sale_slot,
                        leg.designated_location)
            builder.add(leg.exempt_code, when=version >= sv.MIN_SERVER_VER_SSHORTX_OLD)

        if version >= sv.MIN_SERVER_VER_ORDER_COMBO_LEGS_PRICE:
            order_legs = order.order_combo_legs or ()
            builder.add(len(order_legs))
            for order_leg in order_legs:
                builder.add(order_leg.price)

        if version >= sv.MIN_SERVER_VER_SMART_COMBO_ROUTING_PARAMS:
            params = order.smart_combo_routing_params or ()
            builder.add(len(params))
            for param in params:
                builder.add(param.tag, param.value)


    def _order_volatility(self, builder, order):

        version = self._server_version
        neutral = bool(order.delta_neutral_order_type)

        builder.add(order.volatility,
                    order.volatility_type,
                    order.delta_neutral_order_type,
                    order.delta_neutral_aux_price)

        builder.add(order.delta_neutral_con_id,
                    order.delta_neutral_settling_firm,
                    order.delta_neutral_clearing_account,
                    order.delta_neutral_clearing_intent,
                    when=neutral and version >= sv.MIN_SERVER_VER_DELTA_NEUTRAL_CONID)

        builder.add(order.delta_neutral_open_close,
                    order.delta_neutral_short_sale,
                    order.delta_neutral_short_sale_slot,
                    order.delta_neutral_designated_location,
                    when=neutral and version >= sv.MIN_SERVER_VER_DELTA_NEUTRAL_OPEN_CLOSE)

        builder.add(order.continuous_update,
                    order.reference_price_type,
                    order.trail_stop_price)
        builder.add(order.trailing_percent, when=version >= sv.MIN_SERVER_VER_TRAILING_PERCENT)


    def _order_scale(self, builder, order):

        version = self._server_version

        if version >= sv.MIN_SERVER_VER_SCALE_ORDERS2:
            builder.add(order.scale_init_level_size, order.scale_subs_level_size)
        else:
            # Scale component count, no longer supported.
            builder.add('', order.scale_init_level_size)

        builder.add(order.scale_price_increment)

        builder.add(order.scale_price_adjust_value,
                    order.scale_price_adjust_interval,
                    order.scale_profit_offset,
                    order.scale_auto_reset,
                    order.scale_init_position,
                    order.scale_init_fill_qty,
                    order.scale_random_percent,
                    when=version >= sv.MIN_SERVER_VER_SCALE_ORDERS3 and self._scale_increment(order))

        builder.add(order.scale_table, order.active_start_time, order.active_stop_time,
                    when=version >= sv.MIN_SERVER_VER_SCALE_TABLE)


    def _order_pegged(self, builder, order):

        if order.order_type == 'PEG BENCH':
            builder.add(order.reference_contract_id,
                        order.is_pegged_change_amount_decrease,
                        order.pegged_change_amount,
                        order.reference_change_amount,
                        order.reference_exchange_id)

        conditions = order.conditions or ()
        builder.add(len(conditions))

        if conditions:
            for condition in conditions:
                builder.add(condition.type)
                builder.extend(condition.fields())
            builder.add(order.conditions_ignore_rth, order.conditions_cancel_order)

        builder.add(order.adjusted_order_type,
                    order.trigger_price,
                    order.lmt_price_offset,
                    order.adjusted_stop_price,
                    order.adjusted_stop_limit_price,
                    order.adjusted_trailing_amount,
                    order.adjustable_trailing_unit)


    @request
    def cancel_order(self, order_id: int):
        return MessageBuilder(Out.CANCEL_ORDER).add(1, order_id)


    @request(with_id=False)
    def req_open_orders(self):
        """ Request the open orders placed by this client; results arrive
            on open_order and order_status, followed by open_order_end.
        """

        return MessageBuilder(Out.REQ_OPEN_ORDERS).add(1)


    @request(with_id=False)
    def req_auto_open_orders(self, auto_bind: bool):
        """ Only valid for client id 0: bind orders placed from the trading
            platform to this client.
        """

        return MessageBuilder(Out.REQ_AUTO_OPEN_ORDERS).add(1, auto_bind)


    @request(with_id=False)
    def req_all_open_orders(self):
        return MessageBuilder(Out.REQ_ALL_OPEN_ORDERS).add(1)


    @request(with_id=False)
    def req_global_cancel(self):
        self.require(sv.MIN_SERVER_VER_REQ_GLOBAL_CANCEL, NO_VALID_ID,
                     ' It does not support globalCancel requests.')

        return MessageBuilder(Out.REQ_GLOBAL_CANCEL).add(1)


    @request(with_id=False)
    def req_ids(self, num_ids: int = 1):
        """ Request the next valid order id; it arrives on next_valid_id.
        """

        return MessageBuilder(Out.REQ_IDS).add(1, num_ids)


    @request(with_id=False)
    def req_completed_orders(self, api_only: bool):
        self.require(sv.MIN_SERVER_VER_COMPLETED_ORDERS, NO_VALID_ID,
                     ' It does not support completed orders requests.')

        return MessageBuilder(Out.REQ_COMPLETED_ORDERS).add(api_only)


    # Account and portfolio.

    @request(with_id=False)
    def req_account_updates(self, subscribe: bool, acct_code: str):
        return MessageBuilder(Out.REQ_ACCT_DATA).add(2, subscribe, acct_code)


    @request
    def req_account_summary(self, req_id: int, group_name: str, tags: str):
        """ Subscribe to the account summary for *group_name* ('All' for
            every account). *tags* is a comma separated list; see
            :mod:`ibwire.account_summary_tags`.
        """

        self.require(sv.MIN_SERVER_VER_ACCOUNT_SUMMARY, req_id,
                     ' It does not support account summary requests.')

        return MessageBuilder(Out.REQ_ACCOUNT_SUMMARY).add(1, req_id, group_name, tags)


    @request
    def cancel_account_summary(self, req_id: int):
        self.require(sv.MIN_SERVER_VER_ACCOUNT_SUMMARY, req_id,
                     ' It does not support account summary cancellation.')

        return MessageBuilder(Out.CANCEL_ACCOUNT_SUMMARY).add(1, req_id)


    @request(with_id=False)
    def req_positions(self):
        self.require(sv.MIN_SERVER_VER_POSITIONS, NO_VALID_ID,
                     ' It does not support positions request.')

        return MessageBuilder(Out.REQ_POSITIONS).add(1)


    @request(with_id=False)
    def cancel_positions(self):
        self.require(sv.MIN_SERVER_VER_POSITIONS, NO_VALID_ID,
                     ' It does not support positions cancellation.')

        return MessageBuilder(Out.CANCEL_POSITIONS).add(1)


    @request
    def req_positions_multi(self, req_id: int, account: str, model_code: str):
        self.require(sv.MIN_SERVER_VER_MODELS_SUPPORT, req_id,
                     ' It does not support positions multi request.')

        return MessageBuilder(Out.REQ_POSITIONS_MULTI).add(1, req_id, account, model_code)


    @request
    def cancel_positions_multi(self, req_id: int):
        self.require(sv.MIN_SERVER_VER_MODELS_SUPPORT, req_id,
                     ' It does not support positions multi cancellation.')

        return MessageBuilder(Out.CANCEL_POSITIONS_MULTI).add(1, req_id)


    @request
    def req_account_updates_multi(self, req_id: int, account: str, model_code: str,
                                  ledger_and_nlv: bool):
        self.require(sv.MIN_SERVER_VER_MODELS_SUPPORT, req_id,
                     ' It does not support account updates multi request.')

        builder = MessageBuilder(Out.REQ_ACCOUNT_UPDATES_MULTI)
        builder.add(1, req_id, account, model_code, ledger_and_nlv)
        return builder


    @request
    def cancel_account_updates_multi(self, req_id: int):
        self.require(sv.MIN_SERVER_VER_MODELS_SUPPORT, req_id,
                     ' It does not support account updates multi cancellation.')

        return MessageBuilder(Out.CANCEL_ACCOUNT_UPDATES_MULTI).add(1, req_id)


    @request
    def req_pnl(self, req_id: int, account: str, model_code: str):
        self.require(sv.MIN_SERVER_VER_PNL, req_id, ' It does not support PnL request.')

        return MessageBuilder(Out.REQ_PNL).add(req_id, account, model_code)


    @request
    def cancel_pnl(self, req_id: int):
        self.require(sv.MIN_SERVER_VER_PNL, req_id, ' It does not support PnL request.')

        return MessageBuilder(Out.CANCEL_PNL).add(req_id)


    @request
    def req_pnl_single(self, req_id: int, account: str, model_code: str, con_id: int):
        self.require(sv.MIN_SERVER_VER_PNL, req_id, ' It does not support PnL request.')

        return MessageBuilder(Out.REQ_PNL_SINGLE).add(req_id, account, model_code, con_id)


    @request
    def cancel_pnl_single(self, req_id: int):
        self.require(sv.MIN_SERVER_VER_PNL, req_id, ' It does not support PnL request.')

        return MessageBuilder(Out.CANCEL_PNL_SINGLE).add(req_id)


    # Executions.

    @request
    def req_executions(self, req_id: int, exec_filter):
        """ Request the fills matching *exec_filter*, an
            :class:`ibwire.execution.ExecutionFilter`.
        """

        builder = MessageBuilder(Out.REQ_EXECUTIONS)
        builder.add(3)
        builder.add(req_id, when=self.supports(sv.MIN_SERVER_VER_EXECUTION_DATA_CHAIN))
        builder.add(exec_filter.client_id,
                    exec_filter.acct_code,
                    exec_filter.time,
                    exec_filter.symbol,
                    exec_filter.sec_type,
                    exec_filter.exchange,
                    exec_filter.side)

        return builder


    # Contract details.

    @request
    def req_contract_details(self, req_id: int, contract):

        self.require(sv.MIN_SERVER_VER_SEC_ID_TYPE, req_id,
                     ' It does not support secIdType and secId parameters.',
                     when=bool(contract.sec_id_type or contract.sec_id))
        self.require(sv.MIN_SERVER_VER_TRADING_CLASS, req_id,
                     ' It does not support tradingClass parameter in reqContractDetails.',
                     when=bool(contract.trading_class))
        self.require(sv.MIN_SERVER_VER_LINKING, req_id,
                     ' It does not support primaryExchange parameter in reqContractDetails.',
                     when=bool(contract.primary_exchange))

        builder = MessageBuilder(Out.REQ_CONTRACT_DATA)
        builder.add(8)
        builder.add(req_id, when=self.supports(sv.MIN_SERVER_VER_CONTRACT_DATA_CHAIN))
        builder.add(contract.con_id,
                    contract.symbol,
                    contract.sec_type,
                    contract.last_trade_date_or_contract_month,
                    contract.strike,
                    contract.right,
                    contract.multiplier)

        if self.supports(sv.MIN_SERVER_VER_PRIMARYEXCH):
            builder.add(contract.exchange, contract.primary_exchange)
        elif self.supports(sv.MIN_SERVER_VER_LINKING) and contract.primary_exchange \
                and contract.exchange in ('BEST', 'SMART'):
            builder.add(contract.exchange + ':' + contract.primary_exchange)
        else:
            builder.add(contract.exchange)

        builder.add(contract.currency, contract.local_symbol)
        builder.add(contract.trading_class, when=self.supports(sv.MIN_SERVER_VER_TRADING_CLASS))
        builder.add(contract.include_expired)
        builder.add(contract.sec_id_type, contract.sec_id,
                    when=self.supports(sv.MIN_SERVER_VER_SEC_ID_TYPE))

        return builder


    @request
    def req_matching_symbols(self, req_id: int, pattern: str):
        self.require(sv.MIN_SERVER_VER_REQ_MATCHING_SYMBOLS, req_id,
                     ' It does not support matching symbols request.')

        return MessageBuilder(Out.REQ_MATCHING_SYMBOLS).add(req_id, pattern)


    @request
    def req_sec_def_opt_params(self, req_id: int, underlying_symbol: str,
                               fut_fop_exchange: str, underlying_sec_type: str,
                               underlying_con_id: int):
        self.require(sv.MIN_SERVER_VER_SEC_DEF_OPT_PARAMS_REQ, req_id,
                     ' It does not support security definition option request.')

        builder = MessageBuilder(Out.REQ_SEC_DEF_OPT_PARAMS)
        builder.add(req_id, underlying_symbol, fut_fop_exchange,
                    underlying_sec_type, underlying_con_id)
        return builder


    @request(with_id=False)
    def req_family_codes(self):
        self.require(sv.MIN_SERVER_VER_REQ_FAMILY_CODES, NO_VALID_ID,
                     ' It does not support family codes request.')

        return MessageBuilder(Out.REQ_FAMILY_CODES)


    @request
    def req_soft_dollar_tiers(self, req_id: int):
        return MessageBuilder(Out.REQ_SOFT_DOLLAR_TIERS).add(req_id)


    # Market depth.

    @request(with_id=False)
    def req_mkt_depth_exchanges(self):
        self.require(sv.MIN_SERVER_VER_REQ_MKT_DEPTH_EXCHANGES, NO_VALID_ID,
                     ' It does not support market depth exchanges request.')

        return MessageBuilder(Out.REQ_MKT_DEPTH_EXCHANGES)


    @request
    def req_mkt_depth(self, req_id: int, contract, num_rows: int,
                      is_smart_depth: bool = False, mkt_depth_options=None):
        """ Subscribe to the order book; updates arrive on
            update_mkt_depth, or update_mkt_depth_l2 for aggregated depth.
        """

        self.require(sv.MIN_SERVER_VER_TRADING_CLASS, req_id,
                     ' It does not support conId and tradingClass parameters in reqMktDepth.',
                     when=bool(contract.trading_class) or contract.con_id > 0)
        self.require(sv.MIN_SERVER_VER_SMART_DEPTH, req_id,
                     ' It does not support SMART depth request.',
                     when=is_smart_depth)
        self.require(sv.MIN_SERVER_VER_MKT_DEPTH_PRIM_EXCHANGE, req_id,
                     ' It does not support primaryExch parameter in reqMktDepth.',
                     when=bool(contract.primary_exchange))

        trading_class = self.supports(sv.MIN_SERVER_VER_TRADING_CLASS)

        builder = MessageBuilder(Out.REQ_MKT_DEPTH)
        builder.add(5, req_id)
        builder.contract(contract, con_id=trading_class,
                         primary_exchange=self.supports(sv.MIN_SERVER_VER_MKT_DEPTH_PRIM_EXCHANGE),
                         trading_class=trading_class)
        builder.add(num_rows)
        builder.add(is_smart_depth, when=self.supports(sv.MIN_SERVER_VER_SMART_DEPTH))

        if self.supports(sv.MIN_SERVER_VER_LINKING):
            builder.add(self._internal_options(req_id, mkt_depth_options, 'mkt_depth_options'))

        return builder


    @request
    def cancel_mkt_depth(self, req_id: int, is_smart_depth: bool = False):

        self.require(sv.MIN_SERVER_VER_SMART_DEPTH, req_id,
                     ' It does not support SMART depth cancel.',
                     when=is_smart_depth)

        builder = MessageBuilder(Out.CANCEL_MKT_DEPTH)
        builder.add(1, req_id)
        builder.add(is_smart_depth, when=self.supports(sv.MIN_SERVER_VER_SMART_DEPTH))
        return builder


    # News.

    @request(with_id=False)
    def req_news_bulletins(self, all_msgs: bool):
        return MessageBuilder(Out.REQ_NEWS_BULLETINS).add(1, all_msgs)


    @request(with_id=False)
    def cancel_news_bulletins(self):
        return MessageBuilder(Out.CANCEL_NEWS_BULLETINS).add(1)


    @request(with_id=False)
    def req_news_providers(self):
        self.require(sv.MIN_SERVER_VER_REQ_NEWS_PROVIDERS, NO_VALID_ID,
                     ' It does not support news providers request.')

        return MessageBuilder(Out.REQ_NEWS_PROVIDERS)


    @request
    def req_news_article(self, req_id: int, provider_code: str, article_id: str,
                         news_article_options=None):
        self.require(sv.MIN_SERVER_VER_REQ_NEWS_ARTICLE, req_id,
                     ' It does not support news article request.')

        builder = MessageBuilder(Out.REQ_NEWS_ARTICLE)
        builder.add(req_id, provider_code, article_id)
        builder.tag_values(news_article_options,
                           when=self.supports(sv.MIN_SERVER_VER_NEWS_QUERY_ORIGINS))
        return builder


    @request
    def req_historical_news(self, req_id: int, con_id: int, provider_codes: str,
                            start_date_time: str, end_date_time: str, total_results: int,
                            historical_news_options=None):
        self.require(sv.MIN_SERVER_VER_REQ_HISTORICAL_NEWS, req_id,
                     ' It does not support historical news request.')

        builder = MessageBuilder(Out.REQ_HISTORICAL_NEWS)
        builder.add(req_id, con_id, provider_codes, start_date_time, end_date_time,
                    total_results)
        builder.tag_values(historical_news_options,
                           when=self.supports(sv.MIN_SERVER_VER_NEWS_QUERY_ORIGINS))
        return builder


    # Financial advisors.

    @request(with_id=False)
    def req_managed_accts(self):
        return MessageBuilder(Out.REQ_MANAGED_ACCTS).add(1)


    @request(with_id=False)
    def request_fa(self, fa_data: int):
        """ Request the financial advisor configuration for *fa_data*, a
            :class:`ibwire.common.FaDataType`; it arrives on receive_fa.
        """

        return MessageBuilder(Out.REQ_FA).add(1, int(fa_data))


    @request
    def replace_fa(self, req_id: int, fa_data: int, cxml: str):

        builder = MessageBuilder(Out.REPLACE_FA)
        builder.add(1, int(fa_data), cxml)
        builder.add(req_id, when=self.supports(sv.MIN_SERVER_VER_REPLACE_FA_END))
        return builder


    # Historical data.

    @request
    def req_historical_data(self, req_id: int, contract, end_date_time: str,
                            duration_str: str, bar_size_setting: str, what_to_show: str,
                            use_rth: int, format_date: int, keep_up_to_date: bool = False,
                            chart_options=None):
        """ Request historical bars, delivered on historical_data and
            terminated by historical_data_end. With *keep_up_to_date* the
            last bar continues to update through historical_data_update.
        """

        self.require(sv.MIN_SERVER_VER_TRADING_CLASS, req_id,
                     ' It does not support conId and tradingClass parameters '
                     'in reqHistoricalData.',
                     when=bool(contract.trading_class) or contract.con_id > 0)

        trading_class = self.supports(sv.MIN_SERVER_VER_TRADING_CLASS)

        builder = MessageBuilder(Out.REQ_HISTORICAL_DATA)
        builder.add(6, when=not self.supports(sv.MIN_SERVER_VER_SYNT_REALTIME_BARS))
        builder.add(req_id)
        builder.contract(contract, con_id=trading_class, trading_class=trading_class)
        builder.add(contract.include_expired,
                    end_date_time,
                    bar_size_setting,
                    duration_str,
                    use_rth,
                    what_to_show,
                    format_date)

        self._combo_legs(builder, contract)

        builder.add(keep_up_to_date, when=self.supports(sv.MIN_SERVER_VER_SYNT_REALTIME_BARS))
        builder.tag_values(chart_options, when=self.supports(sv.MIN_SERVER_VER_LINKING))

        return builder


    @request
    def cancel_historical_data(self, req_id: int):
        return MessageBuilder(Out.CANCEL_HISTORICAL_DATA).add(1, req_id)


    @request
    def req_head_time_stamp(self, req_id: int, contract, what_to_show: str,
                            use_rth: int, format_date: int):
        self.require(sv.MIN_SERVER_VER_REQ_HEAD_TIMESTAMP, req_id,
                     ' It does not support head time stamp requests.')

        builder = MessageBuilder(Out.REQ_HEAD_TIMESTAMP)
        builder.add(req_id)
        builder.contract(contract, trading_class=True)
        builder.add(contract.include_expired, use_rth, what_to_show, format_date)
        return builder


    @request
    def cancel_head_time_stamp(self, req_id: int):
        self.require(sv.MIN_SERVER_VER_CANCEL_HEADTIMESTAMP, req_id,
                     ' It does not support head time stamp requests.')

        return MessageBuilder(Out.CANCEL_HEAD_TIMESTAMP).add(req_id)


    @request
    def req_histogram_data(self, req_id: int, contract, use_rth: bool, time_period: str):
        self.require(sv.MIN_SERVER_VER_REQ_HISTOGRAM, req_id,
                     ' It does not support histogram requests.')

        builder = MessageBuilder(Out.REQ_HISTOGRAM_DATA)
        builder.add(req_id)
        builder.contract(contract, trading_class=True)
        builder.add(contract.include_expired, use_rth, time_period)
        return builder


    @request
    def cancel_histogram_data(self, req_id: int):
        self.require(sv.MIN_SERVER_VER_REQ_HISTOGRAM, req_id,
                     ' It does not support histogram requests.')

        return MessageBuilder(Out.CANCEL_HISTOGRAM_DATA).add(req_id)


    @request
    def req_historical_ticks(self, req_id: int, contract, start_date_time: str,
                             end_date_time: str, number_of_ticks: int, what_to_show: str,
                             use_rth: int, ignore_size: bool, misc_options=None):
        self.require(sv.MIN_SERVER_VER_HISTORICAL_TICKS, req_id,
                     ' It does not support historical ticks requests.')

        builder = MessageBuilder(Out.REQ_HISTORICAL_TICKS)
        builder.add(req_id)
        builder.contract(contract, trading_class=True)
        builder.add(contract.include_expired,
                    start_date_time,
                    end_date_time,
                    number_of_ticks,
                    what_to_show,
                    use_rth,
                    ignore_size)
        builder.tag_values(misc_options)
        return builder


    # Scanners.

    @request(with_id=False)
    def req_scanner_parameters(self):
        return MessageBuilder(Out.REQ_SCANNER_PARAMETERS).add(1)


    @request
    def req_scanner_subscription(self, req_id: int, subscription,
                                 scanner_subscription_options=None,
                                 scanner_subscription_filter_options=None):

        self.require(sv.MIN_SERVER_VER_SCANNER_GENERIC_OPTS, req_id,
                     ' It does not support API scanner subscription generic filter options',
                     when=bool(scanner_subscription_filter_options))

        generic = self.supports(sv.MIN_SERVER_VER_SCANNER_GENERIC_OPTS)

        builder = MessageBuilder(Out.REQ_SCANNER_SUBSCRIPTION)
        builder.add(4, when=not generic)
        builder.add(req_id,
                    subscription.number_of_rows,
                    subscription.instrument,
                    subscription.location_code,
                    subscription.scan_code,
                    subscription.above_price,
                    subscription.below_price,
                    subscription.above_volume,
                    subscription.market_cap_above,
                    subscription.market_cap_below,
                    subscription.moody_rating_above,
                    subscription.moody_rating_below,
                    subscription.sp_rating_above,
                    subscription.sp_rating_below,
                    subscription.maturity_date_above,
                    subscription.maturity_date_below,
                    subscription.coupon_rate_above,
                    subscription.coupon_rate_below,
                    subscription.exclude_convertible,
                    subscription.average_option_volume_above,
                    subscription.scanner_setting_pairs,
                    subscription.stock_type_filter)

        builder.tag_values(scanner_subscription_filter_options, when=generic)
        builder.tag_values(scanner_subscription_options,
                           when=self.supports(sv.MIN_SERVER_VER_LINKING))

        return builder


    @request
    def cancel_scanner_subscription(self, req_id: int):
        return MessageBuilder(Out.CANCEL_SCANNER_SUBSCRIPTION).add(1, req_id)


    # Real time bars.

    @request
    def req_real_time_bars(self, req_id: int, contract, bar_size: int,
                           what_to_show: str, use_rth: bool, real_time_bars_options=None):
        """ Subscribe to five second bars. *bar_size* is currently ignored
            by the server.
        """

        self.require(sv.MIN_SERVER_VER_TRADING_CLASS, req_id,
                     ' It does not support conId and tradingClass parameter in reqRealTimeBars.',
                     when=bool(contract.trading_class))

        trading_class = self.supports(sv.MIN_SERVER_VER_TRADING_CLASS)

        builder = MessageBuilder(Out.REQ_REAL_TIME_BARS)
        builder.add(3, req_id)
        builder.contract(contract, con_id=trading_class, trading_class=trading_class)
        builder.add(bar_size, what_to_show, use_rth)
        builder.tag_values(real_time_bars_options, when=self.supports(sv.MIN_SERVER_VER_LINKING))
        return builder


    @request
    def cancel_real_time_bars(self, req_id: int):
        return MessageBuilder(Out.CANCEL_REAL_TIME_BARS).add(1, req_id)


    # Fundamental data.

    @request
    def req_fundamental_data(self, req_id: int, contract, report_type: str,
                             fundamental_data_options=None):

        self.require(sv.MIN_SERVER_VER_FUNDAMENTAL_DATA, req_id,
                     ' It does not support fundamental data request.')
        self.require(sv.MIN_SERVER_VER_TRADING_CLASS, req_id,
                     ' It does not support conId parameter in reqFundamentalData.',
                     when=contract.con_id > 0)

        builder = MessageBuilder(Out.REQ_FUNDAMENTAL_DATA)
        builder.add(2, req_id)
        builder.add(contract.con_id, when=self.supports(sv.MIN_SERVER_VER_TRADING_CLASS))
        builder.add(contract.symbol,
                    contract.sec_type,
                    contract.exchange,
                    contract.primary_exchange,
                    contract.currency,
                    contract.local_symbol,
                    report_type)

        if self.supports(sv.MIN_SERVER_VER_LINKING):
            options = fundamental_data_options or ()
            builder.add(len(options))
            builder.tag_values(options)

        return builder


    @request
    def cancel_fundamental_data(self, req_id: int):
        self.require(sv.MIN_SERVER_VER_FUNDAMENTAL_DATA, req_id,
                     ' It does not support fundamental data request.')

        return MessageBuilder(Out.CANCEL_FUNDAMENTAL_DATA).add(1, req_id)


    # Display groups.

    @request
    def query_display_groups(self, req_id: int):
        self.require(sv.MIN_SERVER_VER_LINKING, req_id,
                     ' It does not support queryDisplayGroups request.')

        return MessageBuilder(Out.QUERY_DISPLAY_GROUPS).add(1, req_id)


    @request
    def subscribe_to_group_events(self, req_id: int, group_id: int):
        self.require(sv.MIN_SERVER_VER_LINKING, req_id,
                     ' It does not support subscribeToGroupEvents request.')

        return MessageBuilder(Out.SUBSCRIBE_TO_GROUP_EVENTS).add(1, req_id, group_id)


    @request
    def update_display_group(self, req_id: int, contract_info: str):
        """ *contract_info* is a contract id and exchange in the form
            ``'8314@SMART'``, or 'none' to clear the group.
        """

        self.require(sv.MIN_SERVER_VER_LINKING, req_id,
                     ' It does not support updateDisplayGroup request.')

        return MessageBuilder(Out.UPDATE_DISPLAY_GROUP).add(1, req_id, contract_info)


    @request
    def unsubscribe_from_group_events(self, req_id: int):
        self.require(sv.MIN_SERVER_VER_LINKING, req_id,
                     ' It does not support unsubscribeFromGroupEvents request.')

        return MessageBuilder(Out.UNSUBSCRIBE_FROM_GROUP_EVENTS).add(1, req_id)


    # Authentication.

    def _require_extra_auth(self):
        if not self.extra_auth:
            raise errors.RequestError(errors.BAD_MESSAGE, NO_VALID_ID,
                                      ' Intent to authenticate needs to be expressed '
                                      'during initial connect request.')


    @request(with_id=False)
    def verify_request(self, api_name: str, api_version: str):
        self.require(sv.MIN_SERVER_VER_LINKING, NO_VALID_ID,
                     ' It does not support verification request.')
        self._require_extra_auth()

        return MessageBuilder(Out.VERIFY_REQUEST).add(1, api_name, api_version)


    @request(with_id=False)
    def verify_message(self, api_data: str):
        self.require(sv.MIN_SERVER_VER_LINKING, NO_VALID_ID,
                     ' It does not support verification message sending.')

        return MessageBuilder(Out.VERIFY_MESSAGE).add(1, api_data)


    @request(with_id=False)
    def verify_and_auth_request(self, api_name: str, api_version: str,
                                opaque_isv_key: str):
        self.require(sv.MIN_SERVER_VER_LINKING, NO_VALID_ID,
                     ' It does not support verification request.')
        self._require_extra_auth()

        builder = MessageBuilder(Out.VERIFY_AND_AUTH_REQUEST)
        builder.add(1, api_name, api_version, opaque_isv_key)
        return builder


    @request(with_id=False)
    def verify_and_auth_message(self, api_data: str, xyz_response: str):
        self.require(sv.MIN_SERVER_VER_LINKING, NO_VALID_ID,
                     ' It does not support verification message sending.')

        return MessageBuilder(Out.VERIFY_AND_AUTH_MESSAGE).add(1, api_data, xyz_response)


    # Miscellaneous.

    @request(with_id=False)
    def req_current_time(self):
        return MessageBuilder(Out.REQ_CURRENT_TIME).add(1)


    @request(with_id=False)
    def set_server_log_level(self, log_level: int):
        """ Set the server side log level, 1 (system) through 5 (detail).
        """

        return MessageBuilder(Out.SET_SERVER_LOGLEVEL).add(1, log_level)


# end of class Client


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
