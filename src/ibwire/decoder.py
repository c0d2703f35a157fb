""" The decoder thread: receive complete messages from the reader over the
    channel, decode each one, and invoke the matching method on the
    application's :class:`ibwire.wrapper.Wrapper`. This is the only thread
    that ever invokes callbacks.

    Each incoming message type has exactly one handler method on
    :class:`Decoder`, named after the message type in lower case with a
    leading underscore; the dispatch table is built from the
    :class:`ibwire.protocol.ids.IncomingMessage` enumeration.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from . import errors
from .common import (BarData, CommissionReport, DepthMktDataDescription,
                     FamilyCode, HistogramData, HistoricalTick,
                     HistoricalTickBidAsk, HistoricalTickLast, NewsProvider,
                     PriceIncrement, SmartComponent, SoftDollarTier, TagValue,
                     TickAttrib, TickAttribBidAsk, TickAttribLast, TickType,
                     price_to_size_tick)
from .contract import Contract, ContractDescription, ContractDetails, DeltaNeutralContract
from .execution import Execution
from .order import Order, OrderState
from .order_decoder import OrderDecoder
from .protocol import fields
from .protocol.fields import NO_VALID_ID, UNSET_DOUBLE, UNSET_INTEGER
from .protocol.ids import IncomingMessage, incoming
from .scanner import ScanData
from .server_versions import *
from .transport import channel as channel_module

logger = logging.getLogger(__name__)


class Decoder:
    """ Decode messages for one connection. *server_version* is the version
        negotiated during the handshake; it does not change for the life of
        the connection. The *channel* is only required when running the
        decoder thread; :func:`interpret` can be driven directly.

        *on_end*, if provided, is invoked when the reader signals the end of
        the connection, immediately before the wrapper's
        :func:`connection_closed` callback.
    """

    def __init__(self, wrapper, server_version: int, channel=None,
                 on_end: Optional[Callable[[], None]] = None):

        self.wrapper = wrapper
        self.server_version = server_version
        self.channel = channel
        self.on_end = on_end

        self.handlers = dict()
        for message in IncomingMessage:
            self.handlers[message] = getattr(self, '_' + message.name.lower())

        self.thread = threading.Thread(target=self.run, name='ibwire.Decoder')
        self.thread.daemon = True


    def start(self):
        self.thread.start()


    def join(self, timeout=None):
        self.thread.join(timeout)


    def is_alive(self):
        return self.thread.is_alive()


    def run(self):
        """ Main loop for the decoder thread. Runs until the reader sends
            the END marker.
        """

        try:
            while True:
                parts = self.channel.get()
                kind = parts[0]

                if kind == channel_module.MSG:
                    self.interpret(parts[1])
                elif kind == channel_module.ERR:
                    code = int(parts[1])
                    text = parts[2].decode(errors='backslashreplace')
                    self.emit('error', NO_VALID_ID, code, text)
                elif kind == channel_module.END:
                    break
                else:
                    logger.debug('ignoring channel message of kind %r', kind)
        finally:
            self.channel.close()

        logger.info('connection closed')

        if self.on_end is not None:
            self.on_end()

        self.emit('connection_closed')


    def interpret(self, payload: bytes) -> None:
        """ Decode one complete message and dispatch it. Malformed messages
            are reported via the error callback with code 508; the decoder
            carries on with the next message regardless.
        """

        reader = fields.reader(payload)

        if len(reader) == 0:
            logger.debug('ignoring empty message')
            return

        try:
            msg_id = reader.decode_int()
            message = incoming(msg_id)

            if message is None:
                logger.debug('ignoring message with unknown id %s', msg_id)
                return

            logger.debug('received %s: %r', message.name, reader.fields)
            self.handlers[message](reader)

        except (errors.DecodeError, ValueError, IndexError) as e:
            logger.warning('bad message %r: %s', reader.fields, e)
            error = errors.BAD_MESSAGE
            self.emit('error', NO_VALID_ID, error.code, error.text('. ' + str(e)))


    def emit(self, name, *args):
        """ Invoke the named wrapper method. An exception raised by the
            application's callback is logged and otherwise ignored, so that
            one misbehaving callback cannot stop the decoder thread.
        """

        method = getattr(self.wrapper, name)

        try:
            method(*args)
        except Exception:
            logger.exception('exception in wrapper callback %s', name)


    # Shared decoding steps.

    def _contract(self, reader, contract=None, multiplier=True,
                  exchange=True, trading_class=True):
        """ Read the common run of contract fields, starting with the
            contract id, that several messages share.
        """

        if contract is None:
            contract = Contract()

        contract.con_id = reader.decode_int()
        contract.symbol = reader.decode_str()
        contract.sec_type = reader.decode_str()
        contract.last_trade_date_or_contract_month = reader.decode_str()
        contract.strike = reader.decode_float()
        contract.right = reader.decode_str()
        if multiplier:
            contract.multiplier = reader.decode_str()
        if exchange:
            contract.exchange = reader.decode_str()
        contract.currency = reader.decode_str()
        contract.local_symbol = reader.decode_str()
        if trading_class:
            contract.trading_class = reader.decode_str()

        return contract


    def _quantity(self, reader):
        if self.server_version >= MIN_SERVER_VER_FRACTIONAL_POSITIONS:
            return reader.decode_float()
        return float(reader.decode_int())


    def _tag_values(self, reader):
        count = reader.decode_int()
        pairs = list()
        for _ in range(count):
            tag = reader.decode_str()
            value = reader.decode_str()
            pairs.append(TagValue(tag, value))
        return pairs


    def _last_trade_date(self, details, is_bond, text):
        """ The last trade date arrives as one field, holding the date, an
            optional time, and for bonds an optional time zone.
        """

        parts = text.split()

        if len(parts) > 0:
            if is_bond:
                details.maturity = parts[0]
            else:
                details.contract.last_trade_date_or_contract_month = parts[0]

        if len(parts) > 1:
            details.last_trade_time = parts[1]

        if is_bond and len(parts) > 2:
            details.time_zone_id = parts[2]


    # Market data.

    def _tick_price(self, reader):

        reader.skip()   # version
        req_id = reader.decode_int()
        tick_type = reader.decode_int()
        price = reader.decode_float()
        size = reader.decode_int()
        mask = reader.decode_int()

        attrib = TickAttrib()
        if self.server_version >= MIN_SERVER_VER_PAST_LIMIT:
            attrib.can_auto_execute = mask & 1 != 0
            attrib.past_limit = mask & 2 != 0
            if self.server_version >= MIN_SERVER_VER_PRE_OPEN_BID_ASK:
                attrib.pre_open = mask & 4 != 0
        else:
            attrib.can_auto_execute = mask == 1

        self.emit('tick_price', req_id, tick_type, price, attrib)

        size_tick_type = price_to_size_tick.get(tick_type)
        if size_tick_type is not None:
            self.emit('tick_size', req_id, size_tick_type, size)


    def _tick_size(self, reader):
        reader.skip()
        req_id = reader.decode_int()
        tick_type = reader.decode_int()
        size = reader.decode_int()
        self.emit('tick_size', req_id, tick_type, size)


    def _tick_generic(self, reader):
        reader.skip()
        req_id = reader.decode_int()
        tick_type = reader.decode_int()
        value = reader.decode_float()
        self.emit('tick_generic', req_id, tick_type, value)


    def _tick_string(self, reader):
        reader.skip()
        req_id = reader.decode_int()
        tick_type = reader.decode_int()
        value = reader.decode_str()
        self.emit('tick_string', req_id, tick_type, value)


    def _tick_efp(self, reader):

        reader.skip()
        req_id = reader.decode_int()
        tick_type = reader.decode_int()
        basis_points = reader.decode_float()
        formatted_basis_points = reader.decode_str()
        implied_futures_price = reader.decode_float()
        hold_days = reader.decode_int()
        future_last_trade_date = reader.decode_str()
        dividend_impact = reader.decode_float()
        dividends_to_last_trade_date = reader.decode_float()

        self.emit('tick_efp', req_id, tick_type, basis_points,
                  formatted_basis_points, implied_futures_price, hold_days,
                  future_last_trade_date, dividend_impact,
                  dividends_to_last_trade_date)


    def _tick_option_computation(self, reader):
        """ Model values the server has not computed arrive as -1, or as -2
            for the greeks that can legitimately be negative; both become
            UNSET_DOUBLE.
        """

        version = reader.decode_int()
        req_id = reader.decode_int()
        tick_type = reader.decode_int()

        implied_vol = self._computed(reader, -1)
        delta = self._computed(reader, -2)

        opt_price = UNSET_DOUBLE
        pv_dividend = UNSET_DOUBLE
        gamma = UNSET_DOUBLE
        vega = UNSET_DOUBLE
        theta = UNSET_DOUBLE
        und_price = UNSET_DOUBLE

        model = (TickType.MODEL_OPTION, TickType.DELAYED_MODEL_OPTION)
        if version >= 6 or tick_type in model:
            opt_price = self._computed(reader, -1)
            pv_dividend = self._computed(reader, -1)

        if version >= 6:
            gamma = self._computed(reader, -2)
            vega = self._computed(reader, -2)
            theta = self._computed(reader, -2)
            und_price = self._computed(reader, -1)

        self.emit('tick_option_computation', req_id, tick_type, implied_vol,
                  delta, opt_price, pv_dividend, gamma, vega, theta, und_price)


    def _computed(self, reader, not_computed):
        value = reader.decode_float()
        if value == not_computed:
            return UNSET_DOUBLE
        return value


    def _tick_snapshot_end(self, reader):
        reader.skip()
        self.emit('tick_snapshot_end', reader.decode_int())


    def _tick_req_params(self, reader):
        req_id = reader.decode_int()
        min_tick = reader.decode_float()
        bbo_exchange = reader.decode_str()
        snapshot_permissions = reader.decode_int()
        self.emit('tick_req_params', req_id, min_tick, bbo_exchange, snapshot_permissions)


    def _tick_news(self, reader):
        req_id = reader.decode_int()
        time_stamp = reader.decode_long()
        provider_code = reader.decode_str()
        article_id = reader.decode_str()
        headline = reader.decode_str()
        extra_data = reader.decode_str()
        self.emit('tick_news', req_id, time_stamp, provider_code, article_id,
                  headline, extra_data)


    def _market_data_type(self, reader):
        reader.skip()
        req_id = reader.decode_int()
        market_data_type = reader.decode_int()
        self.emit('market_data_type', req_id, market_data_type)


    def _reroute_mkt_data_req(self, reader):
        req_id = reader.decode_int()
        con_id = reader.decode_int()
        exchange = reader.decode_str()
        self.emit('reroute_mkt_data_req', req_id, con_id, exchange)


    def _reroute_mkt_depth_req(self, reader):
        req_id = reader.decode_int()
        con_id = reader.decode_int()
        exchange = reader.decode_str()
        self.emit('reroute_mkt_depth_req', req_id, con_id, exchange)


    def _market_depth(self, reader):

        reader.skip()
        req_id = reader.decode_int()
        position = reader.decode_int()
        operation = reader.decode_int()
        side = reader.decode_int()
        price = reader.decode_float()
        size = reader.decode_int()

        self.emit('update_mkt_depth', req_id, position, operation, side, price, size)


    def _market_depth_l2(self, reader):

        reader.skip()
        req_id = reader.decode_int()
        position = reader.decode_int()
        market_maker = reader.decode_str()
        operation = reader.decode_int()
        side = reader.decode_int()
        price = reader.decode_float()
        size = reader.decode_int()

        is_smart_depth = False
        if self.server_version >= MIN_SERVER_VER_SMART_DEPTH:
            is_smart_depth = reader.decode_bool()

        self.emit('update_mkt_depth_l2', req_id, position, market_maker,
                  operation, side, price, size, is_smart_depth)


    def _mkt_depth_exchanges(self, reader):

        descriptions = list()
        count = reader.decode_int()

        for _ in range(count):
            description = DepthMktDataDescription()
            description.exchange = reader.decode_str()
            description.sec_type = reader.decode_str()

            if self.server_version >= MIN_SERVER_VER_SERVICE_DATA_TYPE:
                description.listing_exch = reader.decode_str()
                description.service_data_type = reader.decode_str()
                description.agg_group = reader.decode_int()
            else:
                # Level 2 flag, superseded by the service data type.
                is_l2 = reader.decode_bool()
                description.service_data_type = 'Deep' if is_l2 else 'Top'

            descriptions.append(description)

        self.emit('mkt_depth_exchanges', descriptions)


    def _smart_components(self, reader):

        req_id = reader.decode_int()
        count = reader.decode_int()

        components = dict()
        for _ in range(count):
            component = SmartComponent()
            component.bit_number = reader.decode_int()
            component.exchange = reader.decode_str()
            component.exchange_letter = reader.decode_str()
            components[component.bit_number] = component

        self.emit('smart_components', req_id, components)


    def _tick_by_tick(self, reader):

        req_id = reader.decode_int()
        tick_type = reader.decode_int()
        time = reader.decode_long()

        if tick_type in (1, 2):
            price = reader.decode_float()
            size = reader.decode_int()
            mask = reader.decode_int()
            attrib = TickAttribLast()
            attrib.past_limit = mask & 1 != 0
            attrib.unreported = mask & 2 != 0
            exchange = reader.decode_str()
            special_conditions = reader.decode_str()
            self.emit('tick_by_tick_all_last', req_id, tick_type, time, price,
                      size, attrib, exchange, special_conditions)

        elif tick_type == 3:
            bid_price = reader.decode_float()
            ask_price = reader.decode_float()
            bid_size = reader.decode_int()
            ask_size = reader.decode_int()
            mask = reader.decode_int()
            attrib = TickAttribBidAsk()
            attrib.bid_past_low = mask & 1 != 0
            attrib.ask_past_high = mask & 2 != 0
            self.emit('tick_by_tick_bid_ask', req_id, time, bid_price,
                      ask_price, bid_size, ask_size, attrib)

        elif tick_type == 4:
            mid_point = reader.decode_float()
            self.emit('tick_by_tick_mid_point', req_id, time, mid_point)

        else:
            logger.debug('tick-by-tick %d: no data for tick type %d', req_id, tick_type)


    # Orders.

    def _order_status(self, reader):

        if self.server_version < MIN_SERVER_VER_MARKET_CAP_PRICE:
            reader.skip()

        order_id = reader.decode_int()
        status = reader.decode_str()
        filled = self._quantity(reader)
        remaining = self._quantity(reader)
        avg_fill_price = reader.decode_float()
        perm_id = reader.decode_int()
        parent_id = reader.decode_int()
        last_fill_price = reader.decode_float()
        client_id = reader.decode_int()
        why_held = reader.decode_str()

        mkt_cap_price = 0.0
        if self.server_version >= MIN_SERVER_VER_MARKET_CAP_PRICE:
            mkt_cap_price = reader.decode_float()

        self.emit('order_status', order_id, status, filled, remaining,
                  avg_fill_price, perm_id, parent_id, last_fill_price,
                  client_id, why_held, mkt_cap_price)


    def _open_order(self, reader):

        if self.server_version >= MIN_SERVER_VER_ORDER_CONTAINER:
            version = self.server_version
        else:
            version = reader.decode_int()

        contract = Contract()
        order = Order()
        order_state = OrderState()

        decoder = OrderDecoder(reader, contract, order, order_state,
                               version, self.server_version)
        decoder.decode_open()

        self.emit('open_order', order.order_id, contract, order, order_state)


    def _open_order_end(self, reader):
        self.emit('open_order_end')


    def _next_valid_id(self, reader):
        reader.skip()
        self.emit('next_valid_id', reader.decode_int())


    def _order_bound(self, reader):
        req_id = reader.decode_long()
        api_client_id = reader.decode_int()
        api_order_id = reader.decode_int()
        self.emit('order_bound', req_id, api_client_id, api_order_id)


    def _completed_order(self, reader):

        contract = Contract()
        order = Order()
        order_state = OrderState()

        decoder = OrderDecoder(reader, contract, order, order_state,
                               UNSET_INTEGER, self.server_version)
        decoder.decode_completed()

        self.emit('completed_order', contract, order, order_state)


    def _completed_orders_end(self, reader):
        self.emit('completed_orders_end')


    def _execution_data(self, reader):

        if self.server_version >= MIN_SERVER_VER_LAST_LIQUIDITY:
            version = self.server_version
        else:
            version = reader.decode_int()

        req_id = NO_VALID_ID
        if version >= 7:
            req_id = reader.decode_int()

        order_id = reader.decode_int()

        contract = self._contract(reader, multiplier=version >= 9,
                                  trading_class=version >= 10)

        execution = Execution()
        execution.order_id = order_id
        execution.exec_id = reader.decode_str()
        execution.time = reader.decode_str()
        execution.acct_number = reader.decode_str()
        execution.exchange = reader.decode_str()
        execution.side = reader.decode_str()
        execution.shares = self._quantity(reader)
        execution.price = reader.decode_float()
        execution.perm_id = reader.decode_int()
        execution.client_id = reader.decode_int()
        execution.liquidation = reader.decode_int()

        if version >= 6:
            execution.cum_qty = reader.decode_float()
            execution.avg_price = reader.decode_float()

        if version >= 8:
            execution.order_ref = reader.decode_str()

        if version >= 9:
            execution.ev_rule = reader.decode_str()
            execution.ev_multiplier = reader.decode_float()

        if self.server_version >= MIN_SERVER_VER_MODELS_SUPPORT:
            execution.model_code = reader.decode_str()

        if self.server_version >= MIN_SERVER_VER_LAST_LIQUIDITY:
            execution.last_liquidity = reader.decode_int()

        self.emit('exec_details', req_id, contract, execution)


    def _execution_data_end(self, reader):
        reader.skip()
        self.emit('exec_details_end', reader.decode_int())


    def _commission_report(self, reader):

        reader.skip()

        report = CommissionReport()
        report.exec_id = reader.decode_str()
        report.commission = reader.decode_float()
        report.currency = reader.decode_str()
        report.realized_pnl = reader.decode_float()
        report.yield_ = reader.decode_float()
        report.yield_redemption_date = reader.decode_int()

        self.emit('commission_report', report)


    def _delta_neutral_validation(self, reader):

        reader.skip()
        req_id = reader.decode_int()

        delta_neutral = DeltaNeutralContract()
        delta_neutral.con_id = reader.decode_int()
        delta_neutral.delta = reader.decode_float()
        delta_neutral.price = reader.decode_float()

        self.emit('delta_neutral_validation', req_id, delta_neutral)


    def _soft_dollar_tiers(self, reader):

        req_id = reader.decode_int()
        count = reader.decode_int()

        tiers = list()
        for _ in range(count):
            name = reader.decode_str()
            val = reader.decode_str()
            display_name = reader.decode_str()
            tiers.append(SoftDollarTier(name, val, display_name))

        self.emit('soft_dollar_tiers', req_id, tiers)


    # Account and portfolio.

    def _acct_value(self, reader):
        reader.skip()
        key = reader.decode_str()
        value = reader.decode_str()
        currency = reader.decode_str()
        account_name = reader.decode_str()
        self.emit('update_account_value', key, value, currency, account_name)


    def _portfolio_value(self, reader):

        version = reader.decode_int()

        contract = Contract()
        contract.con_id = reader.decode_int()
        contract.symbol = reader.decode_str()
        contract.sec_type = reader.decode_str()
        contract.last_trade_date_or_contract_month = reader.decode_str()
        contract.strike = reader.decode_float()
        contract.right = reader.decode_str()

        if version >= 7:
            contract.multiplier = reader.decode_str()
            contract.primary_exchange = reader.decode_str()

        contract.currency = reader.decode_str()
        contract.local_symbol = reader.decode_str()

        if version >= 8:
            contract.trading_class = reader.decode_str()

        position = self._quantity(reader)
        market_price = reader.decode_float()
        market_value = reader.decode_float()
        average_cost = reader.decode_float()
        unrealized_pnl = reader.decode_float()
        realized_pnl = reader.decode_float()
        account_name = reader.decode_str()

        # Server version 39 sent the primary exchange at the end.

        if version == 6 and self.server_version == 39:
            contract.primary_exchange = reader.decode_str()

        self.emit('update_portfolio', contract, position, market_price,
                  market_value, average_cost, unrealized_pnl, realized_pnl,
                  account_name)


    def _acct_update_time(self, reader):
        reader.skip()
        self.emit('update_account_time', reader.decode_str())


    def _acct_download_end(self, reader):
        reader.skip()
        self.emit('account_download_end', reader.decode_str())


    def _managed_accts(self, reader):
        reader.skip()
        self.emit('managed_accounts', reader.decode_str())


    def _position_data(self, reader):

        version = reader.decode_int()
        account = reader.decode_str()

        contract = self._contract(reader, trading_class=version >= 2)
        position = self._quantity(reader)

        avg_cost = 0.0
        if version >= 3:
            avg_cost = reader.decode_float()

        self.emit('position', account, contract, position, avg_cost)


    def _position_end(self, reader):
        self.emit('position_end')


    def _account_summary(self, reader):
        reader.skip()
        req_id = reader.decode_int()
        account = reader.decode_str()
        tag = reader.decode_str()
        value = reader.decode_str()
        currency = reader.decode_str()
        self.emit('account_summary', req_id, account, tag, value, currency)


    def _account_summary_end(self, reader):
        reader.skip()
        self.emit('account_summary_end', reader.decode_int())


    def _position_multi(self, reader):

        reader.skip()
        req_id = reader.decode_int()
        account = reader.decode_str()
        contract = self._contract(reader)
        position = reader.decode_float()
        avg_cost = reader.decode_float()
        model_code = reader.decode_str()

        self.emit('position_multi', req_id, account, model_code, contract,
                  position, avg_cost)


    def _position_multi_end(self, reader):
        reader.skip()
        self.emit('position_multi_end', reader.decode_int())


    def _account_update_multi(self, reader):

        reader.skip()
        req_id = reader.decode_int()
        account = reader.decode_str()
        model_code = reader.decode_str()
        key = reader.decode_str()
        value = reader.decode_str()
        currency = reader.decode_str()

        self.emit('account_update_multi', req_id, account, model_code, key,
                  value, currency)


    def _account_update_multi_end(self, reader):
        reader.skip()
        self.emit('account_update_multi_end', reader.decode_int())


    def _pnl(self, reader):

        req_id = reader.decode_int()
        daily_pnl = reader.decode_float()

        unrealized_pnl = UNSET_DOUBLE
        realized_pnl = UNSET_DOUBLE

        if self.server_version >= MIN_SERVER_VER_UNREALIZED_PNL:
            unrealized_pnl = reader.decode_float()

        if self.server_version >= MIN_SERVER_VER_REALIZED_PNL:
            realized_pnl = reader.decode_float()

        self.emit('pnl', req_id, daily_pnl, unrealized_pnl, realized_pnl)


    def _pnl_single(self, reader):

        req_id = reader.decode_int()
        position = reader.decode_int()
        daily_pnl = reader.decode_float()

        unrealized_pnl = UNSET_DOUBLE
        realized_pnl = UNSET_DOUBLE

        if self.server_version >= MIN_SERVER_VER_UNREALIZED_PNL:
            unrealized_pnl = reader.decode_float()

        if self.server_version >= MIN_SERVER_VER_REALIZED_PNL:
            realized_pnl = reader.decode_float()

        value = reader.decode_float()

        self.emit('pnl_single', req_id, position, daily_pnl, unrealized_pnl,
                  realized_pnl, value)


    def _family_codes(self, reader):

        count = reader.decode_int()

        codes = list()
        for _ in range(count):
            account_id = reader.decode_str()
            family_code = reader.decode_str()
            codes.append(FamilyCode(account_id, family_code))

        self.emit('family_codes', codes)


    def _receive_fa(self, reader):
        reader.skip()
        fa_data_type = reader.decode_int()
        xml = reader.decode_str()
        self.emit('receive_fa', fa_data_type, xml)


    # Contracts.

    def _contract_data(self, reader):

        version = reader.decode_int()

        req_id = NO_VALID_ID
        if version >= 3:
            req_id = reader.decode_int()

        details = ContractDetails()
        contract = details.contract

        contract.symbol = reader.decode_str()
        contract.sec_type = reader.decode_str()
        self._last_trade_date(details, False, reader.decode_str())
        contract.strike = reader.decode_float()
        contract.right = reader.decode_str()
        contract.exchange = reader.decode_str()
        contract.currency = reader.decode_str()
        contract.local_symbol = reader.decode_str()
        details.market_name = reader.decode_str()
        contract.trading_class = reader.decode_str()
        contract.con_id = reader.decode_int()
        details.min_tick = reader.decode_float()

        if self.server_version >= MIN_SERVER_VER_MD_SIZE_MULTIPLIER:
            details.md_size_multiplier = reader.decode_int()

        contract.multiplier = reader.decode_str()
        details.order_types = reader.decode_str()
        details.valid_exchanges = reader.decode_str()
        details.price_magnifier = reader.decode_int()

        if version >= 4:
            details.under_con_id = reader.decode_int()

        if version >= 5:
            details.long_name = reader.decode_str()
            contract.primary_exchange = reader.decode_str()

        if version >= 6:
            details.contract_month = reader.decode_str()
            details.industry = reader.decode_str()
            details.category = reader.decode_str()
            details.subcategory = reader.decode_str()
            details.time_zone_id = reader.decode_str()
            details.trading_hours = reader.decode_str()
            details.liquid_hours = reader.decode_str()

        if version >= 8:
            details.ev_rule = reader.decode_str()
            details.ev_multiplier = reader.decode_float()

        if version >= 7:
            details.sec_id_list = self._tag_values(reader)

        if self.server_version >= MIN_SERVER_VER_AGG_GROUP:
            details.agg_group = reader.decode_int()

        if self.server_version >= MIN_SERVER_VER_UNDERLYING_INFO:
            details.under_symbol = reader.decode_str()
            details.under_sec_type = reader.decode_str()

        if self.server_version >= MIN_SERVER_VER_MARKET_RULES:
            details.market_rule_ids = reader.decode_str()

        if self.server_version >= MIN_SERVER_VER_REAL_EXPIRATION_DATE:
            details.real_expiration_date = reader.decode_str()

        self.emit('contract_details', req_id, details)


    def _bond_contract_data(self, reader):

        version = reader.decode_int()

        req_id = NO_VALID_ID
        if version >= 3:
            req_id = reader.decode_int()

        details = ContractDetails()
        contract = details.contract

        contract.symbol = reader.decode_str()
        contract.sec_type = reader.decode_str()
        details.cusip = reader.decode_str()
        details.coupon = reader.decode_float()
        self._last_trade_date(details, True, reader.decode_str())
        details.issue_date = reader.decode_str()
        details.ratings = reader.decode_str()
        details.bond_type = reader.decode_str()
        details.coupon_type = reader.decode_str()
        details.convertible = reader.decode_bool()
        details.callable = reader.decode_bool()
        details.putable = reader.decode_bool()
        details.desc_append = reader.decode_str()
        contract.exchange = reader.decode_str()
        contract.currency = reader.decode_str()
        details.market_name = reader.decode_str()
        contract.trading_class = reader.decode_str()
        contract.con_id = reader.decode_int()
        details.min_tick = reader.decode_float()

        if self.server_version >= MIN_SERVER_VER_MD_SIZE_MULTIPLIER:
            details.md_size_multiplier = reader.decode_int()

        details.order_types = reader.decode_str()
        details.valid_exchanges = reader.decode_str()

        if version >= 2:
            details.next_option_date = reader.decode_str()
            details.next_option_type = reader.decode_str()
            details.next_option_partial = reader.decode_bool()
            details.notes = reader.decode_str()

        if version >= 4:
            details.long_name = reader.decode_str()

        if version >= 6:
            details.ev_rule = reader.decode_str()
            details.ev_multiplier = reader.decode_float()

        if version >= 5:
            details.sec_id_list = self._tag_values(reader)

        if self.server_version >= MIN_SERVER_VER_AGG_GROUP:
            details.agg_group = reader.decode_int()

        if self.server_version >= MIN_SERVER_VER_MARKET_RULES:
            details.market_rule_ids = reader.decode_str()

        self.emit('bond_contract_details', req_id, details)


    def _contract_data_end(self, reader):
        reader.skip()
        self.emit('contract_details_end', reader.decode_int())


    def _security_definition_option_parameter(self, reader):

        req_id = reader.decode_int()
        exchange = reader.decode_str()
        underlying_con_id = reader.decode_int()
        trading_class = reader.decode_str()
        multiplier = reader.decode_str()

        count = reader.decode_int()
        expirations = set()
        for _ in range(count):
            expirations.add(reader.decode_str())

        count = reader.decode_int()
        strikes = set()
        for _ in range(count):
            strikes.add(reader.decode_float())

        self.emit('security_definition_option_parameter', req_id, exchange,
                  underlying_con_id, trading_class, multiplier, expirations,
                  strikes)


    def _security_definition_option_parameter_end(self, reader):
        self.emit('security_definition_option_parameter_end', reader.decode_int())


    def _symbol_samples(self, reader):

        req_id = reader.decode_int()
        count = reader.decode_int()

        descriptions = list()
        for _ in range(count):
            description = ContractDescription()
            contract = description.contract
            contract.con_id = reader.decode_int()
            contract.symbol = reader.decode_str()
            contract.sec_type = reader.decode_str()
            contract.primary_exchange = reader.decode_str()
            contract.currency = reader.decode_str()

            types = reader.decode_int()
            for _ in range(types):
                description.derivative_sec_types.append(reader.decode_str())

            descriptions.append(description)

        self.emit('symbol_samples', req_id, descriptions)


    def _market_rule(self, reader):

        market_rule_id = reader.decode_int()
        count = reader.decode_int()

        increments = list()
        for _ in range(count):
            low_edge = reader.decode_float()
            increment = reader.decode_float()
            increments.append(PriceIncrement(low_edge, increment))

        self.emit('market_rule', market_rule_id, increments)


    # Historical data.

    def _historical_data(self, reader):

        if self.server_version < MIN_SERVER_VER_SYNT_REALTIME_BARS:
            reader.skip()

        req_id = reader.decode_int()
        start = reader.decode_str()
        end = reader.decode_str()
        count = reader.decode_int()

        for _ in range(count):
            bar = BarData()
            bar.date = reader.decode_str()
            bar.open = reader.decode_float()
            bar.high = reader.decode_float()
            bar.low = reader.decode_float()
            bar.close = reader.decode_float()

            if self.server_version < MIN_SERVER_VER_SYNT_REALTIME_BARS:
                bar.volume = reader.decode_int()
            else:
                bar.volume = reader.decode_long()

            bar.average = reader.decode_float()

            if self.server_version < MIN_SERVER_VER_SYNT_REALTIME_BARS:
                reader.skip()   # has gaps

            bar.bar_count = reader.decode_int()
            self.emit('historical_data', req_id, bar)

        self.emit('historical_data_end', req_id, start, end)


    def _historical_data_update(self, reader):

        req_id = reader.decode_int()

        bar = BarData()
        bar.bar_count = reader.decode_int()
        bar.date = reader.decode_str()
        bar.open = reader.decode_float()
        bar.close = reader.decode_float()
        bar.high = reader.decode_float()
        bar.low = reader.decode_float()
        bar.average = reader.decode_float()
        bar.volume = reader.decode_long()

        self.emit('historical_data_update', req_id, bar)


    def _real_time_bars(self, reader):

        reader.skip()
        req_id = reader.decode_int()
        time = reader.decode_long()
        open_ = reader.decode_float()
        high = reader.decode_float()
        low = reader.decode_float()
        close = reader.decode_float()
        volume = reader.decode_long()
        wap = reader.decode_float()
        count = reader.decode_int()

        self.emit('realtime_bar', req_id, time, open_, high, low, close,
                  volume, wap, count)


    def _head_timestamp(self, reader):
        req_id = reader.decode_int()
        head_timestamp = reader.decode_str()
        self.emit('head_timestamp', req_id, head_timestamp)


    def _histogram_data(self, reader):

        req_id = reader.decode_int()
        count = reader.decode_int()

        items = list()
        for _ in range(count):
            price = reader.decode_float()
            size = reader.decode_long()
            items.append(HistogramData(price, size))

        self.emit('histogram_data', req_id, items)


    def _historical_ticks(self, reader):

        req_id = reader.decode_int()
        count = reader.decode_int()

        ticks = list()
        for _ in range(count):
            tick = HistoricalTick()
            tick.time = reader.decode_long()
            reader.skip()   # unused, present for consistency with the other tick types
            tick.price = reader.decode_float()
            tick.size = reader.decode_int()
            ticks.append(tick)

        done = reader.decode_bool()
        self.emit('historical_ticks', req_id, ticks, done)


    def _historical_ticks_bid_ask(self, reader):

        req_id = reader.decode_int()
        count = reader.decode_int()

        ticks = list()
        for _ in range(count):
            tick = HistoricalTickBidAsk()
            tick.time = reader.decode_long()
            mask = reader.decode_int()
            tick.tick_attrib_bid_ask.ask_past_high = mask & 1 != 0
            tick.tick_attrib_bid_ask.bid_past_low = mask & 2 != 0
            tick.price_bid = reader.decode_float()
            tick.price_ask = reader.decode_float()
            tick.size_bid = reader.decode_int()
            tick.size_ask = reader.decode_int()
            ticks.append(tick)

        done = reader.decode_bool()
        self.emit('historical_ticks_bid_ask', req_id, ticks, done)


    def _historical_ticks_last(self, reader):

        req_id = reader.decode_int()
        count = reader.decode_int()

        ticks = list()
        for _ in range(count):
            tick = HistoricalTickLast()
            tick.time = reader.decode_long()
            mask = reader.decode_int()
            tick.tick_attrib_last.past_limit = mask & 1 != 0
            tick.tick_attrib_last.unreported = mask & 2 != 0
            tick.price = reader.decode_float()
            tick.size = reader.decode_int()
            tick.exchange = reader.decode_str()
            tick.special_conditions = reader.decode_str()
            ticks.append(tick)

        done = reader.decode_bool()
        self.emit('historical_ticks_last', req_id, ticks, done)


    # Scanners.

    def _scanner_parameters(self, reader):
        reader.skip()
        self.emit('scanner_parameters', reader.decode_str())


    def _scanner_data(self, reader):

        version = reader.decode_int()
        req_id = reader.decode_int()
        count = reader.decode_int()

        for _ in range(count):
            data = ScanData()
            contract = data.contract.contract

            data.rank = reader.decode_int()
            if version >= 3:
                contract.con_id = reader.decode_int()
            contract.symbol = reader.decode_str()
            contract.sec_type = reader.decode_str()
            contract.last_trade_date_or_contract_month = reader.decode_str()
            contract.strike = reader.decode_float()
            contract.right = reader.decode_str()
            contract.exchange = reader.decode_str()
            contract.currency = reader.decode_str()
            contract.local_symbol = reader.decode_str()
            data.contract.market_name = reader.decode_str()
            contract.trading_class = reader.decode_str()
            data.distance = reader.decode_str()
            data.benchmark = reader.decode_str()
            data.projection = reader.decode_str()
            if version >= 2:
                data.legs = reader.decode_str()

            self.emit('scanner_data', req_id, data.rank, data.contract,
                      data.distance, data.benchmark, data.projection, data.legs)

        self.emit('scanner_data_end', req_id)


    # News, fundamentals and miscellany.

    def _news_bulletins(self, reader):
        reader.skip()
        msg_id = reader.decode_int()
        msg_type = reader.decode_int()
        message = reader.decode_str()
        origin_exchange = reader.decode_str()
        self.emit('update_news_bulletin', msg_id, msg_type, message, origin_exchange)


    def _news_providers(self, reader):

        count = reader.decode_int()

        providers = list()
        for _ in range(count):
            code = reader.decode_str()
            name = reader.decode_str()
            providers.append(NewsProvider(code, name))

        self.emit('news_providers', providers)


    def _news_article(self, reader):
        req_id = reader.decode_int()
        article_type = reader.decode_int()
        article_text = reader.decode_str()
        self.emit('news_article', req_id, article_type, article_text)


    def _historical_news(self, reader):
        req_id = reader.decode_int()
        time = reader.decode_str()
        provider_code = reader.decode_str()
        article_id = reader.decode_str()
        headline = reader.decode_str()
        self.emit('historical_news', req_id, time, provider_code, article_id, headline)


    def _historical_news_end(self, reader):
        req_id = reader.decode_int()
        has_more = reader.decode_bool()
        self.emit('historical_news_end', req_id, has_more)


    def _fundamental_data(self, reader):
        reader.skip()
        req_id = reader.decode_int()
        data = reader.decode_str()
        self.emit('fundamental_data', req_id, data)


    def _current_time(self, reader):
        reader.skip()
        self.emit('current_time', reader.decode_long())


    def _err_msg(self, reader):
        reader.skip()
        req_id = reader.decode_int()
        code = reader.decode_int()
        text = reader.decode_str()
        self.emit('error', req_id, code, text)


    def _verify_message_api(self, reader):
        reader.skip()
        self.emit('verify_message_api', reader.decode_str())


    def _verify_completed(self, reader):
        reader.skip()
        is_successful = reader.decode_str() == 'true'
        error_text = reader.decode_str()
        self.emit('verify_completed', is_successful, error_text)


    def _verify_and_auth_message_api(self, reader):
        reader.skip()
        api_data = reader.decode_str()
        xyz_challenge = reader.decode_str()
        self.emit('verify_and_auth_message_api', api_data, xyz_challenge)


    def _verify_and_auth_completed(self, reader):
        reader.skip()
        is_successful = reader.decode_str() == 'true'
        error_text = reader.decode_str()
        self.emit('verify_and_auth_completed', is_successful, error_text)


    def _display_group_list(self, reader):
        reader.skip()
        req_id = reader.decode_int()
        groups = reader.decode_str()
        self.emit('display_group_list', req_id, groups)


    def _display_group_updated(self, reader):
        reader.skip()
        req_id = reader.decode_int()
        contract_info = reader.decode_str()
        self.emit('display_group_updated', req_id, contract_info)


# end of class Decoder


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
