""" The callback interface. The decoder thread invokes one method on a
    :class:`Wrapper` instance for every decoded event; applications subclass
    :class:`Wrapper` and override the methods for the events they care about.

    Every default implementation funnels through :func:`Wrapper.event`,
    which logs the event at DEBUG level. Overriding :func:`Wrapper.event` is a
    convenient way to observe every callback in one place.
"""

import logging

logger = logging.getLogger(__name__)


class Wrapper:

    def event(self, name, *args):
        """ Common sink for the default callback implementations.
        """

        logger.debug('%s%r', name, args)


    # Connection and errors.

    def error(self, req_id, error_code, error_string):
        """ Errors from the server, and errors raised locally while sending
            requests or decoding responses. *req_id* is the id of the request
            the error applies to, or -1 if there is none.
        """

        logger.error('request %d: error %d: %s', req_id, error_code, error_string)
        self.event('error', req_id, error_code, error_string)


    def connection_closed(self):
        """ Invoked once, as the last callback, when the connection ends.
        """

        self.event('connection_closed')


    # Market data.

    def tick_price(self, req_id, tick_type, price, attrib):
        """ A price tick; *attrib* is a :class:`ibwire.common.TickAttrib`.
        """

        self.event('tick_price', req_id, tick_type, price, attrib)


    def tick_size(self, req_id, tick_type, size):
        self.event('tick_size', req_id, tick_type, size)


    def tick_snapshot_end(self, req_id):
        self.event('tick_snapshot_end', req_id)


    def tick_generic(self, req_id, tick_type, value):
        self.event('tick_generic', req_id, tick_type, value)


    def tick_string(self, req_id, tick_type, value):
        self.event('tick_string', req_id, tick_type, value)


    def tick_efp(self, req_id, tick_type, basis_points, formatted_basis_points,
                 total_dividends, hold_days, future_last_trade_date,
                 dividend_impact, dividends_to_last_trade_date):
        """ Exchange for physical: the annualized basis, the implied futures
            price and the dividends up to the futures expiration.
        """

        self.event('tick_efp', req_id, tick_type, basis_points,
                   formatted_basis_points, total_dividends, hold_days,
                   future_last_trade_date, dividend_impact,
                   dividends_to_last_trade_date)


    def tick_option_computation(self, req_id, tick_type, implied_vol, delta,
                                opt_price, pv_dividend, gamma, vega, theta, und_price):
        """ Option greeks and model values. Values the server did not compute
            are UNSET_DOUBLE.
        """

        self.event('tick_option_computation', req_id, tick_type, implied_vol,
                   delta, opt_price, pv_dividend, gamma, vega, theta, und_price)


    def tick_req_params(self, ticker_id, min_tick, bbo_exchange, snapshot_permissions):
        self.event('tick_req_params', ticker_id, min_tick, bbo_exchange, snapshot_permissions)


    def tick_news(self, ticker_id, time_stamp, provider_code, article_id, headline, extra_data):
        self.event('tick_news', ticker_id, time_stamp, provider_code, article_id, headline, extra_data)


    def market_data_type(self, req_id, market_data_type):
        self.event('market_data_type', req_id, market_data_type)


    def reroute_mkt_data_req(self, req_id, con_id, exchange):
        self.event('reroute_mkt_data_req', req_id, con_id, exchange)


    def reroute_mkt_depth_req(self, req_id, con_id, exchange):
        self.event('reroute_mkt_depth_req', req_id, con_id, exchange)


    def update_mkt_depth(self, req_id, position, operation, side, price, size):
        self.event('update_mkt_depth', req_id, position, operation, side, price, size)


    def update_mkt_depth_l2(self, req_id, position, market_maker, operation,
                            side, price, size, is_smart_depth):
        self.event('update_mkt_depth_l2', req_id, position, market_maker,
                   operation, side, price, size, is_smart_depth)


    def mkt_depth_exchanges(self, depth_mkt_data_descriptions):
        self.event('mkt_depth_exchanges', depth_mkt_data_descriptions)


    def smart_components(self, req_id, smart_component_map):
        """ *smart_component_map* maps each bit number to a
            :class:`ibwire.common.SmartComponent`.
        """

        self.event('smart_components', req_id, smart_component_map)


    def tick_by_tick_all_last(self, req_id, tick_type, time, price, size,
                              tick_attrib_last, exchange, special_conditions):
        self.event('tick_by_tick_all_last', req_id, tick_type, time, price,
                   size, tick_attrib_last, exchange, special_conditions)


    def tick_by_tick_bid_ask(self, req_id, time, bid_price, ask_price,
                             bid_size, ask_size, tick_attrib_bid_ask):
        self.event('tick_by_tick_bid_ask', req_id, time, bid_price, ask_price,
                   bid_size, ask_size, tick_attrib_bid_ask)


    def tick_by_tick_mid_point(self, req_id, time, mid_point):
        self.event('tick_by_tick_mid_point', req_id, time, mid_point)


    # Orders.

    def order_status(self, order_id, status, filled, remaining, avg_fill_price,
                     perm_id, parent_id, last_fill_price, client_id, why_held,
                     mkt_cap_price):
        self.event('order_status', order_id, status, filled, remaining,
                   avg_fill_price, perm_id, parent_id, last_fill_price,
                   client_id, why_held, mkt_cap_price)


    def open_order(self, order_id, contract, order, order_state):
        self.event('open_order', order_id, contract, order, order_state)


    def open_order_end(self):
        self.event('open_order_end')


    def next_valid_id(self, order_id):
        """ The next order id available for place_order. Sent once after
            the connection is established, and again in response to req_ids.
        """

        self.event('next_valid_id', order_id)


    def order_bound(self, req_id, api_client_id, api_order_id):
        self.event('order_bound', req_id, api_client_id, api_order_id)


    def completed_order(self, contract, order, order_state):
        self.event('completed_order', contract, order, order_state)


    def completed_orders_end(self):
        self.event('completed_orders_end')


    def exec_details(self, req_id, contract, execution):
        self.event('exec_details', req_id, contract, execution)


    def exec_details_end(self, req_id):
        self.event('exec_details_end', req_id)


    def commission_report(self, commission_report):
        self.event('commission_report', commission_report)


    def delta_neutral_validation(self, req_id, delta_neutral_contract):
        self.event('delta_neutral_validation', req_id, delta_neutral_contract)


    def soft_dollar_tiers(self, req_id, tiers):
        self.event('soft_dollar_tiers', req_id, tiers)


    # Account and portfolio.

    def update_account_value(self, key, val, currency, account_name):
        self.event('update_account_value', key, val, currency, account_name)


    def update_portfolio(self, contract, position, market_price, market_value,
                         average_cost, unrealized_pnl, realized_pnl, account_name):
        self.event('update_portfolio', contract, position, market_price,
                   market_value, average_cost, unrealized_pnl, realized_pnl,
                   account_name)


    def update_account_time(self, time_stamp):
        self.event('update_account_time', time_stamp)


    def account_download_end(self, account_name):
        self.event('account_download_end', account_name)


    def managed_accounts(self, accounts_list):
        """ A comma-separated list of the accounts managed by this login.
        """

        self.event('managed_accounts', accounts_list)


    def position(self, account, contract, position, avg_cost):
        self.event('position', account, contract, position, avg_cost)


    def position_end(self):
        self.event('position_end')


    def account_summary(self, req_id, account, tag, value, currency):
        self.event('account_summary', req_id, account, tag, value, currency)


    def account_summary_end(self, req_id):
        self.event('account_summary_end', req_id)


    def position_multi(self, req_id, account, model_code, contract, pos, avg_cost):
        self.event('position_multi', req_id, account, model_code, contract, pos, avg_cost)


    def position_multi_end(self, req_id):
        self.event('position_multi_end', req_id)


    def account_update_multi(self, req_id, account, model_code, key, value, currency):
        self.event('account_update_multi', req_id, account, model_code, key, value, currency)


    def account_update_multi_end(self, req_id):
        self.event('account_update_multi_end', req_id)


    def pnl(self, req_id, daily_pnl, unrealized_pnl, realized_pnl):
        self.event('pnl', req_id, daily_pnl, unrealized_pnl, realized_pnl)


    def pnl_single(self, req_id, pos, daily_pnl, unrealized_pnl, realized_pnl, value):
        self.event('pnl_single', req_id, pos, daily_pnl, unrealized_pnl, realized_pnl, value)


    def family_codes(self, family_codes):
        self.event('family_codes', family_codes)


    def receive_fa(self, fa_data, cxml):
        self.event('receive_fa', fa_data, cxml)


    # Contracts.

    def contract_details(self, req_id, contract_details):
        self.event('contract_details', req_id, contract_details)


    def bond_contract_details(self, req_id, contract_details):
        self.event('bond_contract_details', req_id, contract_details)


    def contract_details_end(self, req_id):
        self.event('contract_details_end', req_id)


    def security_definition_option_parameter(self, req_id, exchange,
                                             underlying_con_id, trading_class,
                                             multiplier, expirations, strikes):
        self.event('security_definition_option_parameter', req_id, exchange,
                   underlying_con_id, trading_class, multiplier, expirations,
                   strikes)


    def security_definition_option_parameter_end(self, req_id):
        self.event('security_definition_option_parameter_end', req_id)


    def symbol_samples(self, req_id, contract_descriptions):
        self.event('symbol_samples', req_id, contract_descriptions)


    def market_rule(self, market_rule_id, price_increments):
        self.event('market_rule', market_rule_id, price_increments)


    # Historical data.

    def historical_data(self, req_id, bar):
        """ One bar of a historical data request. The end of the data is
            signalled by :func:`historical_data_end`.
        """

        self.event('historical_data', req_id, bar)


    def historical_data_end(self, req_id, start, end):
        self.event('historical_data_end', req_id, start, end)


    def historical_data_update(self, req_id, bar):
        self.event('historical_data_update', req_id, bar)


    def realtime_bar(self, req_id, time, open_, high, low, close, volume, wap, count):
        self.event('realtime_bar', req_id, time, open_, high, low, close, volume, wap, count)


    def head_timestamp(self, req_id, head_timestamp):
        self.event('head_timestamp', req_id, head_timestamp)


    def histogram_data(self, req_id, items):
        self.event('histogram_data', req_id, items)


    def historical_ticks(self, req_id, ticks, done):
        self.event('historical_ticks', req_id, ticks, done)


    def historical_ticks_bid_ask(self, req_id, ticks, done):
        self.event('historical_ticks_bid_ask', req_id, ticks, done)


    def historical_ticks_last(self, req_id, ticks, done):
        self.event('historical_ticks_last', req_id, ticks, done)


    # Scanners.

    def scanner_parameters(self, xml):
        self.event('scanner_parameters', xml)


    def scanner_data(self, req_id, rank, contract_details, distance, benchmark, projection, legs_str):
        self.event('scanner_data', req_id, rank, contract_details, distance,
                   benchmark, projection, legs_str)


    def scanner_data_end(self, req_id):
        self.event('scanner_data_end', req_id)


    # News, fundamentals and miscellany.

    def update_news_bulletin(self, msg_id, msg_type, news_message, origin_exch):
        self.event('update_news_bulletin', msg_id, msg_type, news_message, origin_exch)


    def news_providers(self, news_providers):
        self.event('news_providers', news_providers)


    def news_article(self, request_id, article_type, article_text):
        self.event('news_article', request_id, article_type, article_text)


    def historical_news(self, request_id, time, provider_code, article_id, headline):
        self.event('historical_news', request_id, time, provider_code, article_id, headline)


    def historical_news_end(self, request_id, has_more):
        self.event('historical_news_end', request_id, has_more)


    def fundamental_data(self, req_id, data):
        self.event('fundamental_data', req_id, data)


    def current_time(self, time):
        self.event('current_time', time)


    def verify_message_api(self, api_data):
        self.event('verify_message_api', api_data)


    def verify_completed(self, is_successful, error_text):
        self.event('verify_completed', is_successful, error_text)


    def verify_and_auth_message_api(self, api_data, xyz_challenge):
        self.event('verify_and_auth_message_api', api_data, xyz_challenge)


    def verify_and_auth_completed(self, is_successful, error_text):
        self.event('verify_and_auth_completed', is_successful, error_text)


    def display_group_list(self, req_id, groups):
        self.event('display_group_list', req_id, groups)


    def display_group_updated(self, req_id, contract_info):
        self.event('display_group_updated', req_id, contract_info)


# end of class Wrapper


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
