import ibwire
import pytest

from ibwire import server_versions as sv
from ibwire.protocol.fields import NO_VALID_ID


def stock():

    contract = ibwire.Contract()
    contract.symbol = 'AAPL'
    contract.sec_type = 'STK'
    contract.exchange = 'SMART'
    contract.currency = 'USD'
    return contract


def limit_order(quantity=100, price=150.5):

    order = ibwire.Order()
    order.action = 'BUY'
    order.order_type = 'LMT'
    order.total_quantity = quantity
    order.lmt_price = price
    return order


def test_boundary_encodings(client_factory):

    client = client_factory()

    client.cancel_account_summary(2)
    client.req_account_updates(True, 'D12345')

    assert client.socket.messages() == [['63', '1', '2'], ['6', '2', '1', 'D12345']]


def test_not_connected(recorder):

    client = ibwire.Client(recorder)
    client.req_current_time()
    client.cancel_mkt_data(5)

    assert recorder.events == [
        ('error', NO_VALID_ID, 504, 'Not connected'),
        ('error', 5, 504, 'Not connected'),
    ]


def test_simple_requests(client_factory):

    client = client_factory()

    client.req_current_time()
    client.req_ids(1)
    client.cancel_order(7)
    client.req_market_data_type(ibwire.MarketDataType.DELAYED)
    client.request_fa(ibwire.FaDataType.GROUPS)
    client.req_pnl(3, 'DU123', '')
    client.req_family_codes()
    client.req_completed_orders(True)

    assert client.socket.messages() == [
        ['49', '1'],
        ['8', '1', '1'],
        ['4', '1', '7'],
        ['59', '1', '3'],
        ['18', '1', '1'],
        ['92', '3', 'DU123', ''],
        ['80'],
        ['99', '1'],
    ]


def test_update_tws(client_factory, recorder):

    client = client_factory(sv.MIN_SERVER_VER_PNL - 1)
    client.req_pnl(3, 'DU123', '')

    assert client.socket.sent == []
    assert len(recorder.events) == 1

    name, req_id, code, text = recorder.events[0]
    assert name == 'error'
    assert req_id == 3
    assert code == 503
    assert text == 'The TWS is out of date and must be upgraded. It does not support PnL request.'


def test_req_mkt_data(client_factory):

    client = client_factory()
    client.req_mkt_data(1, stock(), '233', False, False)

    assert client.socket.messages() == [[
        '1', '11', '1',
        '0', 'AAPL', 'STK', '', '0.0', '', '', 'SMART', '', 'USD', '', '',
        '0', '233', '0', '0', '']]


def test_req_mkt_data_options_refused(client_factory, recorder):

    client = client_factory()
    client.req_mkt_data(1, stock(), '', False, False, [ibwire.TagValue('a', 'b')])

    assert client.socket.sent == []
    assert recorder.events[0][2] == 506


def test_req_mkt_data_combo(client_factory):

    contract = stock()
    contract.sec_type = 'BAG'

    leg = ibwire.ComboLeg()
    leg.con_id = 43645865
    leg.ratio = 1
    leg.action = 'BUY'
    leg.exchange = 'SMART'
    contract.combo_legs = [leg]

    client = client_factory()
    client.req_mkt_data(1, contract)

    fields = client.socket.messages()[0]
    assert fields[15:20] == ['1', '43645865', '1', 'BUY', 'SMART']


def test_cancel_mkt_depth(client_factory, recorder):

    client = client_factory()
    client.cancel_mkt_depth(4, True)
    assert client.socket.messages() == [['11', '1', '4', '1']]

    older = client_factory(sv.MIN_SERVER_VER_SMART_DEPTH - 1)
    older.cancel_mkt_depth(4)
    assert older.socket.messages() == [['11', '1', '4']]

    older.cancel_mkt_depth(4, True)
    assert recorder.events[-1][2] == 503


def test_tick_by_tick(client_factory, recorder):

    client = client_factory()
    client.req_tick_by_tick_data(9, stock(), ibwire.TickByTickType.BID_ASK, 0, True)

    fields = client.socket.messages()[0]
    assert fields[:3] == ['97', '9', '0']
    assert fields[-3:] == ['BidAsk', '0', '1']

    older = client_factory(sv.MIN_SERVER_VER_TICK_BY_TICK_IGNORE_SIZE - 1)
    older.req_tick_by_tick_data(9, stock(), 'Last')
    assert older.socket.messages()[0][-1] == 'Last'

    older.req_tick_by_tick_data(9, stock(), 'Last', 10)
    assert recorder.events[-1][:3] == ('error', 9, 503)


def test_historical_data_version(client_factory):

    client = client_factory()
    client.req_historical_data(5, stock(), '', '1 D', '1 hour', 'TRADES', 1, 1, True)

    fields = client.socket.messages()[0]
    assert fields[:3] == ['20', '5', '0']
    assert fields[-9:] == ['0', '', '1 hour', '1 D', '1', 'TRADES', '1', '1', '']

    older = client_factory(sv.MIN_SERVER_VER_SYNT_REALTIME_BARS - 1)
    older.req_historical_data(5, stock(), '', '1 D', '1 hour', 'TRADES', 1, 1)

    fields = older.socket.messages()[0]
    assert fields[:3] == ['20', '6', '5']
    assert fields[-1] == ''


def test_contract_details_exchange(client_factory):

    contract = stock()
    contract.primary_exchange = 'ISLAND'

    client = client_factory(sv.MIN_SERVER_VER_PRIMARYEXCH - 1)
    client.req_contract_details(2, contract)

    fields = client.socket.messages()[0]
    assert 'SMART:ISLAND' in fields

    client = client_factory()
    client.req_contract_details(2, contract)

    fields = client.socket.messages()[0]
    assert fields[10:12] == ['SMART', 'ISLAND']


def test_verify_request(client_factory, recorder):

    client = client_factory()
    client.verify_request('api', '1.0')

    assert client.socket.sent == []
    assert recorder.events[0][2] == 508

    client.extra_auth = True
    client.verify_request('api', '1.0')
    assert client.socket.messages() == [['65', '1', 'api', '1.0']]


def test_place_order(client_factory):

    client = client_factory()
    client.place_order(7, stock(), limit_order())

    fields = client.socket.messages()[0]

    # No message version at current server versions.
    assert fields[:3] == ['3', '7', '0']
    assert fields[3:14] == ['AAPL', 'STK', '', '0.0', '', '', 'SMART', '', 'USD', '', '']
    assert fields[14:16] == ['', '']
    assert fields[16:21] == ['BUY', '100.0', 'LMT', '150.5', '']

    # The order ends with the price management algo flag, unset.
    assert fields[-1] == ''


def test_place_order_old_server(client_factory):

    client = client_factory(sv.MIN_SERVER_VER_ORDER_CONTAINER - 1)
    client.place_order(7, stock(), limit_order())

    fields = client.socket.messages()[0]
    assert fields[:3] == ['3', '45', '7']


def test_place_order_refused(client_factory, recorder):

    order = limit_order()
    order.use_price_mgmt_algo = True

    client = client_factory(sv.MIN_SERVER_VER_PRICE_MGMT_ALGO - 1)
    client.place_order(7, stock(), order)

    assert client.socket.sent == []

    name, req_id, code, text = recorder.events[0]
    assert req_id == 7
    assert code == 503
    assert text.endswith('It does not support Use price management algo requests.')


def test_place_order_conditions(client_factory):

    order = limit_order()
    order.conditions = [ibwire.condition.TimeCondition(True, '20240102 10:00:00').or_()]
    order.conditions_ignore_rth = True

    client = client_factory()
    client.place_order(7, stock(), order)

    fields = client.socket.messages()[0]

    start = fields.index('20240102 10:00:00') - 4
    assert fields[start:start + 7] == ['1', '3', 'o', '1', '20240102 10:00:00', '1', '0']


def test_place_order_algo(client_factory):

    order = ibwire.algo_params.fill_adaptive_params(limit_order(), 'Normal')

    client = client_factory()
    client.place_order(7, stock(), order)

    fields = client.socket.messages()[0]

    start = fields.index('Adaptive')
    assert fields[start:start + 4] == ['Adaptive', '1', 'adaptivePriority', 'Normal']


def test_send_failure(client_factory, recorder):

    class Broken:
        def sendall(self, data):
            raise ConnectionResetError('reset')

    client = client_factory()
    client.socket = Broken()
    client.cancel_order(7)

    name, req_id, code, text = recorder.events[0]
    assert req_id == 7
    assert code == 509
    assert 'reset' in text

def test_place_order_combo(client_factory):

    contract = stock()
    contract.sec_type = 'BAG'

    leg = ibwire.ComboLeg()
    leg.con_id = 43645865
    leg.ratio = 2
    leg.action = 'BUY'
    leg.exchange = 'SMART'
    contract.combo_legs = [leg]

    order = limit_order()
    order.order_combo_legs = [ibwire.OrderComboLeg(1.25), ibwire.OrderComboLeg()]
    order.smart_combo_routing_params = [ibwire.TagValue('NonGuaranteed', '1')]

    client = client_factory()
    client.place_order(7, contract, order)

    fields = client.socket.messages()[0]

    start = fields.index('43645865') - 1
    assert fields[start:start + 16] == [
        '1', '43645865', '2', 'BUY', 'SMART', '0', '0', '', '-1',
        '2', '1.25', '',
        '1', 'NonGuaranteed', '1',
        '']


def test_place_order_combo_leg_prices_refused(client_factory, recorder):

    contract = stock()
    contract.sec_type = 'BAG'

    order = limit_order()
    order.order_combo_legs = [ibwire.OrderComboLeg(1.25)]

    client = client_factory(sv.MIN_SERVER_VER_ORDER_COMBO_LEGS_PRICE - 1)
    client.place_order(7, contract, order)

    assert client.socket.sent == []
    assert recorder.events[0][1:3] == (7, 503)
    assert recorder.events[0][3].endswith('per-leg prices for order combo legs.')


def test_place_order_delta_neutral_contract(client_factory, recorder):

    contract = stock()
    contract.delta_neutral_contract = ibwire.DeltaNeutralContract()
    contract.delta_neutral_contract.con_id = 12345
    contract.delta_neutral_contract.delta = 0.5
    contract.delta_neutral_contract.price = 98.25

    client = client_factory()
    client.place_order(7, contract, limit_order())

    fields = client.socket.messages()[0]

    # Present flag, the contract, then the empty algo strategy.
    start = fields.index('12345') - 1
    assert fields[start:start + 5] == ['1', '12345', '0.5', '98.25', '']

    older = client_factory(sv.MIN_SERVER_VER_DELTA_NEUTRAL - 1)
    older.place_order(7, contract, limit_order())

    assert older.socket.sent == []
    assert recorder.events[-1][3].endswith('It does not support delta-neutral orders.')


def volatility_order():

    order = limit_order()
    order.order_type = 'VOL'
    order.volatility = 0.3
    order.volatility_type = 2
    order.continuous_update = True
    order.reference_price_type = 1
    return order


def test_place_order_volatility(client_factory):

    client = client_factory()
    client.place_order(7, stock(), volatility_order())

    fields = client.socket.messages()[0]

    start = fields.index('0.3')
    assert fields[start:start + 8] == ['0.3', '2', '', '', '1', '1', '', '']


def test_place_order_volatility_delta_neutral(client_factory):

    order = volatility_order()
    order.delta_neutral_order_type = 'LMT'
    order.delta_neutral_aux_price = 1.5
    order.delta_neutral_con_id = 999
    order.delta_neutral_settling_firm = 'FIRM'
    order.delta_neutral_clearing_account = 'ACC'
    order.delta_neutral_clearing_intent = 'IB'
    order.delta_neutral_open_close = 'O'
    order.delta_neutral_short_sale = True
    order.delta_neutral_short_sale_slot = 1
    order.delta_neutral_designated_location = 'LOC'

    client = client_factory()
    client.place_order(7, stock(), order)

    fields = client.socket.messages()[0]

    start = fields.index('0.3')
    assert fields[start:start + 16] == [
        '0.3', '2', 'LMT', '1.5',
        '999', 'FIRM', 'ACC', 'IB',
        'O', '1', '1', 'LOC',
        '1', '1', '', '']


def test_place_order_scale(client_factory):

    order = ibwire.algo_params.fill_scale_params(
        limit_order(), 300, 200, True, 0.05, 0.02, 60, 0.1, True, 5, 7)
    order.scale_table = 'tbl'
    order.active_start_time = '20240102 09:30:00'
    order.active_stop_time = '20240102 16:00:00'

    client = client_factory()
    client.place_order(7, stock(), order)

    fields = client.socket.messages()[0]

    start = fields.index('300')
    assert fields[start:start + 13] == [
        '300', '200', '0.05',
        '0.02', '60', '0.1', '1', '5', '7', '1',
        'tbl', '20240102 09:30:00', '20240102 16:00:00']


def test_place_order_scale_without_increment(client_factory):

    # Without a price increment the extended scale fields are left out.

    order = limit_order()
    order.scale_init_level_size = 300
    order.scale_subs_level_size = 200

    client = client_factory()
    client.place_order(7, stock(), order)

    fields = client.socket.messages()[0]

    start = fields.index('300')
    assert fields[start:start + 6] == ['300', '200', '', '', '', '']


def test_place_order_hedge(client_factory):

    order = limit_order()
    order.hedge_type = 'D'
    order.hedge_param = '0.5'

    client = client_factory()
    client.place_order(7, stock(), order)

    fields = client.socket.messages()[0]

    start = fields.index('D')
    assert fields[start:start + 3] == ['D', '0.5', '0']


def test_place_order_peg_bench(client_factory):

    order = limit_order()
    order.order_type = 'PEG BENCH'
    order.reference_contract_id = 555
    order.is_pegged_change_amount_decrease = True
    order.pegged_change_amount = 0.25
    order.reference_change_amount = 0.5
    order.reference_exchange_id = 'ISLAND'

    client = client_factory()
    client.place_order(7, stock(), order)

    fields = client.socket.messages()[0]

    # The benchmark fields, then an empty condition list.
    start = fields.index('555')
    assert fields[start:start + 6] == ['555', '1', '0.25', '0.5', 'ISLAND', '0']

    order.order_type = 'LMT'
    client.place_order(7, stock(), order)

    assert '555' not in client.socket.messages()[1]


def test_place_order_unreachable_attributes(client_factory, recorder):

    # Attributes newer than any negotiable server version are refused.

    order = limit_order()
    order.duration = 60

    client = client_factory()
    client.place_order(7, stock(), order)

    order = limit_order()
    order.post_to_ats = 1
    client.place_order(8, stock(), order)

    assert client.socket.sent == []
    assert recorder.events[0][1:3] == (7, 503)
    assert recorder.events[0][3].endswith('It does not support duration attribute.')
    assert recorder.events[1][1:3] == (8, 503)
    assert recorder.events[1][3].endswith('It does not support postToAts attribute.')


def test_request_id_by_keyword(client_factory, recorder):

    unconnected = ibwire.Client(recorder)
    unconnected.cancel_mkt_data(req_id=5)

    class Broken:
        def sendall(self, data):
            raise ConnectionResetError('reset')

    client = client_factory()
    client.socket = Broken()
    client.cancel_order(order_id=7)

    assert recorder.events[0][1:3] == (5, 504)
    assert recorder.events[1][1:3] == (7, 509)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
