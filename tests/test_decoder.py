import ibwire
import pytest

from conftest import message
from ibwire.decoder import Decoder
from ibwire.protocol.fields import UNSET_DOUBLE, UNSET_INTEGER
from ibwire.protocol.ids import IncomingMessage
from ibwire.server_versions import MAX_CLIENT_VER, MIN_SERVER_VER_SYNT_REALTIME_BARS
from ibwire.transport import Channel


def test_dispatch_complete(recorder):

    decoder = Decoder(recorder, MAX_CLIENT_VER)

    for incoming in IncomingMessage:
        assert callable(decoder.handlers[incoming])


def test_unknown_id(recorder):

    decoder = Decoder(recorder, MAX_CLIENT_VER)
    decoder.interpret(message(9999, 1, 2))
    decoder.interpret(b'')

    assert recorder.events == []


def test_tick_price(recorder):

    decoder = Decoder(recorder, MAX_CLIENT_VER)
    decoder.interpret(message(1, 6, 5, 1, 150.25, 300, 3))

    assert len(recorder.events) == 2

    name, req_id, tick_type, price, attrib = recorder.events[0]
    assert name == 'tick_price'
    assert req_id == 5
    assert tick_type == ibwire.TickType.BID
    assert price == 150.25
    assert attrib.can_auto_execute == True
    assert attrib.past_limit == True
    assert attrib.pre_open == False

    assert recorder.events[1] == ('tick_size', 5, ibwire.TickType.BID_SIZE, 300)


def test_tick_price_without_size(recorder):

    decoder = Decoder(recorder, MAX_CLIENT_VER)
    decoder.interpret(message(1, 6, 5, ibwire.TickType.HIGH.value, 151.0, 0, 0))

    assert [event[0] for event in recorder.events] == ['tick_price']


def test_truncated_then_valid(recorder):

    decoder = Decoder(recorder, MAX_CLIENT_VER)

    decoder.interpret(message(1, 6, 5))
    decoder.interpret(message(9, 1, 1))

    assert len(recorder.events) == 2

    name, req_id, code, text = recorder.events[0]
    assert name == 'error'
    assert req_id == -1
    assert code == 508
    assert text.startswith('Bad message')

    assert recorder.events[1] == ('next_valid_id', 1)


def test_bad_number(recorder):

    decoder = Decoder(recorder, MAX_CLIENT_VER)
    decoder.interpret(message(9, 1, 'one'))

    assert recorder.named('error')[0][1] == 508


def test_error_message(recorder):

    decoder = Decoder(recorder, MAX_CLIENT_VER)
    decoder.interpret(message(4, 2, 7, 200, 'No security definition has been found'))

    assert recorder.events == [('error', 7, 200, 'No security definition has been found')]


def test_simple_messages(recorder):

    decoder = Decoder(recorder, MAX_CLIENT_VER)

    decoder.interpret(message(49, 1, 1700000000))
    decoder.interpret(message(15, 1, 'DU123,DU456'))
    decoder.interpret(message(63, 1, 2, 'DU123', 'NetLiquidation', '100000.00', 'USD'))
    decoder.interpret(message(64, 1, 2))

    assert recorder.events == [
        ('current_time', 1700000000),
        ('managed_accounts', 'DU123,DU456'),
        ('account_summary', 2, 'DU123', 'NetLiquidation', '100000.00', 'USD'),
        ('account_summary_end', 2),
    ]


def test_order_status(recorder):

    decoder = Decoder(recorder, MAX_CLIENT_VER)
    decoder.interpret(message(3, 7, 'Filled', 100, 0, 150.5, 12345, 0, 150.5, 0, '', 0))

    status = recorder.named('order_status')
    assert status == [(7, 'Filled', 100.0, 0.0, 150.5, 12345, 0, 150.5, 0, '', 0.0)]


def test_historical_data(recorder):

    decoder = Decoder(recorder, MAX_CLIENT_VER)

    payload = message(17, 3, '20240102 09:30:00', '20240103 16:00:00', 2,
                      '20240102', 10.0, 11.0, 9.5, 10.5, 1000, 10.25, 50,
                      '20240103', 10.5, 12.0, 10.0, 11.5, 2000, 11.0, 75)
    decoder.interpret(payload)

    bars = recorder.named('historical_data')
    assert len(bars) == 2
    assert bars[0][0] == 3
    assert bars[0][1].date == '20240102'
    assert bars[0][1].high == 11.0
    assert bars[0][1].volume == 1000
    assert bars[1][1].bar_count == 75

    assert recorder.events[-1] == ('historical_data_end', 3, '20240102 09:30:00', '20240103 16:00:00')


def test_historical_data_versioned(recorder):

    # Older servers send a version field, and a has-gaps field per bar.

    decoder = Decoder(recorder, MIN_SERVER_VER_SYNT_REALTIME_BARS - 1)

    payload = message(17, 3, 3, 'start', 'end', 1,
                      '20240102', 10.0, 11.0, 9.5, 10.5, 1000, 10.25, 'false', 50)
    decoder.interpret(payload)

    bars = recorder.named('historical_data')
    assert len(bars) == 1
    assert bars[0][1].bar_count == 50
    assert recorder.events[-1] == ('historical_data_end', 3, 'start', 'end')


def open_order_fields():
    """ The fields of a plain limit order as sent by a current server.
    """

    values = [5, 7]

    # Contract.
    values += [265598, 'AAPL', 'STK', '', 0, '', '', 'SMART', 'USD', 'AAPL', 'NMS']

    # Action through the order state.
    values += ['BUY', 100, 'LMT', 150.5, '', 'DAY', '', 'DU123', 'O', 0, 'ref', 0, 12345]
    values += [0, 0, 0, '', '']             # outside rth .. shares allocation
    values += ['', '', '', '', '']          # fa params, model code
    values += ['', '', '', '']              # good till date .. settling firm
    values += [0, '', -1]                   # short sale
    values += [0, '', '', '', '', '']       # auction, box, peg to stock
    values += [0, 0, 0, 0, '', 3, 0, 0, '', 0, 0]
    values += ['', 0, '', '', 0, 0]         # volatility
    values += ['', '']                      # trail
    values += ['', '']                      # basis points
    values += ['', 0, 0, 0]                 # combo legs, smart combo routing
    values += ['', '', '']                  # scale
    values += ['', 0, '', '', 0, 0, '', 0]  # hedge .. algo, solicited
    values += [0, 'Submitted', '', '', '', '', '', '', '', '', '', '', '', '', '', '']
    values += [0, 0]                        # randomize
    values += [0]                           # conditions
    values += ['', '', '', '', '', '', '', 0]
    values += ['', '', '', '', 0, 0, 0, 1]

    return values


def test_open_order(recorder):

    decoder = Decoder(recorder, MAX_CLIENT_VER)
    decoder.interpret(message(*open_order_fields()))

    assert [event[0] for event in recorder.events] == ['open_order']

    order_id, contract, order, state = recorder.named('open_order')[0]

    assert order_id == 7
    assert contract.con_id == 265598
    assert contract.symbol == 'AAPL'
    assert contract.trading_class == 'NMS'
    assert order.action == 'BUY'
    assert order.total_quantity == 100.0
    assert order.order_type == 'LMT'
    assert order.lmt_price == 150.5
    assert order.aux_price == UNSET_DOUBLE
    assert order.account == 'DU123'
    assert order.order_ref == 'ref'
    assert order.perm_id == 12345
    assert order.oca_type == 3
    assert order.min_qty == UNSET_INTEGER
    assert order.conditions == []
    assert order.use_price_mgmt_algo == True
    assert state.status == 'Submitted'
    assert state.commission == UNSET_DOUBLE


def test_open_order_conditions(recorder):

    values = open_order_fields()

    # Replace the empty condition list with one price condition.

    index = values.index('Submitted') + 17
    assert values[index] == 0

    condition = [ibwire.condition.PRICE, 'o', 1, 265598, 'SMART', 160.0, 2]
    values[index:index + 1] = [1] + condition + [1, 0]

    decoder = Decoder(recorder, MAX_CLIENT_VER)
    decoder.interpret(message(*values))

    order = recorder.named('open_order')[0][2]

    assert len(order.conditions) == 1

    price = order.conditions[0]
    assert isinstance(price, ibwire.condition.PriceCondition)
    assert price.is_conjunction_connection == False
    assert price.is_more == True
    assert price.con_id == 265598
    assert price.price == 160.0
    assert price.trigger_method == 2
    assert order.conditions_ignore_rth == True
    assert order.conditions_cancel_order == False


def test_callback_exception(recorder):

    class Fragile(type(recorder)):
        def current_time(self, time):
            raise RuntimeError('boom')

    fragile = Fragile()
    decoder = Decoder(fragile, MAX_CLIENT_VER)

    decoder.interpret(message(49, 1, 1700000000))
    decoder.interpret(message(9, 1, 3))

    assert fragile.events == [('next_valid_id', 3)]


def test_run(recorder):

    ended = list()

    channel = Channel()
    decoder = Decoder(recorder, MAX_CLIENT_VER, channel, lambda: ended.append(True))

    channel.put(message(9, 1, 1))
    channel.error(509, 'Exception caught while reading socket - reset')
    channel.end()

    decoder.start()
    decoder.join(5)

    assert decoder.is_alive() == False
    assert ended == [True]
    assert recorder.events == [
        ('next_valid_id', 1),
        ('error', -1, 509, 'Exception caught while reading socket - reset'),
        ('connection_closed',),
    ]

def completed_order_fields():
    """ The fields of a filled limit order as sent in reply to
        req_completed_orders by a current server.
    """

    values = [101]

    # Contract.
    values += [265598, 'AAPL', 'STK', '', 0, '', '', 'SMART', 'USD', 'AAPL', 'NMS']

    # Action through good after time.
    values += ['BUY', 100, 'LMT', 150.5, '', 'DAY', '', 'DU123', 'O', 0, 'ref', 12345, 0, 0, 0, '']
    values += ['', '', '', '', '']          # fa params, model code
    values += ['', '', '', '']              # good till date .. settling firm
    values += [0, '', -1]                   # short sale
    values += ['', '', '', '', '']          # box, peg to stock
    values += [0, 0, 0, '', 3, 0]           # display size .. trigger method
    values += ['', 0, '', '', 0, 0]         # volatility
    values += ['', '']                      # trail
    values += ['', 0, 0, 0]                 # combo legs, smart combo routing
    values += ['', '', '']                  # scale
    values += ['', '', '', 0]               # hedge, clearing, not held
    values += [0, '', 0]                    # delta neutral, algo, solicited
    values += ['Filled', 0, 0]              # status, randomize
    values += [0]                           # conditions
    values += ['', '', '', 0, 0]            # stop price .. oms container

    # Completion details.
    values += ['', 100, 0, 0, '', 0, 0, 0, '20240102 10:00:00 EST', 'Filled Size: 100']

    return values


def test_completed_order(recorder):

    decoder = Decoder(recorder, MAX_CLIENT_VER)
    decoder.interpret(message(*completed_order_fields()))

    assert [event[0] for event in recorder.events] == ['completed_order']

    contract, order, state = recorder.named('completed_order')[0]

    assert contract.con_id == 265598
    assert contract.trading_class == 'NMS'
    assert order.action == 'BUY'
    assert order.total_quantity == 100.0
    assert order.lmt_price == 150.5
    assert order.perm_id == 12345
    assert order.exempt_code == -1
    assert order.oca_type == 3
    assert order.volatility == UNSET_DOUBLE
    assert order.filled_quantity == 100.0
    assert order.parent_perm_id == 0
    assert state.status == 'Filled'
    assert state.completed_time == '20240102 10:00:00 EST'
    assert state.completed_status == 'Filled Size: 100'


def test_completed_order_truncated(recorder):

    values = completed_order_fields()[:-3]

    decoder = Decoder(recorder, MAX_CLIENT_VER)
    decoder.interpret(message(*values))

    assert recorder.named('completed_order') == []
    assert recorder.named('error')[0][1] == 508


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
