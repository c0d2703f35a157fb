import ibwire
import pytest

from ibwire import account_summary_tags, algo_params


def test_all_tags():

    tags = account_summary_tags.ALL_TAGS.split(',')

    assert tags[0] == 'AccountType'
    assert 'NetLiquidation' in tags
    assert 'Leverage' in tags
    assert account_summary_tags.LEDGER not in tags

    assert account_summary_tags.ledger('usd') == '$LEDGER:USD'


def test_vwap():

    order = ibwire.Order()
    result = algo_params.fill_vwap_params(order, 0.2, '09:00:00 US/Eastern',
                                          '16:00:00 US/Eastern', True, False, 100000)

    assert result is order
    assert order.algo_strategy == 'Vwap'

    pairs = [(param.tag, param.value) for param in order.algo_params]
    assert pairs == [
        ('MaxPctVol', '0.2'),
        ('StartTime', '09:00:00 US/Eastern'),
        ('EndTime', '16:00:00 US/Eastern'),
        ('AllowPastEndTime', '1'),
        ('NoTakeLiq', '0'),
        ('monetaryValue', '100000'),
    ]


def test_scale():

    order = algo_params.fill_scale_params(ibwire.Order(), 2000, 500, True, 0.05,
                                          0.0, 0, 0.1, True, 1000, 200)

    assert order.algo_strategy == ''
    assert order.scale_init_level_size == 2000
    assert order.scale_price_increment == 0.05
    assert order.scale_init_fill_qty == 200

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
