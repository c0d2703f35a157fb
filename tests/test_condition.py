import ibwire
import pytest

from ibwire import condition
from ibwire.protocol import fields


def test_create():

    for condition_type, cls in ((condition.PRICE, condition.PriceCondition),
                                (condition.TIME, condition.TimeCondition),
                                (condition.MARGIN, condition.MarginCondition),
                                (condition.EXECUTION, condition.ExecutionCondition),
                                (condition.VOLUME, condition.VolumeCondition),
                                (condition.PERCENT_CHANGE, condition.PercentChangeCondition)):

        instance = condition.create(condition_type)
        assert isinstance(instance, cls)
        assert instance.type == condition_type

    with pytest.raises(ValueError):
        condition.create(2)


def test_fields():

    price = condition.PriceCondition(condition.PriceCondition.LAST, 265598, 'SMART', True, 160.0)
    assert price.fields() == ['a', True, 265598, 'SMART', 160.0, 2]

    margin = condition.MarginCondition(False, 30).or_()
    assert margin.fields() == ['o', False, 30]

    execution = condition.ExecutionCondition('STK', 'SMART', 'AAPL')
    assert execution.fields() == ['a', 'STK', 'SMART', 'AAPL']


def test_decode():

    payload = fields.encode_all(['o', 1, 8314, 'SMART', 5000])
    reader = fields.reader(payload)

    volume = condition.create(condition.VOLUME)
    volume.decode(reader)

    assert volume.is_conjunction_connection == False
    assert volume.is_more == True
    assert volume.con_id == 8314
    assert volume.exchange == 'SMART'
    assert volume.volume == 5000
    assert reader.remaining() == 0


def test_encode_then_decode():

    sent = condition.PercentChangeCondition(8314, 'SMART', False, 2.5)
    reader = fields.reader(fields.encode_all(sent.fields()))

    decoded = condition.create(condition.PERCENT_CHANGE)
    decoded.decode(reader)

    assert decoded == sent

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
