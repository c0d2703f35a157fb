from __future__ import annotations

from typing import Any, Iterable, List

from . import fields


class MessageBuilder:
    """ Fluent assembly of an outgoing message. Fields are appended in call
        order; every append takes an optional *when* condition, so that the
        version gates for a request read as an ordered list of
        (condition, field) steps:

            builder = MessageBuilder(OutgoingMessage.CANCEL_MKT_DEPTH)
            builder.add(1, req_id)
            builder.add(is_smart_depth, when=version >= SMART_DEPTH)
            payload = builder.build()

        A step whose condition is False contributes nothing to the message.
    """

    def __init__(self, msg_id: int):
        self._fields: List[Any] = [int(msg_id)]


    def add(self, *values, when: bool = True):
        if when:
            self._fields.extend(values)
        return self


    def extend(self, values: Iterable, when: bool = True):
        if when:
            self._fields.extend(values)
        return self


    def tag_values(self, tag_values, when: bool = True):
        """ Append a list of tag/value pairs collapsed into one field, in the
            ``tag=value;tag=value;`` form used for the various options lists.
        """

        if when:
            text = ''.join(f"{tv.tag}={tv.value};" for tv in tag_values or ())
            self._fields.append(text)
        return self


    def contract(self, contract, con_id: bool = True, primary_exchange: bool = True,
                 trading_class: bool = False):
        """ Append the commonly grouped contract description fields.
        """

        self.add(contract.con_id, when=con_id)
        self.add(contract.symbol,
                 contract.sec_type,
                 contract.last_trade_date_or_contract_month,
                 contract.strike,
                 contract.right,
                 contract.multiplier,
                 contract.exchange)
        self.add(contract.primary_exchange, when=primary_exchange)
        self.add(contract.currency, contract.local_symbol)
        self.add(contract.trading_class, when=trading_class)
        return self


    @property
    def fields(self) -> List[Any]:
        return list(self._fields)


    def build(self) -> bytes:
        return fields.encode_all(self._fields)


# end of class MessageBuilder


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
