from .common import Holder


class Execution(Holder):
    """ One fill, as reported by the execution details callback.
    """

    def __init__(self):
        self.exec_id = ''
        self.time = ''
        self.acct_number = ''
        self.exchange = ''
        self.side = ''
        self.shares = 0.0
        self.price = 0.0
        self.perm_id = 0
        self.client_id = 0
        self.order_id = 0
        self.liquidation = 0
        self.cum_qty = 0.0
        self.avg_price = 0.0
        self.order_ref = ''
        self.ev_rule = ''
        self.ev_multiplier = 0.0
        self.model_code = ''
        self.last_liquidity = 0



class ExecutionFilter(Holder):
    """ Criteria for req_executions; empty or zero fields match everything.
    """

    def __init__(self):
        self.client_id = 0
        self.acct_code = ''
        self.time = ''
        self.symbol = ''
        self.sec_type = ''
        self.exchange = ''
        self.side = ''


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
