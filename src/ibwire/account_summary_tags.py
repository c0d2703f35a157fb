""" Tag names accepted by :func:`ibwire.client.Client.req_account_summary`.
    Pass a comma separated selection, or :data:`ALL_TAGS` for every standard
    tag. The ledger tags relay every cash balance tag: in the base currency
    (:data:`LEDGER`), in one currency (:func:`ledger`), or in all currencies
    (:data:`LEDGER_ALL`).
"""

ACCOUNT_TYPE = 'AccountType'
NET_LIQUIDATION = 'NetLiquidation'
TOTAL_CASH_VALUE = 'TotalCashValue'
SETTLED_CASH = 'SettledCash'
ACCRUED_CASH = 'AccruedCash'
BUYING_POWER = 'BuyingPower'
EQUITY_WITH_LOAN_VALUE = 'EquityWithLoanValue'
PREVIOUS_EQUITY_WITH_LOAN_VALUE = 'PreviousEquityWithLoanValue'
GROSS_POSITION_VALUE = 'GrossPositionValue'
REG_T_EQUITY = 'RegTEquity'
REG_T_MARGIN = 'RegTMargin'
SMA = 'SMA'
INIT_MARGIN_REQ = 'InitMarginReq'
MAINT_MARGIN_REQ = 'MaintMarginReq'
AVAILABLE_FUNDS = 'AvailableFunds'
EXCESS_LIQUIDITY = 'ExcessLiquidity'
CUSHION = 'Cushion'
FULL_INIT_MARGIN_REQ = 'FullInitMarginReq'
FULL_MAINT_MARGIN_REQ = 'FullMaintMarginReq'
FULL_AVAILABLE_FUNDS = 'FullAvailableFunds'
FULL_EXCESS_LIQUIDITY = 'FullExcessLiquidity'
LOOK_AHEAD_NEXT_CHANGE = 'LookAheadNextChange'
LOOK_AHEAD_INIT_MARGIN_REQ = 'LookAheadInitMarginReq'
LOOK_AHEAD_MAINT_MARGIN_REQ = 'LookAheadMaintMarginReq'
LOOK_AHEAD_AVAILABLE_FUNDS = 'LookAheadAvailableFunds'
LOOK_AHEAD_EXCESS_LIQUIDITY = 'LookAheadExcessLiquidity'
HIGHEST_SEVERITY = 'HighestSeverity'
DAY_TRADES_REMAINING = 'DayTradesRemaining'
LEVERAGE = 'Leverage'

LEDGER = '$LEDGER'
LEDGER_ALL = '$LEDGER:ALL'


def ledger(currency):
    return LEDGER + ':' + currency.upper()


standard = (
    ACCOUNT_TYPE,
    NET_LIQUIDATION,
    TOTAL_CASH_VALUE,
    SETTLED_CASH,
    ACCRUED_CASH,
    BUYING_POWER,
    EQUITY_WITH_LOAN_VALUE,
    PREVIOUS_EQUITY_WITH_LOAN_VALUE,
    GROSS_POSITION_VALUE,
    REG_T_EQUITY,
    REG_T_MARGIN,
    SMA,
    INIT_MARGIN_REQ,
    MAINT_MARGIN_REQ,
    AVAILABLE_FUNDS,
    EXCESS_LIQUIDITY,
    CUSHION,
    FULL_INIT_MARGIN_REQ,
    FULL_MAINT_MARGIN_REQ,
    FULL_AVAILABLE_FUNDS,
    FULL_EXCESS_LIQUIDITY,
    LOOK_AHEAD_NEXT_CHANGE,
    LOOK_AHEAD_INIT_MARGIN_REQ,
    LOOK_AHEAD_MAINT_MARGIN_REQ,
    LOOK_AHEAD_AVAILABLE_FUNDS,
    LOOK_AHEAD_EXCESS_LIQUIDITY,
    HIGHEST_SEVERITY,
    DAY_TRADES_REMAINING,
    LEVERAGE,
)

ALL_TAGS = ','.join(standard)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
