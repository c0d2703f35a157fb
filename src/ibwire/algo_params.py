""" Helpers that populate an :class:`ibwire.order.Order` for the broker's
    algorithmic order strategies. Each ``fill_*`` function sets
    ``algo_strategy`` and appends the strategy parameters to
    ``algo_params``; the order is modified in place and also returned.
"""

from .common import TagValue


def _add(order, tag, value):

    # Flags go over the wire as 1 or 0.

    if isinstance(value, bool):
        value = int(value)

    order.algo_params.append(TagValue(tag, str(value)))


def _window(order, start_time, end_time):
    _add(order, 'StartTime', start_time)
    _add(order, 'EndTime', end_time)


def fill_scale_params(order, init_level_size, subs_level_size, random_percent,
                      price_increment, price_adjust_value, price_adjust_interval,
                      profit_offset, auto_reset, init_position, init_fill_qty):
    """ Scale orders are not an algo strategy; the parameters are plain
        order attributes.
    """

    order.scale_init_level_size = init_level_size
    order.scale_subs_level_size = subs_level_size
    order.scale_random_percent = random_percent
    order.scale_price_increment = price_increment
    order.scale_price_adjust_value = price_adjust_value
    order.scale_price_adjust_interval = price_adjust_interval
    order.scale_profit_offset = profit_offset
    order.scale_auto_reset = auto_reset
    order.scale_init_position = init_position
    order.scale_init_fill_qty = init_fill_qty

    return order


def fill_arrival_price_params(order, max_pct_vol, risk_aversion, start_time, end_time,
                              force_completion, allow_past_time, monetary_value=None):

    order.algo_strategy = 'ArrivalPx'
    _add(order, 'MaxPctVol', max_pct_vol)
    _add(order, 'RiskAversion', risk_aversion)
    _window(order, start_time, end_time)
    _add(order, 'ForceCompletion', force_completion)
    _add(order, 'AllowPastEndTime', allow_past_time)

    if monetary_value is not None:
        _add(order, 'monetaryValue', monetary_value)

    return order


def fill_dark_ice_params(order, display_size, start_time, end_time,
                         allow_past_end_time, monetary_value=None):

    order.algo_strategy = 'DarkIce'
    _add(order, 'DisplaySize', display_size)
    _window(order, start_time, end_time)
    _add(order, 'AllowPastEndTime', allow_past_end_time)

    if monetary_value is not None:
        _add(order, 'monetaryValue', monetary_value)

    return order


def fill_pct_vol_params(order, pct_vol, start_time, end_time, no_take_liq,
                        monetary_value=None):

    order.algo_strategy = 'PctVol'
    _add(order, 'PctVol', pct_vol)
    _window(order, start_time, end_time)
    _add(order, 'NoTakeLiq', no_take_liq)

    if monetary_value is not None:
        _add(order, 'monetaryValue', monetary_value)

    return order


def fill_twap_params(order, strategy_type, start_time, end_time,
                     allow_past_end_time, monetary_value=None):
    """ *strategy_type* is one of 'Marketable', 'Matching Midpoint',
        'Matching Same Side' or 'Matching Last'.
    """

    order.algo_strategy = 'Twap'
    _add(order, 'StrategyType', strategy_type)
    _window(order, start_time, end_time)
    _add(order, 'AllowPastEndTime', allow_past_end_time)

    if monetary_value is not None:
        _add(order, 'monetaryValue', monetary_value)

    return order


def fill_vwap_params(order, max_pct_vol, start_time, end_time, allow_past_end_time,
                     no_take_liq, monetary_value=None):

    order.algo_strategy = 'Vwap'
    _add(order, 'MaxPctVol', max_pct_vol)
    _window(order, start_time, end_time)
    _add(order, 'AllowPastEndTime', allow_past_end_time)
    _add(order, 'NoTakeLiq', no_take_liq)

    if monetary_value is not None:
        _add(order, 'monetaryValue', monetary_value)

    return order


def fill_accumulate_distribute_params(order, component_size, time_between_orders,
                                      randomize_time_20, randomize_size_55, give_up,
                                      catch_up, wait_for_fill, start_time, end_time):

    order.algo_strategy = 'AD'
    _add(order, 'componentSize', component_size)
    _add(order, 'timeBetweenOrders', time_between_orders)
    _add(order, 'randomizeTime20', randomize_time_20)
    _add(order, 'randomizeSize55', randomize_size_55)
    _add(order, 'giveUp', give_up)
    _add(order, 'catchUp', catch_up)
    _add(order, 'waitForFill', wait_for_fill)
    _add(order, 'activeTimeStart', start_time)
    _add(order, 'activeTimeEnd', end_time)

    return order


def fill_balance_impact_risk_params(order, max_pct_vol, risk_aversion, force_completion):

    order.algo_strategy = 'BalanceImpactRisk'
    _add(order, 'MaxPctVol', max_pct_vol)
    _add(order, 'RiskAversion', risk_aversion)
    _add(order, 'ForceCompletion', force_completion)

    return order


def fill_min_impact_params(order, max_pct_vol):

    order.algo_strategy = 'MinImpact'
    _add(order, 'MaxPctVol', max_pct_vol)

    return order


def fill_adaptive_params(order, priority):
    """ *priority* is 'Urgent', 'Normal' or 'Patient'.
    """

    order.algo_strategy = 'Adaptive'
    _add(order, 'adaptivePriority', priority)

    return order


def fill_close_price_params(order, max_pct_vol, risk_aversion, start_time,
                            force_completion, monetary_value=None):

    order.algo_strategy = 'ClosePx'
    _add(order, 'MaxPctVol', max_pct_vol)
    _add(order, 'RiskAversion', risk_aversion)
    _add(order, 'StartTime', start_time)
    _add(order, 'ForceCompletion', force_completion)

    if monetary_value is not None:
        _add(order, 'monetaryValue', monetary_value)

    return order


def fill_price_variant_pct_vol_params(order, pct_vol, delta_pct_vol, min_pct_vol_4px,
                                      max_pct_vol_4px, start_time, end_time,
                                      no_take_liq, monetary_value=None):

    order.algo_strategy = 'PctVolPx'
    _add(order, 'pctVol', pct_vol)
    _add(order, 'deltaPctVol', delta_pct_vol)
    _add(order, 'minPctVol4Px', min_pct_vol_4px)
    _add(order, 'maxPctVol4Px', max_pct_vol_4px)
    _window(order, start_time, end_time)
    _add(order, 'NoTakeLiq', no_take_liq)

    if monetary_value is not None:
        _add(order, 'monetaryValue', monetary_value)

    return order


def _variant_pct_vol(order, strategy, start_pct_vol, end_pct_vol, start_time, end_time,
                     no_take_liq, monetary_value):

    order.algo_strategy = strategy
    _add(order, 'startPctVol', start_pct_vol)
    _add(order, 'endPctVol', end_pct_vol)
    _window(order, start_time, end_time)
    _add(order, 'NoTakeLiq', no_take_liq)

    if monetary_value is not None:
        _add(order, 'monetaryValue', monetary_value)

    return order


def fill_size_variant_pct_vol_params(order, start_pct_vol, end_pct_vol, start_time,
                                     end_time, no_take_liq, monetary_value=None):
    return _variant_pct_vol(order, 'PctVolSz', start_pct_vol, end_pct_vol,
                            start_time, end_time, no_take_liq, monetary_value)


def fill_time_variant_pct_vol_params(order, start_pct_vol, end_pct_vol, start_time,
                                     end_time, no_take_liq, monetary_value=None):
    return _variant_pct_vol(order, 'PctVolTm', start_pct_vol, end_pct_vol,
                            start_time, end_time, no_take_liq, monetary_value)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
