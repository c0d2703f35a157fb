from .common import Holder
from .contract import ContractDetails
from .protocol.fields import UNSET_INTEGER, UNSET_DOUBLE

NO_ROW_NUMBER_SPECIFIED = -1


class ScannerSubscription(Holder):
    """ Parameters for a market scanner subscription. See the scanner
        parameters XML (req_scanner_parameters) for the valid instrument,
        location and scan codes.
    """

    def __init__(self):
        self.number_of_rows = NO_ROW_NUMBER_SPECIFIED
        self.instrument = ''
        self.location_code = ''
        self.scan_code = ''
        self.above_price = UNSET_DOUBLE
        self.below_price = UNSET_DOUBLE
        self.above_volume = UNSET_INTEGER
        self.market_cap_above = UNSET_DOUBLE
        self.market_cap_below = UNSET_DOUBLE
        self.moody_rating_above = ''
        self.moody_rating_below = ''
        self.sp_rating_above = ''
        self.sp_rating_below = ''
        self.maturity_date_above = ''
        self.maturity_date_below = ''
        self.coupon_rate_above = UNSET_DOUBLE
        self.coupon_rate_below = UNSET_DOUBLE
        self.exclude_convertible = False
        self.average_option_volume_above = UNSET_INTEGER
        self.scanner_setting_pairs = ''
        self.stock_type_filter = ''



class ScanData(Holder):

    def __init__(self):
        self.contract = ContractDetails()
        self.rank = 0
        self.distance = ''
        self.benchmark = ''
        self.projection = ''
        self.legs = ''


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
