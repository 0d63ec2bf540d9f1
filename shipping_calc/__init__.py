"""
shipping-calc: shipping quotes from the DHL and Freightquote XML APIs.
"""

__version__ = "0.2.0"

from shipping_calc.core.exceptions import (
    ShippingCalcError,
    InvalidArgument,
    CarrierError,
    TransportFailure,
)
from shipping_calc.services.shipping.data import US_STATES
from shipping_calc.services.shipping.carriers.dhl import DHLCarrier
from shipping_calc.services.shipping.carriers.freight_quote import FreightQuoteCarrier
from shipping_calc.services.shipping.factory import get_carrier

__all__ = [
    "ShippingCalcError",
    "InvalidArgument",
    "CarrierError",
    "TransportFailure",
    "US_STATES",
    "DHLCarrier",
    "FreightQuoteCarrier",
    "get_carrier",
]
