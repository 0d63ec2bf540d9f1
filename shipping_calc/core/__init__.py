"""
Core module exports.
"""
from .exceptions import (
    ShippingCalcError,
    InvalidArgument,
    CarrierError,
    TransportFailure
)
