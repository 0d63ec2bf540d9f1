"""
Shipping carrier integrations.
"""
from .base import BaseCarrier
from .carriers import DHLCarrier, DHLQuoteRequest, FreightQuoteCarrier, FreightQuoteRequest
from .factory import get_carrier
