"""
Shipping carrier factory to make carrier selection easy
"""
from typing import Optional

from shipping_calc.services.shipping.base import BaseCarrier
from shipping_calc.services.shipping.carriers.dhl import DHLCarrier
from shipping_calc.services.shipping.carriers.freight_quote import FreightQuoteCarrier

CARRIERS = {
    "dhl": DHLCarrier,
    "freightquote": FreightQuoteCarrier,
}


def get_carrier(carrier_code: str, endpoint: Optional[str] = None, timeout: Optional[float] = None) -> BaseCarrier:
    """
    Factory function to get the appropriate carrier by code

    Args:
        carrier_code: The code of the carrier to use
        endpoint: Optional override for the carrier's rate endpoint
        timeout: Optional HTTP timeout in seconds

    Returns:
        A new instance of the appropriate carrier class

    Raises:
        ValueError: If the carrier code is not supported
    """
    if carrier_code not in CARRIERS:
        raise ValueError(f"Carrier '{carrier_code}' is not supported")

    return CARRIERS[carrier_code](endpoint=endpoint, timeout=timeout)
