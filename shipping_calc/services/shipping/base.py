"""
Base Carrier Interface

This module defines the abstract base class that every quoting carrier
implements. A quote always runs the same pipeline:

    validate params -> build XML request -> POST it -> parse the response

Carriers keep no per-call state on the instance, so one carrier object can
serve any number of independent quote calls.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from shipping_calc.core.config import get_settings
from shipping_calc.services.shipping.transport import post_xml

logger = logging.getLogger(__name__)


class BaseCarrier(ABC):
    """Base class for all shipping carriers"""

    carrier_name = "Generic Carrier"
    carrier_code = "generic"

    def __init__(self, endpoint: Optional[str] = None, timeout: Optional[float] = None):
        """Initialize the carrier

        Args:
            endpoint: Override for the carrier's rate endpoint
            timeout: HTTP timeout in seconds. Defaults to SHIPPING_HTTP_TIMEOUT
        """
        settings = get_settings()
        self.endpoint = endpoint or self.default_endpoint(settings)
        self.timeout = timeout if timeout is not None else settings.SHIPPING_HTTP_TIMEOUT

    @abstractmethod
    def default_endpoint(self, settings) -> str:
        pass

    @abstractmethod
    def quote(self, params: Optional[Mapping[str, Any]]) -> Any:
        """Get a shipping quote

        Args:
            params: Carrier specific shipment settings

        Returns:
            Quoted price(s)
        """
        pass

    def _send(self, xml_request: str) -> str:
        """Send the request document to the carrier and return the raw response."""
        logger.info(f"Requesting {self.carrier_name} quote from {self.endpoint}")
        return post_xml(self.endpoint, xml_request, timeout=self.timeout)
