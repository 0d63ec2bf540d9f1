"""
Freightquote Carrier Implementation

Freight quotes from several LTL carriers at once through Freightquote's XML
quoter (connection test version 03).

A fresh account comes with a test key that works with your username and
password; ask Freightquote for a production key once things are stable. The
generic xmltest@FreightQuote.com / XML login works too, without the
account-specific debugging info.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from shipping_calc.core.exceptions import InvalidArgument
from shipping_calc.services.shipping.base import BaseCarrier
from shipping_calc.services.shipping.data import (
    FREIGHTQUOTE_CONDITIONS,
    FREIGHTQUOTE_DEFAULT_CONDITIONS,
    FREIGHTQUOTE_DEFAULT_DESCRIPTION,
    FREIGHTQUOTE_REQUIRED_FIELDS,
)
from shipping_calc.services.shipping.payload_builder import FreightQuotePayloadBuilder
from shipping_calc.services.shipping.validation import (
    check_optional_bool,
    is_number,
    parse_dimensions,
    require_fields,
)
from shipping_calc.services.shipping.xml_utils import as_list, element_text, parse_xml

logger = logging.getLogger(__name__)


def valid_conditions(conditions: Any) -> bool:
    return conditions is None or (isinstance(conditions, str) and conditions in FREIGHTQUOTE_CONDITIONS)


@dataclass(frozen=True)
class FreightQuoteRequest:
    """A validated Freightquote QUOTE request with defaults applied."""
    api_email: str
    api_password: str
    from_zip: Any
    to_zip: Any
    weight: Any
    dimensions: Optional[Tuple[str, str, str]] = None
    freight_class: Any = None
    description: str = FREIGHTQUOTE_DEFAULT_DESCRIPTION
    from_conditions: str = FREIGHTQUOTE_DEFAULT_CONDITIONS
    to_conditions: str = FREIGHTQUOTE_DEFAULT_CONDITIONS
    liftgate: bool = False
    inside_delivery: bool = False

    @classmethod
    def from_params(cls, params: Optional[Mapping[str, Any]]) -> "FreightQuoteRequest":
        """
        Validate a caller's parameter mapping.

        Args:
            params: Mapping with:
                api_email: API access email, provided by Freightquote.
                api_password: API access password, provided by Freightquote.
                from_zip: Sender's zip code.
                to_zip: Recipient's zip code.
                weight: Total weight of the order in lbs.
                dimensions: Optional "LengthxWidthxHeight" string, e.g. "23x32x15".
                class: Optional Freightquote shipping class, e.g. 92.5.
                description: Optional description of the goods. Defaults to "NODESC".
                from_conditions: Optional "RES", "BIZ_WITH" (dock or forklift) or
                    "BIZ_WITHOUT" for the sending location. Defaults to "RES".
                to_conditions: Same, for the receiving location.
                liftgate: Optional bool, liftgate needed at the receiving location.
                inside_delivery: Optional bool, inside delivery needed.

            One of dimensions or class has to be there. If both are, class wins.

        Raises:
            InvalidArgument: If anything is missing or invalid
        """
        if params is None:
            raise InvalidArgument("Nil parameters for FreightQuote quote.")

        require_fields(params, FREIGHTQUOTE_REQUIRED_FIELDS)

        freight_class = params.get('class')
        dimensions = parse_dimensions(params.get('dimensions'))
        if dimensions is None and freight_class is None:
            raise InvalidArgument("Invalid shipment dimensions")
        if freight_class is not None and not is_number(freight_class):
            raise InvalidArgument("Invalid freight class")

        to_conditions = params.get('to_conditions')
        if not valid_conditions(to_conditions):
            raise InvalidArgument("Invalid receiving conditions")
        from_conditions = params.get('from_conditions')
        if not valid_conditions(from_conditions):
            raise InvalidArgument("Invalid shipping conditions")

        liftgate = check_optional_bool(
            params.get('liftgate'), "Invalid liftgate option, only boolean values."
        )
        inside_delivery = check_optional_bool(
            params.get('inside_delivery'), "Invalid inside delivery option, only boolean values."
        )

        description = params.get('description')

        weight = params['weight']
        if not is_number(weight) or not weight > 0:
            raise InvalidArgument("Invalid weight")

        return cls(
            api_email=params['api_email'],
            api_password=params['api_password'],
            from_zip=params['from_zip'],
            to_zip=params['to_zip'],
            weight=weight,
            dimensions=dimensions,
            freight_class=freight_class,
            description=FREIGHTQUOTE_DEFAULT_DESCRIPTION if description is None else description,
            from_conditions=from_conditions or FREIGHTQUOTE_DEFAULT_CONDITIONS,
            to_conditions=to_conditions or FREIGHTQUOTE_DEFAULT_CONDITIONS,
            liftgate=liftgate,
            inside_delivery=inside_delivery,
        )


class FreightQuoteCarrier(BaseCarrier):
    """Freightquote multi-carrier freight quoter."""

    carrier_name = "Freightquote"
    carrier_code = "freightquote"

    def __init__(self, endpoint: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__(endpoint=endpoint, timeout=timeout)
        self.payload_builder = FreightQuotePayloadBuilder()

    def default_endpoint(self, settings) -> str:
        return settings.FREIGHTQUOTE_ENDPOINT

    def quote(self, params: Optional[Mapping[str, Any]]) -> Dict[str, Optional[str]]:
        """Get freight quotes from every carrier Freightquote offers.

        Args:
            params: Shipment settings, see FreightQuoteRequest.from_params

        Returns:
            Dict: {carrier_name: rate} in the order Freightquote listed them

        Raises:
            InvalidArgument: Bad params, nothing was sent
            CarrierError: The response wasn't readable XML
            TransportFailure: Freightquote couldn't be reached
        """
        request = FreightQuoteRequest.from_params(params)
        xml_request = self.payload_builder.build(request)
        xml_response = self._send(xml_request)
        return self.parse_response(xml_response)

    def parse_response(self, xml_response: str) -> Dict[str, Optional[str]]:
        """Returns a dict with the carriers and their rates."""
        doc = parse_xml(xml_response, self.carrier_name)

        quotes = {}
        for root in doc.values():
            if not isinstance(root, dict):
                continue
            for carrier in as_list(root.get("CARRIER")):
                if not isinstance(carrier, dict):
                    continue
                name = element_text(carrier.get("CARRIERNAME"))
                if not name:
                    logger.warning("Skipping Freightquote carrier without a CARRIERNAME")
                    continue
                quotes[name] = element_text(carrier.get("RATE"))

        logger.info(f"Freightquote returned {len(quotes)} carrier rate(s)")
        return quotes
