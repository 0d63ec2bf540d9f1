# shipping_calc/services/shipping/payload_builder.py
"""
Rate request payload builders

Turn validated quote requests into the XML documents each carrier expects.
Documents are assembled as nested dicts (xmltodict's model: "@name" keys are
attributes, "#text" is element text, insertion order is element order) and
serialized with xmltodict.unparse.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

import xmltodict

from shipping_calc.services.shipping.data import (
    DHL_BILLING_PARTY,
    FREIGHTQUOTE_BILL_TO,
    FREIGHTQUOTE_CONDITIONS,
    FREIGHTQUOTE_PIECES,
)
from shipping_calc.services.shipping.validation import format_number

if TYPE_CHECKING:
    from shipping_calc.services.shipping.carriers.dhl import DHLQuoteRequest
    from shipping_calc.services.shipping.carriers.freight_quote import FreightQuoteRequest

XML_ENCODING = "UTF-8"


def render(document: Dict[str, Any], pretty: bool = False) -> str:
    """Serialize a document dict with a leading UTF-8 XML declaration."""
    return xmltodict.unparse(document, encoding=XML_ENCODING, full_document=True, pretty=pretty)


def _text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class DHLPayloadBuilder:
    """
    Builds the DHL eCommerce RateEstimate request.

    DHL gets the quote in 2 parts: the Requestor block authenticates the API
    user, the Shipment block nested below it asks for the estimate.
    """

    def build_document(self, request: "DHLQuoteRequest") -> Dict[str, Any]:
        # <eCommerce action="Request" version="1.1">
        return {
            "eCommerce": {
                "@action": "Request",
                "@version": "1.1",
                "Requestor": self._build_auth(request),
                "Shipment": self._build_rate_estimate(request),
            }
        }

    def build(self, request: "DHLQuoteRequest") -> str:
        return render(self.build_document(request))

    def _build_auth(self, request: "DHLQuoteRequest") -> Dict[str, Any]:
        return {
            "ID": _text(request.api_user),
            "Password": _text(request.api_password),
        }

    def _build_rate_estimate(self, request: "DHLQuoteRequest") -> Dict[str, Any]:
        return {
            "@action": "RateEstimate",
            "@version": "1.0",
            "ShippingCredentials": {
                "ShippingKey": _text(request.shipping_key),
                "AccountNbr": _text(request.account_num),
            },
            "ShipmentDetail": {
                "ShipDate": request.ship_date,
                "Service": {"Code": request.service_code},
                "ShipmentType": {"Code": request.shipment_code},
                "Weight": request.rendered_weight,
            },
            # Only quoting here, so assume the sender pays for the shipping
            "Billing": {"Party": {"Code": DHL_BILLING_PARTY}},
            "Receiver": {
                "Address": {
                    "State": request.to_state,
                    "Country": "US",
                    "PostalCode": str(request.to_zip),
                }
            },
        }


class FreightQuotePayloadBuilder:
    """Builds the Freightquote QUOTE request (connection test version 03)."""

    def build_document(self, request: "FreightQuoteRequest") -> Dict[str, Any]:
        return {
            "FREIGHTQUOTE": {
                "@REQUEST": "QUOTE",
                "@EMAIL": str(request.api_email),
                "@PASSWORD": str(request.api_password),
                # Quote only - pretend the shipper's paying
                "@BILLTO": FREIGHTQUOTE_BILL_TO,
                "DESTINATION": self._build_destination(request),
                "ORIGIN": self._build_location(request.from_zip, request.from_conditions),
                "SHIPMENT": self._build_shipment(request),
            }
        }

    def build(self, request: "FreightQuoteRequest") -> str:
        return render(self.build_document(request))

    def _build_location(self, zip_code: Any, conditions: str) -> Dict[str, Any]:
        element, text = FREIGHTQUOTE_CONDITIONS[conditions]
        return {
            "ZIPCODE": str(zip_code),
            element: text,
        }

    def _build_destination(self, request: "FreightQuoteRequest") -> Dict[str, Any]:
        destination = self._build_location(request.to_zip, request.to_conditions)
        # Accessorials, API page 10
        if request.liftgate:
            destination["LIFTGATEDELIVERY"] = "TRUE"
        if request.inside_delivery:
            destination["INSIDEDELIVERY"] = "TRUE"
        return destination

    def _build_shipment(self, request: "FreightQuoteRequest") -> Dict[str, Any]:
        shipment = {
            "WEIGHT": format_number(request.weight),
            "PRODUCTDESC": str(request.description),
        }

        # Class takes priority over dimensions
        if request.freight_class is not None:
            shipment["CLASS"] = format_number(request.freight_class)
        else:
            length, width, height = request.dimensions
            shipment["DIMENSIONS"] = {
                "LENGTH": length,
                "WIDTH": width,
                "HEIGHT": height,
            }

        shipment["PIECES"] = str(FREIGHTQUOTE_PIECES)
        return shipment
