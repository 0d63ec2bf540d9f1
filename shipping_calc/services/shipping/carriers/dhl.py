"""
DHL Carrier Implementation

This module implements the DHL (Airborne eCommerce) rate estimate API.

The current API version is 1.0, with a test landing page at
https://eCommerce.airborne.com/ApiLandingTest.asp . Full access needs DHL to
certify the application against their live platform tests; the test bed is
enough for simple calculations.

Only shipments inside the US are supported.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional, Union

from shipping_calc.core.exceptions import CarrierError, InvalidArgument, TransportFailure
from shipping_calc.services.shipping.base import BaseCarrier
from shipping_calc.services.shipping.data import (
    DHL_DEFAULT_FAULT_CATEGORY,
    DHL_DEFAULT_SERVICE_CODE,
    DHL_DEFAULT_SHIPMENT_CODE,
    DHL_FAULT_CATEGORIES,
    DHL_LETTER_CODE,
    DHL_MAX_WEIGHT_LBS,
    DHL_SERVICE_CODES,
    DHL_SHIPMENT_CODES,
    DHL_SUCCESS_DESC,
)
from shipping_calc.services.shipping.payload_builder import DHLPayloadBuilder
from shipping_calc.services.shipping.validation import format_number, is_number, valid_state
from shipping_calc.services.shipping.xml_utils import (
    MISSING,
    element_text,
    find_first,
    get_path,
    parse_xml,
)

logger = logging.getLogger(__name__)

DHL_PARAM_KEYS = (
    'api_user',
    'api_password',
    'shipping_key',
    'account_num',
    'date',
    'service_code',
    'shipment_code',
    'weight',
    'to_zip',
    'to_state',
)

SHIP_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
ZIP_CODE_PATTERN = re.compile(r"\d{5}")
FAULT_CODE_PATTERN = re.compile(r"\s*(-?\d+)")


def format_ship_date(value: Union[str, date, datetime, None]) -> str:
    """
    Ship date as YYYY-MM-DD.

    Strings already in that shape are trusted as-is. Dates and datetimes are
    formatted, moving Sundays to Monday because DHL doesn't ship on Sundays.
    None means today.
    """
    if value is None:
        value = datetime.now()

    if isinstance(value, str):
        if SHIP_DATE_PATTERN.fullmatch(value):
            return value
        raise InvalidArgument("Invalid shipment date")

    if not isinstance(value, date):
        raise InvalidArgument("Invalid shipment date")

    if value.weekday() == 6:
        value = value + timedelta(days=1)
    return value.strftime("%Y-%m-%d")


def normalize_service_code(code: Any) -> str:
    return code if isinstance(code, str) and code in DHL_SERVICE_CODES else DHL_DEFAULT_SERVICE_CODE


def normalize_shipment_code(code: Any) -> str:
    return code if isinstance(code, str) and code in DHL_SHIPMENT_CODES else DHL_DEFAULT_SHIPMENT_CODE


def fault_category(code: Optional[int]) -> str:
    """Map a DHL fault code to the request field it refers to. First matching range wins."""
    if code is not None:
        for low, high, category in DHL_FAULT_CATEGORIES:
            if low <= code <= high:
                return category
    return DHL_DEFAULT_FAULT_CATEGORY


@dataclass(frozen=True)
class DHLQuoteRequest:
    """A validated DHL rate estimate request."""
    api_user: Any
    api_password: Any
    shipping_key: Any
    account_num: Any
    ship_date: str
    service_code: str
    shipment_code: str
    weight: Any
    to_zip: int
    to_state: str

    @property
    def is_letter(self) -> bool:
        return self.shipment_code == DHL_LETTER_CODE

    @property
    def rendered_weight(self) -> str:
        # Letters always go out as weight 0
        return "0" if self.is_letter else format_number(self.weight)

    @classmethod
    def from_params(cls, params: Optional[Mapping[str, Any]]) -> "DHLQuoteRequest":
        """
        Validate a caller's parameter mapping.

        Args:
            params: Mapping with exactly these keys:
                api_user: API access username, provided by DHL.
                api_password: API access password, provided by DHL.
                shipping_key: API shipping key, provided by DHL.
                account_num: Account number, provided by DHL.
                date: Ship date, "YYYY-MM-DD" or a date/datetime (None = now).
                service_code: E, N, S or G. Anything else becomes G (ground).
                shipment_code: "P" package or "L" letter. Anything else becomes P.
                weight: Weight in lbs. Ignored (sent as 0) for letters.
                to_zip: Recipient's 5 digit zip code, as an int.
                to_state: Recipient's state.

        Raises:
            InvalidArgument: If anything is missing or invalid
        """
        if params is None:
            raise InvalidArgument("Invalid parameters")
        if len(params) != len(DHL_PARAM_KEYS):
            raise InvalidArgument("Missing shipping parameters")

        ship_date = format_ship_date(params.get('date'))
        service_code = normalize_service_code(params.get('service_code'))
        shipment_code = normalize_shipment_code(params.get('shipment_code'))

        weight = params.get('weight')
        if shipment_code != DHL_LETTER_CODE:
            if not is_number(weight) or not (0 < weight <= DHL_MAX_WEIGHT_LBS):
                raise InvalidArgument("Invalid weight - Must be between 1 and 150 lbs.")

        to_state = params.get('to_state')
        if not valid_state(to_state):
            raise InvalidArgument("Invalid state for recipient")

        to_zip = params.get('to_zip')
        if not isinstance(to_zip, int) or isinstance(to_zip, bool):
            raise InvalidArgument("Zip Code must be a number. Perhaps you are using a string?")
        if not ZIP_CODE_PATTERN.fullmatch(str(to_zip)):
            raise InvalidArgument("Invalid zip code for recipient")

        return cls(
            api_user=params.get('api_user'),
            api_password=params.get('api_password'),
            shipping_key=params.get('shipping_key'),
            account_num=params.get('account_num'),
            ship_date=ship_date,
            service_code=service_code,
            shipment_code=shipment_code,
            weight=weight,
            to_zip=to_zip,
            to_state=to_state,
        )


class DHLCarrier(BaseCarrier):
    """DHL eCommerce rate estimate carrier."""

    carrier_name = "DHL"
    carrier_code = "dhl"

    def __init__(self, endpoint: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__(endpoint=endpoint, timeout=timeout)
        self.payload_builder = DHLPayloadBuilder()

    def default_endpoint(self, settings) -> str:
        return settings.DHL_ENDPOINT

    def quote(self, params: Optional[Mapping[str, Any]]) -> Decimal:
        """Obtain an estimate quote from DHL.

        Args:
            params: Shipment settings, see DHLQuoteRequest.from_params

        Returns:
            Decimal: Total charge estimate

        Raises:
            InvalidArgument: Bad params, nothing was sent
            CarrierError: DHL reported a fault or no estimate
            TransportFailure: DHL couldn't be reached, or answered with an
                HTTP error that carried no fault
        """
        request = DHLQuoteRequest.from_params(params)
        xml_request = self.payload_builder.build(request)
        try:
            xml_response = self._send(xml_request)
        except TransportFailure as e:
            if e.response_text:
                self._raise_error_body_fault(e.response_text)
            raise
        return self.parse_response(xml_response)

    def parse_response(self, xml_response: str) -> Decimal:
        """Parse DHL's response. Only the estimate value is returned."""
        doc = parse_xml(xml_response, self.carrier_name)

        faults = find_first(doc, "Faults")
        if faults is not MISSING:
            self._raise_fault(faults, xml_response)

        shipment = find_first(doc, "Shipment")
        desc = element_text(get_path(shipment, "Result", "Desc"))

        if desc != DHL_SUCCESS_DESC:
            logger.error(f"DHL estimate unsuccessful: {desc or 'no result description'}")
            raise CarrierError(desc or xml_response, details={"response": xml_response})

        total = element_text(get_path(shipment, "EstimateDetail", "RateEstimate", "TotalChargeEstimate"))
        try:
            price = Decimal(total)
        except (InvalidOperation, TypeError):
            raise CarrierError(
                f"DHL returned an invalid total charge estimate: {total!r}",
                details={"response": xml_response},
            )

        if not price.is_finite() or price < 0:
            raise CarrierError(
                f"DHL returned an invalid total charge estimate: {total!r}",
                details={"response": xml_response},
            )

        logger.info(f"DHL estimate: {price}")
        return price

    def _raise_error_body_fault(self, xml_response: str) -> None:
        """Raise the categorized fault if an HTTP error body holds a DHL <Faults> document."""
        try:
            doc = parse_xml(xml_response, self.carrier_name)
        except CarrierError:
            return

        faults = find_first(doc, "Faults")
        if faults is not MISSING:
            self._raise_fault(faults, xml_response)

    def _raise_fault(self, faults: Any, xml_response: str) -> None:
        code_text = element_text(find_first(faults, "Code"))

        code = None
        if code_text:
            match = FAULT_CODE_PATTERN.match(code_text)
            if match:
                code = int(match.group(1))

        category = fault_category(code)
        message = f"DHL Error {code_text or 'unknown'}: Invalid {category}"
        logger.error(message)
        raise CarrierError(
            message,
            code=code,
            category=category,
            details={"response": xml_response},
        )
