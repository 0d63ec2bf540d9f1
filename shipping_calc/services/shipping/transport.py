# shipping_calc/services/shipping/transport.py
"""
XML-over-HTTP transport shared by the carriers.

Each call is a single blocking POST through a fresh ``requests.post`` - no
session, no pooling, no retries.
"""

import logging
from typing import Optional

import requests

from shipping_calc.core.exceptions import TransportFailure

logger = logging.getLogger(__name__)

XML_HEADERS = {"Content-Type": "text/xml"}


def post_xml(url: str, xml_request: str, timeout: Optional[float] = None) -> str:
    """
    POST an XML document and return the raw response body.

    Args:
        url: Full carrier endpoint (http:// or https://)
        xml_request: Serialized request document
        timeout: Seconds before giving up, None for the requests default

    Returns:
        str: Response body as text

    Raises:
        TransportFailure: On connection errors, timeouts or a non-2xx status.
            For an HTTP error the body is kept on ``response_text`` so a
            carrier can still read a fault document out of it.
    """
    logger.debug(f"POST {url} ({len(xml_request)} bytes)")

    try:
        response = requests.post(
            url,
            headers=XML_HEADERS,
            data=xml_request.encode("utf-8"),
            timeout=timeout,
        )
    except requests.RequestException as e:
        logger.error(f"Network error posting to {url}: {str(e)}")
        raise TransportFailure(f"Network error posting to {url}: {str(e)}") from e

    if not 200 <= response.status_code < 300:
        logger.error(f"HTTP {response.status_code} from {url}: {response.text[:500]}")
        raise TransportFailure(
            f"Request to {url} failed with HTTP {response.status_code}",
            status_code=response.status_code,
            response_text=response.text,
        )

    return response.text
