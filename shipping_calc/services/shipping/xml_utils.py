# shipping_calc/services/shipping/xml_utils.py
"""
Helpers for walking carrier responses parsed with xmltodict.

xmltodict turns repeated elements into lists and elements that carry
attributes into dicts with a "#text" key, so lookups go through these
helpers instead of plain indexing.
"""

import logging
from typing import Any, Dict, List, Optional
from xml.parsers.expat import ExpatError

import xmltodict

from shipping_calc.core.exceptions import CarrierError

logger = logging.getLogger(__name__)

MISSING = object()


def parse_xml(xml_response: str, carrier_name: str) -> Dict[str, Any]:
    """Parse a response body, turning unreadable XML into a CarrierError."""
    try:
        return xmltodict.parse(xml_response)
    except ExpatError as e:
        logger.error(f"Unreadable {carrier_name} response: {str(e)}")
        raise CarrierError(
            f"{carrier_name} returned an unreadable response: {str(e)}",
            details={"response": xml_response},
        ) from e


def as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def find_first(node: Any, tag: str) -> Any:
    """
    Depth-first, document-order search for the first element named ``tag``
    anywhere below ``node`` (XPath ``//tag``).

    Returns MISSING when there is no such element, so empty elements (None)
    can still be told apart from absent ones.
    """
    if isinstance(node, list):
        for item in node:
            found = find_first(item, tag)
            if found is not MISSING:
                return found
    elif isinstance(node, dict):
        for key, value in node.items():
            if key == tag:
                return value[0] if isinstance(value, list) else value
            if key.startswith("@"):
                continue
            found = find_first(value, tag)
            if found is not MISSING:
                return found
    return MISSING


def get_path(node: Any, *tags: str) -> Any:
    """Follow child elements by name (first match at each step), MISSING if any step is absent."""
    for tag in tags:
        if isinstance(node, list):
            node = node[0] if node else None
        if not isinstance(node, dict) or tag not in node:
            return MISSING
        node = node[tag]
    if isinstance(node, list):
        node = node[0] if node else None
    return node


def element_text(node: Any) -> Optional[str]:
    """Text content of a parsed element, None for empty or missing ones."""
    if node is MISSING or node is None:
        return None
    if isinstance(node, list):
        return element_text(node[0]) if node else None
    if isinstance(node, dict):
        text = node.get("#text")
        return text.strip() if isinstance(text, str) else None
    return str(node).strip()
