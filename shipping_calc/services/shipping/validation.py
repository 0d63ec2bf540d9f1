"""
Validation helpers shared by the carrier integrations.
"""

import math
import re
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional, Tuple

from shipping_calc.core.exceptions import InvalidArgument
from shipping_calc.services.shipping.data import US_STATES

DIMENSIONS_PATTERN = re.compile(r"(\d+)x(\d+)x(\d+)")


def is_number(value: Any) -> bool:
    """True for finite ints, floats and Decimals. Booleans are not weights."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int)


def format_number(value: Any) -> str:
    # Decimal's str() switches to exponent notation, e.g. 1E+2
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def is_strict_bool(value: Any) -> bool:
    return isinstance(value, bool)


def valid_state(state: Any) -> bool:
    return isinstance(state, str) and state in US_STATES


def require_fields(params: Mapping[str, Any], fields: Iterable[str]) -> None:
    """Raise InvalidArgument for the first field that is absent or None."""
    for name in fields:
        if params.get(name) is None:
            raise InvalidArgument(f'Required field "{name}" not found.')


def check_optional_bool(value: Any, message: str) -> bool:
    """None means False; anything that isn't exactly True/False is rejected."""
    if value is None:
        return False
    if not is_strict_bool(value):
        raise InvalidArgument(message)
    return value


def parse_dimensions(dimensions: Optional[str]) -> Optional[Tuple[str, str, str]]:
    """Split an "LxWxH" string into its parts, or return None if it doesn't match."""
    if not isinstance(dimensions, str):
        return None
    match = DIMENSIONS_PATTERN.fullmatch(dimensions)
    if match is None:
        return None
    return match.groups()
